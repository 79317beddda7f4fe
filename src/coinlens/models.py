"""Shared data models for the CoinLens backend."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coin:
    """A tradable asset as identified by the market data provider."""

    id: str  # provider slug, e.g. "bitcoin"
    name: str
    ticker: str  # upper-case symbol, e.g. "BTC"

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "ticker": self.ticker}


@dataclass(frozen=True)
class Timeframe:
    """A lookback window offered to the dashboard."""

    label: str
    days: int


#: Lookback presets shown in the dashboard timeframe selector.
TIMEFRAMES: tuple[Timeframe, ...] = (
    Timeframe(label="1D", days=1),
    Timeframe(label="7D", days=7),
    Timeframe(label="30D", days=30),
    Timeframe(label="90D", days=90),
)

DEFAULT_TIMEFRAME_DAYS = 30

#: Coins offered when the live market-cap listing cannot be fetched.
FALLBACK_COINS: tuple[Coin, ...] = (
    Coin(id="bitcoin", name="Bitcoin", ticker="BTC"),
    Coin(id="ethereum", name="Ethereum", ticker="ETH"),
    Coin(id="solana", name="Solana", ticker="SOL"),
    Coin(id="ripple", name="XRP", ticker="XRP"),
)
