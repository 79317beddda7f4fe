"""Data models for the historical data and technical indicator pipeline.

Prices and volumes are plain floats: they come from a JSON API as floats
and are only ever rounded for display, never used for accounting.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawSample:
    """One ``[timestamp, value]`` pair as delivered by the market data API."""

    timestamp_ms: int
    value: float


@dataclass(frozen=True)
class AlignedSample:
    """A price and a volume joined at a single price timestamp."""

    timestamp_ms: int
    price: float
    volume: float | None = None  # None only when volume alignment is disabled


@dataclass(frozen=True)
class IndicatorRecord:
    """An aligned sample enriched with indicator values at full precision.

    Indicator fields are None until enough history precedes the sample.
    """

    timestamp_ms: int
    price: float
    volume: float | None
    ma_short: float | None
    ma_long: float | None
    rsi: float | None


@dataclass(frozen=True)
class PricePoint:
    """Display-ready row of the indicator series (values rounded to 2 dp)."""

    date: str
    price: float
    ma_short: float | None = None
    ma_long: float | None = None
    volume: float | None = None
    rsi: float | None = None

    def to_dict(self) -> dict:
        """JSON form for the chart: undefined indicators are left out."""
        data: dict = {"date": self.date, "price": self.price}
        for key in ("ma_short", "ma_long", "volume", "rsi"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class HistoricalData:
    """Both encodings of one indicator series plus the current price.

    ``prices`` feeds the chart, ``data_string`` feeds the prompt layer.
    ``current_price`` is 0.0 when the series is empty; callers must check
    ``is_empty`` rather than treat that as a real price.
    """

    prices: list[PricePoint]
    data_string: str
    current_price: float

    @property
    def is_empty(self) -> bool:
        return not self.prices

    def to_dict(self) -> dict:
        return {
            "prices": [p.to_dict() for p in self.prices],
            "data_string": self.data_string,
            "current_price": self.current_price,
        }
