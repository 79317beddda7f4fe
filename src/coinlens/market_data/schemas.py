"""Pydantic schemas validating CoinGecko payloads at the ingestion boundary.

Only the fields the backend reads are declared; everything else in the
payload is ignored. A payload missing a declared field, or carrying a
non-numeric or non-finite sample, fails validation instead of flowing on
half-formed.
"""

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, TypeAdapter

from coinlens.indicators.models import RawSample
from coinlens.models import Coin

#: ``[timestamp_ms, value]`` as sent by the API. NaN and Infinity are rejected.
SamplePair = tuple[int, FiniteFloat]


class MarketChartResponse(BaseModel):
    """``/coins/{id}/market_chart`` payload."""

    model_config = ConfigDict(extra="ignore")

    prices: list[SamplePair]
    total_volumes: list[SamplePair] = Field(default_factory=list)

    def price_samples(self) -> list[RawSample]:
        return [RawSample(timestamp_ms=ts, value=v) for ts, v in self.prices]

    def volume_samples(self) -> list[RawSample]:
        return [RawSample(timestamp_ms=ts, value=v) for ts, v in self.total_volumes]


class CoinEntry(BaseModel):
    """Coin as listed by ``/search`` and ``/coins/markets``."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    symbol: str

    def to_coin(self) -> Coin:
        return Coin(id=self.id, name=self.name, ticker=self.symbol.upper())


class SearchResponse(BaseModel):
    """``/search`` payload; exchanges, categories and NFTs are ignored."""

    model_config = ConfigDict(extra="ignore")

    coins: list[CoinEntry] = Field(default_factory=list)


MarketListing = TypeAdapter(list[CoinEntry])
