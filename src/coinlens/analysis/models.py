"""Input and result models for the reasoning (LLM) collaborator."""

from dataclasses import asdict, dataclass
from typing import Any

from coinlens.indicators.models import HistoricalData


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything the prompt layer receives for one coin.

    ``historical_data`` is the indicator table, embedded verbatim in the
    prompt; the scalar fields give it context.
    """

    historical_data: str
    coin_name: str
    coin_ticker: str
    timeframe_days: int
    current_price: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """Chart data plus the collaborator's answer, passed through as-is.

    ``analysis`` is expected to hold ``analysis``, ``support``,
    ``resistance`` and ``recommendation`` sections but is not validated.
    """

    history: HistoricalData
    analysis: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"history": self.history.to_dict(), "analysis": self.analysis}
