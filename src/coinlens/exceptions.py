"""Custom exceptions for the CoinLens backend.

Upstream problems are raised by the market data client as ``MarketDataError``
subclasses. The historical data path folds every failure, upstream or
empty, into one coarse ``HistoricalDataError`` so callers get a single
"could not fetch" outcome and never a partial series.
"""

HISTORICAL_DATA_MESSAGE = "Could not fetch historical data."


class CoinLensError(Exception):
    """Base exception for all CoinLens errors."""


class MarketDataError(CoinLensError):
    """Base for failures talking to the market data API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SourceUnavailableError(MarketDataError):
    """Raised on a non-2xx response or a transport failure (connect, timeout)."""


class MalformedResponseError(MarketDataError):
    """Raised when a payload is not JSON or does not match the expected shape."""


class HistoricalDataError(CoinLensError):
    """Raised when historical market data cannot be produced for a coin.

    The message is always the same; ``detail`` carries the stage-specific
    reason for logs.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(HISTORICAL_DATA_MESSAGE)
        self.detail = detail


class EmptyDatasetError(HistoricalDataError):
    """Raised when there are zero price samples to process."""


class AnalysisUnavailableError(CoinLensError):
    """Raised when an analysis is requested but no reasoning backend is configured."""
