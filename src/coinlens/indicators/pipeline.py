"""Indicator pipeline: raw series in, chart rows and prompt table out.

One code path covers every indicator set: window sizes and whether volume
and RSI are included come from ``IndicatorSettings``.
"""

from coinlens.config import IndicatorSettings
from coinlens.indicators.alignment import align_series, price_only_series
from coinlens.indicators.models import HistoricalData, IndicatorRecord, RawSample
from coinlens.indicators.moving_average import compute_sma
from coinlens.indicators.rsi import compute_rsi
from coinlens.indicators.serialization import current_price, to_data_string, to_price_points


class IndicatorPipeline:
    """Computes moving averages and RSI over an aligned price/volume series.

    Stateless between calls; a single instance can serve concurrent requests.
    """

    def __init__(self, settings: IndicatorSettings | None = None) -> None:
        self._settings = settings or IndicatorSettings()

    @property
    def settings(self) -> IndicatorSettings:
        return self._settings

    def compute_records(
        self,
        prices: list[RawSample],
        volumes: list[RawSample],
    ) -> list[IndicatorRecord]:
        """Align the raw series and attach indicator values to every sample.

        Raises:
            EmptyDatasetError: If ``prices`` is empty.
        """
        s = self._settings
        if s.volume_enabled:
            samples = align_series(prices, volumes)
        else:
            samples = price_only_series(prices)

        closes = [sample.price for sample in samples]
        ma_short = compute_sma(closes, s.ma_short_window)
        ma_long = compute_sma(closes, s.ma_long_window)
        rsi = compute_rsi(closes, s.rsi_period) if s.rsi_enabled else [None] * len(closes)

        return [
            IndicatorRecord(
                timestamp_ms=sample.timestamp_ms,
                price=sample.price,
                volume=sample.volume,
                ma_short=ma_short[i],
                ma_long=ma_long[i],
                rsi=rsi[i],
            )
            for i, sample in enumerate(samples)
        ]

    def run(
        self,
        prices: list[RawSample],
        volumes: list[RawSample],
        days: int,
    ) -> HistoricalData:
        """Produce both encodings of the indicator series from one record set.

        Args:
            prices: Raw price samples, oldest first.
            volumes: Raw volume samples, oldest first.
            days: Requested lookback, which selects the date format.

        Raises:
            EmptyDatasetError: If ``prices`` is empty.
        """
        points = to_price_points(self.compute_records(prices, volumes), days)
        return HistoricalData(
            prices=points,
            data_string=to_data_string(points),
            current_price=current_price(points),
        )
