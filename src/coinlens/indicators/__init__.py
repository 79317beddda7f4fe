"""Technical indicator pipeline.

Aligns price and volume series, computes simple moving averages and Wilder
RSI, and encodes the result for the chart and for the prompt layer.
"""

from coinlens.indicators.alignment import align_series, nearest_timestamp
from coinlens.indicators.models import (
    AlignedSample,
    HistoricalData,
    IndicatorRecord,
    PricePoint,
    RawSample,
)
from coinlens.indicators.moving_average import compute_sma
from coinlens.indicators.pipeline import IndicatorPipeline
from coinlens.indicators.rsi import compute_rsi
from coinlens.indicators.serialization import (
    DATA_STRING_HEADER,
    current_price,
    to_data_string,
    to_price_points,
)

__all__ = [
    "DATA_STRING_HEADER",
    "AlignedSample",
    "HistoricalData",
    "IndicatorPipeline",
    "IndicatorRecord",
    "PricePoint",
    "RawSample",
    "align_series",
    "compute_rsi",
    "compute_sma",
    "current_price",
    "nearest_timestamp",
    "to_data_string",
    "to_price_points",
]
