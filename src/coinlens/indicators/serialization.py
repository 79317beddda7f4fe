"""Encodings of an indicator series for the chart and the prompt layer.

The text table is embedded verbatim in LLM prompts that explain the columns
by name, so its header and column order are a fixed contract:

    Date,Price,ma_short,ma_long,volume,rsi
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from coinlens.indicators.models import IndicatorRecord, PricePoint

DATA_STRING_HEADER = "Date,Price,ma_short,ma_long,volume,rsi"

#: Lookbacks at or below this many days keep the time of day in ``date``.
INTRADAY_MAX_DAYS = 1

_DISPLAY_DECIMALS = 2
_DISPLAY_QUANTUM = Decimal("0.01")


def format_date(timestamp_ms: int, days: int) -> str:
    """Render a sample timestamp as ISO-8601 in UTC.

    Intraday lookbacks get the full timestamp with milliseconds
    (``2024-03-01T13:05:00.000Z``); longer ones just the calendar date.
    """
    seconds, millis = divmod(timestamp_ms, 1000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    if days <= INTRADAY_MAX_DAYS:
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{millis:03d}Z"
    return dt.strftime("%Y-%m-%d")


def round_display(value: float) -> float:
    """Round to display precision, halves away from zero.

    Works on the exact binary value, so 100.125 becomes 100.13 while 1.005
    (stored as 1.00499...) becomes 1.0.
    """
    return float(Decimal(value).quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP))


def _round(value: float | None) -> float | None:
    if value is None:
        return None
    return round_display(value)


def format_number(value: float | None) -> str:
    """Shortest fixed-point rendering at display precision; '' for None.

    >>> format_number(100.0), format_number(100.5), format_number(None)
    ('100', '100.5', '')
    """
    if value is None:
        return ""
    text = f"{round_display(value):.{_DISPLAY_DECIMALS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_price_points(records: list[IndicatorRecord], days: int) -> list[PricePoint]:
    """Round a record sequence into chart rows."""
    return [
        PricePoint(
            date=format_date(r.timestamp_ms, days),
            price=round_display(r.price),
            ma_short=_round(r.ma_short),
            ma_long=_round(r.ma_long),
            volume=_round(r.volume),
            rsi=_round(r.rsi),
        )
        for r in records
    ]


def to_data_string(points: list[PricePoint]) -> str:
    """Render chart rows as the comma-separated prompt table.

    One line per row after the header, each terminated by a newline;
    undefined fields are empty.
    """
    lines = [DATA_STRING_HEADER]
    for p in points:
        lines.append(
            ",".join(
                [
                    p.date,
                    format_number(p.price),
                    format_number(p.ma_short),
                    format_number(p.ma_long),
                    format_number(p.volume),
                    format_number(p.rsi),
                ]
            )
        )
    return "\n".join(lines) + "\n"


def current_price(points: list[PricePoint]) -> float:
    """Price of the newest row, or 0.0 for an empty series."""
    if not points:
        return 0.0
    return points[-1].price
