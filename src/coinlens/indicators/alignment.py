"""Nearest-timestamp alignment of price and volume series.

The market data API samples prices and volumes independently, so their
timestamps can drift by a few milliseconds. Each volume sample is attached
to the closest price timestamp; only price timestamps that end up holding a
volume are emitted.

Precondition: both inputs sorted ascending (as delivered by the API).
Unsorted input is accepted without error, but nearest-match is only
guaranteed for sorted input.
"""

from bisect import bisect_left

from coinlens.exceptions import EmptyDatasetError
from coinlens.indicators.models import AlignedSample, RawSample


def nearest_timestamp(sorted_timestamps: list[int], target_ms: int) -> int:
    """Return the element of ``sorted_timestamps`` closest to ``target_ms``.

    On an exact tie the earlier timestamp wins.

    Args:
        sorted_timestamps: Non-empty, ascending, de-duplicated timestamps.
        target_ms: Timestamp to match.
    """
    idx = bisect_left(sorted_timestamps, target_ms)
    if idx == 0:
        return sorted_timestamps[0]
    if idx == len(sorted_timestamps):
        return sorted_timestamps[-1]

    before = sorted_timestamps[idx - 1]
    after = sorted_timestamps[idx]
    if after - target_ms < target_ms - before:
        return after
    return before


def align_series(
    prices: list[RawSample],
    volumes: list[RawSample],
) -> list[AlignedSample]:
    """Join volumes onto the price timestamp axis.

    Args:
        prices: Price samples, oldest first. A repeated timestamp keeps
            the last price.
        volumes: Volume samples, oldest first. When several volumes resolve
            to the same price timestamp, the last one wins.

    Returns:
        Samples holding both a price and a volume, strictly ascending by
        timestamp. Empty when ``volumes`` is empty.

    Raises:
        EmptyDatasetError: If ``prices`` is empty.
    """
    if not prices:
        raise EmptyDatasetError("no price samples to align")

    price_by_ts: dict[int, float] = {}
    for sample in prices:
        price_by_ts[sample.timestamp_ms] = sample.value

    sorted_ts = sorted(price_by_ts)
    volume_by_ts: dict[int, float] = {}
    for sample in volumes:
        volume_by_ts[nearest_timestamp(sorted_ts, sample.timestamp_ms)] = sample.value

    return [
        AlignedSample(timestamp_ms=ts, price=price_by_ts[ts], volume=volume_by_ts[ts])
        for ts in sorted_ts
        if ts in volume_by_ts
    ]


def price_only_series(prices: list[RawSample]) -> list[AlignedSample]:
    """Build the series without volume, for pipelines with volume disabled.

    Same de-duplication and ordering rules as ``align_series``.

    Raises:
        EmptyDatasetError: If ``prices`` is empty.
    """
    if not prices:
        raise EmptyDatasetError("no price samples to align")

    price_by_ts: dict[int, float] = {}
    for sample in prices:
        price_by_ts[sample.timestamp_ms] = sample.value

    return [
        AlignedSample(timestamp_ms=ts, price=price_by_ts[ts])
        for ts in sorted(price_by_ts)
    ]
