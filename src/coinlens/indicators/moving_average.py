"""Simple moving average over a trailing fixed-size window."""


def compute_sma(values: list[float], window: int) -> list[float | None]:
    """Compute the simple moving average of ``values``.

    Entry ``i`` is None while fewer than ``window`` values are available
    (``i < window - 1``); otherwise it is the arithmetic mean of
    ``values[i - window + 1 : i + 1]``. Each window is summed afresh, so
    results do not accumulate rolling-sum drift.

    Args:
        values: Ordered list of values (oldest first).
        window: Number of trailing values to average.

    Returns:
        List the same length as ``values``.

    Raises:
        ValueError: If ``window`` is not a positive integer.
    """
    if window < 1:
        raise ValueError(f"window must be a positive integer, got {window}")

    result: list[float | None] = []
    for i in range(len(values)):
        if i < window - 1:
            result.append(None)
        else:
            result.append(sum(values[i - window + 1 : i + 1]) / window)
    return result
