"""Relative Strength Index with Wilder smoothing.

Seeds the average gain/loss with the plain mean of the first ``period``
price changes, then applies Wilder's recurrence:

    avg = (avg * (period - 1) + current) / period

RSI = 100 - 100 / (1 + avg_gain / avg_loss), and exactly 100 whenever the
average loss is zero (including during the smoothing phase).
"""


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


def compute_rsi(prices: list[float], period: int = 14) -> list[float | None]:
    """Compute RSI over a chronological price series.

    The first value is emitted at price index ``period``, once ``period``
    changes have been consumed; earlier entries are None. A series of
    ``period`` prices or fewer therefore yields no values at all.

    Args:
        prices: Ordered list of prices (oldest first).
        period: Lookback period for the seed averages and smoothing.

    Returns:
        List the same length as ``prices``, each defined value in [0, 100].

    Raises:
        ValueError: If ``period`` is not a positive integer.
    """
    if period < 1:
        raise ValueError(f"period must be a positive integer, got {period}")

    result: list[float | None] = [None] * len(prices)
    if len(prices) <= period:
        return result

    changes = [prices[i] - prices[i - 1] for i in range(1, len(prices))]

    seed = changes[:period]
    avg_gain = sum(c for c in seed if c > 0) / period
    avg_loss = sum(-c for c in seed if c < 0) / period
    result[period] = _rsi_value(avg_gain, avg_loss)

    # changes[j] is the move into prices[j + 1]
    for j in range(period, len(changes)):
        change = changes[j]
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0
        avg_gain = (avg_gain * (period - 1) + gain) / period
        avg_loss = (avg_loss * (period - 1) + loss) / period
        result[j + 1] = _rsi_value(avg_gain, avg_loss)

    return result
