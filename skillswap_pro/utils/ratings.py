from decimal import ROUND_HALF_UP, Decimal


def round1(value: float) -> float:
    """Round half up to one decimal place."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def running_average(old_rating: float, old_count: int, rating: int) -> float:
    """
    Fold one new rating into an average kept as (rating, count).

    The stored reviews are for display only; the average is never rebuilt
    from them.
    """
    return round1(((old_rating or 0.0) * (old_count or 0) + rating) / ((old_count or 0) + 1))
