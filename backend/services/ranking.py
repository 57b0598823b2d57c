"""Join schema achievements with global percentages and order them."""

from models import Achievement


def merge(achievements: list[Achievement], percentages: dict[str, float]) -> list[Achievement]:
    """Copy each achievement with its global percentage, 0.0 when Steam has none."""
    return [
        a.model_copy(update={"global_pct": percentages.get(a.api_name, 0.0)})
        for a in achievements
    ]


def rank(achievements: list[Achievement]) -> list[Achievement]:
    """Most unlocked first, then by display name.

    ``sorted`` is stable, so entries with the same percentage and name keep
    their schema order.
    """
    return sorted(achievements, key=lambda a: (-a.global_pct, a.name))


def merge_and_rank(achievements: list[Achievement], percentages: dict[str, float]) -> list[Achievement]:
    return rank(merge(achievements, percentages))
