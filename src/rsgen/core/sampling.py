from collections.abc import Iterator

from rsgen.core.sources import RandomIndexSource


def draw_indices(
    source: RandomIndexSource, size: int, count: int
) -> Iterator[int]:
    """Draw `count` uniform indices in [0, size).

    Raises ValueError when the table is empty or count is negative.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return (source.randrange(0, size) for _ in range(count))


def draw_codes(
    source: RandomIndexSource, low: int, high: int, count: int
) -> Iterator[int]:
    """Draw `count` uniform integers in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(
            f"range is malformed: low ({low}) must be <= high ({high})"
        )
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return (source.randint(low, high) for _ in range(count))
