"""Target-size selection.

When the classified charset holds more characters than the limit, the
policy keeps the first ``limit`` characters walking buckets from the fewest
strokes upward and, inside a bucket, in collation order. The cut may land in
the middle of a bucket; the rest of that bucket and every higher bucket are
dropped.

The walk favors simple, low-stroke characters. That bias is the policy, not
an accident: for a fixed input set and limit it always yields the same
result.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice

from .collation import collate
from .domain import BucketMap, make_buckets, total_count


@dataclass(frozen=True)
class Selection:
    """Result of applying the size limit.

    Attributes:
        buckets: Bucket map after truncation.
        total_before: Number of bucketed characters before truncation.
        limit: The limit that was applied.
    """
    buckets: BucketMap
    total_before: int
    limit: int

    @property
    def total(self) -> int:
        return total_count(self.buckets)

    @property
    def dropped(self) -> int:
        return self.total_before - self.total

    @property
    def truncated(self) -> bool:
        return self.dropped > 0


def selection_order(buckets: BucketMap):
    """Yield (stroke count, char) pairs in truncation order."""
    for strokes in sorted(buckets):
        for char in collate(buckets[strokes]):
            yield strokes, char


def select(buckets: BucketMap, limit: int) -> Selection:
    """Apply ``limit`` to ``buckets``.

    Args:
        buckets: Classified characters. Not modified.
        limit: Maximum number of characters to keep. Zero keeps nothing.

    Returns:
        Selection holding a new bucket map with at most ``limit`` characters.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    total = total_count(buckets)
    if total <= limit:
        return Selection(buckets, total, limit)

    picked: dict[int, list[str]] = {}
    for strokes, char in islice(selection_order(buckets), limit):
        picked.setdefault(strokes, []).append(char)
    return Selection(make_buckets(picked), total, limit)
