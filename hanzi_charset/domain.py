"""Core value objects for charset building.

This module provides the immutable data structures passed between the
pipeline stages. Every stage receives these values and returns new ones;
nothing here is mutated after construction.

The module exports:

    CharsetIOError: Fatal IO failure (baseline, stroke data or output path).
    BucketMap: Read-only mapping of stroke count to character set.
    StrokeResult: Tagged per-character classification result.
    Classification: Buckets plus the characters that could not be classified.

Example usage:

    from hanzi_charset.domain import make_buckets, total_count

    buckets = make_buckets({1: {'一', '乙'}, 2: {'人'}})
    print(total_count(buckets))  # 3
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

BucketMap = Mapping[int, frozenset]


class CharsetIOError(OSError):
    """A read or write the run cannot continue without has failed."""


def make_buckets(groups: Mapping[int, Iterable[str]]) -> BucketMap:
    """Freeze ``groups`` into a read-only bucket map.

    Empty groups are dropped so every key in the result holds at least one
    character.
    """
    frozen = {n: frozenset(chars) for n, chars in groups.items()}
    return MappingProxyType({n: chars for n, chars in sorted(frozen.items()) if chars})


def total_count(buckets: BucketMap) -> int:
    return sum(len(chars) for chars in buckets.values())


def bucket_chars(buckets: BucketMap) -> frozenset:
    """Return every character held by any bucket."""
    return frozenset().union(*buckets.values()) if buckets else frozenset()


@dataclass(frozen=True)
class StrokeResult:
    """Stroke classification of one character.

    Attributes:
        char: The classified character.
        count: Stroke count, or None when neither lookup resolved it.
        method: 'direct' when the count lookup answered, 'order' when the
            stroke decomposition fallback did, None when unresolved.
    """
    char: str
    count: int | None = None
    method: str | None = None

    @property
    def resolved(self) -> bool:
        return self.count is not None


@dataclass(frozen=True)
class Classification:
    """Result of classifying a character set.

    Attributes:
        buckets: Stroke count -> characters, resolved characters only.
        unknown: Characters with no resolvable stroke count. These are kept
            out of ``buckets`` and reported separately.
        fallback_count: How many characters were resolved through the
            stroke decomposition fallback.
    """
    buckets: BucketMap
    unknown: frozenset = field(default_factory=frozenset)
    fallback_count: int = 0

    @property
    def unknown_count(self) -> int:
        return len(self.unknown)

    @property
    def total(self) -> int:
        return total_count(self.buckets)
