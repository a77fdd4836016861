"""Stroke-count classification.

Every character is classified in two steps:

    1. Ask the stroke source for a direct count. A positive integer wins.
    2. Otherwise ask for the ordered stroke decomposition and use its length.

A character neither step resolves is *unknown*. Unknown characters are left
out of the bucket map and reported in :class:`Classification.unknown`, so
callers can surface them instead of losing them silently.

The stroke source is an external capability behind :class:`StrokeSource`.
:class:`StrokeTable` is the data-file implementation used by the CLI:

    - direct counts from a JSON object (``{"一": 1, "乙": 1}``) or a Unihan
      style text file (``U+4E00<TAB>kTotalStrokes<TAB>1``)
    - decompositions from a hanzi-writer-data directory, one
      ``<char>.json`` per character with a ``"strokes"`` list

Example:
    >>> table = StrokeTable({'一': 1, '人': 2})
    >>> classify({'一', '人', '?'}, table).buckets[2]
    frozenset({'人'})
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Any, Iterable, Sequence

from .domain import CharsetIOError, Classification, StrokeResult, make_buckets

logger = logging.getLogger(__name__)

UNIHAN_FIELD = 'kTotalStrokes'


class StrokeSource(ABC):
    """Stroke-count capability for single characters."""

    @abstractmethod
    def stroke_count(self, char: str) -> Any:
        """Return the direct stroke count of ``char``.

        Anything that is not a positive integer (None, a non-numeric value,
        zero) sends classification to :meth:`stroke_order`.
        """

    @abstractmethod
    def stroke_order(self, char: str) -> Sequence | None:
        """Return the ordered stroke decomposition of ``char``, or None."""


def _as_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return None


def resolve_strokes(char: str, source: StrokeSource) -> StrokeResult:
    """Classify one character with the direct lookup and its fallback.

    Errors raised by the source fail that step only; they never propagate.
    """
    try:
        count = _as_count(source.stroke_count(char))
    except Exception as e:
        logger.debug("Direct stroke lookup failed for %r: %s", char, e)
        count = None
    if count is not None:
        return StrokeResult(char, count, 'direct')

    try:
        order = source.stroke_order(char)
        length = len(order) if order else 0
    except Exception as e:
        logger.debug("Stroke order lookup failed for %r: %s", char, e)
        length = 0
    if length > 0:
        return StrokeResult(char, length, 'order')

    return StrokeResult(char)


def classify(chars: Iterable[str], source: StrokeSource) -> Classification:
    """Group characters into stroke buckets.

    Args:
        chars: Characters to classify. Not modified.
        source: Stroke-count capability.

    Returns:
        Classification with the bucket map, the unknown characters and the
        number of characters that needed the decomposition fallback.
    """
    groups: dict[int, set[str]] = defaultdict(set)
    unknown = set()
    fallback = 0
    for char in set(chars):
        result = resolve_strokes(char, source)
        if not result.resolved:
            unknown.add(char)
            continue
        if result.method == 'order':
            fallback += 1
        groups[result.count].add(char)

    if unknown:
        logger.debug("Unclassified characters: %s", ''.join(sorted(unknown)[:50]))
    return Classification(make_buckets(groups), frozenset(unknown), fallback)


def _parse_unihan(text: str) -> dict[str, int]:
    counts = {}
    for line in text.splitlines():
        if not line.startswith('U+'):
            continue
        parts = line.split('\t')
        if len(parts) < 3 or parts[1] != UNIHAN_FIELD:
            continue
        try:
            char = chr(int(parts[0][2:], 16))
            counts[char] = int(parts[2].split()[0])
        except (ValueError, IndexError):
            continue
    return counts


def _parse_count_map(data: Any) -> dict[str, int]:
    counts = {}
    if not isinstance(data, dict):
        return counts
    for key, value in data.items():
        if not isinstance(key, str) or len(key) != 1:
            continue
        try:
            counts[key] = int(value)
        except (TypeError, ValueError):
            continue
    return counts


class StrokeTable(StrokeSource):
    """Stroke source backed by data files.

    Attributes:
        counts: Character -> direct stroke count.
        orders_dir: Optional hanzi-writer-data directory for the
            decomposition fallback.
    """

    def __init__(self, counts: dict[str, int] | None = None, orders_dir: Path | None = None):
        self.counts = dict(counts or {})
        self.orders_dir = Path(orders_dir) if orders_dir else None

    @classmethod
    def from_paths(cls, counts_path: str | Path, orders_dir: str | Path | None = None) -> 'StrokeTable':
        """Load a table from a count file and optional decomposition directory.

        Files ending in ``.json`` are read as a character -> count object;
        anything else is read as Unihan ``kTotalStrokes`` lines.

        Raises:
            CharsetIOError: If the count file cannot be read or decoded.
        """
        counts_path = Path(counts_path)
        try:
            text = counts_path.read_text(encoding='utf-8')
            if counts_path.suffix.lower() == '.json':
                counts = _parse_count_map(json.loads(text))
            else:
                counts = _parse_unihan(text)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise CharsetIOError(f"Cannot read stroke data {counts_path}: {e}") from e

        if orders_dir is not None and not Path(orders_dir).is_dir():
            logger.warning("Stroke order directory not found: %s", orders_dir)
            orders_dir = None

        logger.info("Loaded %d stroke counts from %s", len(counts), counts_path)
        return cls(counts, orders_dir)

    def stroke_count(self, char: str) -> int | None:
        return self.counts.get(char)

    def stroke_order(self, char: str) -> list | None:
        if self.orders_dir is None:
            return None
        path = self.orders_dir / f'{char}.json'
        if not path.is_file():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        strokes = data.get('strokes') if isinstance(data, dict) else None
        return strokes if isinstance(strokes, list) else None
