"""Pinned Chinese collation for rendering and truncation.

Both the Formatter and the SelectionPolicy order characters inside a stroke
bucket with :func:`collation_key`, so the order a document is written in is
the same order truncation walks.

The order is ICU's ``zh_Hans_CN`` collation (pinyin tailoring), read
through PyICU sort keys:

    1. the ICU sort key bytes of the character
    2. code point, for the rare characters ICU weighs identically

Homophones keep ICU's own pinyin table order (边 砭 编 鞭), not code
point order, and characters with several readings sort under the reading
ICU lists for them.

Example:
    >>> sorted('人大八', key=collation_key)
    ['八', '大', '人']
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

import icu

COLLATION_LOCALE = 'zh_Hans_CN'


@lru_cache(maxsize=1)
def _collator() -> icu.Collator:
    return icu.Collator.createInstance(icu.Locale(COLLATION_LOCALE))


@lru_cache(maxsize=None)
def collation_key(char: str) -> tuple[bytes, int]:
    """Return the sort key of a single character."""
    return bytes(_collator().getSortKey(char)), ord(char[0])


def collate(chars: Iterable[str]) -> list[str]:
    """Return ``chars`` sorted in collation order."""
    return sorted(chars, key=collation_key)
