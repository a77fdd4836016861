"""Parsers for the baseline document, external lists and the heuristic pool.

All parsers here are pure: they take text and return a new frozenset. The
only functions touching the filesystem are :func:`read_document`,
:func:`load_baseline` and :func:`load_heuristic_pool`.

Baseline documents group characters by stroke count, one line per group::

    1画\t一 乙
    2画\t二 十 丁 厂

Lines that do not have this shape (headers, the symbol block) are ignored.
"""

from __future__ import annotations

import logging
import re
from importlib import resources
from pathlib import Path

from .config import HEURISTIC_ASSET
from .domain import CharsetIOError

logger = logging.getLogger(__name__)

# "<digits>画<TAB><chars>", the 画 and extra whitespace before the tab optional
STROKE_LINE_RE = re.compile(r'^(\d+)[画\s]*\t(.+)$')

# External lists may separate characters by whitespace or commas
LIST_SEPARATOR_RE = re.compile(r'[\s,]+')


def parse_document(text: str) -> frozenset:
    """Extract every single character listed on a stroke line.

    Args:
        text: Full text of a baseline or generated document.

    Returns:
        Frozenset of the single-character tokens found on lines matching
        ``<n>画<TAB><list>``. Multi-character tokens are skipped.
    """
    chars = set()
    for line in text.splitlines():
        match = STROKE_LINE_RE.match(line)
        if not match:
            continue
        for token in match.group(2).split():
            if len(token) == 1:
                chars.add(token)
    return frozenset(chars)


def parse_external_list(text: str) -> tuple[frozenset, int]:
    """Parse a whitespace or comma separated character list.

    Returns:
        Tuple of (single characters, number of non-empty tokens seen).
    """
    tokens = [t for t in LIST_SEPARATOR_RE.split(text) if t]
    return frozenset(t for t in tokens if len(t) == 1), len(tokens)


def read_document(path: str | Path) -> str:
    """Read a UTF-8 document, raising CharsetIOError if it cannot be read."""
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise CharsetIOError(f"Cannot read document {path}: {e}") from e


def load_baseline(path: str | Path) -> frozenset:
    return parse_document(read_document(path))


def load_heuristic_pool(path: str | Path | None = None) -> frozenset:
    """Load the heuristic candidate pool.

    Args:
        path: Optional override. When None the versioned asset bundled in
            ``hanzi_charset/data`` is used.

    Returns:
        Frozenset of single characters from the pool.
    """
    if path is None:
        asset = resources.files('hanzi_charset').joinpath('data').joinpath(HEURISTIC_ASSET)
        text = asset.read_text(encoding='utf-8')
        source = HEURISTIC_ASSET
    else:
        text = read_document(path)
        source = str(path)

    chars, entries = parse_external_list(text)
    logger.debug("Heuristic pool %s: %d entries, %d unique characters",
                 source, entries, len(chars))
    return chars
