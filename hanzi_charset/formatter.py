"""Render bucket maps back into the baseline document layout.

The generated document keeps the baseline's informational header and its
trailing symbol block verbatim and replaces everything between them with
one line per stroke bucket::

    <prefix>

    1画\t一 乙
    2画\t八 丁 ...


    <suffix>

The prefix is everything before ``PREFIX_ANCHOR``; the suffix starts at
``SUFFIX_ANCHOR``. A missing anchor leaves its region empty.
"""

from __future__ import annotations

from .collation import collate
from .config import PREFIX_ANCHOR, STROKE_SUFFIX, SUFFIX_ANCHOR
from .domain import BucketMap


def split_regions(source_text: str) -> tuple[str, str]:
    """Return the trimmed (prefix, suffix) regions of ``source_text``."""
    head_end = source_text.find(PREFIX_ANCHOR)
    prefix = source_text[:head_end].strip() if head_end > -1 else ''
    tail_start = source_text.find(SUFFIX_ANCHOR)
    suffix = source_text[tail_start:].strip() if tail_start > -1 else ''
    return prefix, suffix


def render_body(buckets: BucketMap) -> str:
    lines = []
    for strokes in sorted(buckets):
        if buckets[strokes]:
            lines.append(f"{strokes}{STROKE_SUFFIX}\t{' '.join(collate(buckets[strokes]))}\n")
    return ''.join(lines)


def render(buckets: BucketMap, source_text: str) -> str:
    """Render ``buckets`` inside the regions preserved from ``source_text``.

    Args:
        buckets: Final stroke bucket map.
        source_text: The baseline document the prefix and suffix come from.

    Returns:
        The document text, trimmed, with exactly one trailing newline.
    """
    prefix, suffix = split_regions(source_text)
    return f"{prefix}\n\n{render_body(buckets)}\n\n{suffix}".strip() + '\n'


def format_distribution(buckets: BucketMap) -> str:
    """Return a one-line summary such as ``1画:2, 2画:9``."""
    return ', '.join(f"{n}{STROKE_SUFFIX}:{len(buckets[n])}" for n in sorted(buckets))
