"""Read-only analysis of a generated charset document.

Reports:
    1. total unique basic CJK characters in the document
    2. signed delta against the 3500 character baseline
    3. stroke count distribution, with unresolved characters as "unknown"
    4. whether the sentinel characters are present
    5. usage suggestions

Unlike the loader, the analyzer looks at every character of the text, not
just the stroke lines, so characters in the preserved header count too.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from .config import BASELINE_COUNT, SENTINEL_CHARS, STROKE_SUFFIX, is_basic_cjk
from .domain import CharsetIOError
from .strokes import StrokeSource, resolve_strokes

logger = logging.getLogger(__name__)

SUGGESTIONS = (
    "Use the extended document as the charset source in the build.",
    "Keep the original baseline document as the minimal set.",
    "Maintain new characters in an external list and merge them with --include.",
    "Re-run extend and analyze periodically to check the distribution against the limit.",
)


@dataclass(frozen=True)
class AnalysisReport:
    """Statistics computed from one document.

    Attributes:
        unique: Unique basic CJK characters found.
        baseline: Reference count the delta is measured against.
        histogram: Stroke count -> number of characters.
        unknown: Number of characters with no resolvable stroke count.
        sentinels: Sentinel character -> present in the document.
    """
    unique: frozenset
    baseline: int = BASELINE_COUNT
    histogram: dict = field(default_factory=dict)
    unknown: int = 0
    sentinels: dict = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.unique)

    @property
    def delta(self) -> int:
        return self.total - self.baseline


def analyze(
    text: str,
    source: StrokeSource,
    baseline: int = BASELINE_COUNT,
    sentinels: tuple[str, ...] = SENTINEL_CHARS,
) -> AnalysisReport:
    """Compute the report for a document's text."""
    unique = frozenset(c for c in text if is_basic_cjk(c))

    histogram = Counter()
    unknown = 0
    for char in unique:
        result = resolve_strokes(char, source)
        if result.resolved:
            histogram[result.count] += 1
        else:
            unknown += 1

    return AnalysisReport(
        unique=unique,
        baseline=baseline,
        histogram=dict(sorted(histogram.items())),
        unknown=unknown,
        sentinels={s: s in unique for s in sentinels},
    )


def analyze_file(path: str | Path, source: StrokeSource, **kwargs) -> AnalysisReport:
    """Read ``path`` and analyze it.

    Raises:
        CharsetIOError: If the file is missing or unreadable.
    """
    path = Path(path)
    if not path.is_file():
        raise CharsetIOError(f"File not found: {path}")
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise CharsetIOError(f"Cannot read {path}: {e}") from e
    logger.info("Analyzing %s (%d characters of text)", path, len(text))
    return analyze(text, source, **kwargs)


def format_report(report: AnalysisReport, label: str = '') -> str:
    """Render ``report`` as the human-readable text printed by the CLI."""
    delta = f"+{report.delta}" if report.delta >= 0 else str(report.delta)
    parts = [f"{n}{STROKE_SUFFIX}:{count}" for n, count in report.histogram.items()]
    if report.unknown:
        parts.append(f"unknown:{report.unknown}")

    lines = ["=== Extended charset report ==="]
    if label:
        lines.append(f"File: {label}")
    lines.append(f"Unique characters: {report.total}")
    lines.append(f"Delta vs {report.baseline} baseline: {delta}")
    lines.append("Stroke distribution:")
    lines.append(' | '.join(parts))
    lines.append("Sentinel characters:")
    for char, present in report.sentinels.items():
        lines.append(f"- {char}: {'yes' if present else 'no'}")
    lines.append("")
    lines.append("Suggestions:")
    lines.extend(f"- {s}" for s in SUGGESTIONS)
    return '\n'.join(lines)
