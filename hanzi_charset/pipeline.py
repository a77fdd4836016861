"""The extend pipeline.

One run of :func:`run_extend` goes through these steps:

    1. **Load the baseline**: parse the stroke lines of the baseline
       document. An unreadable baseline aborts the run.

    2. **Aggregate candidates**: union the heuristic pool, include files
       and font coverage with the baseline. Failing include files and fonts
       are skipped.

    3. **Classify**: bucket every character by stroke count. Unresolved
       characters are reported and left out.

    4. **Select**: truncate to the configured limit.

    5. **Write**: render into the baseline layout and replace the output
       file atomically, or only report the distribution in preview mode.

Each run builds its sets from scratch; nothing is carried between runs.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .aggregator import AggregateResult, CandidateAggregator, union_sets
from .config import ExtendConfig
from .domain import CharsetIOError, Classification
from .fonts import GlyphCoverage
from .formatter import format_distribution, render
from .loader import load_heuristic_pool, parse_document, read_document
from .selection import Selection, select
from .strokes import StrokeSource, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Everything one run produced.

    Attributes:
        baseline: Characters parsed from the baseline document.
        candidates: Aggregated candidates, per source.
        classification: Stroke classification of the full union.
        selection: The classification after the size limit.
        document: Rendered document text, None in preview mode.
        output: Path written to, None in preview mode.
    """
    baseline: frozenset
    candidates: AggregateResult
    classification: Classification
    selection: Selection
    document: str | None = None
    output: Path | None = None

    @property
    def union(self) -> frozenset:
        return union_sets(self.baseline, self.candidates.union)


def _output_mode(path: Path) -> int:
    # mkstemp files are 0600; output takes the existing mode or the umask default
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` through a temporary file in the same directory.

    An existing file keeps its permission bits; a new one gets the usual
    umask-derived mode.

    Raises:
        CharsetIOError: If the file cannot be written. ``path`` is left as it
            was.
    """
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f'.{path.name}.', suffix='.tmp')
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
            f.write(text)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CharsetIOError(f"Cannot write output {path}: {e}") from e


def run_extend(
    config: ExtendConfig,
    source: StrokeSource,
    coverage: GlyphCoverage | None = None,
    heuristic: frozenset | None = None,
) -> BuildResult:
    """Run the extend pipeline.

    Args:
        config: Settings for this run.
        source: Stroke-count capability.
        coverage: Glyph coverage capability; fontTools when None.
        heuristic: Heuristic pool override; the bundled asset when None.

    Returns:
        BuildResult describing the run.

    Raises:
        CharsetIOError: If the baseline cannot be read or the output cannot
            be written.
        ValueError: If ``config.limit`` is negative.
    """
    if config.limit < 0:
        raise ValueError(f"limit must be >= 0, got {config.limit}")

    raw = read_document(config.baseline)
    baseline = parse_document(raw)
    if heuristic is None:
        heuristic = load_heuristic_pool()

    aggregator = CandidateAggregator(coverage, progress=config.progress)
    candidates = aggregator.aggregate(heuristic, config.include_files, config.font_dir)
    union = union_sets(baseline, candidates.union)
    logger.info("Baseline: %d, heuristic candidates: %d, union: %d, target: %d",
                len(baseline), len(candidates.heuristic), len(union), config.limit)

    classification = classify(union, source)
    if classification.unknown_count:
        logger.warning("%d characters have no stroke count and were left out",
                       classification.unknown_count)
    if classification.fallback_count:
        logger.info("%d characters classified from stroke order", classification.fallback_count)

    selection = select(classification.buckets, config.limit)
    if selection.truncated:
        logger.info("Over the limit: truncated by stroke count and collation order to %d characters",
                    selection.total)

    if config.preview:
        print(f"Distribution by stroke count: {format_distribution(selection.buckets)}")
        return BuildResult(baseline, candidates, classification, selection)

    document = render(selection.buckets, raw)
    write_atomic(config.output, document)
    logger.info("Written: %s", config.output)
    return BuildResult(baseline, candidates, classification, selection, document, Path(config.output))
