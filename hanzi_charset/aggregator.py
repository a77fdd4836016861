"""Candidate aggregation.

Builds the union of every candidate source for one run:

    1. The heuristic pool (see ``loader.load_heuristic_pool``).
    2. External character lists given with ``--include``.
    3. Basic CJK characters covered by the fonts under the font directory.

A list file or font that cannot be read is logged and skipped; the other
sources still contribute. Each source is folded into a new frozenset, so
the result does not depend on the order sources are visited in and a
repeated character never grows the union.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from tqdm import tqdm

from .config import is_basic_cjk
from .fonts import FontToolsCoverage, GlyphCoverage, find_fonts
from .loader import parse_external_list

logger = logging.getLogger(__name__)


def union_sets(*sets: Iterable[str]) -> frozenset:
    """Return the union of ``sets`` as a new frozenset."""
    return frozenset().union(*sets)


@dataclass(frozen=True)
class AggregateResult:
    """Outcome of one aggregation.

    Attributes:
        union: All candidate characters.
        heuristic: Characters from the heuristic pool.
        external: Characters from the include files.
        fonts: Basic CJK characters covered by the scanned fonts.
        skipped: Include files and fonts that failed and were skipped.
    """
    union: frozenset
    heuristic: frozenset = field(default_factory=frozenset)
    external: frozenset = field(default_factory=frozenset)
    fonts: frozenset = field(default_factory=frozenset)
    skipped: tuple = ()


class CandidateAggregator:
    """Collects candidate characters from every configured source.

    Attributes:
        coverage: Glyph coverage capability used for fonts.
        progress: Show a tqdm progress bar while scanning fonts.
    """

    def __init__(self, coverage: GlyphCoverage | None = None, progress: bool = False):
        self.coverage = coverage or FontToolsCoverage()
        self.progress = progress

    def read_include_files(self, paths: Iterable[Path]) -> tuple[frozenset, list[Path]]:
        """Parse each include file; unreadable files are skipped.

        Returns:
            Tuple of (characters from all readable files, skipped paths).
        """
        parsed = []
        skipped = []
        for path in paths:
            try:
                text = Path(path).read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to read include file %s: %s", path, e)
                skipped.append(Path(path))
                continue
            chars, entries = parse_external_list(text)
            logger.info("Merged include file %s: %d entries", path, entries)
            parsed.append(chars)
        return union_sets(*parsed), skipped

    def scan_fonts(self, font_dir: Path | None) -> tuple[frozenset, list[Path]]:
        """Collect basic CJK characters covered by fonts under ``font_dir``.

        Returns:
            Tuple of (covered characters, fonts that failed and were skipped).
        """
        if font_dir is None:
            return frozenset(), []
        if not Path(font_dir).is_dir():
            logger.warning("Font directory not found, skipping font scan: %s", font_dir)
            return frozenset(), []

        covered = []
        skipped = []
        fonts = find_fonts(Path(font_dir))
        for font_path in tqdm(fonts, desc="Scanning fonts", unit="font", disable=not self.progress):
            try:
                codepoints = self.coverage.codepoints(font_path)
            except Exception as e:
                logger.warning("Failed to read font %s: %s", font_path, e)
                skipped.append(font_path)
                continue
            chars = frozenset(c for c in map(chr, codepoints) if is_basic_cjk(c))
            logger.debug("Font %s covers %d basic CJK characters", font_path.name, len(chars))
            covered.append(chars)

        logger.info("Scanned %d fonts (%d skipped)", len(fonts), len(skipped))
        return union_sets(*covered), skipped

    def aggregate(
        self,
        heuristic: Iterable[str] = (),
        include_files: Iterable[Path] = (),
        font_dir: Path | None = None,
    ) -> AggregateResult:
        """Union the heuristic pool, include files and font coverage.

        Args:
            heuristic: Heuristic candidate characters.
            include_files: External list files to merge.
            font_dir: Directory scanned recursively for fonts, or None.

        Returns:
            AggregateResult with the union and the per-source sets.
        """
        heuristic = frozenset(c for c in heuristic if len(c) == 1)
        external, skipped_lists = self.read_include_files(include_files)
        fonts, skipped_fonts = self.scan_fonts(font_dir)
        return AggregateResult(
            union=union_sets(heuristic, external, fonts),
            heuristic=heuristic,
            external=external,
            fonts=fonts,
            skipped=tuple(skipped_lists + skipped_fonts),
        )
