"""Font discovery and glyph coverage queries.

The aggregator only needs one question answered about a font: which code
points does it have glyphs for. :class:`GlyphCoverage` is that contract;
:class:`FontToolsCoverage` answers it from the font's best cmap using
fontTools.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from fontTools.ttLib import TTFont

from .config import FONT_EXTENSIONS

logger = logging.getLogger(__name__)


class GlyphCoverage(ABC):
    """Answers glyph coverage queries for font files."""

    @abstractmethod
    def codepoints(self, font_path: Path) -> set[int]:
        """Return the Unicode code points ``font_path`` has glyphs for.

        Raises:
            Any exception on an unreadable or malformed font. Callers treat
            the failure as affecting this font only.
        """


class FontToolsCoverage(GlyphCoverage):
    """Glyph coverage read from the font's best Unicode cmap subtable."""

    def codepoints(self, font_path: Path) -> set[int]:
        with TTFont(str(font_path), lazy=True) as font:
            cmap = font.getBestCmap()
        if cmap is None:
            logger.debug("No Unicode cmap in %s", font_path)
            return set()
        return set(cmap)


def find_fonts(fonts_dir: Path, extensions: tuple[str, ...] = FONT_EXTENSIONS) -> list[Path]:
    """Find all font files in a directory recursively.

    Extensions are matched case-insensitively, so ``FONT.TTF`` is found as
    well as ``font.ttf``.

    Args:
        fonts_dir: Root directory to scan.
        extensions: Lowercase file suffixes to accept.

    Returns:
        Sorted list of font file paths. Empty if ``fonts_dir`` is not a
        directory.
    """
    fonts_dir = Path(fonts_dir)
    if not fonts_dir.is_dir():
        return []
    return sorted(
        p for p in fonts_dir.rglob('*')
        if p.is_file() and p.suffix.lower() in extensions
    )
