"""Shared configuration for the charset tools.

This module centralizes the values used by:
    - loader.py (document anchors, heuristic asset)
    - aggregator.py / fonts.py (font discovery)
    - analyzer.py (baseline count, sentinel characters)
    - cli.py (defaults for every flag)

Having these values in one place keeps the extend and analyze commands in
agreement about the document layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Basic CJK Unified Ideographs block
CJK_START = 0x4E00
CJK_END = 0x9FFF

# Anchors delimiting the preserved regions of the baseline document
PREFIX_ANCHOR = '1000 个次常用字大全'
SUFFIX_ANCHOR = '1234567890'

# Suffix marking a stroke-count line, e.g. "5画\t..."
STROKE_SUFFIX = '画'

# Versioned heuristic candidate pool shipped as package data
HEURISTIC_ASSET = 'heuristic_candidates.v1.txt'

# Font files scanned for glyph coverage
FONT_EXTENSIONS = ('.ttf', '.otf')

# Defaults for the extend command
DEFAULT_BASELINE = 'content.txt'
DEFAULT_OUTPUT = 'content-extended.txt'
DEFAULT_FONT_DIR = 'src'
DEFAULT_LIMIT = 5800

# Analyzer reference values
BASELINE_COUNT = 3500
SENTINEL_CHARS = ('哼', '暧')


def is_basic_cjk(char: str) -> bool:
    """Return True if ``char`` is a single code point in U+4E00..U+9FFF."""
    return len(char) == 1 and CJK_START <= ord(char) <= CJK_END


@dataclass
class ExtendConfig:
    """Settings for one run of the extend pipeline.

    Attributes:
        baseline: Path to the baseline charset document.
        output: Path the generated document is written to.
        limit: Maximum number of characters kept after classification.
        preview: If True, print the distribution and skip writing.
        font_dir: Directory scanned recursively for font files.
        include_files: Extra character list files merged into the union.
        progress: Show a tqdm progress bar while scanning fonts.
    """
    baseline: Path = Path(DEFAULT_BASELINE)
    output: Path = Path(DEFAULT_OUTPUT)
    limit: int = DEFAULT_LIMIT
    preview: bool = False
    font_dir: Path = Path(DEFAULT_FONT_DIR)
    include_files: list[Path] = field(default_factory=list)
    progress: bool = False


@dataclass
class AnalyzeConfig:
    """Settings for the analyzer.

    Attributes:
        file: Generated document to inspect.
        baseline_count: Reference size the delta is computed against.
        sentinels: Characters whose presence is reported.
    """
    file: Path = Path(DEFAULT_OUTPUT)
    baseline_count: int = BASELINE_COUNT
    sentinels: tuple[str, ...] = SENTINEL_CHARS
