"""Hanzi Charset Package.

Builds a reproducible working set of Chinese characters for embedding into
downstream assets such as subsetted fonts, and analyzes the documents it
produces.

Architecture Overview:
    The extend pipeline runs leaves first:

    - loader parses the baseline document and external character lists
    - aggregator unions the heuristic pool, include files and font coverage
    - strokes classifies characters by stroke count, with a fallback
    - selection truncates the classified set to a target size
    - formatter writes the buckets back into the baseline layout

    analyzer inspects a generated document independently and never writes.

The package is organized into the following modules:
    config: Constants and run settings.
    domain: Immutable value objects (bucket maps, tagged stroke results).
    collation: Pinned pinyin collation shared by rendering and truncation.
    fonts: Glyph coverage queries via fontTools.
    pipeline: The full extend run, including the atomic output write.
    cli: argparse entry point with ``extend`` and ``analyze`` commands.

Example usage:
    Run the pipeline from Python::

        from hanzi_charset import ExtendConfig, StrokeTable, run_extend

        source = StrokeTable.from_paths('strokes.json')
        result = run_extend(ExtendConfig(limit=6000, preview=True), source)
        print(result.selection.total)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .aggregator import AggregateResult, CandidateAggregator, union_sets
from .analyzer import AnalysisReport, analyze, analyze_file, format_report
from .collation import collate, collation_key
from .config import AnalyzeConfig, ExtendConfig
from .domain import CharsetIOError, Classification, StrokeResult, make_buckets
from .fonts import FontToolsCoverage, GlyphCoverage, find_fonts
from .formatter import format_distribution, render, split_regions
from .loader import load_baseline, load_heuristic_pool, parse_document, parse_external_list
from .pipeline import BuildResult, run_extend
from .selection import Selection, select
from .strokes import StrokeSource, StrokeTable, classify, resolve_strokes

__all__ = [
    # Configuration and domain objects
    'ExtendConfig', 'AnalyzeConfig', 'CharsetIOError', 'Classification',
    'StrokeResult', 'make_buckets',
    # Loading and aggregation
    'parse_document', 'parse_external_list', 'load_baseline', 'load_heuristic_pool',
    'CandidateAggregator', 'AggregateResult', 'union_sets',
    'GlyphCoverage', 'FontToolsCoverage', 'find_fonts',
    # Classification, selection, rendering
    'StrokeSource', 'StrokeTable', 'classify', 'resolve_strokes',
    'collation_key', 'collate', 'Selection', 'select',
    'render', 'split_regions', 'format_distribution',
    # Pipeline and analysis
    'run_extend', 'BuildResult',
    'analyze', 'analyze_file', 'format_report', 'AnalysisReport',
]

__version__ = '1.0.0'
