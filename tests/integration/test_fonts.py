"""Integration tests for glyph coverage with real font files.

Fonts are built on the fly with fontTools.fontBuilder, so no binary fixtures
are checked in.
"""

import pytest

from hanzi_charset.aggregator import CandidateAggregator
from hanzi_charset.fonts import FontToolsCoverage, find_fonts
from helpers import build_test_font

pytestmark = pytest.mark.integration


def test_codepoints_from_cmap(tmp_path):
    path = build_test_font(tmp_path / 'Sample.ttf', '中王A')
    assert FontToolsCoverage().codepoints(path) == {ord('中'), ord('王'), ord('A')}


def test_find_fonts_recursive_and_case_insensitive(tmp_path):
    (tmp_path / 'a' / 'b').mkdir(parents=True)
    for name in ('a/x.ttf', 'a/b/y.OTF', 'z.otf', 'readme.md', 'a/b/w.woff'):
        (tmp_path / name).write_bytes(b'')
    assert [p.name for p in find_fonts(tmp_path)] == ['x.ttf', 'y.OTF', 'z.otf']


def test_find_fonts_missing_directory(tmp_path):
    assert find_fonts(tmp_path / 'missing') == []


def test_scan_real_fonts_skips_corrupt_file(font_dir, caplog):
    (font_dir / 'Corrupt.ttf').write_bytes(b'not a font at all')

    with caplog.at_level('WARNING', logger='hanzi_charset.aggregator'):
        chars, skipped = CandidateAggregator().scan_fonts(font_dir)

    assert chars == frozenset('中王日')
    assert [p.name for p in skipped] == ['Corrupt.ttf']
    assert 'Corrupt.ttf' in caplog.text
