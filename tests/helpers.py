"""Test doubles and sample data shared by the unit and integration tests."""

from __future__ import annotations

from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from hanzi_charset.fonts import GlyphCoverage
from hanzi_charset.strokes import StrokeSource

# Real stroke counts of the characters used throughout the tests
STROKES = {
    '一': 1, '乙': 1,
    '八': 2, '人': 2, '十': 2,
    '大': 3, '工': 3, '上': 3,
    '中': 4, '王': 4, '日': 4,
    '哼': 10, '暧': 13,
}

SAMPLE_DOCUMENT = (
    "常用字表\n"
    "说明：按笔画排列\n"
    "\n"
    "1000 个次常用字大全\n"
    "1画\t一 乙\n"
    "2画\t八 人 十\n"
    "3画\t大 工 上\n"
    "\n"
    "1234567890\n"
    "ABCDEFGHIJ\n"
    "，。！？\n"
)

SAMPLE_PREFIX = "常用字表\n说明：按笔画排列"
SAMPLE_SUFFIX = "1234567890\nABCDEFGHIJ\n，。！？"


class DictStrokeSource(StrokeSource):
    """Stroke source answering from in-memory dictionaries.

    Args:
        counts: Character -> direct result (may be invalid on purpose).
        orders: Character -> stroke decomposition.
        failing: Characters whose direct lookup raises.
    """

    def __init__(self, counts=None, orders=None, failing=()):
        self.counts = dict(STROKES if counts is None else counts)
        self.orders = dict(orders or {})
        self.failing = set(failing)
        self.calls = []

    def stroke_count(self, char):
        self.calls.append(char)
        if char in self.failing:
            raise KeyError(char)
        return self.counts.get(char)

    def stroke_order(self, char):
        return self.orders.get(char)


class DictCoverage(GlyphCoverage):
    """Glyph coverage keyed by font file name; listed names raise."""

    def __init__(self, coverage=None, failing=()):
        self.coverage = dict(coverage or {})
        self.failing = set(failing)

    def codepoints(self, font_path):
        name = Path(font_path).name
        if name in self.failing:
            raise OSError(f"cannot open {name}")
        return {ord(c) for c in self.coverage.get(name, '')}


def build_test_font(path: Path, chars: str) -> Path:
    """Write a minimal TrueType font with a square glyph for each of ``chars``."""
    names = {ord(c): f'uni{ord(c):04X}' for c in chars}
    glyph_order = ['.notdef'] + sorted(names.values())

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((800, 700))
    pen.lineTo((800, 0))
    pen.closePath()
    glyph = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(names)
    fb.setupGlyf({name: glyph for name in glyph_order})
    glyph_table = fb.font['glyf']
    fb.setupHorizontalMetrics({name: (1000, glyph_table[name].xMin) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=880, descent=-120)
    fb.setupNameTable({'familyName': 'CharsetTest', 'styleName': 'Regular'})
    fb.setupOS2(sTypoAscender=880, usWinAscent=880, usWinDescent=120)
    fb.setupPost()
    fb.save(str(path))
    return path
