"""Unit tests for analyzer.py."""

import tempfile
import unittest
from pathlib import Path

from hanzi_charset.analyzer import analyze, analyze_file, format_report
from hanzi_charset.domain import CharsetIOError
from helpers import SAMPLE_DOCUMENT, DictStrokeSource


class TestAnalyze(unittest.TestCase):
    """Tests for analyze()."""

    def test_counts_unique_cjk_in_whole_text(self):
        report = analyze("1画\t一 一\n中A，中\n", DictStrokeSource(), baseline=5)
        # 画 sits in the basic CJK block as well
        self.assertEqual(report.unique, frozenset('画一中'))
        self.assertEqual(report.total, 3)
        self.assertEqual(report.delta, -2)

    def test_histogram_and_unknown(self):
        report = analyze("一乙八囧", DictStrokeSource())
        self.assertEqual(report.histogram, {1: 2, 2: 1})
        self.assertEqual(report.unknown, 1)

    def test_histogram_uses_fallback(self):
        source = DictStrokeSource({}, orders={'囧': list('abcdefg')})
        self.assertEqual(analyze("囧", source).histogram, {7: 1})

    def test_sentinels(self):
        report = analyze("哼 大", DictStrokeSource())
        self.assertEqual(report.sentinels, {'哼': True, '暧': False})

    def test_header_characters_count(self):
        # the preserved header holds CJK text too
        report = analyze(SAMPLE_DOCUMENT, DictStrokeSource(), baseline=0)
        self.assertIn('常', report.unique)
        self.assertIn('一', report.unique)

    def test_input_not_modified(self):
        text = "一乙"
        analyze(text, DictStrokeSource())
        self.assertEqual(text, "一乙")


class TestAnalyzeFile(unittest.TestCase):
    """Tests for analyze_file()."""

    def test_missing_file(self):
        with self.assertRaises(CharsetIOError):
            analyze_file(Path(tempfile.mkdtemp()) / 'none.txt', DictStrokeSource())

    def test_reads_file(self):
        path = Path(tempfile.mkdtemp()) / 'doc.txt'
        path.write_text("1画\t一 乙\n", encoding='utf-8')
        report = analyze_file(path, DictStrokeSource(), baseline=1)
        self.assertEqual(report.unique, frozenset('画一乙'))
        self.assertEqual(report.delta, 2)
        self.assertEqual(report.unknown, 1)


class TestFormatReport(unittest.TestCase):
    """Tests for format_report()."""

    def test_report_text(self):
        report = analyze("一乙八囧哼", DictStrokeSource(), baseline=3)
        text = format_report(report, label='out.txt')
        self.assertIn("File: out.txt", text)
        self.assertIn("Unique characters: 5", text)
        self.assertIn("Delta vs 3 baseline: +2", text)
        self.assertIn("1画:2 | 2画:1 | 10画:1 | unknown:1", text)
        self.assertIn("- 哼: yes", text)
        self.assertIn("- 暧: no", text)

    def test_negative_delta(self):
        report = analyze("一", DictStrokeSource(), baseline=3500)
        self.assertIn("Delta vs 3500 baseline: -3499", format_report(report))


if __name__ == '__main__':
    unittest.main()
