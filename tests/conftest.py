"""Shared pytest fixtures for the hanzi_charset test suite.

Fixtures:
    stroke_source: DictStrokeSource loaded with real stroke counts
    baseline_path: SAMPLE_DOCUMENT written to a temp file
    font_dir: Temp directory holding one fontTools-built test font
    extend_config: ExtendConfig pointing at the temp baseline and output

Markers:
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import pytest

# Test helpers and the package itself, for runs without an install
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from hanzi_charset.config import ExtendConfig  # noqa: E402
from helpers import SAMPLE_DOCUMENT, DictStrokeSource, build_test_font  # noqa: E402


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture
def stroke_source():
    return DictStrokeSource()


@pytest.fixture
def baseline_path(tmp_path):
    """Return the path of a baseline document with 8 characters in 3 buckets."""
    path = tmp_path / 'content.txt'
    path.write_text(SAMPLE_DOCUMENT, encoding='utf-8')
    return path


@pytest.fixture
def font_dir(tmp_path):
    """Return a directory with ``fonts/nested/Test.ttf`` covering 中王日 and A."""
    nested = tmp_path / 'fonts' / 'nested'
    nested.mkdir(parents=True)
    build_test_font(nested / 'Test.ttf', '中王日A')
    return tmp_path / 'fonts'


@pytest.fixture
def extend_config(tmp_path, baseline_path):
    """Return an ExtendConfig with no fonts, no includes and a roomy limit."""
    return ExtendConfig(
        baseline=baseline_path,
        output=tmp_path / 'content-extended.txt',
        limit=100,
        font_dir=None,
    )
