import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import moran_abbrev
sys.path.insert(0, str(Path(__file__).parent.parent))

from moran_abbrev.generator import AbbreviationGenerator
from moran_abbrev.services import CodeInferenceService, CollectingDiagnostics, build_char_code_table
from moran_abbrev.types import AbbreviationConfig, Dictionary

# Full codes: initial, final, separator, head, tail
CHARACTERS = [
    ("甲", "aaaxx", 100),
    ("乙", "bbbyy", 200),
    ("丙", "bzbmm", 60_000),  # "bz" folds onto "bw"
    ("丁", "ddddd", 300),  # "dd" folds onto "dl"
    ("戊", "ccccc", 400),
]


@pytest.fixture
def diagnostics():
    return CollectingDiagnostics()


@pytest.fixture
def config():
    return AbbreviationConfig.create_default().with_overrides(pinyin_hints=False)


@pytest.fixture
def char_dict():
    return Dictionary.from_rows(CHARACTERS)


@pytest.fixture
def inference(char_dict, diagnostics):
    return CodeInferenceService(build_char_code_table(char_dict.entries, diagnostics), diagnostics)


@pytest.fixture
def generator(config, diagnostics):
    return AbbreviationGenerator(config, diagnostics)


@pytest.fixture
def make_words():
    """Word dictionary from ``(text, weight)`` pairs."""

    def _make(*rows):
        return Dictionary.from_rows([(text, "", weight) for text, weight in rows])

    return _make
