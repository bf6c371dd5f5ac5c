"""
Code Inference Test Suite

This module contains tests for building the character code table and for
translating words into full codes and abbreviations.
"""

import pytest

from moran_abbrev.services import CodeInferenceService, PinyinCacheService, build_char_code_table
from moran_abbrev.types import AbbreviationConfig, Dictionary, PhoneticCode


def test_char_table_skips_malformed_spellings(diagnostics):
    char_dict = Dictionary.from_rows([("甲", "aaaxx", 1), ("坏", "abc", 1), ("乙", "bbbyy", 1)])

    table = build_char_code_table(char_dict.entries, diagnostics)

    assert set(table) == {"甲", "乙"}
    assert len(diagnostics) == 1
    assert "坏" in diagnostics.messages[0]
    assert "'abc'" in diagnostics.messages[0]


def test_char_table_skips_empty_text(diagnostics):
    char_dict = Dictionary.from_rows([("", "aaaxx", 1), ("甲", "aaaxx", 1)])

    table = build_char_code_table(char_dict.entries, diagnostics)

    assert list(table) == ["甲"]
    assert "empty text" in diagnostics.messages[0]


def test_char_table_last_spelling_wins(diagnostics):
    char_dict = Dictionary.from_rows([("行", "xkxaa", 9), ("行", "hhxbb", 1)])

    table = build_char_code_table(char_dict.entries, diagnostics)

    assert table["行"] == PhoneticCode("h", "h", "b", "b")


def test_char_table_is_read_only(char_dict, diagnostics):
    table = build_char_code_table(char_dict.entries, diagnostics)

    with pytest.raises(TypeError):
        table["子"] = PhoneticCode("z", "i", "a", "a")


def test_infer_returns_normalized_codes_in_order(inference):
    codes = inference.infer("甲丙")

    assert codes == [PhoneticCode("a", "a", "x", "x"), PhoneticCode("b", "w", "m", "m")]


def test_infer_missing_character_yields_nothing(inference, diagnostics):
    assert inference.infer("甲子乙") is None

    assert diagnostics.messages == ["cannot infer full code of 「甲子乙」: missing 「子」"]


@pytest.mark.parametrize(("text", "expected"), [("甲乙", "ab"), ("丙丁甲", "bda"), ("甲乙丙丁", "abbd")])
def test_infer_abbreviation_takes_initials(inference, text, expected):
    abbreviation = inference.infer_abbreviation(text)

    assert abbreviation == expected
    assert len(abbreviation) == len(text)


def test_infer_abbreviation_missing_character(inference, diagnostics):
    assert inference.infer_abbreviation("甲子") is None

    assert diagnostics.messages == ["cannot infer abbreviation of 「甲子」: missing 「子」"]


def test_missing_character_carries_pinyin_hint(diagnostics):
    config = AbbreviationConfig.create_default()
    inference = CodeInferenceService({}, diagnostics, PinyinCacheService(config))

    assert inference.infer_abbreviation("甲") is None

    assert diagnostics.messages == ["cannot infer abbreviation of 「甲」: missing 「甲」(jia)"]


def test_pinyin_hints_can_be_disabled():
    config = AbbreviationConfig.create_default().with_overrides(pinyin_hints=False)

    assert PinyinCacheService(config).describe("甲") == "「甲」"
