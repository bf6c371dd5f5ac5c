"""
Dictionary I/O Test Suite

This module contains tests for reading Rime dictionaries and writing the
abbreviation dictionary.
"""

import pytest

from moran_abbrev.services import dictionary_header, load_dictionary, save_dictionary, write_abbreviation_table
from moran_abbrev.services.dictionary_io import parse_weight, split_header
from moran_abbrev.types import Dictionary

HEADER = "# Rime dictionary\n---\nname: moran.chars\nversion: \"1\"\n..."

BODY = "\n".join(
    [
        "",
        "# comment line",
        "甲\taaaxx\t100",
        "",
        "乙\tbbbyy",
        "丙\tbzbmm\tmany",
        "丁",
        "戊\tccccc\t-3",
    ],
)


def test_load_dictionary_parses_header_and_entries(tmp_path):
    path = tmp_path / "chars.dict.yaml"
    path.write_text(HEADER + BODY + "\n", encoding="utf-8")

    dictionary = load_dictionary(path)

    assert dictionary.header == HEADER
    assert [(e.text, e.spelling, e.weight, e.ordinal) for e in dictionary.entries] == [
        ("甲", "aaaxx", 100, 0),
        ("乙", "bbbyy", 0, 1),
        ("丙", "bzbmm", 0, 2),
        ("丁", "", 0, 3),
        ("戊", "ccccc", 0, 4),
    ]


def test_file_without_header_is_all_body(tmp_path):
    path = tmp_path / "pinyin.txt"
    path.write_text("甲乙\tjia yi\t40000\n", encoding="utf-8")

    dictionary = load_dictionary(path)

    assert dictionary.header == ""
    assert [(e.text, e.weight) for e in dictionary.entries] == [("甲乙", 40000)]


def test_header_marker_beyond_search_window_is_ignored():
    content = "#" * 2000 + "\n...\n甲\taaaxx\t1\n"

    header, body = split_header(content)

    assert header == ""
    assert body == content


def test_header_search_window_counts_bytes():
    # 400 CJK characters take 1200 bytes, pushing the marker out of the window
    content = "# " + "注" * 400 + "\n...\n甲\taaaxx\t1\n"

    header, body = split_header(content)

    assert header == ""
    assert body == content


def test_header_with_cjk_comment_is_split_on_characters():
    header, body = split_header("# 魔然略碼\n---\nname: moran.abbrev\n...\n甲\taaaxx\t1\n")

    assert header == "# 魔然略碼\n---\nname: moran.abbrev\n..."
    assert body == "\n甲\taaaxx\t1\n"


@pytest.mark.parametrize(
    ("field", "weight"),
    [("12", 12), ("+7", 7), ("0", 0), ("-1", 0), ("4294967295", 4294967295), ("4294967296", 0), ("1.5", 0), ("", 0), (None, 0)],
)
def test_parse_weight(field, weight):
    assert parse_weight(field) == weight


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "absent.dict.yaml")


def test_save_dictionary_writes_header_and_lines(tmp_path):
    dictionary = Dictionary.from_rows([("甲", "aaaxx", 100), ("乙", "", 0)], header=HEADER)
    path = tmp_path / "out.dict.yaml"

    save_dictionary(dictionary, path)

    assert path.read_text(encoding="utf-8") == HEADER + "\n甲\taaaxx\t100\n乙\t\t0\n"
    assert load_dictionary(path).entries == dictionary.entries


def test_dictionary_header_names_the_table():
    header = dictionary_header("moran.abbrev", "generated")

    assert header.startswith("# Rime dictionary\n")
    assert "# generated\n" in header
    assert "\nname: moran.abbrev\n" in header
    assert "\nsort: by_weight\n" in header
    assert header.endswith("...")


def test_write_abbreviation_table(tmp_path, generator, char_dict, make_words):
    table = generator.build_table(char_dict, make_words(("甲乙丙", 600), ("甲戊", 40_000)))
    path = tmp_path / "moran.abbrev.dict.yaml"

    count = write_abbreviation_table(table, path, name="moran.abbrev")

    lines = path.read_text(encoding="utf-8").split("...\n", 1)[1].splitlines()
    assert count == 2
    assert lines == ["甲乙丙\tabb\t600", "甲戊\tac\t4294967295"]
