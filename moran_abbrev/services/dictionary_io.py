"""
Dictionary file reading and writing.

Rime dictionaries start with a YAML header terminated by ``...``, followed by
tab-separated ``text<TAB>spelling<TAB>weight`` lines. The header is kept as an
opaque blob and written back unchanged by ``save_dictionary``.
"""
from __future__ import annotations

import re
from pathlib import Path

from moran_abbrev.paths import logger, resolve_path
from moran_abbrev.types import AbbreviationTable, Dictionary, Entry, MAX_WEIGHT

HEADER_END = "..."
HEADER_SEARCH_LIMIT = 1024

_WEIGHT_PATTERN = re.compile(r"^\+?[0-9]+$")

HEADER_TEMPLATE = """# Rime dictionary
# encoding: utf-8
#
# {comment}

---
name: {name}
version: "1.0"
sort: by_weight
..."""


def dictionary_header(name: str, comment: str = "") -> str:
    return HEADER_TEMPLATE.format(name=name, comment=comment)


def split_header(content: str) -> tuple[str, str]:
    """Split file content into (header, body); the header ends at the first ``...`` in the first 1024 bytes."""
    raw = content.encode("utf-8")
    end = raw.find(HEADER_END.encode(), 0, HEADER_SEARCH_LIMIT + len(HEADER_END) - 1)
    if end < 0:
        return "", content
    # The marker is ASCII, so the byte offset falls on a character boundary
    header = raw[: end + len(HEADER_END)].decode("utf-8")
    return header, content[len(header):]


def parse_weight(field: str | None) -> int:
    """Parse an unsigned weight; anything unparsable or out of range is 0."""
    if not field or not _WEIGHT_PATTERN.match(field):
        return 0
    weight = int(field)
    return weight if weight <= MAX_WEIGHT else 0


def parse_entries(body: str) -> tuple[Entry, ...]:
    entries = []
    for line in body.splitlines():
        if not line or line.startswith("#"):
            continue
        fields = line.split("\t")
        text = fields[0]
        spelling = fields[1] if len(fields) > 1 else ""
        weight = parse_weight(fields[2] if len(fields) > 2 else None)
        entries.append(Entry(text=text, spelling=spelling, weight=weight, ordinal=len(entries)))
    return tuple(entries)


def load_dictionary(path: str | Path) -> Dictionary:
    """Read a dictionary file. I/O and decoding errors propagate to the caller."""
    resolved = resolve_path(path)
    content = resolved.read_text(encoding="utf-8")
    header, body = split_header(content)
    dictionary = Dictionary(header=header, entries=parse_entries(body))
    logger.debug("Loaded %d entries from %s", len(dictionary), resolved)
    return dictionary


def save_dictionary(dictionary: Dictionary, path: str | Path) -> Path:
    """Write the header blob followed by every entry."""
    resolved = resolve_path(path)
    with resolved.open("w", encoding="utf-8", newline="\n") as f:
        f.write(f"{dictionary.header}\n")
        for entry in dictionary.entries:
            f.write(f"{entry.text}\t{entry.spelling}\t{entry.weight}\n")
    return resolved


def write_abbreviation_table(
    table: AbbreviationTable,
    path: str | Path,
    name: str = "moran.abbrev",
    comment: str = "",
) -> int:
    """Write the abbreviation dictionary and return the number of lines written below the header."""
    resolved = resolve_path(path)
    count = 0
    with resolved.open("w", encoding="utf-8", newline="\n") as f:
        f.write(f"{dictionary_header(name, comment)}\n")
        for text, code, weight in table.rows():
            f.write(f"{text}\t{code}\t{weight}\n")
            count += 1
    logger.debug("Wrote %d abbreviation lines to %s", count, resolved)
    return count
