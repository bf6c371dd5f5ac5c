"""
Dictionary data structures.

An entry is one line of a Rime dictionary: text, spelling and weight. The
``ordinal`` records the position among accepted lines of its file.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One dictionary line: a character or a multi-character word."""

    text: str
    spelling: str = ""  # Full code, only meaningful for single characters
    weight: int = 0
    ordinal: int = 0

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Dictionary:
    """Ordered entries plus the header blob they were read with."""

    header: str
    entries: tuple[Entry, ...]

    @classmethod
    def from_rows(cls, rows, header: str = "") -> Dictionary:
        """Build a dictionary from ``(text, spelling, weight)`` rows, numbering them in order."""
        entries = tuple(
            Entry(text=text, spelling=spelling, weight=weight, ordinal=ordinal)
            for ordinal, (text, spelling, weight) in enumerate(rows)
        )
        return cls(header=header, entries=entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
