"""
Result types for abbreviation generation.

This module contains result classes with Either-like error handling and the
immutable abbreviation table handed to the output writer.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moran_abbrev.types.code import PhoneticCode
    from moran_abbrev.types.dictionary import Entry


@dataclass(frozen=True)
class CodeParseResult:
    """Result of parsing a spelling into a full code - Either-like structure."""

    success: bool
    code: PhoneticCode | None
    error_message: str | None = None

    @classmethod
    def success_with_code(cls, code: PhoneticCode) -> CodeParseResult:
        return cls(success=True, code=code, error_message=None)

    @classmethod
    def failure(cls, error_message: str) -> CodeParseResult:
        return cls(success=False, code=None, error_message=error_message)


@dataclass(frozen=True)
class AbbreviationEntry:
    """A word holding an abbreviation; ``promoted`` pins it above any weight."""

    entry: Entry
    code: str
    promoted: bool = False

    @property
    def sort_key(self) -> tuple[bool, int]:
        return (self.promoted, self.entry.weight)

    def output_weight(self, max_weight: int) -> int:
        """Weight written to the output dictionary."""
        return max_weight if self.promoted else self.entry.weight


@dataclass(frozen=True)
class AbbreviationTable:
    """Abbreviation code -> surviving words, highest priority first."""

    buckets: MappingProxyType
    max_weight: int

    def __len__(self) -> int:
        return len(self.buckets)

    def __contains__(self, code: str) -> bool:
        return code in self.buckets

    def __getitem__(self, code: str) -> tuple[AbbreviationEntry, ...]:
        return self.buckets[code]

    def codes(self) -> list[str]:
        return sorted(self.buckets)

    def rows(self):
        """Yield ``(text, code, weight)`` in ascending code order, then bucket order."""
        for code in self.codes():
            for item in self.buckets[code]:
                yield item.entry.text, code, item.output_weight(self.max_weight)
