"""
Code inference service.

Builds the character code table from the character dictionary and translates
words into full codes, one character at a time. A word with any character
missing from the table yields no result at all; this is reported to the
diagnostics sink and is never an error.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from moran_abbrev.services.diagnostics import DiagnosticsSink, LoggingDiagnostics
from moran_abbrev.types import Entry, PhoneticCode

if TYPE_CHECKING:
    from moran_abbrev.services.cache import PinyinCacheService


def build_char_code_table(
    char_entries: Iterable[Entry],
    diagnostics: DiagnosticsSink | None = None,
) -> Mapping[str, PhoneticCode]:
    """
    Map each character to its parsed full code.

    Entries with a malformed spelling are reported and skipped. When a
    character appears more than once, its last parsable spelling wins.
    """
    report = diagnostics if diagnostics is not None else LoggingDiagnostics()
    table: dict[str, PhoneticCode] = {}
    for entry in char_entries:
        if not entry.text:
            report(f"skipping character entry #{entry.ordinal} with empty text")
            continue
        result = PhoneticCode.parse(entry.spelling)
        if not result.success:
            report(f"cannot parse full code of 「{entry.text}」: {entry.spelling!r} ({result.error_message})")
            continue
        table[entry.text[0]] = result.code
    return MappingProxyType(table)


class CodeInferenceService:
    """Infer full codes and abbreviations of words from the character code table."""

    def __init__(
        self,
        char_codes: Mapping[str, PhoneticCode],
        diagnostics: DiagnosticsSink | None = None,
        pinyin: PinyinCacheService | None = None,
    ):
        self._char_codes = char_codes
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()
        self._pinyin = pinyin

    @property
    def char_codes(self) -> Mapping[str, PhoneticCode]:
        return self._char_codes

    def infer(self, text: str) -> list[PhoneticCode] | None:
        """Normalized full code of every character of ``text``, or None if any is missing."""
        codes = []
        for ch in text:
            code = self._char_codes.get(ch)
            if code is None:
                self._diagnostics(f"cannot infer full code of 「{text}」: missing {self._describe(ch)}")
                return None
            codes.append(code.normalized())
        return codes

    def infer_abbreviation(self, text: str) -> str | None:
        """Concatenated initials of ``text``, or None if any character is missing."""
        initials = []
        for ch in text:
            code = self._char_codes.get(ch)
            if code is None:
                self._diagnostics(f"cannot infer abbreviation of 「{text}」: missing {self._describe(ch)}")
                return None
            # Initials are never touched by slot normalization
            initials.append(code.initial)
        return "".join(initials)

    def _describe(self, ch: str) -> str:
        if self._pinyin is None:
            return f"「{ch}」"
        return self._pinyin.describe(ch)
