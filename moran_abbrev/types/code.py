"""
Full code of a single character.

A full code is spelled with five symbols: initial, final, a separator, then the
head and tail of the auxiliary code. Only single characters carry one; a word's
code is always the sequence of its characters' codes.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from moran_abbrev.flypy_data import FLYPY_SLOT_PAIRS
from moran_abbrev.types.results import CodeParseResult

SPELLING_LENGTH = 5


@dataclass(frozen=True)
class PhoneticCode:
    """Four single-symbol slots of a character's full code."""

    initial: str
    final: str
    head: str
    tail: str

    @classmethod
    def parse(cls, spelling: str) -> CodeParseResult:
        """Extract slots 0, 1, 3 and 4 of a five-symbol spelling. Symbol legality is not checked."""
        if len(spelling) != SPELLING_LENGTH:
            return CodeParseResult.failure(f"expected {SPELLING_LENGTH} symbols, got {len(spelling)}")
        return CodeParseResult.success_with_code(
            cls(initial=spelling[0], final=spelling[1], head=spelling[3], tail=spelling[4]),
        )

    def normalized(self) -> PhoneticCode:
        """Fold the (initial, final) pair onto its canonical flypy pair."""
        converted = FLYPY_SLOT_PAIRS.get(self.initial + self.final)
        if converted is None:
            return self
        return replace(self, initial=converted[0], final=converted[1])

    def __str__(self) -> str:
        return f"{self.initial}{self.final}{self.head}{self.tail}"
