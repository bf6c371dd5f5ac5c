"""
Abbreviation builder service.

Derives one abbreviation per frequent word (the initials of its characters),
groups words by abbreviation and applies the two-symbol collision rule:

- only the highest-weight word may hold a two-symbol abbreviation;
- it is dropped when the common-code incumbent for the same key is frequent
  enough, otherwise it is promoted above every weight.

Three- and four-symbol abbreviations are only gated and sorted. Nothing keeps
them from shadowing a sentence-composition code yet.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from types import MappingProxyType

from moran_abbrev.services.common_code import CommonCodeIndex
from moran_abbrev.services.diagnostics import DiagnosticsSink, LoggingDiagnostics
from moran_abbrev.services.inference import CodeInferenceService
from moran_abbrev.types import AbbreviationConfig, AbbreviationEntry, AbbreviationTable, Entry


def passes_frequency_gate(entry: Entry, config: AbbreviationConfig) -> bool:
    """Whether a word is frequent enough for its length to deserve an abbreviation."""
    min_weight = config.min_weight_for(entry.length)
    return min_weight is not None and entry.weight >= min_weight


def derive_abbreviations(
    words: Iterable[Entry],
    inference: CodeInferenceService,
    config: AbbreviationConfig,
) -> list[tuple[str, Entry]]:
    """Gate and infer: ``(abbreviation, word)`` pairs in input order."""
    pairs = []
    for word in words:
        if not passes_frequency_gate(word, config):
            continue
        abbreviation = inference.infer_abbreviation(word.text)
        if abbreviation is None:
            continue
        pairs.append((abbreviation, word))
    return pairs


class AbbreviationBuilderService:
    """Build the abbreviation table from word entries."""

    def __init__(
        self,
        config: AbbreviationConfig,
        inference: CodeInferenceService,
        diagnostics: DiagnosticsSink | None = None,
    ):
        self._config = config
        self._inference = inference
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()

    def build(self, words: Iterable[Entry], common_index: CommonCodeIndex, pool=None) -> AbbreviationTable:
        """
        Build the table. With ``pool`` (a PersistentAbbreviationPool) the
        per-word derivation runs in worker processes; grouping and collision
        handling always run here, in input order.
        """
        if pool is not None:
            pairs = pool.derive(list(words), self._diagnostics)
        else:
            pairs = derive_abbreviations(words, self._inference, self._config)
        return self.assemble(pairs, common_index)

    def assemble(self, pairs: Iterable[tuple[str, Entry]], common_index: CommonCodeIndex) -> AbbreviationTable:
        groups: dict[str, list[Entry]] = {}
        for abbreviation, word in pairs:
            groups.setdefault(abbreviation, []).append(word)

        buckets = {}
        for code in sorted(groups):
            items = [AbbreviationEntry(entry=word, code=code) for word in groups[code]]
            ranked = sorted(items, key=lambda item: item.sort_key, reverse=True)
            if len(code) == self._config.short_code_length:
                survivors = self._resolve_short_code(code, ranked, common_index)
            else:
                # TODO: keep three-symbol abbreviations from shadowing sentence-composition codes
                survivors = tuple(ranked)
            if survivors:
                buckets[code] = survivors

        return AbbreviationTable(buckets=MappingProxyType(buckets), max_weight=self._config.max_weight)

    def _resolve_short_code(
        self,
        code: str,
        ranked: list[AbbreviationEntry],
        common_index: CommonCodeIndex,
    ) -> tuple[AbbreviationEntry, ...]:
        """Keep at most one word for a short code and pin it to the top, unless a frequent incumbent owns the code."""
        best = ranked[0]
        word = best.entry
        incumbent = common_index.incumbent(code)
        if incumbent is not None:
            if incumbent.weight >= self._config.incumbent_weight_limit:
                self._diagnostics(
                    f"{code}: dropped 「{word.text}」, 「{incumbent.text}」 keeps the code ({incumbent.weight})",
                )
                return ()
            self._diagnostics(f"{code}: adopted 「{word.text}」, demoted 「{incumbent.text}」")
        # Promoted even with no incumbent: the surviving short code always sorts first
        return (replace(best, promoted=True),)
