"""
Abbreviation Generation Module

This module derives short abbreviation codes for multi-character words of a
phonetic-code input method, from a character dictionary carrying five-symbol
full codes and a word dictionary carrying usage weights.

## Overview

The core functionality is provided by the `AbbreviationGenerator` class, which
runs a strictly ordered pipeline:

1. **Character Code Table**: Parse every character's full code (initial, final, head, tail)
2. **Common-Code Index**: Group characters and two-character words by composite code
3. **Abbreviation Derivation**: Gate words by frequency and take the initial of each character
4. **Collision Resolution**: Keep one word per two-symbol code, yielding to frequent incumbents
5. **Output**: Write ``text<TAB>code<TAB>weight`` lines in ascending code order

## Composite Codes

- A character occupies ``initial+final`` and ``initial+final+head``
- A two-character word occupies ``a.initial+a.final+b.final+b.initial``
- Full codes are folded onto canonical flypy pairs before composition

## Two-Symbol Collision Rule

Only the heaviest word may hold a two-symbol abbreviation. If the common-code
incumbent for that key weighs 50000 or more, the abbreviation is dropped;
otherwise the word is promoted above every weight and the incumbent is demoted.
Three- and four-symbol abbreviations are not checked against anything.

## Usage Examples

```python
generator = AbbreviationGenerator()
table = generator.build_table(char_dict, word_dict)
for text, code, weight in table.rows():
    print(text, code, weight)

# Or straight from files (``rime:`` and ``%VAR%`` paths are resolved)
generator.generate("rime:moran.chars.dict.yaml", "res/pinyin.txt", "rime:moran.abbrev.dict.yaml")
```

## Error Handling

Malformed spellings and words with unknown characters are reported to the
diagnostics sink and skipped. Only file I/O errors propagate.
"""
from __future__ import annotations

from itertools import chain
from pathlib import Path

from moran_abbrev.paths import logger
from moran_abbrev.services import (
    AbbreviationBuilderService,
    CodeInferenceService,
    CommonCodeIndex,
    CommonCodeIndexService,
    DiagnosticsSink,
    LoggingDiagnostics,
    PersistentAbbreviationPool,
    PinyinCacheService,
    build_char_code_table,
    load_dictionary,
    write_abbreviation_table,
)
from moran_abbrev.types import AbbreviationConfig, AbbreviationTable, Dictionary


class AbbreviationGenerator:
    """Main abbreviation generation service."""

    def __init__(self, config: AbbreviationConfig | None = None, diagnostics: DiagnosticsSink | None = None):
        self._config = config or AbbreviationConfig.create_default()
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnostics()
        self._pinyin = PinyinCacheService(self._config)

    @property
    def config(self) -> AbbreviationConfig:
        return self._config

    def create_inference(self, char_dict: Dictionary) -> CodeInferenceService:
        """Parse the character dictionary into an inference service."""
        char_codes = build_char_code_table(char_dict.entries, self._diagnostics)
        return CodeInferenceService(char_codes, self._diagnostics, self._pinyin)

    def build_common_index(
        self,
        char_dict: Dictionary,
        word_dict: Dictionary,
        inference: CodeInferenceService,
    ) -> CommonCodeIndex:
        """Index characters then words by composite code."""
        service = CommonCodeIndexService(inference)
        return service.build(chain(char_dict.entries, word_dict.entries))

    def build_table(self, char_dict: Dictionary, word_dict: Dictionary) -> AbbreviationTable:
        """Run the whole pipeline on in-memory dictionaries."""
        inference = self.create_inference(char_dict)
        common_index = self.build_common_index(char_dict, word_dict, inference)
        builder = AbbreviationBuilderService(self._config, inference, self._diagnostics)

        workers = self._config.max_workers
        if workers is None or workers <= 1:
            table = builder.build(word_dict.entries, common_index)
        else:
            with PersistentAbbreviationPool(inference.char_codes, config=self._config) as pool:
                table = builder.build(word_dict.entries, common_index, pool=pool)

        logger.info(
            "Indexed %d characters into %d common codes; %d abbreviation codes kept",
            len(inference.char_codes),
            len(common_index),
            len(table),
        )
        return table

    def generate(
        self,
        char_path: str | Path | None = None,
        word_path: str | Path | None = None,
        target_path: str | Path | None = None,
    ) -> int:
        """Read both dictionaries, build the table and write it. Returns the number of lines written."""
        char_dict = load_dictionary(char_path or self._config.char_dict_path)
        word_dict = load_dictionary(word_path or self._config.word_dict_path)
        logger.info("Read %d characters and %d words", len(char_dict), len(word_dict))

        table = self.build_table(char_dict, word_dict)
        return write_abbreviation_table(
            table,
            target_path or self._config.target_path,
            name=self._config.output_name,
            comment=self._config.output_comment,
        )
