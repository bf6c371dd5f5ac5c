"""
Pinyin reading cache.

Missing-character diagnostics carry the character's pinyin so a maintainer can
see which full code has to be added to the character dictionary.
"""
from __future__ import annotations

from functools import cache

import pypinyin

from moran_abbrev.types import AbbreviationConfig


@cache  # one entry per unique character
def _char_to_pinyin(ch: str) -> str:
    return pypinyin.lazy_pinyin(ch, style=pypinyin.Style.NORMAL)[0]


class PinyinCacheService:
    """Pinyin hints for characters missing from the character code table."""

    def __init__(self, config: AbbreviationConfig):
        self._config = config

    def describe(self, ch: str) -> str:
        """Format a character with its reading, e.g. ``「甲」(jia)``."""
        if not self._config.pinyin_hints:
            return f"「{ch}」"
        return f"「{ch}」({_char_to_pinyin(ch)})"
