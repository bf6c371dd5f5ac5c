"""
Configuration for abbreviation generation.

All thresholds of the frequency gate and of the two-symbol collision rule live
here, together with the default dictionary locations used by the command line.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType

# Largest weight an unsigned 32-bit dictionary column can hold
MAX_WEIGHT = 0xFFFF_FFFF

DEFAULT_MIN_WEIGHTS = MappingProxyType({2: 30_000, 3: 500, 4: 200})


@dataclass(frozen=True)
class AbbreviationConfig:
    """Immutable configuration for the abbreviation pipeline."""

    # Frequency gate: word length -> minimum weight. Lengths not listed are never eligible.
    min_weights: MappingProxyType = field(default_factory=lambda: DEFAULT_MIN_WEIGHTS)

    # Collision rule
    short_code_length: int = 2
    incumbent_weight_limit: int = 50_000
    max_weight: int = MAX_WEIGHT

    # Output header
    output_name: str = "moran.abbrev"
    output_comment: str = ""

    # Diagnostics
    pinyin_hints: bool = True

    # Default locations (resolved through paths.resolve_path)
    char_dict_path: str = "rime:moran.chars.dict.yaml"
    word_dict_path: str = "res/pinyin.txt"
    target_path: str = "rime:moran.abbrev.dict.yaml"

    # Process pool
    max_workers: int | None = None
    chunk_size: int = 512

    def __post_init__(self):
        # Freeze plain dicts handed in by callers
        if not isinstance(self.min_weights, MappingProxyType):
            object.__setattr__(self, "min_weights", MappingProxyType(dict(self.min_weights)))

        if any(weight < 0 for weight in self.min_weights.values()):
            raise ValueError("min_weights must be non-negative")
        if self.incumbent_weight_limit < 0:
            raise ValueError("incumbent_weight_limit must be non-negative")
        if self.short_code_length < 1:
            raise ValueError("short_code_length must be >= 1")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")

    @classmethod
    def create_default(cls) -> AbbreviationConfig:
        return cls()

    def with_overrides(self, **changes) -> AbbreviationConfig:
        """Return a copy with the given fields replaced, skipping ``None`` values."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    def min_weight_for(self, length: int) -> int | None:
        """Minimum weight for a word of ``length`` characters, or None if never eligible."""
        return self.min_weights.get(length)

    def __getstate__(self):
        # MappingProxyType cannot be pickled; workers receive a plain dict
        state = dict(self.__dict__)
        state["min_weights"] = dict(self.min_weights)
        return state

    def __setstate__(self, state):
        state["min_weights"] = MappingProxyType(state["min_weights"])
        self.__dict__.update(state)
