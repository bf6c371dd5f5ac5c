"""
Types package for abbreviation generation.

This package contains dictionary entries, full codes, result types and the
configuration class used throughout the pipeline.
"""

from moran_abbrev.types.code import PhoneticCode
from moran_abbrev.types.config import MAX_WEIGHT, AbbreviationConfig
from moran_abbrev.types.dictionary import Dictionary, Entry
from moran_abbrev.types.results import AbbreviationEntry, AbbreviationTable, CodeParseResult

__all__ = [
    "MAX_WEIGHT",
    "AbbreviationConfig",
    "AbbreviationEntry",
    "AbbreviationTable",
    "CodeParseResult",
    "Dictionary",
    "Entry",
    "PhoneticCode",
]
