"""
Services package for abbreviation generation.

This package contains all service classes used by the abbreviation
pipeline, organized by domain responsibility.
"""

from moran_abbrev.services.abbreviation import (
    AbbreviationBuilderService,
    derive_abbreviations,
    passes_frequency_gate,
)
from moran_abbrev.services.cache import PinyinCacheService
from moran_abbrev.services.common_code import CommonCodeIndex, CommonCodeIndexService, composite_codes
from moran_abbrev.services.diagnostics import CollectingDiagnostics, DiagnosticsSink, LoggingDiagnostics
from moran_abbrev.services.dictionary_io import (
    dictionary_header,
    load_dictionary,
    save_dictionary,
    write_abbreviation_table,
)
from moran_abbrev.services.inference import CodeInferenceService, build_char_code_table
from moran_abbrev.services.process_pool import PersistentAbbreviationPool

__all__ = [
    # Builder
    "AbbreviationBuilderService",
    "derive_abbreviations",
    "passes_frequency_gate",
    # Common codes
    "CommonCodeIndex",
    "CommonCodeIndexService",
    "composite_codes",
    # Diagnostics
    "CollectingDiagnostics",
    "DiagnosticsSink",
    "LoggingDiagnostics",
    # Dictionary I/O
    "dictionary_header",
    "load_dictionary",
    "save_dictionary",
    "write_abbreviation_table",
    # Inference
    "CodeInferenceService",
    "build_char_code_table",
    # Caches and pools
    "PersistentAbbreviationPool",
    "PinyinCacheService",
]
