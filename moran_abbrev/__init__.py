"""
moran_abbrev: Abbreviation Code Generator for Phonetic-Code Input Methods

Derives collision-aware short codes for frequent multi-character words from a
character dictionary of five-symbol full codes and a weighted word dictionary.
"""

__version__ = "0.1.0"

__all__ = ["AbbreviationGenerator"]

def __getattr__(name):
    """Lazy import to avoid eager loading of pypinyin."""
    if name == "AbbreviationGenerator":
        from .generator import AbbreviationGenerator
        return AbbreviationGenerator
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
