"""
ExtropiaLingo Lexicon - The static morpheme dictionary and unlock resolver.

This module provides:
- MorphemeDictionary: Read-only token lookup
- load_dictionary / get_default_dictionary: YAML loading, process-wide instance
- get_morpheme and friends: stateless lookups against the default dictionary
- Unlock resolver: prerequisite checks and the learning queue
"""

from .dictionary import (
    MorphemeDictionary,
    load_dictionary,
    get_default_dictionary,
    resolve_dictionary,
    get_morpheme,
    get_all_morpheme_names,
    get_morphemes_by_category,
)

from .unlock import (
    is_unlocked,
    missing_prerequisites,
    available_tokens,
    find_dangling_prerequisites,
    find_prerequisite_cycles,
)

__all__ = [
    # Dictionary
    "MorphemeDictionary",
    "load_dictionary",
    "get_default_dictionary",
    "resolve_dictionary",
    "get_morpheme",
    "get_all_morpheme_names",
    "get_morphemes_by_category",
    # Unlock
    "is_unlocked",
    "missing_prerequisites",
    "available_tokens",
    "find_dangling_prerequisites",
    "find_prerequisite_cycles",
]
