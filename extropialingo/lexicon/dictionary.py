"""
MorphemeDictionary - Read-only access to the Extropian vocabulary.

Provides:
- Token lookup and category listings
- Loading from the nested `category -> token -> fields` YAML file
- A process-wide default instance, loaded once
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from extropialingo.config import get_morphemes_path
from extropialingo.schemas import Morpheme, MorphemeCategory
from extropialingo.utils import load_yaml


logger = logging.getLogger(__name__)


class MorphemeDictionary:
    """
    Immutable token -> Morpheme mapping.

    Iteration order is the order entries appear in the source mapping
    (category by category). That order breaks difficulty ties in the
    learning queue, so it is part of the contract.
    """

    def __init__(self, morphemes: list[Morpheme]):
        """
        Build a dictionary from morpheme records.

        Args:
            morphemes: Morphemes in dictionary order

        Raises:
            ValueError: If two records share a token
        """
        entries: dict[str, Morpheme] = {}
        by_category: dict[str, dict[str, Morpheme]] = {}
        for morpheme in morphemes:
            if morpheme.token in entries:
                raise ValueError(f"Duplicate morpheme token: {morpheme.token!r}")
            entries[morpheme.token] = morpheme
            by_category.setdefault(morpheme.category, {})[morpheme.token] = morpheme

        self._entries = MappingProxyType(entries)
        self._by_category = MappingProxyType(
            {cat: MappingProxyType(toks) for cat, toks in by_category.items()}
        )
        self._suffix_operators = frozenset(t for t in entries if t.endswith("-"))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Mapping[str, Any]]]) -> "MorphemeDictionary":
        """
        Build from the nested `category -> token -> fields` layout.

        The section key supplies `category` when an entry leaves it out.
        """
        morphemes = []
        for category, section in data.items():
            for token, fields in (section or {}).items():
                record = dict(fields or {})
                record.setdefault("category", category)
                record["token"] = str(token)
                morphemes.append(Morpheme(**record))
        return cls(morphemes)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup(self, token: str) -> Optional[Morpheme]:
        """Get a morpheme by token, or None if unknown."""
        return self._entries.get(token)

    def all_tokens(self) -> list[str]:
        """All tokens in dictionary order."""
        return list(self._entries)

    def by_category(self, category: str | MorphemeCategory) -> Mapping[str, Morpheme]:
        """Morphemes of one category (empty mapping if none)."""
        key = category.value if isinstance(category, MorphemeCategory) else category
        return self._by_category.get(key, MappingProxyType({}))

    @property
    def categories(self) -> list[str]:
        return list(self._by_category)

    @property
    def morphemes(self) -> Mapping[str, Morpheme]:
        """Read-only view of the full token -> Morpheme mapping."""
        return self._entries

    @property
    def suffix_operators(self) -> frozenset[str]:
        """Tokens that end in a hyphen (e.g. `nyx-`); the parser keeps that hyphen."""
        return self._suffix_operators

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


# -----------------------------------------------------------------------------
# Loading
# -----------------------------------------------------------------------------

def load_dictionary(path: str | Path | None = None) -> MorphemeDictionary:
    """
    Load a morpheme dictionary from YAML.

    Args:
        path: Dictionary file (default: $EXTROPIA_MORPHEMES_PATH, then the packaged file)

    Returns:
        MorphemeDictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: On duplicate tokens or a malformed entry
    """
    file_path = Path(path) if path else get_morphemes_path()
    data = load_yaml(file_path)
    dictionary = MorphemeDictionary.from_mapping(data)
    logger.info(
        f"Loaded {len(dictionary)} morphemes in {len(dictionary.categories)} categories from {file_path}"
    )
    return dictionary


@lru_cache(maxsize=1)
def get_default_dictionary() -> MorphemeDictionary:
    """Process-wide dictionary, loaded on first use and never reloaded."""
    return load_dictionary()


# -----------------------------------------------------------------------------
# Stateless queries
# -----------------------------------------------------------------------------

def resolve_dictionary(dictionary: Optional[MorphemeDictionary] = None) -> MorphemeDictionary:
    """Return `dictionary`, or the process-wide one when None."""
    return dictionary if dictionary is not None else get_default_dictionary()


def get_morpheme(token: str, dictionary: Optional[MorphemeDictionary] = None) -> Optional[Morpheme]:
    """Get a morpheme by token, or None if unknown."""
    return resolve_dictionary(dictionary).lookup(token)


def get_all_morpheme_names(dictionary: Optional[MorphemeDictionary] = None) -> list[str]:
    """All morpheme tokens in dictionary order."""
    return resolve_dictionary(dictionary).all_tokens()


def get_morphemes_by_category(
    category: str | MorphemeCategory,
    dictionary: Optional[MorphemeDictionary] = None,
) -> dict[str, Morpheme]:
    """Morphemes of one category, keyed by token."""
    return dict(resolve_dictionary(dictionary).by_category(category))
