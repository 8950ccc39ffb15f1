"""
Expression parser - Split raw learner input into morpheme tokens.

Tokens are separated by whitespace and/or hyphens. The operator marks
`+ ! ?` are never separators, so `nyx+`, `nyx!` and `nyx?` stay whole.
A fragment followed by a separator (whitespace or hyphen) becomes a suffix
operator when the fragment plus hyphen is a known one (`nyx-`). A bare
fragment at the very end of the input (`ka nyx`) is left as typed.

Example:
    "Ka-sho-nyx-ver-lim" -> ['ka', 'sho', 'nyx-', 'ver', 'lim']
    "ka sho nyx ver lim" -> ['ka', 'sho', 'nyx-', 'ver', 'lim']
"""

import re
from typing import Iterable, Optional

from extropialingo.lexicon import get_default_dictionary


# Everything except letters, hyphens, operator marks and whitespace is dropped
DISALLOWED_CHARS = re.compile(r'[^a-z\-+!?\s]')
FRAGMENT = re.compile(r'[^\s\-]+')


def normalize_expression(raw: str) -> str:
    """Lowercase and strip characters that can never be part of a token."""
    return DISALLOWED_CHARS.sub('', raw.lower())


def parse_expression(raw: str, suffix_operators: Optional[Iterable[str]] = None) -> list[str]:
    """
    Parse an expression into its ordered token sequence.

    Tokens are not checked against the dictionary; unknown ones pass through.

    Args:
        raw: Learner input, e.g. "ka-sho-nyx-ver-lim" or "ka sho lim"
        suffix_operators: Tokens ending in '-' that keep their hyphen
            (default: those of the default dictionary)

    Returns:
        List of tokens, empty for blank input
    """
    if suffix_operators is None:
        suffix_operators = get_default_dictionary().suffix_operators
    suffix_operators = frozenset(suffix_operators)

    text = normalize_expression(raw).strip()
    tokens = []
    for match in FRAGMENT.finditer(text):
        fragment = match.group()
        end = match.end()
        # anything after a fragment starts a separator run
        if end < len(text) and fragment + '-' in suffix_operators:
            fragment += '-'
        tokens.append(fragment)
    return tokens
