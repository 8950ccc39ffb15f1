"""
Unlock resolver - Which morphemes a learner may study next.

Provides:
- Prerequisite checking against a learned set
- Ordered "available to learn" queue
- Static checks on the prerequisite graph (dangling edges, cycles)
"""

from typing import Iterable, Optional

from .dictionary import MorphemeDictionary, resolve_dictionary


def is_unlocked(
    token: str,
    learned: Iterable[str],
    dictionary: Optional[MorphemeDictionary] = None,
) -> bool:
    """
    Check if a morpheme can be studied.

    Returns False for unknown tokens. A morpheme with no prerequisite is
    always unlocked; otherwise its prerequisite must be in `learned`.
    """
    morpheme = resolve_dictionary(dictionary).lookup(token)
    if morpheme is None:
        return False
    if morpheme.unlocked_by is None:
        return True
    return morpheme.unlocked_by in set(learned)


def missing_prerequisites(
    token: str,
    learned: Iterable[str],
    dictionary: Optional[MorphemeDictionary] = None,
) -> list[str]:
    """Unmet prerequisites for a token (empty if unlocked or unknown)."""
    morpheme = resolve_dictionary(dictionary).lookup(token)
    if morpheme is None or morpheme.unlocked_by is None:
        return []
    if morpheme.unlocked_by in set(learned):
        return []
    return [morpheme.unlocked_by]


def available_tokens(
    learned: Iterable[str],
    dictionary: Optional[MorphemeDictionary] = None,
) -> list[str]:
    """
    Get morphemes that are unlocked but not yet learned.

    Sorted by difficulty (easiest first); equal difficulties keep
    dictionary order.
    """
    dictionary = resolve_dictionary(dictionary)
    learned_set = set(learned)
    candidates = [
        token for token in dictionary
        if token not in learned_set and is_unlocked(token, learned_set, dictionary)
    ]
    # sorted() is stable, so ties stay in dictionary order
    return sorted(candidates, key=lambda t: dictionary.lookup(t).difficulty)


# -----------------------------------------------------------------------------
# Graph checks
# -----------------------------------------------------------------------------

def find_dangling_prerequisites(dictionary: MorphemeDictionary) -> dict[str, str]:
    """Map of token -> prerequisite for prerequisites missing from the dictionary."""
    return {
        token: morpheme.unlocked_by
        for token, morpheme in dictionary.morphemes.items()
        if morpheme.unlocked_by is not None and morpheme.unlocked_by not in dictionary
    }


def find_prerequisite_cycles(dictionary: MorphemeDictionary) -> list[list[str]]:
    """
    Find prerequisite cycles (morphemes that can never be unlocked).

    Each token has at most one prerequisite, so every cycle is found by
    walking `unlocked_by` edges until a token repeats.

    Returns:
        List of cycles, each as the list of tokens on it, in discovery order
    """
    cycles = []
    on_cycle: set[str] = set()
    for start in dictionary:
        path: list[str] = []
        index: dict[str, int] = {}
        current = start
        while current is not None and current in dictionary and current not in index:
            if current in on_cycle:
                break
            index[current] = len(path)
            path.append(current)
            current = dictionary.lookup(current).unlocked_by
        if current is not None and current in index:
            cycle = path[index[current]:]
            if not on_cycle.intersection(cycle):
                cycles.append(cycle)
                on_cycle.update(cycle)
    return cycles
