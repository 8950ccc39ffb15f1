"""
Structural analyzer - Route parsed tokens into grammatical roles.

A single left-to-right pass over the token sequence:
- agent / validation: last occurrence wins
- loop_control: `sho` initiates, `lim`/`zur` close, anything else is an action
- entropy: `ek` is the effect, anything else is an action
- uncertainty / entropy_operator: collected in order
- any other category: action
Unknown tokens are skipped here and reported by the validator.
"""

from typing import Optional

from extropialingo.lexicon import MorphemeDictionary, resolve_dictionary
from extropialingo.schemas import (
    MorphemeCategory,
    StructureRecord,
    INITIATOR_TOKENS,
    CLOSURE_TOKENS,
    EFFECT_TOKENS,
)


def analyze_structure(
    tokens: list[str],
    dictionary: Optional[MorphemeDictionary] = None,
) -> StructureRecord:
    """Build the StructureRecord for a token sequence."""
    dictionary = resolve_dictionary(dictionary)

    agent = initiator = validation = closure = effect = None
    actions: list[str] = []
    uncertainty_markers: list[str] = []
    entropy_operators: list[str] = []

    for token in tokens:
        morpheme = dictionary.lookup(token)
        if morpheme is None:
            continue

        category = morpheme.category
        if category == MorphemeCategory.AGENT:
            agent = token
        elif category == MorphemeCategory.LOOP_CONTROL:
            if token in INITIATOR_TOKENS:
                initiator = token
            elif token in CLOSURE_TOKENS:
                closure = token
            else:
                actions.append(token)
        elif category == MorphemeCategory.VALIDATION:
            validation = token
        elif category == MorphemeCategory.ENTROPY:
            if token in EFFECT_TOKENS:
                effect = token
            else:
                actions.append(token)
        elif category == MorphemeCategory.UNCERTAINTY:
            uncertainty_markers.append(token)
        elif category == MorphemeCategory.ENTROPY_OPERATOR:
            entropy_operators.append(token)
        else:
            actions.append(token)

    return StructureRecord(
        agent=agent,
        initiator=initiator,
        actions=actions,
        validation=validation,
        closure=closure,
        effect=effect,
        uncertainty_markers=uncertainty_markers,
        entropy_operators=entropy_operators,
        nesting_level=0,
    )


def find_unknown_tokens(
    tokens: list[str],
    dictionary: Optional[MorphemeDictionary] = None,
) -> list[str]:
    """Tokens with no dictionary entry, in order of appearance."""
    dictionary = resolve_dictionary(dictionary)
    return [token for token in tokens if token not in dictionary]
