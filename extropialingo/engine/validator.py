"""
Loop validator - Grammar rules for Extropian loop expressions.

Pipeline: parse -> analyze -> rule check -> score.

Rules:
- Unknown morphemes: error (one message listing all of them)
- No closure (lim / zur): error
- No agent: warning
- No actions: warning

The grammar is deliberately permissive: repeated agents, repeated closures
and nested loops are accepted. `valid` is true iff there are no errors.
"""

import logging
from typing import Optional

from extropialingo.lexicon import MorphemeDictionary, resolve_dictionary
from extropialingo.rewards import from_loop_construction
from extropialingo.schemas import (
    MorphemeCategory,
    StructureRecord,
    ValidationVerdict,
    LoopSummary,
    CLOSURE_TOKENS,
)

from .analyzer import analyze_structure, find_unknown_tokens
from .parser import parse_expression


logger = logging.getLogger(__name__)

VALID_LOOP_EXPLANATION = "Valid loop structure"


def _join_choices(options: list[str]) -> str:
    """'a, b, or c' style list."""
    if len(options) <= 2:
        return " or ".join(options)
    return ", ".join(options[:-1]) + ", or " + options[-1]


def validate_expression(raw: str, dictionary: Optional[MorphemeDictionary] = None) -> ValidationVerdict:
    """
    Validate an expression as a loop.

    Never raises for string input: every problem ends up in `errors`
    or `warnings`. The reward is computed for invalid loops too.

    Args:
        raw: Learner input, e.g. "ka-sho-nyx-ver-lim"
        dictionary: Morpheme dictionary (default: process-wide)

    Returns:
        ValidationVerdict with structure and embedded reward
    """
    dictionary = resolve_dictionary(dictionary)

    tokens = parse_expression(raw, dictionary.suffix_operators)
    structure = analyze_structure(tokens, dictionary)
    unknown = find_unknown_tokens(tokens, dictionary)

    errors: list[str] = []
    warnings: list[str] = []

    if unknown:
        errors.append(f"Unknown morphemes: {', '.join(unknown)}")

    if not structure.agent:
        agents = list(dictionary.by_category(MorphemeCategory.AGENT))
        if agents:
            warnings.append(f"No agent specified - consider adding {_join_choices(agents)}")
        else:
            warnings.append("No agent specified")

    if not structure.closure:
        errors.append(
            f"No closure specified - loops must end with {_join_choices(sorted(CLOSURE_TOKENS))}"
        )

    if not structure.actions:
        warnings.append("No actions specified - consider adding morphemes between initiation and closure")

    valid = not errors
    reward = from_loop_construction(
        structure.complexity,
        valid,
        structure.entropy_operators,
        structure.uncertainty_markers,
    )

    logger.debug(
        f"Validated {raw!r}: valid={valid}, {len(errors)} errors, "
        f"{len(warnings)} warnings, {reward.final_xp} XP"
    )

    return ValidationVerdict(
        valid=valid,
        errors=errors,
        warnings=warnings,
        tokens=tokens,
        unknown_tokens=unknown,
        structure=structure,
        reward=reward,
    )


def validate_loop(raw: str, dictionary: Optional[MorphemeDictionary] = None) -> LoopSummary:
    """Compact validation result for the loop constructor."""
    verdict = validate_expression(raw, dictionary)
    return LoopSummary(
        valid=verdict.valid,
        explanation=" ".join(verdict.errors) or VALID_LOOP_EXPLANATION,
        complexity=verdict.structure.complexity,
        xp_reward=verdict.reward.final_xp,
        errors=verdict.errors,
        warnings=verdict.warnings,
    )


def generate_hints(structure: StructureRecord, tokens: list[str]) -> list[str]:
    """
    Suggestions for enriching a loop.

    Args:
        structure: Analyzed structure of the expression
        tokens: Parsed token sequence of the same expression

    Returns:
        List of hint strings (empty if nothing to suggest)
    """
    hints = []

    if not structure.agent:
        hints.append("Try adding an agent like 'ka' (I) to specify who is acting")

    if not structure.validation:
        hints.append("Consider adding 'ver' (verify) to validate your process")

    if not structure.entropy_operators:
        hints.append("Add entropy tracking with 'nyx-' (order) or 'nyx+' (disorder)")

    if not structure.uncertainty_markers and len(tokens) > 3:
        hints.append("Express certainty with '-zo' (certain) or '-xa' (provisional)")

    if not structure.effect and len(structure.actions) > 2:
        hints.append("Consider adding 'ek' (effect) to show the impact of your actions")

    return hints
