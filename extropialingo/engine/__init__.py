"""
ExtropiaLingo Engine - Parsing, structural analysis and loop validation.

This module provides:
- parse_expression: raw text -> token sequence
- analyze_structure: token sequence -> StructureRecord
- validate_expression / validate_loop: grammar rules + embedded reward
- generate_hints / generate_exercise: learner guidance
"""

from .parser import (
    parse_expression,
    normalize_expression,
)

from .analyzer import (
    analyze_structure,
    find_unknown_tokens,
)

from .validator import (
    validate_expression,
    validate_loop,
    generate_hints,
)

from .exercises import (
    generate_exercise,
)

__all__ = [
    # Parser
    "parse_expression",
    "normalize_expression",
    # Analyzer
    "analyze_structure",
    "find_unknown_tokens",
    # Validator
    "validate_expression",
    "validate_loop",
    "generate_hints",
    # Exercises
    "generate_exercise",
]
