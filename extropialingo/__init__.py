"""
ExtropiaLingo - Core engine for learning the Extropian micro-language.

Pure, stateless functions for:
- Morpheme lookup and the learning queue
- Parsing and validating loop expressions
- Entropy-reduction XP scoring
"""

from .lexicon import (
    MorphemeDictionary,
    load_dictionary,
    get_default_dictionary,
    get_morpheme,
    get_all_morpheme_names,
    get_morphemes_by_category,
    is_unlocked as is_morpheme_unlocked,
    available_tokens as get_available_morphemes,
)

from .engine import (
    parse_expression,
    analyze_structure,
    validate_expression,
    validate_loop,
    generate_hints,
    generate_exercise,
)

from .rewards import (
    calculate_learning_xp,
    from_morpheme_learned,
    from_exercise_completed,
    from_loop_construction,
    from_loop_string,
    from_pronunciation,
    from_teaching,
    validate_physics_compliance,
    calculate_streak_bonus,
    calculate_learning_stats,
)

__version__ = "0.1.0"

__all__ = [
    # Lexicon
    "MorphemeDictionary",
    "load_dictionary",
    "get_default_dictionary",
    "get_morpheme",
    "get_all_morpheme_names",
    "get_morphemes_by_category",
    "is_morpheme_unlocked",
    "get_available_morphemes",
    # Engine
    "parse_expression",
    "analyze_structure",
    "validate_expression",
    "validate_loop",
    "generate_hints",
    "generate_exercise",
    # Rewards
    "calculate_learning_xp",
    "from_morpheme_learned",
    "from_exercise_completed",
    "from_loop_construction",
    "from_loop_string",
    "from_pronunciation",
    "from_teaching",
    "validate_physics_compliance",
    "calculate_streak_bonus",
    "calculate_learning_stats",
]
