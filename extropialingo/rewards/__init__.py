"""
ExtropiaLingo Rewards - XP scoring based on entropy reduction.

This module provides:
- calculate_learning_xp: the shared scoring formula
- Activity adapters (morpheme, exercise, loop, pronunciation, teaching)
- validate_physics_compliance: independent audit of a result
- Streak bonus and learner statistics helpers
"""

from .calculator import (
    calculate_learning_xp,
    explain_reward,
    from_morpheme_learned,
    from_exercise_completed,
    from_loop_construction,
    from_loop_string,
    from_pronunciation,
    from_teaching,
    validate_physics_compliance,
    calculate_streak_bonus,
    calculate_learning_stats,
    round_half_up,
    EXERCISE_BASE_ENTROPY,
    ENTROPY_OPERATOR_BONUS,
)

__all__ = [
    "calculate_learning_xp",
    "explain_reward",
    "from_morpheme_learned",
    "from_exercise_completed",
    "from_loop_construction",
    "from_loop_string",
    "from_pronunciation",
    "from_teaching",
    "validate_physics_compliance",
    "calculate_streak_bonus",
    "calculate_learning_stats",
    "round_half_up",
    "EXERCISE_BASE_ENTROPY",
    "ENTROPY_OPERATOR_BONUS",
]
