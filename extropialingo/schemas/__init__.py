"""
ExtropiaLingo Schemas - Pydantic models for the Extropian language core.

This module exports all schema classes for:
- Morpheme: dictionary entries and categories
- Structure: parsed loop structure, validation verdicts, exercises
- Reward: reward events, reward results, learner statistics
"""

# Morpheme schemas
from .morpheme import (
    MorphemeCategory,
    Morpheme,
    INITIATOR_TOKENS,
    CLOSURE_TOKENS,
    EFFECT_TOKENS,
)

# Reward schemas
from .reward import (
    RewardEventType,
    RewardEvent,
    RewardResult,
    LearningMetrics,
    LearningStats,
)

# Structure schemas
from .structure import (
    StructureRecord,
    ValidationVerdict,
    LoopSummary,
    MorphemeExercise,
)

__all__ = [
    # Morpheme
    'MorphemeCategory',
    'Morpheme',
    'INITIATOR_TOKENS',
    'CLOSURE_TOKENS',
    'EFFECT_TOKENS',
    # Reward
    'RewardEventType',
    'RewardEvent',
    'RewardResult',
    'LearningMetrics',
    'LearningStats',
    # Structure
    'StructureRecord',
    'ValidationVerdict',
    'LoopSummary',
    'MorphemeExercise',
]
