"""
Reward schemas for ExtropiaLingo.

Defines Pydantic models for XP scoring:
- Reward event types
- Reward events (inputs to the shared formula)
- Reward results (formula trace + final XP)
- Learner metrics and derived statistics
"""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class RewardEventType(str, Enum):
    MORPHEME_LEARNED = "morpheme_learned"
    EXERCISE_COMPLETED = "exercise_completed"
    LOOP_CONSTRUCTED = "loop_constructed"
    PRONUNCIATION_PERFECT = "pronunciation_perfect"
    TEACHING_BONUS = "teaching_bonus"
    # Reserved: scored with the same formula, no dedicated adapter yet
    ACHIEVEMENT_UNLOCKED = "achievement_unlocked"
    STREAK_BONUS = "streak_bonus"
    ENTROPY_REDUCTION = "entropy_reduction"
    VALIDATION_SUCCESS = "validation_success"


class RewardEvent(BaseModel):
    """
    Input to the shared XP formula.

    entropy_delta < 0 means the learner reduced uncertainty; anything else
    fails the physics gate and is scored at 10%.
    """
    model_config = ConfigDict(frozen=True)

    event_type: RewardEventType
    base_entropy: float = Field(..., gt=0.0)
    difficulty_multiplier: float = Field(..., ge=0.0)
    quality_score: float = Field(..., ge=0.0, le=1.0)
    time_efficiency: float = Field(default=1.0, ge=0.0)
    social_bonus: float = Field(default=0.0, ge=0.0)
    entropy_delta: float
    causal_closure_speed: float = Field(default=1.0, ge=0.0)


class RewardResult(BaseModel):
    """Every factor of one scoring run plus the final integer XP."""
    model_config = ConfigDict(frozen=True)

    event_type: RewardEventType
    base_xp: float
    entropy_factor: float
    difficulty_factor: float
    quality_factor: float
    efficiency_factor: float
    social_factor: float
    final_xp: int = Field(..., ge=0)
    entropy_delta: float
    physics_valid: bool
    explanation: str


class LearningMetrics(BaseModel):
    """Aggregate learner counters supplied by the progress collaborator."""
    morphemes_learned: int = Field(default=0, ge=0)
    exercises_completed: int = Field(default=0, ge=0)
    loops_constructed: int = Field(default=0, ge=0)
    pronunciation_accuracy: float = Field(default=0.0, ge=0.0, le=1.0)
    consecutive_correct: int = Field(default=0, ge=0)
    time_spent_learning: float = Field(default=0.0, ge=0.0)  # minutes
    entropy_reductions_achieved: int = Field(default=0, ge=0)
    teaching_interactions: int = Field(default=0, ge=0)


class LearningStats(BaseModel):
    total_entropy_reduced: float
    learning_efficiency: float   # exercises per minute
    knowledge_density: float     # morphemes per exercise
    teaching_ratio: float        # teaching interactions per morpheme
    mastery_progression: float
