"""
XP calculator - Entropy-reduction reward scoring.

Every learning activity is scored by one formula:

    base_xp  = base_entropy * difficulty
    final_xp = base_xp * entropy_factor * quality^1.5 * min(efficiency, 2) * (1 + social)
               / sqrt(c_L)

The activity adapters below only choose the domain constants (base entropy,
entropy delta, causal closure speed c_L) and build the RewardEvent.

Physics gate: an event whose entropy_delta is not negative did not reduce
the learner's uncertainty. It is scored at 10% and flagged non-compliant.
"""

import logging
import math
import re
from typing import Iterable, Optional

from extropialingo.lexicon import MorphemeDictionary, resolve_dictionary
from extropialingo.schemas import (
    RewardEvent,
    RewardEventType,
    RewardResult,
    LearningMetrics,
    LearningStats,
)


logger = logging.getLogger(__name__)


EFFICIENCY_CAP = 2.0
NON_COMPLIANT_PENALTY = 0.1
POSITIVE_DELTA_DAMPING = 0.5
COMPLIANCE_XP_PER_ENTROPY = 100
COMPLIANCE_TOLERANCE = 2

# Base entropy (uncertainty removed by one successful activity)
MORPHEME_BASE_ENTROPY = 15.0
LOOP_BASE_ENTROPY = 20.0
PRONUNCIATION_BASE_ENTROPY = 8.0
TEACHING_BASE_ENTROPY = 25.0
DEFAULT_EXERCISE_BASE_ENTROPY = 10.0

EXERCISE_BASE_ENTROPY = {
    'pronunciation': 8.0,
    'morpheme_matching': 12.0,
    'loop_construction': 20.0,
    'entropy_understanding': 18.0,
    'uncertainty_practice': 15.0,
    'complex_construction': 25.0,
    'story_mode': 22.0,
    'recursive_challenge': 30.0,
}

# Causal closure speed per learning domain, normalised so that a single
# well-executed activity lands inside the compliance bound
COGNITIVE_CLOSURE_SPEED = 1.0       # morpheme learning
PSYCHOMOTOR_CLOSURE_SPEED = 16.0    # exercises
LINGUISTIC_CLOSURE_SPEED = 9.0      # loop construction
AUDIO_CLOSURE_SPEED = 1.0           # pronunciation
SOCIAL_CLOSURE_SPEED = 1.0          # teaching

# Seconds a learner is expected to need per difficulty level
MORPHEME_SECONDS_PER_DIFFICULTY = 30
EXERCISE_SECONDS_PER_DIFFICULTY = 45
PRONUNCIATION_EXPECTED_ATTEMPTS = 3.0

# Entropy delta per unit of accuracy / success rate
MORPHEME_ENTROPY_RATE = 0.5
EXERCISE_ENTROPY_RATE = 0.3
PRONUNCIATION_ENTROPY_RATE = 0.2
TEACHING_ENTROPY_RATE = 0.6
VALID_LOOP_ENTROPY_DELTA = -0.4
INVALID_LOOP_ENTROPY_DELTA = 0.1

VALID_LOOP_QUALITY = 1.0
INVALID_LOOP_QUALITY = 0.3
TEACHING_SOCIAL_BONUS = 0.5
DEFAULT_PRONUNCIATION_DIFFICULTY = 2

# Social bonus for entropy awareness in a constructed loop
ENTROPY_OPERATOR_BONUS = {
    'nyx-': 0.3,   # entropy reduction awareness
    'nyx+': 0.1,   # entropy increase awareness
    'nyx!': 0.5,   # critical entropy awareness
}
UNCERTAINTY_MARKER_BONUS = 0.2

# Operator and marker spellings inside a raw loop string
LOOP_OPERATOR_PATTERN = re.compile(r'nyx[\-+!?]')
LOOP_MARKER_PATTERN = re.compile(r'-(?:zo|xa|qa|wa)(?![a-z])')


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3) rather than to the nearest even integer."""
    return int(math.floor(value + 0.5))


def _capped_ratio(expected: float, actual: float) -> float:
    """expected / actual capped at EFFICIENCY_CAP; non-positive actual gets the cap."""
    if actual <= 0:
        return EFFICIENCY_CAP
    return min(expected / actual, EFFICIENCY_CAP)


# -----------------------------------------------------------------------------
# Shared formula
# -----------------------------------------------------------------------------

def calculate_learning_xp(event: RewardEvent) -> RewardResult:
    """
    Score a reward event with the shared formula.

    Args:
        event: Fully specified RewardEvent

    Returns:
        RewardResult with every intermediate factor and the final XP
    """
    physics_valid = event.entropy_delta < 0

    base_xp = event.base_entropy * event.difficulty_multiplier
    if physics_valid:
        entropy_factor = abs(event.entropy_delta)
    else:
        entropy_factor = event.entropy_delta * POSITIVE_DELTA_DAMPING
    quality_factor = event.quality_score ** 1.5
    efficiency_factor = min(event.time_efficiency, EFFICIENCY_CAP)
    social_factor = 1 + event.social_bonus

    final_xp = base_xp * entropy_factor * quality_factor * efficiency_factor * social_factor
    if event.causal_closure_speed > 0:
        final_xp = final_xp / math.sqrt(event.causal_closure_speed)
    if not physics_valid:
        final_xp *= NON_COMPLIANT_PENALTY
    final_xp = round_half_up(max(0.0, final_xp))

    if not physics_valid:
        logger.debug(f"{event.event_type.value}: entropy delta {event.entropy_delta} is not a reduction")

    return RewardResult(
        event_type=event.event_type,
        base_xp=base_xp,
        entropy_factor=entropy_factor,
        difficulty_factor=event.difficulty_multiplier,
        quality_factor=quality_factor,
        efficiency_factor=efficiency_factor,
        social_factor=social_factor,
        final_xp=final_xp,
        entropy_delta=event.entropy_delta,
        physics_valid=physics_valid,
        explanation=explain_reward(event, final_xp, physics_valid),
    )


def explain_reward(event: RewardEvent, final_xp: int, physics_valid: bool) -> str:
    """Human-readable trace of a scoring run, parts joined by ' | '."""
    parts = [
        f"Earned {final_xp} XP for {event.event_type.value.replace('_', ' ')}",
        (
            "Physics compliant: learning reduced entropy (uncertainty)"
            if physics_valid else
            "Low XP: learning should reduce mental entropy"
        ),
        f"Entropy Δ: {event.entropy_delta:.3f} (negative = learning success)",
        f"Quality factor: {event.quality_score * 100:.0f}%",
    ]
    if event.social_bonus > 0:
        parts.append(f"Social bonus: +{event.social_bonus * 100:.0f}%")
    return " | ".join(parts)


# -----------------------------------------------------------------------------
# Activity adapters
# -----------------------------------------------------------------------------

def from_morpheme_learned(token: str, difficulty: int, accuracy: float, time_taken: float) -> RewardResult:
    """
    XP for learning a new morpheme.

    Args:
        token: Morpheme that was learned
        difficulty: Morpheme difficulty (1-5)
        accuracy: Recall accuracy (0-1)
        time_taken: Seconds spent; 30s per difficulty level is par
    """
    expected_time = difficulty * MORPHEME_SECONDS_PER_DIFFICULTY
    logger.debug(f"Scoring morpheme {token!r}")
    return calculate_learning_xp(RewardEvent(
        event_type=RewardEventType.MORPHEME_LEARNED,
        base_entropy=MORPHEME_BASE_ENTROPY,
        difficulty_multiplier=difficulty,
        quality_score=accuracy,
        time_efficiency=_capped_ratio(expected_time, time_taken),
        social_bonus=0.0,
        entropy_delta=-accuracy * MORPHEME_ENTROPY_RATE,
        causal_closure_speed=COGNITIVE_CLOSURE_SPEED,
    ))


def from_exercise_completed(
    exercise_type: str,
    difficulty: int,
    accuracy: float,
    time_taken: float,
    streak_bonus: float = 0.0,
) -> RewardResult:
    """
    XP for completing an exercise.

    Unknown exercise types use DEFAULT_EXERCISE_BASE_ENTROPY. The streak
    bonus (see calculate_streak_bonus) is applied as the social bonus.
    """
    expected_time = difficulty * EXERCISE_SECONDS_PER_DIFFICULTY
    return calculate_learning_xp(RewardEvent(
        event_type=RewardEventType.EXERCISE_COMPLETED,
        base_entropy=EXERCISE_BASE_ENTROPY.get(exercise_type, DEFAULT_EXERCISE_BASE_ENTROPY),
        difficulty_multiplier=difficulty,
        quality_score=accuracy,
        time_efficiency=_capped_ratio(expected_time, time_taken),
        social_bonus=streak_bonus,
        entropy_delta=-accuracy * EXERCISE_ENTROPY_RATE,
        causal_closure_speed=PSYCHOMOTOR_CLOSURE_SPEED,
    ))


def from_loop_construction(
    complexity: int,
    valid: bool,
    entropy_operators: Iterable[str],
    uncertainty_markers: Iterable[str],
) -> RewardResult:
    """
    XP for constructing a loop.

    Args:
        complexity: Structural complexity (actions + validation + closure)
        valid: Whether the loop passed validation
        entropy_operators: Operators used (nyx-, nyx+, nyx!, ...)
        uncertainty_markers: Uncertainty markers used
    """
    entropy_bonus = sum(ENTROPY_OPERATOR_BONUS.get(op, 0.0) for op in entropy_operators)
    uncertainty_bonus = len(list(uncertainty_markers)) * UNCERTAINTY_MARKER_BONUS

    return calculate_learning_xp(RewardEvent(
        event_type=RewardEventType.LOOP_CONSTRUCTED,
        base_entropy=LOOP_BASE_ENTROPY,
        difficulty_multiplier=complexity,
        quality_score=VALID_LOOP_QUALITY if valid else INVALID_LOOP_QUALITY,
        time_efficiency=1.0,
        social_bonus=entropy_bonus + uncertainty_bonus,
        entropy_delta=VALID_LOOP_ENTROPY_DELTA if valid else INVALID_LOOP_ENTROPY_DELTA,
        causal_closure_speed=LINGUISTIC_CLOSURE_SPEED,
    ))


def from_loop_string(loop: str, complexity: int) -> RewardResult:
    """
    XP for a loop given as raw text, assumed valid.

    Operators and `-xa`-style markers are picked out with regular
    expressions instead of the full parser.
    """
    text = loop.lower()
    return from_loop_construction(
        complexity,
        True,
        LOOP_OPERATOR_PATTERN.findall(text),
        LOOP_MARKER_PATTERN.findall(text),
    )


def from_pronunciation(
    token: str,
    accuracy: float,
    attempts: int,
    dictionary: Optional[MorphemeDictionary] = None,
) -> RewardResult:
    """
    XP for pronouncing a morpheme.

    Args:
        token: Morpheme practised; difficulty comes from the dictionary
        accuracy: Pronunciation accuracy (0-1) reported by the caller
        attempts: Attempts needed; three is par
    """
    dictionary = resolve_dictionary(dictionary)
    morpheme = dictionary.lookup(token)
    difficulty = morpheme.difficulty if morpheme else DEFAULT_PRONUNCIATION_DIFFICULTY

    return calculate_learning_xp(RewardEvent(
        event_type=RewardEventType.PRONUNCIATION_PERFECT,
        base_entropy=PRONUNCIATION_BASE_ENTROPY,
        difficulty_multiplier=difficulty,
        quality_score=accuracy,
        time_efficiency=_capped_ratio(PRONUNCIATION_EXPECTED_ATTEMPTS, attempts),
        social_bonus=0.0,
        entropy_delta=-accuracy * PRONUNCIATION_ENTROPY_RATE,
        causal_closure_speed=AUDIO_CLOSURE_SPEED,
    ))


def from_teaching(concepts_taught: int, learner_success_rate: float) -> RewardResult:
    """XP for teaching others; success rate of the learners is the quality score."""
    return calculate_learning_xp(RewardEvent(
        event_type=RewardEventType.TEACHING_BONUS,
        base_entropy=TEACHING_BASE_ENTROPY,
        difficulty_multiplier=concepts_taught,
        quality_score=learner_success_rate,
        time_efficiency=1.0,
        social_bonus=TEACHING_SOCIAL_BONUS,
        entropy_delta=-learner_success_rate * TEACHING_ENTROPY_RATE,
        causal_closure_speed=SOCIAL_CLOSURE_SPEED,
    ))


# -----------------------------------------------------------------------------
# Audits and statistics
# -----------------------------------------------------------------------------

def validate_physics_compliance(result: RewardResult) -> bool:
    """
    Re-check a result independently of the forward computation.

    Fails when XP was granted without an entropy reduction, or when XP
    exceeds twice the amount the entropy reduction can account for.
    """
    if result.entropy_delta >= 0 and result.final_xp > 0:
        return False

    expected_xp_range = abs(result.entropy_delta) * COMPLIANCE_XP_PER_ENTROPY
    if result.final_xp > expected_xp_range * COMPLIANCE_TOLERANCE:
        return False

    return True


def calculate_streak_bonus(consecutive_days: int, perfect_exercises: int) -> float:
    """Consistency (max 1.0) plus perfection (max 0.5) bonus, for use as a social bonus."""
    consistency_bonus = min(consecutive_days * 0.1, 1.0)
    perfection_bonus = min(perfect_exercises * 0.05, 0.5)
    return consistency_bonus + perfection_bonus


def calculate_learning_stats(metrics: LearningMetrics) -> LearningStats:
    """Derive summary statistics from learner counters."""
    return LearningStats(
        total_entropy_reduced=metrics.entropy_reductions_achieved * 0.3,
        learning_efficiency=metrics.exercises_completed / max(metrics.time_spent_learning, 1),
        knowledge_density=metrics.morphemes_learned / max(metrics.exercises_completed, 1),
        teaching_ratio=metrics.teaching_interactions / max(metrics.morphemes_learned, 1),
        mastery_progression=(metrics.pronunciation_accuracy + metrics.consecutive_correct / 10) / 2,
    )
