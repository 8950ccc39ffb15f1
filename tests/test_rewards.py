"""
XP calculator tests for ExtropiaLingo.

Covers the shared formula, the physics gate, every activity adapter and
the audit / statistics helpers.
"""

import math

import pytest

from extropialingo.rewards import (
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
    round_half_up,
)
from extropialingo.schemas import (
    RewardEvent,
    RewardEventType,
    RewardResult,
    LearningMetrics,
)


def _event(**overrides) -> RewardEvent:
    fields = dict(
        event_type=RewardEventType.ENTROPY_REDUCTION,
        base_entropy=100.0,
        difficulty_multiplier=1,
        quality_score=1.0,
        time_efficiency=1.0,
        social_bonus=0.0,
        entropy_delta=-0.4,
        causal_closure_speed=1.0,
    )
    fields.update(overrides)
    return RewardEvent(**fields)


def _result(final_xp: int, entropy_delta: float) -> RewardResult:
    return RewardResult(
        event_type=RewardEventType.ENTROPY_REDUCTION,
        base_xp=100.0,
        entropy_factor=abs(entropy_delta),
        difficulty_factor=1.0,
        quality_factor=1.0,
        efficiency_factor=1.0,
        social_factor=1.0,
        final_xp=final_xp,
        entropy_delta=entropy_delta,
        physics_valid=entropy_delta < 0,
        explanation="",
    )


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0),
        (0.49, 0),
        (0.5, 1),
        (2.5, 3),
        (7.5, 8),
        (1.49, 1),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestLearningFormula:
    """Test the shared scoring formula."""

    def test_factors_reported(self):
        result = calculate_learning_xp(_event(difficulty_multiplier=2, social_bonus=0.5))
        assert result.base_xp == pytest.approx(200.0)
        assert result.entropy_factor == pytest.approx(0.4)
        assert result.difficulty_factor == 2
        assert result.quality_factor == pytest.approx(1.0)
        assert result.social_factor == pytest.approx(1.5)
        assert result.final_xp == 120

    def test_quality_exponent(self):
        result = calculate_learning_xp(_event(quality_score=0.25))
        assert result.quality_factor == pytest.approx(0.125)
        assert result.final_xp == 5

    def test_efficiency_capped(self):
        result = calculate_learning_xp(_event(time_efficiency=10.0))
        assert result.efficiency_factor == 2.0
        assert result.final_xp == 80

    def test_closure_speed_divides(self):
        result = calculate_learning_xp(_event(causal_closure_speed=4.0))
        assert result.final_xp == 20

    def test_zero_closure_speed_ignored(self):
        result = calculate_learning_xp(_event(causal_closure_speed=0.0))
        assert result.final_xp == 40

    def test_non_compliant_event_penalised(self):
        result = calculate_learning_xp(_event(difficulty_multiplier=10, entropy_delta=0.4))
        assert result.physics_valid is False
        assert result.entropy_factor == pytest.approx(0.2)
        assert result.final_xp == 20

    @pytest.mark.parametrize("delta", [0.0, 0.1, 0.5, 2.0])
    def test_physics_gate(self, delta):
        event = _event(
            base_entropy=50.0,
            difficulty_multiplier=3,
            quality_score=0.8,
            time_efficiency=1.5,
            social_bonus=0.2,
            entropy_delta=delta,
            causal_closure_speed=4.0,
        )
        undamped = 50.0 * 3 * (delta * 0.5) * 0.8 ** 1.5 * 1.5 * (1 + 0.2) / math.sqrt(4.0)
        result = calculate_learning_xp(event)
        assert result.physics_valid is False
        assert result.final_xp == round_half_up(undamped * 0.1)

    def test_larger_reduction_earns_more(self):
        small = calculate_learning_xp(_event(entropy_delta=-0.2))
        large = calculate_learning_xp(_event(entropy_delta=-0.6))
        assert large.final_xp > small.final_xp

    def test_monotonic_over_reductions(self):
        deltas = [-0.05, -0.1, -0.25, -0.4, -0.8, -1.5, -3.0]
        xp = [calculate_learning_xp(_event(entropy_delta=d)).final_xp for d in deltas]
        assert xp == sorted(xp)

    def test_positive_delta_not_monotonic_across_zero(self):
        # the penalty scales with the delta itself, so +2.0 outscores 0.0
        zero = calculate_learning_xp(_event(entropy_delta=0.0))
        positive = calculate_learning_xp(_event(entropy_delta=2.0))
        assert zero.final_xp == 0
        assert positive.final_xp == 10
        assert zero.physics_valid is False
        assert positive.physics_valid is False
        assert validate_physics_compliance(positive) is False

    def test_higher_quality_earns_more(self):
        low = calculate_learning_xp(_event(quality_score=0.5))
        high = calculate_learning_xp(_event(quality_score=0.9))
        assert high.final_xp > low.final_xp

    @pytest.mark.parametrize("overrides", [
        dict(quality_score=0.0),
        dict(difficulty_multiplier=0),
        dict(entropy_delta=-5.0, time_efficiency=0.0),
        dict(entropy_delta=3.0),
        dict(base_entropy=0.001, entropy_delta=-0.001),
    ])
    def test_final_xp_non_negative_integer(self, overrides):
        result = calculate_learning_xp(_event(**overrides))
        assert isinstance(result.final_xp, int)
        assert result.final_xp >= 0

    def test_explanation_compliant(self):
        explanation = from_morpheme_learned("ka", 1, 1.0, 30).explanation
        assert explanation == (
            "Earned 8 XP for morpheme learned"
            " | Physics compliant: learning reduced entropy (uncertainty)"
            " | Entropy Δ: -0.500 (negative = learning success)"
            " | Quality factor: 100%"
        )

    def test_explanation_non_compliant(self):
        explanation = calculate_learning_xp(_event(entropy_delta=0.1)).explanation
        assert "Low XP: learning should reduce mental entropy" in explanation

    def test_explanation_social_bonus(self):
        assert "Social bonus: +50%" in from_teaching(2, 1.0).explanation


class TestMorphemeAdapter:

    def test_first_morpheme(self):
        result = from_morpheme_learned("ka", 1, 1.0, 30)
        assert result.event_type == RewardEventType.MORPHEME_LEARNED
        assert result.physics_valid is True
        assert result.entropy_delta == pytest.approx(-0.5)
        assert result.final_xp == 8

    def test_fast_learner_capped(self):
        assert from_morpheme_learned("ka", 1, 1.0, 10).efficiency_factor == 2.0
        assert from_morpheme_learned("ka", 1, 1.0, 0).efficiency_factor == 2.0

    def test_slow_learner(self):
        result = from_morpheme_learned("ka", 1, 1.0, 60)
        assert result.efficiency_factor == pytest.approx(0.5)
        assert result.final_xp == 4

    def test_zero_accuracy_earns_nothing(self):
        assert from_morpheme_learned("ka", 1, 0.0, 30).final_xp == 0


class TestExerciseAdapter:

    def test_known_exercise_type(self):
        result = from_exercise_completed("morpheme_matching", 1, 1.0, 45)
        assert result.base_xp == pytest.approx(12.0)
        assert result.entropy_delta == pytest.approx(-0.3)
        assert result.final_xp == 1

    def test_unknown_exercise_type(self):
        result = from_exercise_completed("mystery", 2, 1.0, 90)
        assert result.base_xp == pytest.approx(20.0)
        assert result.efficiency_factor == pytest.approx(1.0)

    def test_streak_bonus_is_social(self):
        bonus = calculate_streak_bonus(5, 4)
        result = from_exercise_completed("story_mode", 3, 0.9, 100, streak_bonus=bonus)
        assert result.social_factor == pytest.approx(1.7)


class TestLoopAdapter:

    def test_invalid_loop(self):
        result = from_loop_construction(2, False, ["nyx+"], [])
        assert result.physics_valid is False
        assert result.entropy_delta == pytest.approx(0.1)
        assert result.quality_factor == pytest.approx(0.3 ** 1.5)
        assert result.final_xp == 0

    def test_operator_and_marker_bonus(self):
        result = from_loop_construction(2, True, ["nyx-", "nyx!", "nyx?"], ["zo", "xa"])
        # nyx? carries no bonus
        assert result.social_factor == pytest.approx(1 + 0.3 + 0.5 + 0.4)

    def test_marker_bonus_ignores_xp_modifier(self, dictionary):
        assert dictionary.lookup("zo").xp_modifier == pytest.approx(0.1)
        assert dictionary.lookup("wa").xp_modifier == pytest.approx(0.4)
        certain = from_loop_construction(2, True, [], ["zo"])
        speculative = from_loop_construction(2, True, [], ["wa"])
        assert certain.social_factor == pytest.approx(1.2)
        assert speculative.social_factor == pytest.approx(1.2)
        assert certain.final_xp == speculative.final_xp

    def test_loop_string(self):
        result = from_loop_string("ka-sho-nyx-ver-lim-zo", 2)
        assert result.physics_valid is True
        assert result.social_factor == pytest.approx(1.5)
        assert result.final_xp == 8

    def test_loop_string_marker_must_end_token(self):
        result = from_loop_string("ka-sho-ver-lim-zone", 2)
        assert result.social_factor == pytest.approx(1.0)

    def test_loop_string_critical_operator(self):
        result = from_loop_string("KA-sho-nyx!-ver-lim-wa", 3)
        assert result.social_factor == pytest.approx(1.7)


class TestPronunciationAdapter:

    def test_known_morpheme(self, dictionary):
        result = from_pronunciation("ka", 1.0, 3, dictionary)
        assert result.difficulty_factor == 1
        assert result.entropy_delta == pytest.approx(-0.2)
        assert result.final_xp == 2

    def test_unknown_morpheme_default_difficulty(self, dictionary):
        assert from_pronunciation("xyz", 1.0, 3, dictionary).difficulty_factor == 2

    def test_first_attempt_capped(self, dictionary):
        assert from_pronunciation("ka", 1.0, 1, dictionary).efficiency_factor == 2.0


class TestTeachingAdapter:

    def test_teaching(self):
        result = from_teaching(2, 1.0)
        assert result.event_type == RewardEventType.TEACHING_BONUS
        assert result.social_factor == pytest.approx(1.5)
        assert result.entropy_delta == pytest.approx(-0.6)
        assert result.final_xp == 45


class TestPhysicsCompliance:
    """Test the independent audit."""

    def test_xp_without_reduction_fails(self):
        assert validate_physics_compliance(_result(1, 0.1)) is False

    def test_zero_xp_without_reduction_passes(self):
        assert validate_physics_compliance(_result(0, 0.1)) is True

    def test_bound(self):
        assert validate_physics_compliance(_result(80, -0.4)) is True
        assert validate_physics_compliance(_result(81, -0.4)) is False

    @pytest.mark.parametrize("result", [
        from_morpheme_learned("ka", 1, 1.0, 30),
        from_morpheme_learned("wi", 5, 1.0, 0),
        from_exercise_completed("complex_construction", 5, 1.0, 0),
        from_loop_construction(5, True, ["nyx-", "nyx!"], ["zo", "xa", "qa", "wa"]),
        from_pronunciation("tra", 1.0, 1),
        from_teaching(5, 1.0),
    ])
    def test_well_executed_activities_comply(self, result):
        assert result.physics_valid is True
        assert validate_physics_compliance(result) is True


class TestStreakAndStats:

    def test_streak_bonus(self):
        assert calculate_streak_bonus(0, 0) == 0.0
        assert calculate_streak_bonus(5, 4) == pytest.approx(0.7)
        assert calculate_streak_bonus(20, 20) == pytest.approx(1.5)

    def test_learning_stats(self):
        metrics = LearningMetrics(
            morphemes_learned=10,
            exercises_completed=20,
            time_spent_learning=40,
            teaching_interactions=5,
            pronunciation_accuracy=0.8,
            consecutive_correct=4,
            entropy_reductions_achieved=10,
        )
        stats = calculate_learning_stats(metrics)
        assert stats.total_entropy_reduced == pytest.approx(3.0)
        assert stats.learning_efficiency == pytest.approx(0.5)
        assert stats.knowledge_density == pytest.approx(0.5)
        assert stats.teaching_ratio == pytest.approx(0.5)
        assert stats.mastery_progression == pytest.approx(0.6)

    def test_learning_stats_empty(self):
        stats = calculate_learning_stats(LearningMetrics())
        assert stats.learning_efficiency == 0
        assert stats.knowledge_density == 0
        assert stats.mastery_progression == 0
