"""
Exercise generator - Morpheme identification questions.

Randomness is injected by the caller (a `random.Random`), so a seeded
generator always produces the same exercise.
"""

import random
from typing import Iterable, Optional

from extropialingo.lexicon import MorphemeDictionary, available_tokens, resolve_dictionary
from extropialingo.schemas import MorphemeExercise


DISTRACTOR_COUNT = 3
XP_PER_DIFFICULTY = 10


def generate_exercise(
    learned: Iterable[str],
    rng: random.Random,
    dictionary: Optional[MorphemeDictionary] = None,
) -> Optional[MorphemeExercise]:
    """
    Build a multiple-choice exercise for one of the next learnable morphemes.

    Args:
        learned: Tokens the learner already knows
        rng: Random source used for target, distractors and option order
        dictionary: Morpheme dictionary (default: process-wide)

    Returns:
        MorphemeExercise, or None when nothing is left to learn
    """
    dictionary = resolve_dictionary(dictionary)
    candidates = available_tokens(learned, dictionary)
    if not candidates:
        return None

    target = rng.choice(candidates)
    morpheme = dictionary.lookup(target)

    others = [token for token in dictionary if token != target]
    distractors = rng.sample(others, min(DISTRACTOR_COUNT, len(others)))

    options = [morpheme.gloss] + [dictionary.lookup(token).gloss for token in distractors]
    rng.shuffle(options)

    return MorphemeExercise(
        question=f"What does the morpheme '{target}' mean?",
        options=options,
        correct_answer=options.index(morpheme.gloss),
        explanation=f"'{target}' means \"{morpheme.gloss}\" - {morpheme.function}",
        target_morpheme=target,
        xp_reward=morpheme.difficulty * XP_PER_DIFFICULTY,
    )
