"""Shared fixtures for ExtropiaLingo tests."""

import pytest

from extropialingo.lexicon import MorphemeDictionary, get_default_dictionary


# Small dictionary with hand-checked unlock order:
#   always available: ka(1), sho(1), ver(1), zo(2), log(3)
MINI_MORPHEMES = {
    "agent": {
        "ka": {"english": "I", "function": "agent", "difficulty": 1},
        "mu": {"english": "we", "function": "agent", "difficulty": 1, "unlocked_by": "ka"},
    },
    "loop_control": {
        "sho": {"english": "initiate", "function": "open", "difficulty": 1},
        "lim": {"english": "close", "function": "close", "difficulty": 1, "unlocked_by": "sho"},
        "zur": {"english": "revert", "function": "close", "difficulty": 2, "unlocked_by": "lim"},
        "rep": {"english": "repeat", "function": "repeat", "difficulty": 2, "unlocked_by": "sho"},
    },
    "validation": {
        "ver": {"english": "verify", "function": "check", "difficulty": 1},
    },
    "entropy": {
        "ek": {"english": "effect", "function": "result", "difficulty": 2, "unlocked_by": "lim"},
        "sor": {"english": "order", "function": "sort", "difficulty": 3, "unlocked_by": "nyx-"},
    },
    "entropy_operator": {
        "nyx-": {"english": "entropy decrease", "difficulty": 2, "unlocked_by": "ver"},
        "nyx+": {"english": "entropy increase", "difficulty": 2, "unlocked_by": "nyx-"},
        "nyx!": {"english": "critical entropy", "difficulty": 4, "unlocked_by": "nyx+"},
        "nyx?": {"english": "entropy unknown", "difficulty": 3, "unlocked_by": "nyx-"},
    },
    "uncertainty": {
        "zo": {"english": "certain", "difficulty": 2, "xp_modifier": 0.1},
        "xa": {"english": "provisional", "difficulty": 3, "unlocked_by": "zo", "xp_modifier": 0.2},
    },
    "cognitive": {
        "log": {"english": "record", "function": "write", "difficulty": 3},
    },
}


@pytest.fixture
def mini_dictionary() -> MorphemeDictionary:
    return MorphemeDictionary.from_mapping(MINI_MORPHEMES)


@pytest.fixture
def dictionary() -> MorphemeDictionary:
    """The packaged dictionary."""
    return get_default_dictionary()
