"""
Morpheme schemas for ExtropiaLingo.

Defines Pydantic models for the static morpheme dictionary:
- Grammatical categories
- Morpheme metadata (gloss, difficulty, unlock prerequisite)
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum


class MorphemeCategory(str, Enum):
    """Categories with dedicated routing in the structural analyzer."""
    AGENT = "agent"
    LOOP_CONTROL = "loop_control"
    VALIDATION = "validation"
    ENTROPY = "entropy"
    UNCERTAINTY = "uncertainty"
    ENTROPY_OPERATOR = "entropy_operator"


# Token-identity sub-roles (category alone is not enough for these)
INITIATOR_TOKENS = frozenset({"sho"})
CLOSURE_TOKENS = frozenset({"lim", "zur"})
EFFECT_TOKENS = frozenset({"ek"})


class Morpheme(BaseModel):
    """
    One vocabulary entry of the constructed language.

    `unlocked_by` is a token key, not a reference to another Morpheme;
    resolve it against the dictionary when needed.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str = Field(..., min_length=1)
    gloss: str = Field(..., alias="english")
    function: str = ""
    category: str = Field(..., pattern=r'^[a-z_]+$')  # MorphemeCategory value or any other bucket
    difficulty: int = Field(..., ge=1, le=5)
    pronunciation: str = ""
    examples: tuple[str, ...] = ()
    execution_mapping: Optional[str] = None
    unlocked_by: Optional[str] = None
    xp_modifier: Optional[float] = None  # display only; loop scoring uses a flat marker bonus

    @property
    def is_always_available(self) -> bool:
        return self.unlocked_by is None
