"""
Loop structure schemas for ExtropiaLingo.

Defines Pydantic models produced by the expression engine:
- Structure record (grammatical roles of one parsed expression)
- Validation verdict (errors, warnings, embedded reward)
- Loop summary (compact verdict for the loop constructor)
- Morpheme identification exercise
"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional

from .reward import RewardResult


class StructureRecord(BaseModel):
    """
    Grammatical roles assembled from one token sequence.

    Every known token lands in exactly one field; unknown tokens are left out.
    """
    agent: Optional[str] = None
    initiator: Optional[str] = None
    actions: list[str] = []
    validation: Optional[str] = None
    closure: Optional[str] = None
    effect: Optional[str] = None
    uncertainty_markers: list[str] = []
    entropy_operators: list[str] = []
    nesting_level: int = Field(default=0, ge=0)  # recursive loops not detected yet

    @computed_field
    @property
    def complexity(self) -> int:
        """Action count, plus one each for a validation and a closure."""
        return (
            len(self.actions)
            + (1 if self.validation else 0)
            + (1 if self.closure else 0)
        )


class ValidationVerdict(BaseModel):
    """Outcome of validating one expression. Warnings never affect validity."""
    valid: bool
    errors: list[str] = []
    warnings: list[str] = []
    tokens: list[str] = []
    unknown_tokens: list[str] = []
    structure: StructureRecord
    reward: RewardResult


class LoopSummary(BaseModel):
    valid: bool
    explanation: str
    complexity: int
    xp_reward: int
    errors: list[str] = []
    warnings: list[str] = []


class MorphemeExercise(BaseModel):
    """Multiple-choice "what does this morpheme mean" exercise."""
    type: str = "morpheme_identification"
    question: str
    options: list[str] = Field(..., min_length=1)
    correct_answer: int = Field(..., ge=0)  # index into options
    explanation: str
    target_morpheme: str
    xp_reward: int = Field(..., ge=0)
