# rm_dashboard/risk/models.py
"""
Enumerations and pydantic models for risk profiling.

Score ranges and ceiling rules are administrator-configurable, so they are
validated models rather than constants; the defaults below are what a fresh
installation uses.
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class KnowledgeLevel(Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class RiskCategory(Enum):
    """Risk categories, ordered from least to most risk."""

    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    MODERATELY_AGGRESSIVE = "Moderately Aggressive"
    AGGRESSIVE = "Aggressive"

    @property
    def rank(self) -> int:
        return CATEGORY_ORDER.index(self)


CATEGORY_ORDER: List[RiskCategory] = [
    RiskCategory.CONSERVATIVE,
    RiskCategory.MODERATE,
    RiskCategory.MODERATELY_AGGRESSIVE,
    RiskCategory.AGGRESSIVE,
]


class RiskCategoryRange(BaseModel):
    """Inclusive RP score range mapped to a category."""

    min: float = Field(..., description="Lowest RP score in the range (inclusive)")
    max: float = Field(..., description="Highest RP score in the range (inclusive)")
    category: RiskCategory
    description: str = ""

    @model_validator(mode='after')
    def check_bounds(self) -> 'RiskCategoryRange':
        if self.min > self.max:
            raise ValueError(f"Range min ({self.min}) cannot be greater than max ({self.max})")
        return self

    def contains(self, score: float) -> bool:
        return self.min <= score <= self.max


class CeilingRule(BaseModel):
    """Caps the category when answers to a question category match a pattern."""

    question_category: Optional[str] = Field(
        None, description="Question category the rule inspects, e.g. 'knowledge'"
    )
    answer_pattern: Optional[str] = Field(
        None, description="Regular expression matched case-insensitively against the answers"
    )
    max_category: RiskCategory
    reason: str

    @field_validator("answer_pattern")
    @classmethod
    def check_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid answer_pattern {value!r}: {e}") from e
        return value


DEFAULT_RISK_CATEGORY_RANGES: List[RiskCategoryRange] = [
    RiskCategoryRange(
        min=0, max=20, category=RiskCategory.CONSERVATIVE,
        description="Prefers minimal risk, willing to accept lower returns",
    ),
    RiskCategoryRange(
        min=21, max=40, category=RiskCategory.MODERATE,
        description="Seeks balance between growth and stability",
    ),
    RiskCategoryRange(
        min=41, max=60, category=RiskCategory.MODERATELY_AGGRESSIVE,
        description="Aims for higher returns with moderate to high risk tolerance",
    ),
    RiskCategoryRange(
        min=61, max=75, category=RiskCategory.AGGRESSIVE,
        description="Seeks maximum growth potential, can tolerate high risk",
    ),
]

DEFAULT_CEILING_RULES: List[CeilingRule] = [
    CeilingRule(
        question_category="knowledge",
        answer_pattern="very limited|no knowledge|beginner",
        max_category=RiskCategory.CONSERVATIVE,
        reason="Very limited investment knowledge detected - risk category capped at Conservative",
    ),
    CeilingRule(
        question_category="experience",
        answer_pattern="no experience|less than 1 year",
        max_category=RiskCategory.MODERATE,
        reason="Limited investment experience - risk category capped at Moderate",
    ),
]


class RiskCategoryBreakdown(BaseModel):
    """Every intermediate step of a risk category calculation."""

    kp_score: Optional[float] = None
    rp_score: Optional[float] = None
    knowledge_level: Optional[KnowledgeLevel] = None
    base_risk_category: Optional[RiskCategory] = None
    adjusted_risk_category: Optional[RiskCategory] = None
    final_risk_category: Optional[RiskCategory] = None
    adjustment: str = "none"
    adjustment_reason: str = ""
    ceiling_applied: bool = False
    ceiling_reason: Optional[str] = None


class ProfileValidity(BaseModel):
    is_valid: bool
    is_expired: bool
    is_expiring_soon: bool
    days_remaining: Optional[int] = None
