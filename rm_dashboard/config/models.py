# rm_dashboard/config/models.py
"""
Pydantic models for validating the structure and types of the configuration
loaded from YAML files (e.g., dashboard.yaml).
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from rm_dashboard.projections import calculator as defaults
from rm_dashboard.projections.schema import DEFAULT_HORIZON_AGE
from rm_dashboard.risk.models import (
    DEFAULT_CEILING_RULES,
    DEFAULT_RISK_CATEGORY_RANGES,
    CeilingRule,
    RiskCategoryRange,
)

logger = logging.getLogger(__name__)

MAX_AGE = 120


class RetirementInputs(BaseModel):
    """Inputs for the retirement corpus projection."""

    current_age: int = Field(defaults.DEFAULT_CURRENT_AGE, ge=0, le=MAX_AGE)
    retirement_age: int = Field(defaults.DEFAULT_RETIREMENT_AGE, ge=0, le=MAX_AGE)
    current_corpus: float = Field(
        defaults.DEFAULT_CURRENT_CORPUS, ge=0.0, description="Invested value today"
    )
    monthly_contribution: float = Field(
        defaults.DEFAULT_MONTHLY_CONTRIBUTION, ge=0.0, description="Monthly savings until retirement"
    )
    expected_return: float = Field(
        defaults.DEFAULT_EXPECTED_RETURN, gt=-1.0, description="Annual return (e.g., 0.12 for 12%)"
    )
    monthly_expense_after_retirement: float = Field(
        defaults.DEFAULT_MONTHLY_EXPENSE, ge=0.0, description="Monthly expense in the first retirement year, before inflation"
    )
    inflation_rate: float = Field(
        defaults.DEFAULT_INFLATION_RATE, gt=-1.0, description="Annual inflation (e.g., 0.06 for 6%)"
    )
    horizon_age: int = Field(DEFAULT_HORIZON_AGE, ge=0, le=MAX_AGE)

    @model_validator(mode='after')
    def check_age_order(self) -> 'RetirementInputs':
        if self.retirement_age < self.current_age:
            raise ValueError(
                f"retirement_age ({self.retirement_age}) cannot be before current_age ({self.current_age})"
            )
        if self.retirement_age > self.horizon_age:
            raise ValueError(
                f"retirement_age ({self.retirement_age}) cannot be after horizon_age ({self.horizon_age})"
            )
        if self.retirement_age == self.horizon_age:
            logger.warning(
                f"retirement_age equals horizon_age ({self.horizon_age}); "
                "the projection will have no depletion phase"
            )
        return self


class RiskProfilingConfig(BaseModel):
    """Administrator-configurable score ranges and ceiling rules."""

    ranges: List[RiskCategoryRange] = Field(
        default_factory=lambda: list(DEFAULT_RISK_CATEGORY_RANGES)
    )
    ceiling_rules: List[CeilingRule] = Field(
        default_factory=lambda: list(DEFAULT_CEILING_RULES)
    )

    @model_validator(mode='after')
    def check_ranges(self) -> 'RiskProfilingConfig':
        """Ranges must be listed in ascending order and must not overlap."""
        for previous, current in zip(self.ranges, self.ranges[1:]):
            if current.min <= previous.max:
                raise ValueError(
                    f"Risk category ranges overlap or are out of order: "
                    f"{previous.category.value} ends at {previous.max}, "
                    f"{current.category.value} starts at {current.min}"
                )
        return self


class DashboardConfig(BaseModel):
    """Top-level configuration document."""

    log_level: str = "INFO"
    output_directory: Optional[str] = None
    retirement: RetirementInputs = Field(default_factory=RetirementInputs)
    risk_profiling: RiskProfilingConfig = Field(default_factory=RiskProfilingConfig)
    clients: List[Dict[str, Any]] = Field(default_factory=list)
