from .calculator import (
    ProjectionPoint,
    RetirementProjection,
    project_retirement_corpus,
)
from .schema import DEFAULT_HORIZON_AGE, Phase

__all__ = [
    "ProjectionPoint",
    "RetirementProjection",
    "project_retirement_corpus",
    "DEFAULT_HORIZON_AGE",
    "Phase",
]
