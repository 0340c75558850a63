# rm_dashboard/projections/calculator.py
"""
Year-by-year retirement corpus projection.

The corpus grows until the retirement age (returns plus yearly contributions),
then is drawn down by an inflation-adjusted expense until the horizon age or
until it runs out. Each recorded point carries the corpus rounded half-up to a
whole currency unit; the running total is never rounded, so rounding error does
not compound.

QuickStart:
    >>> projection = project_retirement_corpus(current_age=35, retirement_age=60)
    >>> projection.points[0].corpus
    3750000
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd

from rm_dashboard.utils.formatting import format_crore, round_to_int
from .schema import (
    DEFAULT_HORIZON_AGE,
    EXHAUSTED_LABEL,
    PROJECTION_COLUMNS,
    Phase,
)

logger = logging.getLogger(__name__)

# Defaults used by the retirement planning widget
DEFAULT_CURRENT_AGE = 35
DEFAULT_RETIREMENT_AGE = 60
DEFAULT_CURRENT_CORPUS = 3_750_000  # ₹37.5L
DEFAULT_MONTHLY_CONTRIBUTION = 25_000  # ₹25K per month
DEFAULT_EXPECTED_RETURN = 0.12  # 12% annual return
DEFAULT_MONTHLY_EXPENSE = 85_000  # ₹85K per month
DEFAULT_INFLATION_RATE = 0.06  # 6% inflation


@dataclass(frozen=True)
class ProjectionPoint:
    """One simulated year of the projection."""

    age: int
    corpus: int
    phase: Phase
    formatted_corpus: str

    def as_dict(self) -> dict:
        return {
            "age": self.age,
            "corpus": self.corpus,
            "phase": self.phase.value,
            "formatted_corpus": self.formatted_corpus,
        }


@dataclass(frozen=True)
class RetirementProjection:
    """Ordered projection timeline plus the values derived from it."""

    points: Tuple[ProjectionPoint, ...]
    retirement_age: int
    horizon_age: int = DEFAULT_HORIZON_AGE
    peak_corpus: int = field(init=False)

    def __post_init__(self):
        peak = max((p.corpus for p in self.points), default=0)
        object.__setattr__(self, "peak_corpus", peak)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def accumulation(self) -> List[ProjectionPoint]:
        return [p for p in self.points if p.phase is Phase.ACCUMULATION]

    @property
    def depletion(self) -> List[ProjectionPoint]:
        return [p for p in self.points if p.phase is Phase.DEPLETION]

    @property
    def retirement_point(self) -> Optional[ProjectionPoint]:
        accumulation = self.accumulation
        return accumulation[-1] if accumulation else None

    @property
    def exhaustion_age(self) -> Optional[int]:
        """Age at which the corpus ran out, or None if it lasted."""
        depletion = self.depletion
        if depletion and depletion[-1].corpus == 0:
            return depletion[-1].age
        return None

    def chart_series(self) -> Tuple[List[ProjectionPoint], List[ProjectionPoint]]:
        """
        Split into (accumulation, depletion) series for plotting.

        The depletion series starts with the retirement point so the two areas
        meet at the retirement age.
        """
        accumulation = self.accumulation
        depletion = self.depletion
        if accumulation and depletion:
            depletion = [accumulation[-1]] + depletion
        return accumulation, depletion

    def to_frame(self) -> pd.DataFrame:
        if not self.points:
            return pd.DataFrame(columns=PROJECTION_COLUMNS)
        return pd.DataFrame([p.as_dict() for p in self.points], columns=PROJECTION_COLUMNS)


def _point(age: int, corpus: float, phase: Phase) -> ProjectionPoint:
    return ProjectionPoint(
        age=age,
        corpus=round_to_int(corpus),
        phase=phase,
        formatted_corpus=format_crore(corpus),
    )


def project_retirement_corpus(
    current_age: int = DEFAULT_CURRENT_AGE,
    retirement_age: int = DEFAULT_RETIREMENT_AGE,
    current_corpus: float = DEFAULT_CURRENT_CORPUS,
    monthly_contribution: float = DEFAULT_MONTHLY_CONTRIBUTION,
    expected_return: float = DEFAULT_EXPECTED_RETURN,
    monthly_expense_after_retirement: float = DEFAULT_MONTHLY_EXPENSE,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
    horizon_age: int = DEFAULT_HORIZON_AGE,
) -> RetirementProjection:
    """
    Project the retirement corpus from ``current_age`` to ``horizon_age``.

    Accumulation covers ``current_age..retirement_age`` inclusive. Each year is
    recorded first and then grown, except the retirement year, which is
    recorded without growth. Depletion starts at ``retirement_age + 1`` from the
    unrounded retirement value: the monthly expense is inflated first, then the
    corpus earns its return and pays twelve months of expense. The first year
    the corpus reaches zero or below is recorded as 0 and ends the projection.

    Inputs are not validated. Degenerate values give degenerate results:
    ``retirement_age < current_age`` returns an empty projection.

    Returns:
        RetirementProjection with points ordered by age.
    """
    logger.debug(
        f"Projecting corpus: age {current_age}->{retirement_age}, horizon {horizon_age}, "
        f"corpus={current_corpus}, contribution={monthly_contribution}/month, "
        f"return={expected_return}, expense={monthly_expense_after_retirement}/month, "
        f"inflation={inflation_rate}"
    )

    if retirement_age < current_age:
        logger.warning(
            f"Retirement age {retirement_age} is before current age {current_age}; "
            "returning an empty projection"
        )
        return RetirementProjection(points=(), retirement_age=retirement_age, horizon_age=horizon_age)

    points: List[ProjectionPoint] = []
    corpus = float(current_corpus)
    annual_contribution = monthly_contribution * 12

    # Accumulation phase
    for age in range(current_age, retirement_age + 1):
        points.append(_point(age, corpus, Phase.ACCUMULATION))
        if age < retirement_age:
            corpus = corpus * (1 + expected_return) + annual_contribution

    # Depletion phase
    monthly_expense = float(monthly_expense_after_retirement)
    for age in range(retirement_age + 1, horizon_age + 1):
        monthly_expense *= 1 + inflation_rate
        corpus = corpus * (1 + expected_return) - monthly_expense * 12

        if corpus <= 0:
            points.append(ProjectionPoint(age=age, corpus=0, phase=Phase.DEPLETION, formatted_corpus=EXHAUSTED_LABEL))
            logger.info(f"Corpus exhausted at age {age}")
            break

        points.append(_point(age, corpus, Phase.DEPLETION))

    projection = RetirementProjection(points=tuple(points), retirement_age=retirement_age, horizon_age=horizon_age)
    logger.info(
        f"Projected {len(projection)} years; peak corpus {projection.peak_corpus:,} "
        f"at retirement age {retirement_age}"
    )
    return projection
