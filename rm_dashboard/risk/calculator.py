# rm_dashboard/risk/calculator.py
"""
Final risk category from knowledge profiling (KP, 0-45) and risk profiling
(RP, 0-75) scores.

Steps:
  1. RP score -> base category via configurable score ranges.
  2. KP score -> knowledge level; Basic lowers the category one level,
     Advanced raises it one level, Intermediate leaves it alone.
  3. Ceiling rules cap the category when questionnaire answers show low
     capacity for risk (first matching rule wins).

Risk profiles are valid for 12 months from the assessment date.
"""

import logging
import math
import re
from datetime import date, datetime
from typing import Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from .models import (
    CATEGORY_ORDER,
    DEFAULT_CEILING_RULES,
    DEFAULT_RISK_CATEGORY_RANGES,
    CeilingRule,
    KnowledgeLevel,
    ProfileValidity,
    RiskCategory,
    RiskCategoryBreakdown,
    RiskCategoryRange,
)

logger = logging.getLogger(__name__)

PROFILE_VALIDITY_MONTHS = 12
EXPIRY_WARNING_DAYS = 30

Answers = Mapping[str, Union[str, Sequence[str]]]
DateLike = Union[str, date, datetime, pd.Timestamp]


def get_knowledge_level(kp_score: Optional[float]) -> Optional[KnowledgeLevel]:
    if kp_score is None:
        return None
    if kp_score <= 15:
        return KnowledgeLevel.BASIC
    if kp_score <= 30:
        return KnowledgeLevel.INTERMEDIATE
    return KnowledgeLevel.ADVANCED


def get_base_risk_category(
    rp_score: Optional[float],
    ranges: Sequence[RiskCategoryRange] = DEFAULT_RISK_CATEGORY_RANGES,
) -> Optional[RiskCategory]:
    """
    Map an RP score onto the configured ranges.

    Scores that fall outside every range (including gaps between ranges) get
    the first range's category when below its minimum, otherwise the last
    range's category.
    """
    if rp_score is None:
        return None

    for score_range in ranges:
        if score_range.contains(rp_score):
            return score_range.category

    if ranges:
        if rp_score < ranges[0].min:
            return ranges[0].category
        return ranges[-1].category

    return None


def adjust_risk_category(
    base_category: RiskCategory,
    knowledge_level: Optional[KnowledgeLevel],
) -> RiskCategory:
    """Shift the category one level down (Basic) or up (Advanced), within bounds."""
    index = CATEGORY_ORDER.index(base_category)
    if knowledge_level is KnowledgeLevel.BASIC:
        return CATEGORY_ORDER[max(0, index - 1)]
    if knowledge_level is KnowledgeLevel.ADVANCED:
        return CATEGORY_ORDER[min(len(CATEGORY_ORDER) - 1, index + 1)]
    return base_category


def _answer_text(answers: Union[str, Sequence[str]]) -> str:
    if isinstance(answers, str):
        answers = [answers]
    return " ".join(str(a).lower() for a in answers)


def apply_ceiling_logic(
    category: RiskCategory,
    question_answers: Optional[Answers] = None,
    ceiling_rules: Sequence[CeilingRule] = DEFAULT_CEILING_RULES,
) -> Tuple[RiskCategory, bool, Optional[str]]:
    """
    Cap ``category`` using the first ceiling rule whose pattern matches.

    Returns:
        (category, ceiling_applied, ceiling_reason)
    """
    if not question_answers:
        return category, False, None

    for rule in ceiling_rules:
        if not rule.question_category:
            continue
        answers = question_answers.get(rule.question_category)
        if not answers:
            continue
        if not rule.answer_pattern:
            continue
        if re.search(rule.answer_pattern, _answer_text(answers), re.IGNORECASE):
            if category.rank > rule.max_category.rank:
                logger.debug(f"Ceiling applied: {category.value} -> {rule.max_category.value} ({rule.reason})")
                return rule.max_category, True, rule.reason

    return category, False, None


def calculate_final_risk_category(
    kp_score: Optional[float],
    rp_score: Optional[float],
    question_answers: Optional[Answers] = None,
    ranges: Sequence[RiskCategoryRange] = DEFAULT_RISK_CATEGORY_RANGES,
    ceiling_rules: Sequence[CeilingRule] = DEFAULT_CEILING_RULES,
) -> Optional[RiskCategory]:
    """Final category after knowledge adjustment and ceilings; None without an RP score."""
    return get_risk_category_breakdown(
        kp_score, rp_score, question_answers, ranges, ceiling_rules
    ).final_risk_category


def get_risk_category_breakdown(
    kp_score: Optional[float],
    rp_score: Optional[float],
    question_answers: Optional[Answers] = None,
    ranges: Sequence[RiskCategoryRange] = DEFAULT_RISK_CATEGORY_RANGES,
    ceiling_rules: Sequence[CeilingRule] = DEFAULT_CEILING_RULES,
) -> RiskCategoryBreakdown:
    knowledge_level = get_knowledge_level(kp_score)
    base_category = get_base_risk_category(rp_score, ranges)

    adjusted_category = base_category
    if base_category is not None and knowledge_level is not None:
        adjusted_category = adjust_risk_category(base_category, knowledge_level)

    final_category = adjusted_category
    ceiling_applied, ceiling_reason = False, None
    if adjusted_category is not None:
        final_category, ceiling_applied, ceiling_reason = apply_ceiling_logic(
            adjusted_category, question_answers, ceiling_rules
        )

    adjustment, adjustment_reason = "none", ""
    if knowledge_level is None:
        adjustment_reason = "No knowledge profiling data available - using base risk category"
    elif base_category is not None:
        if knowledge_level is KnowledgeLevel.BASIC and adjusted_category != base_category:
            adjustment = "reduced"
            adjustment_reason = "Knowledge level is Basic - risk category reduced for safety"
        elif knowledge_level is KnowledgeLevel.ADVANCED and adjusted_category != base_category:
            adjustment = "increased"
            adjustment_reason = (
                "Knowledge level is Advanced - risk category increased as client can handle higher risk"
            )
        else:
            adjustment = "neutral"
            adjustment_reason = "Knowledge level is Intermediate - no adjustment applied"

    return RiskCategoryBreakdown(
        kp_score=kp_score,
        rp_score=rp_score,
        knowledge_level=knowledge_level,
        base_risk_category=base_category,
        adjusted_risk_category=adjusted_category,
        final_risk_category=final_category,
        adjustment=adjustment,
        adjustment_reason=adjustment_reason,
        ceiling_applied=ceiling_applied,
        ceiling_reason=ceiling_reason,
    )


def calculate_expiry_date(assessment_date: Optional[DateLike] = None) -> pd.Timestamp:
    """
    Expiry is 12 calendar months after the assessment.

    Dates past the end of the target month are clipped to its last day, so an
    assessment on 2024-02-29 expires on 2025-02-28 rather than rolling over
    into March.
    """
    assessed = pd.Timestamp(assessment_date) if assessment_date is not None else pd.Timestamp.now()
    return assessed + pd.DateOffset(months=PROFILE_VALIDITY_MONTHS)


def check_profile_validity(
    expiry_date: Optional[DateLike],
    days_before_expiry: int = EXPIRY_WARNING_DAYS,
    today: Optional[DateLike] = None,
) -> ProfileValidity:
    """
    Validity status of a risk profile.

    Days remaining are rounded up, so a profile expiring later today has 1 day
    left when ``today`` carries a time of day and 0 when both are dates.
    A missing expiry date counts as expired.
    """
    if expiry_date is None or (isinstance(expiry_date, str) and not expiry_date):
        return ProfileValidity(is_valid=False, is_expired=True, is_expiring_soon=False, days_remaining=None)

    expiry = pd.Timestamp(expiry_date)
    now = pd.Timestamp(today) if today is not None else pd.Timestamp.now()
    diff_days = math.ceil((expiry - now).total_seconds() / 86400)

    is_expired = diff_days < 0
    return ProfileValidity(
        is_valid=not is_expired,
        is_expired=is_expired,
        is_expiring_soon=0 <= diff_days <= days_before_expiry,
        days_remaining=diff_days if diff_days >= 0 else None,
    )
