from .calculator import (
    adjust_risk_category,
    apply_ceiling_logic,
    calculate_expiry_date,
    calculate_final_risk_category,
    check_profile_validity,
    get_base_risk_category,
    get_knowledge_level,
    get_risk_category_breakdown,
)
from .models import (
    DEFAULT_CEILING_RULES,
    DEFAULT_RISK_CATEGORY_RANGES,
    CeilingRule,
    KnowledgeLevel,
    ProfileValidity,
    RiskCategory,
    RiskCategoryBreakdown,
    RiskCategoryRange,
)

__all__ = [
    "adjust_risk_category",
    "apply_ceiling_logic",
    "calculate_expiry_date",
    "calculate_final_risk_category",
    "check_profile_validity",
    "get_base_risk_category",
    "get_knowledge_level",
    "get_risk_category_breakdown",
    "DEFAULT_CEILING_RULES",
    "DEFAULT_RISK_CATEGORY_RANGES",
    "CeilingRule",
    "KnowledgeLevel",
    "ProfileValidity",
    "RiskCategory",
    "RiskCategoryBreakdown",
    "RiskCategoryRange",
]
