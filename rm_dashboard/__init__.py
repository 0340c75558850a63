"""
Deterministic utilities behind the relationship-manager dashboard: client
avatars, retirement corpus projections and risk profiling.
"""

from rm_dashboard.avatars import generate_avatar, generate_client_avatars, svg_to_data_url
from rm_dashboard.projections import project_retirement_corpus
from rm_dashboard.risk import calculate_final_risk_category

__version__ = "0.1.0"

__all__ = [
    "generate_avatar",
    "generate_client_avatars",
    "svg_to_data_url",
    "project_retirement_corpus",
    "calculate_final_risk_category",
]
