from .loaders import (
    ConfigLoadError,
    load_clients,
    load_dashboard_config,
    load_yaml_config,
    parse_dashboard_config,
)
from .models import DashboardConfig, RetirementInputs, RiskProfilingConfig

__all__ = [
    "ConfigLoadError",
    "load_clients",
    "load_dashboard_config",
    "load_yaml_config",
    "parse_dashboard_config",
    "DashboardConfig",
    "RetirementInputs",
    "RiskProfilingConfig",
]
