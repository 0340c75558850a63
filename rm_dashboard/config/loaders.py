# rm_dashboard/config/loaders.py
"""
Loading of YAML configuration files and client lists.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd
import yaml
from cerberus import Validator
from pydantic import ValidationError

from .models import DashboardConfig

# Configure logger for this module
logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Top-level document structure; field-level checks live in the pydantic models
CONFIG_SCHEMA: Dict[str, Any] = {
    "log_level": {
        "type": "string",
        "required": False,
        "allowed": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "debug", "info", "warning", "error", "critical"],
    },
    "output_directory": {"type": "string", "required": False, "nullable": True},
    "retirement": {"type": "dict", "required": False},
    "risk_profiling": {
        "type": "dict",
        "required": False,
        "schema": {
            "ranges": {"type": "list", "required": False, "schema": {"type": "dict"}},
            "ceiling_rules": {"type": "list", "required": False, "schema": {"type": "dict"}},
        },
    },
    "clients": {
        "type": "list",
        "required": False,
        "schema": {
            "type": "dict",
            "schema": {
                "id": {"required": True},
                "fullName": {"type": "string", "required": False},
                "full_name": {"type": "string", "required": False},
                "tier": {"type": "string", "required": False, "nullable": True},
            },
            "allow_unknown": True,
        },
    },
}

CLIENT_NAME_COLUMNS = ("fullName", "full_name", "name")


class ConfigLoadError(Exception):
    """Custom exception for errors during config loading."""

    pass


def load_yaml_config(config_path: PathLike) -> Dict[str, Any]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path object pointing to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration. An empty file gives
        an empty dictionary.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    config_path = Path(config_path)
    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if config_data is None:
        logger.warning(f"Configuration file {config_path} is empty; using defaults")
        return {}

    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def parse_dashboard_config(config_data: Dict[str, Any]) -> DashboardConfig:
    """
    Validate a raw configuration mapping.

    Raises:
        ConfigLoadError: If the document structure or any field is invalid.
    """
    v = Validator(CONFIG_SCHEMA)
    if not v.validate(config_data):
        logger.error(f"Config validation failed: {v.errors}")
        raise ConfigLoadError(f"Config validation failed: {v.errors}")

    try:
        config = DashboardConfig(**config_data)
    except ValidationError as e:
        logger.error(f"Config values are invalid: {e}")
        raise ConfigLoadError(f"Invalid configuration values: {e}") from e

    logger.debug(f"Configuration parsed: {config}")
    return config


def load_dashboard_config(config_path: PathLike) -> DashboardConfig:
    """Load and validate a dashboard YAML configuration file."""
    return parse_dashboard_config(load_yaml_config(config_path))


def _normalize_clients(df: pd.DataFrame, source: Path) -> pd.DataFrame:
    if "id" not in df.columns:
        raise ConfigLoadError(f"Client list {source} has no 'id' column")
    if not any(col in df.columns for col in CLIENT_NAME_COLUMNS):
        raise ConfigLoadError(
            f"Client list {source} needs one of the name columns {list(CLIENT_NAME_COLUMNS)}"
        )
    if "tier" not in df.columns:
        df = df.assign(tier="silver")
    duplicated = df["id"].duplicated()
    if duplicated.any():
        logger.warning(f"Client list {source} has duplicate ids: {df.loc[duplicated, 'id'].tolist()}")
    return df


def load_clients(path: PathLike) -> pd.DataFrame:
    """
    Read a client list from CSV, JSON or YAML into a DataFrame.

    YAML files may be a bare list of clients or a mapping with a ``clients`` key.

    Raises:
        ConfigLoadError: If the file is missing, unreadable, or lacks the id/name columns.
    """
    path = Path(path)
    if not path.is_file():
        logger.error(f"Client file not found at path: {path}")
        raise ConfigLoadError(f"Client file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(path)
        elif suffix == ".json":
            df = pd.read_json(path, orient="records")
        elif suffix in (".yaml", ".yml"):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or []
            records = data.get("clients", []) if isinstance(data, dict) else data
            df = pd.DataFrame(records)
        else:
            raise ConfigLoadError(f"Unsupported client file type: {path.suffix}")
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.exception(f"Could not read client file {path}: {e}")
        raise ConfigLoadError(f"Could not read client file {path}") from e

    logger.info(f"Loaded {len(df)} clients from {path}")
    return _normalize_clients(df, path)


# Expose for import
__all__ = [
    "ConfigLoadError",
    "load_yaml_config",
    "parse_dashboard_config",
    "load_dashboard_config",
    "load_clients",
]
