import json
from pathlib import Path

import pandas as pd
import pytest
import yaml

from rm_dashboard.config import (
    ConfigLoadError,
    DashboardConfig,
    RetirementInputs,
    RiskProfilingConfig,
    load_clients,
    load_dashboard_config,
    load_yaml_config,
    parse_dashboard_config,
)
from rm_dashboard.projections import project_retirement_corpus
from rm_dashboard.risk import RiskCategory


def write_yaml(path, data):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f)
    return path


@pytest.mark.config
def test_load_full_config(tmp_path):
    path = write_yaml(
        tmp_path / "dashboard.yaml",
        {
            "log_level": "DEBUG",
            "output_directory": "out",
            "retirement": {"current_age": 40, "retirement_age": 58, "current_corpus": 5_000_000},
            "risk_profiling": {
                "ranges": [
                    {"min": 0, "max": 30, "category": "Conservative"},
                    {"min": 31, "max": 75, "category": "Aggressive"},
                ],
                "ceiling_rules": [],
            },
            "clients": [{"id": 1, "fullName": "Rahul Sharma", "tier": "gold"}],
        },
    )
    config = load_dashboard_config(path)

    assert isinstance(config, DashboardConfig)
    assert config.log_level == "DEBUG"
    assert config.retirement.current_age == 40
    assert config.retirement.retirement_age == 58
    # unspecified fields keep their defaults
    assert config.retirement.monthly_contribution == 25_000
    assert config.retirement.horizon_age == 85
    assert [r.category for r in config.risk_profiling.ranges] == [RiskCategory.CONSERVATIVE, RiskCategory.AGGRESSIVE]
    assert config.risk_profiling.ceiling_rules == []
    assert config.clients[0]["fullName"] == "Rahul Sharma"


@pytest.mark.config
def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml_config(path) == {}
    config = load_dashboard_config(path)
    assert config.retirement == RetirementInputs()
    assert len(config.risk_profiling.ranges) == 4


@pytest.mark.config
def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigLoadError):
        load_yaml_config(tmp_path / "nope.yaml")


@pytest.mark.config
def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("retirement: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_yaml_config(path)


@pytest.mark.config
def test_non_mapping_yaml_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_yaml_config(path)


@pytest.mark.config
def test_schema_violation_raises():
    with pytest.raises(ConfigLoadError, match="validation failed"):
        parse_dashboard_config({"retirement": "not a mapping"})
    with pytest.raises(ConfigLoadError):
        parse_dashboard_config({"unexpected_section": {}})


@pytest.mark.config
def test_invalid_values_raise():
    with pytest.raises(ConfigLoadError, match="Invalid configuration values"):
        parse_dashboard_config({"retirement": {"current_age": 65, "retirement_age": 60}})
    with pytest.raises(ConfigLoadError):
        parse_dashboard_config({"retirement": {"current_corpus": -1}})


def test_overlapping_ranges_are_rejected():
    with pytest.raises(ValueError):
        RiskProfilingConfig(
            ranges=[
                {"min": 0, "max": 30, "category": "Conservative"},
                {"min": 25, "max": 75, "category": "Moderate"},
            ]
        )


def test_retirement_inputs_reject_bad_ages():
    with pytest.raises(ValueError):
        RetirementInputs(current_age=-1)
    with pytest.raises(ValueError):
        RetirementInputs(current_age=70, retirement_age=60)


def test_retirement_after_horizon_is_rejected():
    with pytest.raises(ValueError, match="horizon_age"):
        RetirementInputs(current_age=80, retirement_age=90)
    with pytest.raises(ConfigLoadError):
        parse_dashboard_config({"retirement": {"retirement_age": 70, "horizon_age": 65}})


def test_validated_inputs_stay_within_horizon():
    inputs = RetirementInputs(current_age=80, retirement_age=85)
    projection = project_retirement_corpus(**inputs.model_dump())
    assert projection.points
    assert all(point.age <= inputs.horizon_age for point in projection.points)


def test_load_clients_csv(tmp_path):
    path = tmp_path / "clients.csv"
    pd.DataFrame(
        [{"id": 1, "fullName": "Rahul Sharma", "tier": "platinum"}, {"id": 2, "fullName": "Priya Patel", "tier": "gold"}]
    ).to_csv(path, index=False)

    df = load_clients(path)
    assert df["id"].tolist() == [1, 2]
    assert df["tier"].tolist() == ["platinum", "gold"]


def test_load_clients_json_without_tier(tmp_path):
    path = tmp_path / "clients.json"
    path.write_text(json.dumps([{"id": 7, "full_name": "Amit Kumar"}]), encoding="utf-8")

    df = load_clients(path)
    assert df["tier"].tolist() == ["silver"]
    assert df["full_name"].tolist() == ["Amit Kumar"]


def test_load_clients_yaml_mapping(tmp_path):
    path = write_yaml(tmp_path / "clients.yaml", {"clients": [{"id": "a", "fullName": "Neha Singh"}]})
    df = load_clients(path)
    assert df["id"].tolist() == ["a"]


def test_load_clients_requires_id_and_name(tmp_path):
    path = tmp_path / "clients.csv"
    pd.DataFrame([{"fullName": "No Id"}]).to_csv(path, index=False)
    with pytest.raises(ConfigLoadError, match="'id'"):
        load_clients(path)

    path2 = tmp_path / "clients2.csv"
    pd.DataFrame([{"id": 1, "tier": "gold"}]).to_csv(path2, index=False)
    with pytest.raises(ConfigLoadError, match="name columns"):
        load_clients(path2)


def test_load_clients_unsupported_type(tmp_path):
    path = tmp_path / "clients.txt"
    path.write_text("id,fullName\n1,A\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="Unsupported"):
        load_clients(path)


@pytest.mark.config
def test_example_config_loads():
    path = Path(__file__).resolve().parents[2] / "config" / "dashboard.yaml"
    config = load_dashboard_config(path)
    assert config.retirement == RetirementInputs()
    assert len(config.risk_profiling.ceiling_rules) == 2
    assert [c["id"] for c in config.clients] == [1, 2, 3]
