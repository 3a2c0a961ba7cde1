import pytest

import config


def test_missing_file_gives_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "missing.yaml")
    assert cfg["loan_years"] == config.DEFAULTS["loan_years"]
    assert cfg["unit_costs"] == config.DEFAULTS["unit_costs"]


def test_yaml_overrides_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("loan_rate: 5.25\nunit_costs:\n  meal: 4\n", encoding="utf-8")
    cfg = config.load_config(path)
    assert cfg["loan_rate"] == 5.25
    assert cfg["loan_years"] == 30
    assert cfg["unit_costs"]["meal"] == 4
    assert cfg["unit_costs"]["water_well"] == 10_000


def test_non_mapping_yaml_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.load_config(path) == config.load_config(tmp_path / "missing.yaml")


def test_environment_override(tmp_path, monkeypatch):
    path = tmp_path / "alt.yaml"
    monkeypatch.setenv("MORTGAGE_IMPACT_CONFIG", str(path))
    assert config.config_path() == path


def test_percentages_are_fractions():
    assert 0 <= config.LOAN_RATE < 1
    assert 0 <= config.PROPERTY_TAX_RATE < 1


def test_unknown_unit_cost_key_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("unit_costs:\n  meals: 4\n", encoding="utf-8")
    with pytest.raises(ValueError, match="meals"):
        config.load_config(path)
