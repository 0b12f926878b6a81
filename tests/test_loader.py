"""Tests for preset value loading."""

import json
import pytest

from t3.exceptions import ConfigError
from t3.loader import load_presets, load_values_file, parse_value_pairs


def test_parse_value_pairs():
    assert parse_value_pairs(["A=1", "B=x=y", "C="]) == {"A": "1", "B": "x=y", "C": ""}


def test_parse_value_pairs_none():
    assert parse_value_pairs(None) == {}


@pytest.mark.parametrize("pair", ["NOEQUALS", "=value"])
def test_parse_value_pairs_rejects_malformed(pair):
    with pytest.raises(ConfigError) as exc_info:
        parse_value_pairs([pair])
    assert exc_info.value.exit_code == 2


def test_load_yaml_values_file(tmp_path):
    path = tmp_path / "values.yaml"
    path.write_text("NAME: World\nPORT: 8080\nSKIP: null\nFLAG: true\n")

    assert load_values_file(path) == {
        "NAME": "World",
        "PORT": "8080",
        "SKIP": None,
        "FLAG": "True",
    }


def test_load_json_values_file(tmp_path):
    path = tmp_path / "values.json"
    path.write_text(json.dumps({"NAME": "World", "MY_VAR": "x"}))

    assert load_values_file(path) == {"NAME": "World", "MY_VAR": "x"}


def test_empty_values_file(tmp_path):
    path = tmp_path / "values.yaml"
    path.write_text("")
    assert load_values_file(path) == {}


def test_missing_values_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_values_file(tmp_path / "missing.yaml")


def test_values_file_must_be_mapping(tmp_path):
    path = tmp_path / "values.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_values_file(path)


def test_malformed_values_file(tmp_path):
    path = tmp_path / "values.yaml"
    path.write_text("key: [unclosed\n")
    with pytest.raises(ConfigError, match="Failed to load"):
        load_values_file(path)


def test_pairs_override_values_file(tmp_path):
    path = tmp_path / "values.yaml"
    path.write_text("A: from-file\nB: from-file\n")

    presets = load_presets(["A=from-cli"], str(path))

    assert presets == {"A": "from-cli", "B": "from-file"}
