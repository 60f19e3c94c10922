"""
Test check options validation and loading.
"""
import json

import pytest
from pydantic import ValidationError

from diagnostics.models import CheckOptions
from diagnostics.options import (
    OPTIONS_FILE_ENV,
    OptionsError,
    load_options,
    options_from_env,
    options_from_mapping,
)


def test_wire_shape_accepted():
    options = options_from_mapping({"standard": "WCAG2AA", "waitMs": 250, "ignore": ["notice", "WCAG2AA.X"]})

    assert options.standard == "WCAG2AA"
    assert options.wait_ms == 250
    assert options.ignore == ["notice", "WCAG2AA.X"]


def test_field_names_accepted():
    options = CheckOptions(standard="Section508", wait_ms=0, ignore=[])

    assert options.wait_ms == 0


@pytest.mark.parametrize("data", [
    {"waitMs": 0, "ignore": []},
    {"standard": "WCAG2AA", "ignore": []},
    {"standard": "WCAG2AA", "waitMs": 0},
    {"standard": "WCAG2AA", "waitMs": -1, "ignore": []},
    {"standard": "WCAG2AA", "waitMs": 0, "ignore": "notice"},
    {"standard": "WCAG2AA", "waitMs": 0, "ignore": [], "timeout": 5},
])
def test_invalid_options_rejected(data):
    with pytest.raises(OptionsError):
        options_from_mapping(data)


def test_non_mapping_rejected():
    with pytest.raises(OptionsError, match="expected object"):
        options_from_mapping(["WCAG2AA"])


def test_options_are_frozen():
    options = CheckOptions(standard="WCAG2AA", wait_ms=0, ignore=[])

    with pytest.raises(ValidationError):
        options.standard = "WCAG2A"


def test_load_options_from_file(tmp_path):
    path = tmp_path / "a11yguard.json"
    path.write_text(json.dumps({"standard": "WCAG2A", "waitMs": 10, "ignore": ["warning"]}), encoding="utf-8")

    options = load_options(path)

    assert options == CheckOptions(standard="WCAG2A", wait_ms=10, ignore=["warning"])


def test_load_options_missing_file(tmp_path):
    with pytest.raises(OptionsError, match="not found"):
        load_options(tmp_path / "missing.json")


def test_load_options_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{standard: ", encoding="utf-8")

    with pytest.raises(OptionsError, match="Invalid JSON"):
        load_options(path)


def test_options_from_env(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"standard": "WCAG2AAA", "waitMs": 0, "ignore": []}), encoding="utf-8")
    monkeypatch.setenv(OPTIONS_FILE_ENV, str(path))

    assert options_from_env().standard == "WCAG2AAA"
