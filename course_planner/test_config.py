import json

import pytest

from course_planner.config import DEFAULTS, load_planner_config


def write_config(tmp_path, data):
    path = tmp_path / "planner_config.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_missing_file_gives_defaults(tmp_path):
    config = load_planner_config(str(tmp_path / "missing.json"))
    assert config == DEFAULTS
    assert config["bucket_count"] == 20


def test_values_override_defaults(tmp_path):
    path = write_config(tmp_path, {"bucket_count": 31, "data_file": "courses.csv", "extra": 1})
    config = load_planner_config(path)
    assert config == {"bucket_count": 31, "data_file": "courses.csv", "warn_on_skipped": False}


@pytest.mark.parametrize("data", [
    {"bucket_count": 0},
    {"bucket_count": "20"},
    {"bucket_count": True},
    {"warn_on_skipped": "yes"},
    {"data_file": 5},
    ["not", "an", "object"],
])
def test_invalid_values_raise(tmp_path, data):
    with pytest.raises(ValueError):
        load_planner_config(write_config(tmp_path, data))
