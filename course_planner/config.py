# === config.py ===
import json
import os

from course_planner.hash_table import DEFAULT_BUCKET_COUNT

DEFAULT_CONFIG_FILE = "data/planner_config.json"

DEFAULTS = {
    "bucket_count": DEFAULT_BUCKET_COUNT,
    "data_file": None,
    "warn_on_skipped": False,
}


def load_planner_config(path=DEFAULT_CONFIG_FILE):
    """
    Load planner settings from a JSON file, falling back to DEFAULTS for
    missing keys (or a missing file). Unknown keys are ignored.
    """
    config = dict(DEFAULTS)
    if not os.path.exists(path):
        return config

    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")

    for key in DEFAULTS:
        if key in data:
            config[key] = data[key]

    bucket_count = config["bucket_count"]
    if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count <= 0:
        raise ValueError(f"{path}: bucket_count must be a positive integer, got {bucket_count!r}")
    if not isinstance(config["warn_on_skipped"], bool):
        raise ValueError(f"{path}: warn_on_skipped must be true or false")
    if config["data_file"] is not None and not isinstance(config["data_file"], str):
        raise ValueError(f"{path}: data_file must be a string or null")

    return config
