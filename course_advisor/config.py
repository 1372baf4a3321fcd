# === config.py ===
import json
import logging
import os

DEFAULT_CONFIG_PATH = os.path.join("data", "advisor_config.json")

DEFAULTS = {
    "default_data_path": "CS 300 ABCU_Advising_Program_Input.csv",
    "delimiter": ",",
    "log_level": "WARNING",
}


def load_config(path=None):
    """Read the JSON config at `path` over the built-in defaults.

    A missing file is not an error; the defaults are returned as-is.
    """
    config = dict(DEFAULTS)
    path = path or DEFAULT_CONFIG_PATH
    if os.path.exists(path):
        with open(path) as f:
            config.update(json.load(f))
    return config


def configure_logging(level="WARNING"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
