import os
import yaml
from pathlib import Path

CONFIG_ENV_VAR = "COOKTIME_CONFIG"


def load_config(config_path: str = None) -> dict:
    """Load YAML configuration file.

    Uses $COOKTIME_CONFIG when set, otherwise config.yml in the working directory.
    """
    config_file = Path(config_path or os.environ.get(CONFIG_ENV_VAR) or "config.yml")
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found at {config_file.resolve()}")
    with open(config_file, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
