"""Configuration loading for Date Planner."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "date-planner" / "config.json"


@dataclass
class PlannerConfig:
    """Configuration for a planner session."""
    seed: Optional[int] = None  # random source for default symbols/colors
    load_sample_data: bool = True
    log_level: str = "WARNING"
    date_format: str = "%b %d, %Y at %I:%M %p"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlannerConfig":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith('_')
        }


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Optional[Path] = None) -> PlannerConfig:
    """Load configuration from environment and file.

    Args:
        config_path: JSON file to read (DATE_PLANNER_CONFIG or the default
            location if None)

    Returns:
        Config with defaults, then environment, then file values applied
    """
    config = PlannerConfig()

    seed = os.getenv("DATE_PLANNER_SEED")
    if seed:
        try:
            config.seed = int(seed)
        except ValueError:
            logger.warning(f"Ignoring non-integer DATE_PLANNER_SEED: {seed}")
    sample_data = os.getenv("DATE_PLANNER_SAMPLE_DATA")
    if sample_data is not None:
        config.load_sample_data = _parse_bool(sample_data)
    config.log_level = os.getenv("DATE_PLANNER_LOG_LEVEL", config.log_level).upper()

    if config_path is None:
        env_path = os.getenv("DATE_PLANNER_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if config_path.exists():
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
            if not isinstance(file_config, dict):
                logger.warning(f"Ignoring {config_path}, expected a JSON object")
                return config
            for key, value in file_config.items():
                if hasattr(config, key):
                    setattr(config, key, value)
            logger.info(f"Loaded planner config from {config_path}")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")

    return config
