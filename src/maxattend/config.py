"""Configuration management for maxattend."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.scheduler import INVALID_POLICIES, REJECT

logger = logging.getLogger(__name__)

MAXATTEND_HOME = Path(os.environ.get("MAXATTEND_HOME", Path.home() / ".maxattend"))
CONFIG_FILE = MAXATTEND_HOME / "maxattend.conf"


@dataclass
class Config:
    """maxattend configuration."""

    invalid_intervals: str = REJECT
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from maxattend.conf, falling back to defaults."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "invalid_intervals":
                policy = value.lower()
                if policy in INVALID_POLICIES:
                    config.invalid_intervals = policy
                else:
                    logger.warning(f"Ignoring unknown INVALID_INTERVALS value: {value}")
            case "log_level":
                config.log_level = value.upper()

    return config
