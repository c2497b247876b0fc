"""ValidationConfig dataclass and loader: config file plus environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".fieldcheck.json"
DEFAULT_RULES_PATH = "rules/validation-rules.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001


@dataclass
class ValidationConfig:
    rules_path: str = DEFAULT_RULES_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @property
    def rules_file(self) -> Path:
        return Path(self.rules_path)


def load_validation_config(path: Path | None = None) -> ValidationConfig:
    """Load the "validation" section of .fieldcheck.json, then apply env overrides."""
    if path is None:
        path = Path.cwd() / CONFIG_FILE_NAME

    config = ValidationConfig()
    if path.exists():
        try:
            text = path.read_text()
            if text.strip():
                data = json.loads(text)
                section = data.get("validation", {})
                if isinstance(section, dict):
                    _apply(config, section)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load validation config from {path}: {e}")

    if rules_path := os.environ.get("FIELDCHECK_RULES_PATH"):
        config.rules_path = rules_path
    if host := os.environ.get("FIELDCHECK_HOST"):
        config.host = host
    if port := os.environ.get("FIELDCHECK_PORT"):
        try:
            config.port = int(port)
        except ValueError:
            logger.warning(f"Ignoring non-integer FIELDCHECK_PORT: {port!r}")
    if log_level := os.environ.get("FIELDCHECK_LOG_LEVEL"):
        config.log_level = log_level.upper()
    return config


def _apply(config: ValidationConfig, data: dict[str, object]) -> None:
    if "rules_path" in data and isinstance(data["rules_path"], str):
        config.rules_path = data["rules_path"]
    if "host" in data and isinstance(data["host"], str):
        config.host = data["host"]
    if "port" in data and isinstance(data["port"], int) and not isinstance(data["port"], bool):
        config.port = data["port"]
    if "log_level" in data and isinstance(data["log_level"], str):
        config.log_level = data["log_level"].upper()
