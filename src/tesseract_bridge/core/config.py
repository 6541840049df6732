"""Configuration for tesseract-bridge."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from tesseract_bridge.core.options import RecognitionOptions

logger = logging.getLogger(__name__)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str) -> float | None:
    value = os.environ[name]
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number of seconds", name, value)
        return None


@dataclass
class TesseractConfig:
    """Main configuration for tesseract-bridge."""

    # Explicit path to the tesseract binary; skips discovery when set
    executable: str = ""
    timeout: float | None = None  # seconds, None waits forever
    show_command: bool = False  # log the full command line before spawning

    # Default options for recognize calls
    options: RecognitionOptions = field(default_factory=RecognitionOptions)

    def __post_init__(self) -> None:
        if not self.executable:
            self.executable = os.environ.get("TESSERACT_CMD", "")

        if self.timeout is None and os.environ.get("TESSERACT_TIMEOUT"):
            self.timeout = _env_timeout("TESSERACT_TIMEOUT")

        if not self.show_command:
            self.show_command = _env_flag("TESSERACT_SHOW_COMMAND")

        if isinstance(self.options, dict):
            self.options = RecognitionOptions.from_dict(self.options)

    def executable_path(self) -> Path | None:
        """Get the configured executable if it points at a regular file."""
        if not self.executable:
            return None
        path = Path(self.executable).expanduser()
        return path if path.is_file() else None

    @classmethod
    def from_file(cls, path: Path | str) -> "TesseractConfig":
        """Load configuration from a YAML file."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")

        config = cls()

        if "options" in data:
            config.options = RecognitionOptions.from_dict(data["options"] or {})

        for key in ["executable", "timeout", "show_command"]:
            if key in data:
                setattr(config, key, data[key])

        if config.executable is None:
            config.executable = ""

        return config
