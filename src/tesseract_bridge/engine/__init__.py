"""Locating, building and running tesseract commands."""

from tesseract_bridge.engine.command import (
    CommandSpec,
    build_flag_command,
    build_recognition_command,
)
from tesseract_bridge.engine.locator import (
    ExecutableLocator,
    SearchEnvironment,
)
from tesseract_bridge.engine.process import ProcessOutcome, run_command

__all__ = [
    "CommandSpec",
    "build_flag_command",
    "build_recognition_command",
    "ExecutableLocator",
    "SearchEnvironment",
    "ProcessOutcome",
    "run_command",
]
