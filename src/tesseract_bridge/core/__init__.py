"""Core data models for tesseract-bridge."""

from tesseract_bridge.core.config import TesseractConfig
from tesseract_bridge.core.errors import (
    CommandExitStatusError,
    CommandTimeoutError,
    ImageError,
    OutputDecodeError,
    TesseractError,
    TesseractNotFoundError,
)
from tesseract_bridge.core.image import ImageSource
from tesseract_bridge.core.options import RecognitionOptions

__all__ = [
    "TesseractConfig",
    "RecognitionOptions",
    "ImageSource",
    "TesseractError",
    "TesseractNotFoundError",
    "CommandExitStatusError",
    "CommandTimeoutError",
    "OutputDecodeError",
    "ImageError",
]
