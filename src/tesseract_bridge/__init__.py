"""tesseract-bridge - locate and run the tesseract OCR executable."""

__version__ = "0.1.0"

from tesseract_bridge.api import (
    Tesseract,
    find_tesseract_path,
    get_tesseract_langs,
    get_tesseract_version,
    image_to_string,
)
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
    "Tesseract",
    "TesseractConfig",
    "RecognitionOptions",
    "ImageSource",
    "find_tesseract_path",
    "get_tesseract_version",
    "get_tesseract_langs",
    "image_to_string",
    "TesseractError",
    "TesseractNotFoundError",
    "CommandExitStatusError",
    "CommandTimeoutError",
    "OutputDecodeError",
    "ImageError",
]
