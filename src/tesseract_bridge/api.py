"""High-level operations on the tesseract executable."""

import logging
from pathlib import Path

from PIL import Image

from tesseract_bridge.core.config import TesseractConfig
from tesseract_bridge.core.errors import TesseractNotFoundError
from tesseract_bridge.core.image import ImageSource, as_image_source
from tesseract_bridge.core.options import RecognitionOptions
from tesseract_bridge.engine.command import (
    LIST_LANGS_FLAG,
    VERSION_FLAG,
    CommandSpec,
    build_flag_command,
    build_recognition_command,
)
from tesseract_bridge.engine.locator import ExecutableLocator
from tesseract_bridge.engine.process import run_command

logger = logging.getLogger(__name__)

ImageInput = ImageSource | Path | str | Image.Image


def parse_language_list(output: str) -> list[str]:
    """Parse ``--list-langs`` output, dropping the header line."""
    return output.splitlines()[1:]


class Tesseract:
    """Facade over locate, build and run.

    The executable path is resolved on first use and then kept for the
    lifetime of the instance.
    """

    def __init__(
        self,
        config: TesseractConfig | None = None,
        locator: ExecutableLocator | None = None,
    ) -> None:
        self.config = config or TesseractConfig()
        self.locator = locator or ExecutableLocator()
        self._executable: Path | None = None

    def find_executable(self) -> Path | None:
        """Locate tesseract without raising; honours the configured override."""
        if self.config.executable:
            path = self.config.executable_path()
            if path is None:
                logger.warning("Configured tesseract executable not found: %s", self.config.executable)
            return path
        return self.locator.locate()

    @property
    def executable(self) -> Path:
        """Resolved tesseract path. Raises TesseractNotFoundError if missing."""
        if self._executable is None:
            path = self.find_executable()
            if path is None:
                raise TesseractNotFoundError()
            self._executable = path
        return self._executable

    def _run(self, spec: CommandSpec) -> str:
        return run_command(
            spec,
            timeout=self.config.timeout,
            show_command=self.config.show_command,
        )

    def version(self) -> str:
        """Get raw ``tesseract --version`` output."""
        return self._run(build_flag_command(self.executable, VERSION_FLAG))

    def languages(self) -> list[str]:
        """Get installed language codes, in the order tesseract lists them."""
        output = self._run(build_flag_command(self.executable, LIST_LANGS_FLAG))
        return parse_language_list(output)

    def image_to_string(
        self,
        image: ImageInput,
        options: RecognitionOptions | None = None,
    ) -> str:
        """Recognize text in an image and return tesseract's raw output."""
        options = options or self.config.options
        source = as_image_source(image)
        owned = source is not image

        try:
            image_path = source.get_image_path()
            command = build_recognition_command(self.executable, image_path, options)
            return self._run(command)
        finally:
            if owned:
                source.cleanup()


def find_tesseract_path() -> Path | None:
    """Locate tesseract in the current environment, or return None."""
    return Tesseract().find_executable()


def get_tesseract_version() -> str:
    """Get raw ``tesseract --version`` output."""
    return Tesseract().version()


def get_tesseract_langs() -> list[str]:
    """Get installed language codes."""
    return Tesseract().languages()


def image_to_string(image: ImageInput, options: RecognitionOptions | None = None) -> str:
    """Recognize text in an image with a freshly resolved tesseract."""
    return Tesseract().image_to_string(image, options)
