"""Image references that can be handed to tesseract as a file path."""

import os
import tempfile
from pathlib import Path

from PIL import Image

from tesseract_bridge.core.errors import ImageError


class ImageSource:
    """An image that yields a filesystem path on demand.

    Path-backed sources are used as-is. Pillow-backed sources are written to a
    temporary PNG the first time a path is requested and removed by
    :meth:`cleanup` (or on leaving a ``with`` block).
    """

    def __init__(self, path: Path | None = None, image: Image.Image | None = None) -> None:
        if (path is None) == (image is None):
            raise ValueError("ImageSource needs exactly one of path or image")
        self._path = Path(path) if path is not None else None
        self._image = image
        self._temp_path: Path | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> "ImageSource":
        """Reference an image file on disk."""
        path = Path(path)
        if not path.is_file():
            raise ImageError(f"image file not found: {path}")
        return cls(path=path)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "ImageSource":
        """Reference an in-memory Pillow image."""
        return cls(image=image)

    def get_image_path(self) -> Path:
        """Return a path tesseract can read, materializing it if needed."""
        if self._path is not None:
            if not self._path.is_file():
                raise ImageError(f"image file not found: {self._path}")
            return self._path

        if self._temp_path is None:
            fd, name = tempfile.mkstemp(suffix=".png", prefix="tesseract-bridge-")
            os.close(fd)
            tmp_path = Path(name)
            try:
                self._image.save(tmp_path, format="PNG")
            except (OSError, ValueError) as e:
                tmp_path.unlink(missing_ok=True)
                raise ImageError(f"could not write temporary image: {e}") from e
            self._temp_path = tmp_path

        return self._temp_path

    def cleanup(self) -> None:
        """Remove the temporary file, if one was written."""
        if self._temp_path is not None:
            self._temp_path.unlink(missing_ok=True)
            self._temp_path = None

    def __enter__(self) -> "ImageSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        if self._path is not None:
            return f"ImageSource(path={str(self._path)!r})"
        return f"ImageSource(image={self._image.mode} {self._image.size})"


def as_image_source(image: "ImageSource | Path | str | Image.Image") -> ImageSource:
    """Coerce the accepted image argument types into an :class:`ImageSource`."""
    if isinstance(image, ImageSource):
        return image
    if isinstance(image, Image.Image):
        return ImageSource.from_pil(image)
    return ImageSource.from_path(image)
