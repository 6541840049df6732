"""Exception hierarchy for tesseract-bridge."""


class TesseractError(Exception):
    """Base class for every error raised by tesseract-bridge."""


class TesseractNotFoundError(TesseractError):
    """Tesseract could not be located, or the located binary could not be started."""

    def __init__(self, message: str = "tesseract is not installed or it's not in your PATH") -> None:
        super().__init__(message)


class CommandExitStatusError(TesseractError):
    """Tesseract ran and exited with a non-zero (or signal) status."""

    def __init__(self, status: str, stderr: str, returncode: int | None = None) -> None:
        self.status = status
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"tesseract failed with {status}: {stderr.strip()}")


class CommandTimeoutError(TesseractError):
    """Tesseract did not exit within the configured timeout."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"tesseract timed out after {timeout}s")


class OutputDecodeError(TesseractError):
    """Captured output was not valid UTF-8."""

    def __init__(self, stream: str, reason: UnicodeDecodeError) -> None:
        self.stream = stream
        super().__init__(f"tesseract {stream} is not valid UTF-8: {reason}")


class ImageError(TesseractError):
    """An image reference could not be turned into a file path."""
