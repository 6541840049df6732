"""Running tesseract and classifying its result."""

import logging
import signal
import subprocess
import sys
from dataclasses import dataclass

from tesseract_bridge.core.errors import (
    CommandExitStatusError,
    CommandTimeoutError,
    OutputDecodeError,
    TesseractNotFoundError,
)
from tesseract_bridge.engine.command import CommandSpec

logger = logging.getLogger(__name__)

CREATE_NO_WINDOW = 0x08000000


@dataclass(frozen=True)
class ProcessOutcome:
    """Raw result of one tesseract run."""

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def format_exit_status(returncode: int) -> str:
    """Render a return code as ``exit status: N`` or ``signal: N (SIGNAME)``."""
    if returncode < 0:
        signum = -returncode
        try:
            return f"signal: {signum} ({signal.Signals(signum).name})"
        except ValueError:
            return f"signal: {signum}"
    return f"exit status: {returncode}"


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputDecodeError(stream, e) from e


def spawn(spec: CommandSpec, timeout: float | None = None) -> ProcessOutcome:
    """Start the command and collect both pipes until it exits."""
    kwargs = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = CREATE_NO_WINDOW

    try:
        process = subprocess.Popen(
            spec.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            **kwargs,
        )
    except OSError as e:
        raise TesseractNotFoundError(f"could not run {spec.program}: {e}") from e

    with process:
        try:
            stdout, stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            process.kill()
            process.communicate()
            raise CommandTimeoutError(timeout) from e

    return ProcessOutcome(returncode=process.returncode, stdout=stdout, stderr=stderr)


def classify(outcome: ProcessOutcome) -> str:
    """Turn an outcome into recognized text or a typed error."""
    out = _decode(outcome.stdout, "stdout")
    err = _decode(outcome.stderr, "stderr")

    if outcome.succeeded:
        return out

    raise CommandExitStatusError(
        format_exit_status(outcome.returncode),
        err,
        returncode=outcome.returncode,
    )


def run_command(
    spec: CommandSpec,
    timeout: float | None = None,
    show_command: bool = False,
) -> str:
    """Run a tesseract command and return its stdout.

    Raises:
        TesseractNotFoundError: the program could not be started.
        CommandExitStatusError: the program exited with a non-zero status.
        CommandTimeoutError: ``timeout`` elapsed before the program exited.
        OutputDecodeError: stdout or stderr was not valid UTF-8.
    """
    if show_command:
        logger.debug("Tesseract Command: %s", spec.display())

    return classify(spawn(spec, timeout=timeout))
