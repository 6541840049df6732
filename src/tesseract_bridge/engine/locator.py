"""Discovery of the tesseract executable.

The search is an ordered list of steps. Each step turns a
:class:`SearchEnvironment` into at most one candidate path, and the first
candidate that is a regular file wins. Platform-specific steps are picked
from a table keyed by platform tag, so the whole order can be exercised on
any host by passing a fake environment.
"""

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, NamedTuple

logger = logging.getLogger(__name__)

EXECUTABLE_BASENAME = "tesseract"


def platform_tag(platform: str | None = None) -> str:
    """Normalize ``sys.platform`` to ``linux``, ``darwin``, ``win32`` or itself."""
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return "linux"
    return platform


def executable_name(platform: str) -> str:
    """Get the binary file name for a platform tag."""
    if platform == "win32":
        return f"{EXECUTABLE_BASENAME}.exe"
    return EXECUTABLE_BASENAME


def _safe_cwd() -> Path | None:
    try:
        return Path.cwd()
    except OSError:
        return None


def _safe_program_dir() -> Path | None:
    if not sys.executable:
        return None
    try:
        return Path(sys.executable).resolve().parent
    except OSError:
        return None


def _safe_home() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


@dataclass(frozen=True)
class SearchEnvironment:
    """Everything the search reads from the outside world.

    A ``None`` field means that piece of the environment could not be
    determined; steps that depend on it are skipped.
    """

    platform: str
    path_env: str | None = None
    cwd: Path | None = None
    program_dir: Path | None = None
    home: Path | None = None

    @property
    def executable_name(self) -> str:
        return executable_name(self.platform)

    @classmethod
    def current(cls) -> "SearchEnvironment":
        """Snapshot the running process's environment."""
        return cls(
            platform=platform_tag(),
            path_env=os.environ.get("PATH", os.defpath),
            cwd=_safe_cwd(),
            program_dir=_safe_program_dir(),
            home=_safe_home(),
        )


CandidateGenerator = Callable[[SearchEnvironment], Path | None]


class SearchStep(NamedTuple):
    name: str
    candidate: CandidateGenerator


def _from_path(env: SearchEnvironment) -> Path | None:
    if env.path_env is None:
        return None
    found = shutil.which(env.executable_name, path=env.path_env)
    return Path(found) if found else None


def _in_cwd(env: SearchEnvironment) -> Path | None:
    if env.cwd is None:
        return None
    return env.cwd / env.executable_name


def _beside_program(env: SearchEnvironment) -> Path | None:
    if env.program_dir is None:
        return None
    return env.program_dir / env.executable_name


def _bundle_resources(env: SearchEnvironment) -> Path | None:
    # <App>.app/Contents/MacOS/<binary> -> <App>.app/Contents/Resources
    if env.program_dir is None:
        return None
    return env.program_dir / ".." / "Resources" / env.executable_name


def _program_lib(env: SearchEnvironment) -> Path | None:
    if env.program_dir is None:
        return None
    return env.program_dir / "lib" / env.executable_name


def _user_local_bin(env: SearchEnvironment) -> Path | None:
    if env.home is None:
        return None
    return env.home / ".local" / "bin" / env.executable_name


LEADING_STEPS = [
    SearchStep("PATH", _from_path),
    SearchStep("current working directory", _in_cwd),
    SearchStep("executable folder", _beside_program),
]

PLATFORM_STEPS = {
    "darwin": [SearchStep("Resources folder", _bundle_resources)],
    "linux": [SearchStep("lib folder", _program_lib)],
}

TRAILING_STEPS = [
    SearchStep("$HOME/.local/bin", _user_local_bin),
]


def search_steps(platform: str) -> list[SearchStep]:
    """Get the ordered search steps for a platform tag."""
    return LEADING_STEPS + PLATFORM_STEPS.get(platform, []) + TRAILING_STEPS


class ExecutableLocator:
    """Find the tesseract binary by walking the search steps in order."""

    def __init__(self, environment: SearchEnvironment | None = None) -> None:
        self._environment = environment

    @property
    def environment(self) -> SearchEnvironment:
        return self._environment or SearchEnvironment.current()

    def locate(self) -> Path | None:
        """Return the first matching path, or ``None`` if every step misses."""
        env = self.environment
        logger.debug("Starting search for %s", env.executable_name)

        for step in search_steps(env.platform):
            try:
                candidate = step.candidate(env)
                found = candidate is not None and candidate.is_file()
            except OSError as e:
                logger.debug("Skipping %s: %s", step.name, e)
                continue

            if found:
                logger.debug("Found tesseract in %s: %s", step.name, candidate)
                return candidate
            logger.debug("tesseract not found in %s", step.name)

        logger.warning("tesseract not found")
        return None
