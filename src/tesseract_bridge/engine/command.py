"""Construction of tesseract command lines."""

from dataclasses import dataclass
from pathlib import Path

from tesseract_bridge.core.options import RecognitionOptions

# Output base name that makes tesseract write recognized text to stdout
STDOUT_TOKEN = "stdout"

VERSION_FLAG = "--version"
LIST_LANGS_FLAG = "--list-langs"


@dataclass(frozen=True)
class CommandSpec:
    """A program plus its argument vector. Never passed through a shell."""

    program: Path
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [str(self.program), *self.args]

    def display(self) -> str:
        """Space-joined command line for diagnostics."""
        return " ".join(self.argv)


def build_flag_command(executable: Path, flag: str) -> CommandSpec:
    """Build a single-flag command such as ``tesseract --version``."""
    return CommandSpec(program=executable, args=(flag,))


def build_recognition_command(
    executable: Path,
    image_path: Path | str,
    options: RecognitionOptions,
) -> CommandSpec:
    """Build ``<image> stdout -l <lang> [--dpi N] [--psm N] [--oem N] [-c k=v]...``."""
    args = [str(image_path), STDOUT_TOKEN, "-l", options.language]

    if options.dpi is not None:
        args += ["--dpi", str(options.dpi)]

    if options.psm is not None:
        args += ["--psm", str(options.psm)]

    if options.oem is not None:
        args += ["--oem", str(options.oem)]

    for parameter in options.get_config_variable_args():
        args += ["-c", parameter]

    return CommandSpec(program=executable, args=tuple(args))
