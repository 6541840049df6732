from pathlib import Path

import pytest

from tesseract_bridge.core.options import RecognitionOptions
from tesseract_bridge.engine.command import (
    CommandSpec,
    build_flag_command,
    build_recognition_command,
)

TESSERACT = Path("/usr/bin/tesseract")


def test_minimal_options() -> None:
    spec = build_recognition_command(TESSERACT, "page.png", RecognitionOptions(language="eng"))

    assert spec.program == TESSERACT
    assert list(spec.args) == ["page.png", "stdout", "-l", "eng"]


def test_full_options_order() -> None:
    options = RecognitionOptions(
        language="eng+fra",
        dpi=300,
        psm=6,
        oem=1,
        config_variables=[("tessedit_char_whitelist", "0123456789"), ("preserve_interword_spaces", "1")],
    )

    spec = build_recognition_command(TESSERACT, Path("scan.tif"), options)

    assert list(spec.args) == [
        "scan.tif", "stdout", "-l", "eng+fra",
        "--dpi", "300",
        "--psm", "6",
        "--oem", "1",
        "-c", "tessedit_char_whitelist=0123456789",
        "-c", "preserve_interword_spaces=1",
    ]


def test_dpi_and_config_variable() -> None:
    options = RecognitionOptions(
        language="eng",
        dpi=300,
        config_variables={"tessedit_char_whitelist": "0123456789"},
    )

    args = build_recognition_command(TESSERACT, "a.png", options).args

    assert args[4:6] == ("--dpi", "300")
    assert args[-2:] == ("-c", "tessedit_char_whitelist=0123456789")


def test_zero_modes_are_kept() -> None:
    options = RecognitionOptions(psm=0, oem=0)

    args = build_recognition_command(TESSERACT, "a.png", options).args

    assert "--psm" in args and args[args.index("--psm") + 1] == "0"
    assert "--oem" in args and args[args.index("--oem") + 1] == "0"


def test_build_is_deterministic() -> None:
    options = RecognitionOptions(language="deu", psm=3, config_variables=[("a", "1"), ("b", "2")])

    first = build_recognition_command(TESSERACT, "x.png", options)
    second = build_recognition_command(TESSERACT, "x.png", options)

    assert first == second
    assert first.argv == second.argv


def test_arguments_are_not_shell_escaped() -> None:
    spec = build_recognition_command(TESSERACT, "my scan; rm -rf.png", RecognitionOptions())

    assert spec.args[0] == "my scan; rm -rf.png"


def test_flag_command() -> None:
    spec = build_flag_command(TESSERACT, "--list-langs")

    assert spec.argv == [str(TESSERACT), "--list-langs"]
    assert spec.display() == f"{TESSERACT} --list-langs"


def test_command_spec_is_frozen() -> None:
    spec = CommandSpec(program=TESSERACT)

    with pytest.raises(AttributeError):
        spec.args = ("--version",)


def test_options_require_language() -> None:
    with pytest.raises(ValueError):
        RecognitionOptions(language="")


def test_with_config_appends_in_order() -> None:
    options = RecognitionOptions(config_variables=[("a", "1")]).with_config([("b", "2")])

    assert options.get_config_variable_args() == ["a=1", "b=2"]
