import stat
import sys
from pathlib import Path

import pytest

STUB_SOURCE = '''\
import sys

args = sys.argv[1:]
if args == ["--version"]:
    sys.stdout.write("tesseract 5.3.0\\n leptonica-1.82.0\\n")
elif args == ["--list-langs"]:
    sys.stdout.write("List of available languages:\\neng\\nfra\\n")
elif len(args) >= 2 and args[1] == "stdout":
    try:
        with open(args[0], "rb") as f:
            data = f.read()
    except OSError:
        sys.stderr.write("Error, cannot read input file %s\\n" % args[0])
        sys.exit(1)
    if data.startswith(b"CORRUPT"):
        sys.stderr.write("Error in pixReadStream: Unknown format: no pix returned\\n")
        sys.exit(1)
    if data.startswith(b"\\x89PNG"):
        sys.stdout.write("png:%s\\n" % args[0])
    else:
        sys.stdout.write(data.decode("utf-8"))
else:
    sys.stderr.write("bad input\\n")
    sys.exit(1)
'''

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="needs shebang scripts")


def make_executable(path: Path, source: str = "") -> Path:
    """Write a script with a shebang for the running interpreter and chmod +x it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!{sys.executable}\n{source}")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["TESSERACT_CMD", "TESSERACT_TIMEOUT", "TESSERACT_SHOW_COMMAND"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def stub_tesseract(tmp_path: Path) -> Path:
    """A fake tesseract that echoes text files back on stdout."""
    if sys.platform == "win32":
        pytest.skip("needs shebang scripts")
    return make_executable(tmp_path / "bin" / "tesseract", STUB_SOURCE)
