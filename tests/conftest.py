from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Callable

import pytest

_FAKE_GIT = """\
#!{python}
import json
import sys
import time
from pathlib import Path


def main() -> int:
    responses = json.loads(Path({responses!r}).read_text(encoding="utf-8"))
    args = sys.argv[1:]
    key = args[0] if args and args[0] == "ls-files" else " ".join(args[:1] + args[-1:])
    entry = responses.get(key)
    if entry is None:
        sys.stderr.write("unexpected args: " + " ".join(args) + "\\n")
        return 2
    time.sleep(float(entry.get("delay", 0)))
    sys.stdout.write(entry.get("stdout", ""))
    sys.stdout.flush()
    sys.stdout.buffer.write(entry.get("stdout_latin1", "").encode("latin-1"))
    sys.stdout.buffer.flush()
    sys.stderr.write(entry.get("stderr", ""))
    return int(entry.get("code", 0))


if __name__ == "__main__":
    raise SystemExit(main())
"""


@pytest.fixture
def fake_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, dict]], Path]:
    """
    Put a scripted `git` first on PATH.

    Responses are keyed by "ls-files" or "<command> <path>" (e.g. "blame a.txt")
    and may set stdout, stdout_latin1 (written as raw bytes), stderr, code and
    delay (seconds).
    """

    def install(responses: dict[str, dict]) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        responses_path = tmp_path / "responses.json"
        responses_path.write_text(json.dumps(responses), encoding="utf-8")
        git = bin_dir / "git"
        git.write_text(_FAKE_GIT.format(python=sys.executable, responses=str(responses_path)), encoding="utf-8")
        git.chmod(0o755)
        monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))
        repo = tmp_path / "repo"
        repo.mkdir(exist_ok=True)
        return repo

    return install
