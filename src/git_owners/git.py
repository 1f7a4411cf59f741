from __future__ import annotations

import subprocess
from pathlib import Path


class EngineUnavailable(RuntimeError):
    """git could not list the tracked files of the repository."""


class EngineError(RuntimeError):
    """A per-path git query failed."""


def run_git(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    # Non-UTF-8 bytes (file names, blamed content) become lone surrogates, so
    # they survive a round trip back into git's argv.
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="surrogateescape",
        timeout=timeout_s,
    )
    return proc.returncode, proc.stdout, proc.stderr


def git_output(args: list[str], cwd: Path, timeout_s: int = 300) -> str:
    """
    Run a git query and return its stdout, raising EngineError when git cannot
    be started, times out or exits non-zero.
    """
    label = " ".join(["git", *args])
    try:
        code, out, err = run_git(args, cwd=cwd, timeout_s=timeout_s)
    except subprocess.TimeoutExpired:
        raise EngineError(f"{label} timed out after {timeout_s}s") from None
    except OSError as e:
        raise EngineError(f"failed to start git: {e}") from e
    if code != 0:
        raise EngineError(f"{label} exited {code}: {err.strip()[:500]}")
    return out
