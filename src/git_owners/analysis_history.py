from __future__ import annotations

from collections import Counter
from pathlib import Path

from .analysis_counts import frequency_table, top_entry
from .git import git_output
from .models import ModeResult


def parse_log_authors(text: str) -> Counter[str]:
    # `git log --format=%aE` prints one author email per commit; lines are keys as-is.
    return frequency_table(line for line in text.splitlines() if line.strip())


def top_committer(path: str, *, cwd: Path, timeout_s: int = 300) -> ModeResult | None:
    out = git_output(["log", "--format=%aE", "--", path], cwd=cwd, timeout_s=timeout_s)
    return top_entry(parse_log_authors(out))
