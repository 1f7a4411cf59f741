from __future__ import annotations

import fnmatch
import re
from pathlib import Path
from typing import Iterable, Iterator

from .git import EngineError, EngineUnavailable, git_output


class PatternError(ValueError):
    pass


def _has_unterminated_class(pattern: str) -> bool:
    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        # A leading "!" negates and a leading "]" is literal, as in fnmatch.
        if j < n and pattern[j] == "!":
            j += 1
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            return True
        i = j + 1
    return False


def compile_pattern(pattern: str) -> re.Pattern[str]:
    if not pattern:
        raise PatternError("empty glob pattern")
    if _has_unterminated_class(pattern):
        raise PatternError(f"invalid glob pattern {pattern!r}: unterminated character class")
    try:
        return re.compile(fnmatch.translate(pattern))
    except re.error as e:
        raise PatternError(f"invalid glob pattern {pattern!r}: {e}") from e


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    return [compile_pattern(p) for p in patterns]


def path_selected(
    path: str,
    excludes: list[re.Pattern[str]],
    include: re.Pattern[str] | None,
) -> bool:
    for ex in excludes:
        if ex.match(path):
            return False
    if include is not None:
        return include.match(path) is not None
    return True


def filter_paths(
    paths: Iterable[str],
    excludes: list[re.Pattern[str]],
    include: re.Pattern[str] | None,
) -> Iterator[str]:
    for p in paths:
        if path_selected(p, excludes, include):
            yield p


def list_tracked_paths(cwd: Path, timeout_s: int = 300) -> list[str]:
    try:
        out = git_output(["ls-files", "-z"], cwd=cwd, timeout_s=timeout_s)
    except EngineError as e:
        raise EngineUnavailable(str(e)) from e
    return [p for p in out.split("\0") if p]


def enumerate_paths(
    cwd: Path,
    *,
    excludes: list[re.Pattern[str]],
    include: re.Pattern[str] | None,
    timeout_s: int = 300,
) -> Iterator[str]:
    """
    Tracked paths of the repository at `cwd` in `git ls-files` order, minus
    excluded ones, limited to `include` when given.

    The listing runs immediately so EngineUnavailable surfaces here rather than
    on first iteration.
    """
    return filter_paths(list_tracked_paths(cwd, timeout_s=timeout_s), excludes, include)
