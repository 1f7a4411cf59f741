from __future__ import annotations

import sys
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .analysis_blame import top_blamer
from .analysis_history import top_committer
from .analysis_paths import PatternError, compile_pattern, compile_patterns, enumerate_paths
from .analysis_render import emit_record
from .git import EngineError, EngineUnavailable
from .models import ModeResult, OwnersConfig, OwnershipRecord


class OwnershipAggregator:
    """
    Runs the commit and blame queries for each path on a worker pool it owns.

    Use as a context manager, or call close() to shut the pool down.
    """

    def __init__(self, cwd: Path, config: OwnersConfig | None = None) -> None:
        self.cwd = cwd
        self.config = config or OwnersConfig()
        if self.config.jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {self.config.jobs}")
        if self.config.lookahead < 1:
            raise ValueError(f"lookahead must be >= 1, got {self.config.lookahead}")
        self._pool = ThreadPoolExecutor(max_workers=self.config.jobs, thread_name_prefix="git-owners")

    def __enter__(self) -> OwnershipAggregator:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._pool.shutdown(wait=True, cancel_futures=True)

    def _submit(self, path: str) -> tuple[Future, Future]:
        kwargs = {"cwd": self.cwd, "timeout_s": self.config.timeout_s}
        return (
            self._pool.submit(top_committer, path, **kwargs),
            self._pool.submit(top_blamer, path, **kwargs),
        )

    @staticmethod
    def _join(path: str, commits: Future, blame: Future) -> OwnershipRecord:
        errors: list[str] = []

        def result(fut: Future, what: str) -> ModeResult | None:
            try:
                return fut.result()
            except EngineError as e:
                errors.append(f"{what}: {e}")
                return None

        top_c = result(commits, "log")
        top_b = result(blame, "blame")
        return OwnershipRecord(path=path, top_committer=top_c, top_blamer=top_b, errors=tuple(errors))

    def process(self, path: str) -> OwnershipRecord:
        return self._join(path, *self._submit(path))

    def process_all(self, paths: Iterable[str]) -> Iterator[OwnershipRecord]:
        """Yield one record per path, in the order the paths were given."""
        pending: deque[tuple[str, Future, Future]] = deque()
        for path in paths:
            pending.append((path, *self._submit(path)))
            if len(pending) >= self.config.lookahead:
                yield self._join(*pending.popleft())
        while pending:
            yield self._join(*pending.popleft())


def run_owners(cwd: Path, config: OwnersConfig, *, out: TextIO | None = None, err: TextIO | None = None) -> int:
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    try:
        excludes = compile_patterns(config.excludes)
        include = compile_pattern(config.include) if config.include is not None else None
    except PatternError as e:
        print(f"err {e}", file=err)
        return 2

    try:
        paths = enumerate_paths(cwd, excludes=excludes, include=include, timeout_s=config.timeout_s)
    except EngineUnavailable as e:
        print(f"err {e}", file=err)
        return 1

    with OwnershipAggregator(cwd, config) as agg:
        for record in agg.process_all(paths):
            emit_record(record, out=out, err=err, placeholder=config.placeholder)
            out.flush()
    return 0
