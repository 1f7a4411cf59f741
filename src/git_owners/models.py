from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ModeResult:
    author: str
    count: int


@dataclasses.dataclass(frozen=True)
class OwnershipRecord:
    path: str
    top_committer: ModeResult | None
    top_blamer: ModeResult | None
    errors: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class OwnersConfig:
    excludes: tuple[str, ...] = ()
    include: str | None = None
    jobs: int = 4
    lookahead: int = 1  # paths in flight at once; 1 joins each path before submitting the next
    timeout_s: int = 300
    placeholder: str = "?"
