from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterator

from .analysis_counts import frequency_table, top_entry
from .git import git_output
from .models import ModeResult

COMMITTER_MAIL = "committer-mail"


def _strip_brackets(value: str) -> str:
    if value.startswith("<"):
        value = value[1:]
    if value.endswith(">"):
        value = value[:-1]
    return value


def iter_committer_mails(text: str) -> Iterator[str]:
    """
    Yield the email of every `committer-mail` header in `git blame` porcelain
    output.

    Only lines whose first token is the header name count. File content is
    emitted TAB-prefixed, so a source line that mentions the header never
    matches.
    """
    for line in text.splitlines():
        key, _, rest = line.partition(" ")
        if key != COMMITTER_MAIL:
            continue
        yield _strip_brackets(rest.strip())


def parse_blame_mails(text: str) -> Counter[str]:
    return frequency_table(iter_committer_mails(text))


def top_blamer(path: str, *, cwd: Path, timeout_s: int = 300) -> ModeResult | None:
    # --line-porcelain repeats the commit headers for every line, so each line
    # of the current file contributes exactly one committer-mail.
    out = git_output(["blame", "--line-porcelain", "--", path], cwd=cwd, timeout_s=timeout_s)
    return top_entry(parse_blame_mails(out))
