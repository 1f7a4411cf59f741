from __future__ import annotations

from typing import TextIO

from .models import ModeResult, OwnershipRecord


def printable(text: str) -> str:
    # Bytes git gave us that were not UTF-8 are held as surrogates; show them as U+FFFD.
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_mode(mode: ModeResult | None, placeholder: str = "?") -> str:
    if mode is None:
        return placeholder
    return f"{printable(mode.author)} {mode.count}"


def format_record(record: OwnershipRecord, placeholder: str = "?") -> str:
    commits = format_mode(record.top_committer, placeholder)
    blame = format_mode(record.top_blamer, placeholder)
    return f"{printable(record.path)} commits {commits}  blame {blame}"


def emit_record(record: OwnershipRecord, *, out: TextIO, err: TextIO, placeholder: str = "?") -> None:
    print(format_record(record, placeholder), file=out)
    for msg in record.errors:
        print(f"warn {printable(record.path)}: {printable(msg)}", file=err)
