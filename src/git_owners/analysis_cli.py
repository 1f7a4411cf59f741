from __future__ import annotations

import argparse
from pathlib import Path

from . import __version__
from .analysis_run import run_owners
from .models import OwnersConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suggests likely code owners of git versioned paths.")
    parser.add_argument(
        "-e",
        "--exclude",
        action="extend",
        nargs="+",
        default=[],
        metavar="GLOB",
        help="Exclude glob matched paths from results (repeatable). Takes every following argument, so give PATH first or end the list with --.",
    )
    parser.add_argument("path", nargs="?", default=None, metavar="PATH", help="Only report paths matching this glob.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> OwnersConfig:
    return OwnersConfig(excludes=tuple(args.exclude or ()), include=args.path)


def main(argv: list[str], prog: str | None = None) -> int:
    parser = _build_parser()
    if prog:
        parser.prog = prog
    args = parser.parse_args(argv)
    return run_owners(Path.cwd(), config_from_args(args))
