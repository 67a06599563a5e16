"""Command line interface for goscaffold."""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from typing import Callable, Sequence

from . import __version__
from .bootstrap import PostDeployInitializer
from .config import ScaffoldOptions, Target
from .errors import ScaffoldError
from .pipeline import ScaffoldPipeline
from .scaffold import ScaffoldDeployer, ask_overwrite
from .store import BundledAssetStore

_PROMPTS = {
    "repository": "Enter the name of git repository (e.g. github.com): ",
    "namespace": "Enter the namespace in the repository (e.g. zulily): ",
    "project": "Enter the name of the project (e.g. fizzbuzz): ",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goscaffold",
        description="Boilerplate a new Go project under $GOPATH/src",
    )
    parser.add_argument("--repository", default="", help="the name of the git repository (e.g. github.com)")
    parser.add_argument(
        "--namespace",
        default="",
        help="the name of the organization/group in the repository (e.g. zulily)",
    )
    parser.add_argument("--project", default="", help="the name of the project (e.g. fizzbuzz)")
    parser.add_argument("-v", "--verbose", action="store_true", help="toggles verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _prompt(question: str, read: Callable[[str], str]) -> str:
    try:
        return read(question).strip()
    except EOFError:
        return ""


def _collect_target(args: argparse.Namespace, read: Callable[[str], str]) -> Target:
    values: dict[str, str] = {}
    for field, question in _PROMPTS.items():
        value = getattr(args, field)
        values[field] = value if value else _prompt(question, read)
    return Target(**values)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )


def main(argv: Sequence[str] | None = None, *, read: Callable[[str], str] = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    options = ScaffoldOptions(target=_collect_target(args, read), verbose=args.verbose)
    pipeline = ScaffoldPipeline(
        deployer=ScaffoldDeployer(BundledAssetStore(), confirm=partial(ask_overwrite, read=read)),
        initializer=PostDeployInitializer(verbose=options.verbose),
    )
    try:
        pipeline.run(options)
    except (ScaffoldError, OSError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
