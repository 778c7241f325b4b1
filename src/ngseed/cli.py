"""Command line interface for the ngseed generator."""

from __future__ import annotations

import argparse
from typing import Sequence

from . import __version__
from .console import Logger, configure_logging
from .errors import ScaffoldError
from .options import Options
from .pipeline import ScaffoldPipeline
from .prompts import Prompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngseed",
        description="Scaffold a new project from the Angular template",
    )
    parser.add_argument("project", nargs="?", help="Project name for the new project.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbosely log progress.",
    )
    parser.add_argument("-d", "--debug", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    prompter: Prompter | None = None,
    logger: Logger | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=args.debug)

    options = Options(
        project=args.project,
        verbose=args.verbose,
        debug=args.debug,
        force=args.force,
    )
    logger = logger or Logger()
    pipeline = ScaffoldPipeline(options, prompter=prompter, logger=logger)
    try:
        pipeline.run()
    except (ScaffoldError, OSError) as exc:
        logger.error(exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
