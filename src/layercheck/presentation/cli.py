"""Command line entry point.

Usage:
    layercheck SOURCE_DIR --package PKG [--format text|json|rich]
               [--parallel] [--exclude NAME ...] [-v]

Exit codes:
    0: all rules passed
    1: violations found (report on stdout)
    2: load error or invalid arguments (message on stderr)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from layercheck import __version__
from layercheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from layercheck.application.reporters.json_reporter import JsonReporter
from layercheck.application.reporters.plain_text import PlainTextReporter
from layercheck.application.services.checker import LayerChecker
from layercheck.domain.exceptions import LayerCheckError
from layercheck.domain.model.configuration import DEFAULT_EXCLUDES, CheckConfig
from layercheck.infrastructure.adapters.ast_loader import ASTModelLoader

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layercheck.domain.ports.reporter import ReporterProtocol

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

logger = logging.getLogger(__name__)


def configure_logging(*, verbose: bool = False) -> None:
    """Route layercheck.* loggers to stderr through rich.

    Args:
        verbose: DEBUG level instead of WARNING
    """
    root = logging.getLogger("layercheck")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not root.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser for the layercheck command."""
    parser = argparse.ArgumentParser(
        prog="layercheck",
        description=(
            "Check controller/service/repository layering of a Python package: "
            "naming conventions and forbidden controller → repository references."
        ),
    )
    parser.add_argument(
        "source_dir",
        type=Path,
        metavar="SOURCE_DIR",
        help="Import root to scan (e.g. src)",
    )
    parser.add_argument(
        "--package",
        "-p",
        required=True,
        help="Package to check; only units under it are loaded",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("text", "json", "rich"),
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Evaluate rules concurrently",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Additional directory name to skip (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging and report output even when passing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_reporter(fmt: str) -> ReporterProtocol:
    """Reporter for a --format value."""
    match fmt:
        case "json":
            return JsonReporter()
        case "rich":
            return ConsoleReporter(ConsoleConfig(force_terminal=sys.stdout.isatty()))
        case _:
            return PlainTextReporter()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the layercheck command.

    Args:
        argv: Arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        config = CheckConfig(
            source_dir=args.source_dir,
            package=args.package,
            exclude=DEFAULT_EXCLUDES | frozenset(args.exclude),
            parallel=args.parallel,
        )
    except ValueError as e:
        parser.error(str(e))

    reporter = make_reporter(args.format)

    try:
        loader = ASTModelLoader(exclude=config.exclude)
        checker = LayerChecker.from_config(config, loader, reporter=reporter)
    except LayerCheckError as e:
        print(f"layercheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    result = checker.check()
    logger.debug(
        "%d rule(s) over %d unit(s): %d violation(s)",
        len(result.rule_results),
        result.unit_count,
        result.violation_count,
    )

    if not result.passed or args.verbose or args.format == "json":
        output = checker.report(result) or ""
        sys.stdout.write(output if output.endswith("\n") else output + "\n")

    return EXIT_OK if result.passed else EXIT_VIOLATIONS


if __name__ == "__main__":
    sys.exit(main())
