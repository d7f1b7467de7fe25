"""Command-line entry point."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ... import __version__
from .commands import lint_command, show_config_command


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parallint",
        description="Run ESLint over a codebase in parallel, one worker per CPU.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to lint (default: current directory)",
    )
    parser.add_argument("--fix", action="store_true", help="Fix linting errors")
    parser.add_argument("--ext", help="File extensions to lint, comma separated (default: js,ts)")
    parser.add_argument("--ignore-path", type=Path, help="Ignore file to use instead of .eslintignore")
    parser.add_argument("--quiet", action="store_true", help="Only report errors")
    parser.add_argument(
        "--fail-on-worker-error",
        action="store_true",
        help="Exit with status 1 if any worker fails",
    )
    parser.add_argument("--config", dest="config_path", help="parallint settings file (YAML)")
    parser.add_argument("--show-config", action="store_true", help="Print effective settings and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console(stderr=True)

    if args.show_config:
        return show_config_command(args.config_path, Console())

    return lint_command(
        path=args.path,
        ext=args.ext,
        fix=args.fix,
        ignore_path=args.ignore_path,
        quiet=args.quiet,
        fail_on_worker_error=args.fail_on_worker_error,
        config_path=args.config_path,
        verbose=args.verbose,
        console=console,
    )


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
