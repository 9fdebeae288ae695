"""CLI entrypoints for fluttertidy commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import REACHABILITY_MODES
from .logging import configure_logging
from .orchestrator import Orchestrator
from .report import render_json, render_text

_COMMAND_ANALYSES = {
    "assets": ["assets"],
    "files": ["files"],
    "packages": ["dependencies"],
    "all": ["assets", "dependencies", "files"],
}

_COMMAND_HELP = {
    "assets": "Find assets declared in pubspec.yaml that no code refers to.",
    "files": "Find Dart files under lib/ that nothing imports, exports or includes.",
    "packages": "Find dependencies and dev_dependencies that no Dart file imports.",
    "all": "Run the asset, package and file analyses together.",
}


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default: object = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Show debug logging for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log errors; skipped entries are still counted in the report.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fluttertidy",
        description="Find unused assets, source files and dependencies in a Flutter project.",
    )
    _add_verbosity_options(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug-level log output to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in _COMMAND_HELP.items():
        sub = subparsers.add_parser(command, help=help_text)
        _add_verbosity_options(sub, suppress_default=True)
        sub.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Path to the Flutter project root (defaults to current directory).",
        )
        sub.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON instead of text.",
        )
        sub.add_argument(
            "--with-references",
            action="store_true",
            help="List the files that reference each used item.",
        )
        if command in {"files", "all"}:
            sub.add_argument(
                "--reachability",
                choices=REACHABILITY_MODES,
                default=None,
                help="How file usage is computed (defaults to the config value, else 'direct').",
            )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for fluttertidy commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    orchestrator = Orchestrator()
    try:
        result = orchestrator.run(
            args.path,
            analyses=_COMMAND_ANALYSES[args.command],
            reachability=getattr(args, "reachability", None),
        )
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except Exception as exc:  # pragma: no cover
        parser.exit(1, f"fluttertidy {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    if args.json:
        print(render_json(result))
    else:
        print(render_text(result, with_references=bool(args.with_references)), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
