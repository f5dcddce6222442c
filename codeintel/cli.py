"""CLI entrypoints for the codeintel hook."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import IntelError
from .hook import SessionStartHook
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Log diagnostics to stderr (stdout stays reserved for the summary).",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_cwd_option(parser: argparse.ArgumentParser, *, suppress_default: bool = False) -> None:
    parser.add_argument(
        "--cwd",
        default=argparse.SUPPRESS if suppress_default else ".",
        help="Project directory holding the intel directory (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeintel",
        description="Inject a codebase intelligence summary at assistant session start.",
    )
    _add_verbose_option(parser)
    _add_cwd_option(parser)
    subparsers = parser.add_subparsers(dest="command")

    start_parser = subparsers.add_parser(
        "session-start",
        help="Read the hook payload from stdin and print the summary block (default).",
    )
    _add_verbose_option(start_parser, suppress_default=True)
    _add_cwd_option(start_parser, suppress_default=True)

    show_parser = subparsers.add_parser(
        "show",
        help="Print the summary block for a project, ignoring the session source.",
    )
    _add_verbose_option(show_parser, suppress_default=True)
    show_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the project root (defaults to --cwd).",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; the exit status is always 0 so session start is never blocked."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        # Usage errors and --help both end here.
        return 0

    verbose = bool(args.verbose)
    if args.command == "show":
        _show(Path(args.path or args.cwd), verbose=verbose)
        return 0

    hook = SessionStartHook(Path(args.cwd), verbose=verbose, manage_logging=True)
    hook.run(sys.stdin, sys.stdout)
    return 0


def _show(project: Path, *, verbose: bool) -> None:
    try:
        configure_logging(verbose=verbose)
        hook = SessionStartHook(project, verbose=verbose)
        summary = hook.summarize()
    except IntelError as exc:
        print(f"codeintel show failed: {exc}", file=sys.stderr)
        return
    except Exception as exc:  # pragma: no cover
        print(f"codeintel show failed: {exc}\nRun with --verbose for more details.", file=sys.stderr)
        return
    if summary is None:
        print("No codebase intelligence found", file=sys.stderr)
        return
    print(hook.writer.wrap(summary))


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
