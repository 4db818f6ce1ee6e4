"""Command-line front end: scan a script file or an interactive prompt."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from pathlib import Path
import sys

from rsjj.diagnostics import StreamReporter
from rsjj.pipeline import ScanResult, scan_file, scan_text
from rsjj.scanner import ScannerOptions, dump_tokens

EXIT_OK = 0
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66

PROMPT = "> "


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsjj",
        description="Scan a script into tokens, or start an interactive prompt when no script is given",
    )
    parser.add_argument("script", nargs="?", type=Path, help="Script file to scan")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tokens with index, kind, range and line",
    )
    parser.add_argument(
        "--first-line",
        type=int,
        default=1,
        help="Line number assigned to the first line of input (default: 1)",
    )
    parser.add_argument(
        "--no-multiline-strings",
        action="store_true",
        help="Treat a newline inside a string literal as the end of an unterminated string",
    )
    return parser


def print_result(result: ScanResult, *, debug: bool) -> None:
    if debug:
        dump_tokens(list(result.tokens))
        return
    for token in result.tokens:
        print(token)


def run_file(path: Path, *, options: ScannerOptions, debug: bool = False) -> int:
    reporter = StreamReporter()
    try:
        result = scan_file(path, options=options, reporter=reporter)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"rsjj: cannot read {path}: {exc}", file=sys.stderr)
        return EXIT_NO_INPUT

    print_result(result, debug=debug)
    return EXIT_DATA_ERROR if result.has_errors else EXIT_OK


def run_prompt(
    *,
    options: ScannerOptions,
    debug: bool = False,
    read_line: Callable[[str], str] = input,
) -> int:
    """Scan each prompt line independently until end of input or Ctrl-C.

    A string literal cannot continue onto the next prompt line; it is
    reported as unterminated.
    """
    reporter = StreamReporter()
    line = options.first_line
    while True:
        try:
            current_line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return EXIT_OK

        if current_line:
            result = scan_text(current_line, options=options.with_first_line(line), reporter=reporter)
            print_result(result, debug=debug)
        line += 1 + current_line.count("\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.first_line < 0:
        parser.error("--first-line cannot be negative")

    options = ScannerOptions(
        first_line=args.first_line,
        allow_multiline_strings=not args.no_multiline_strings,
    )

    if args.script is not None:
        return run_file(args.script, options=options, debug=args.debug)
    return run_prompt(options=options, debug=args.debug)


if __name__ == "__main__":
    raise SystemExit(main())
