# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI for verifying one-sided split/extract refactors."""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from refverify import (
    AnalysisResult,
    ConsoleResultSink,
    JsonResultSink,
    PathFileProvider,
    ProviderError,
    ResultSink,
    discover_new_files,
    verify_refactoring,
)

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
HTML_REPORT_WIDTH = 120


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="refverify",
        description="Check that functions removed by a refactor moved to new files.",
    )
    parser.add_argument(
        "--original", required=True, help="File content before refactoring."
    )
    parser.add_argument(
        "--refactored", required=True, help="File content after refactoring."
    )
    parser.add_argument(
        "--new-file",
        action="append",
        default=[],
        dest="new_files",
        help="File created during refactoring. May be repeated.",
    )
    parser.add_argument(
        "--new-dir",
        action="append",
        default=[],
        dest="new_dirs",
        help="Directory whose source files were created during refactoring. May be repeated.",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )
    parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for raw JSON when --format json is used.",
    )
    parser.add_argument(
        "--html", required=False, help="Optional output file path for an HTML report."
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run the verification command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code: 0 when the refactor passed, 1 when methods were lost and
        2 on usage or input failures.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return EXIT_USAGE
    if not args.verbose:
        return _run_verification(args=args, stdout=stdout, stderr=stderr)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    try:
        return _run_verification(args=args, stdout=stdout, stderr=stderr)
    finally:
        root_logger.setLevel(previous_level)


def _run_verification(
    args: argparse.Namespace, stdout: TextIO, stderr: TextIO
) -> int:
    new_file_paths = [Path(path) for path in args.new_files]
    for new_dir in args.new_dirs:
        try:
            new_file_paths.extend(discover_new_files(Path(new_dir)))
        except ProviderError as exc:
            logger.warning(f"New file discovery failed (root={new_dir} error={exc})")
            stderr.write(f"Analysis failed: {exc}\n")
            return EXIT_USAGE
    if not new_file_paths:
        logger.warning("No new files selected for verification")
        stderr.write("No new files selected for verification\n")
        return EXIT_USAGE

    provider = PathFileProvider(
        original_path=Path(args.original),
        refactored_path=Path(args.refactored),
        new_file_paths=new_file_paths,
    )
    sink = _build_sink(args=args, stdout=stdout)
    try:
        result = verify_refactoring(provider=provider, sink=sink)
    except ProviderError as exc:
        stderr.write(f"Analysis failed: {exc}\n")
        return EXIT_USAGE
    except OSError as exc:
        target = _report_target(args)
        logger.warning(f"Failed to write report (target={target} error={exc})")
        stderr.write(f"Failed to write report to {target}: {exc}\n")
        return EXIT_USAGE

    if args.html:
        try:
            _write_html(result=result, output_path=Path(args.html))
        except OSError as exc:
            logger.warning(
                f"Failed to write HTML report (output_path={args.html} error={exc})"
            )
            stderr.write(f"Failed to write HTML report: {args.html}\n")
            return EXIT_USAGE

    return EXIT_PASSED if result.passed else EXIT_FAILED


def _report_target(args: argparse.Namespace) -> str:
    if args.format == "json" and args.output:
        return f"JSON output file {args.output}"
    return f"stdout ({args.format} format)"


def _build_sink(args: argparse.Namespace, stdout: TextIO) -> ResultSink:
    if args.format == "json":
        output_path = Path(args.output) if args.output else None
        return JsonResultSink(stdout=stdout, output_path=output_path)
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    return ConsoleResultSink(console=console)


def _write_html(result: AnalysisResult, output_path: Path) -> None:
    """Render the result on a recording console and save it as HTML.

    Args:
        result: Completed analysis.
        output_path: Target HTML file.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    console = Console(
        file=io.StringIO(),
        record=True,
        width=HTML_REPORT_WIDTH,
        color_system="truecolor",
    )
    ConsoleResultSink(console=console).consume(result)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    console.save_html(str(output_path))
    logger.info(f"HTML report written (output_path={output_path})")


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
