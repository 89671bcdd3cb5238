# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Result sinks rendering analysis results."""

import json
import logging
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path
from typing import Any, Protocol, TextIO

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from refverify.model import AnalysisResult, FunctionSignature

logger = logging.getLogger(__name__)

PASSED_STYLE = Style(color="green", bold=True)
FAILED_STYLE = Style(color="red", bold=True)
WARNING_STYLE = Style(color="yellow")


class ResultSink(Protocol):
    """Define presentation of one analysis result."""

    def consume(self, result: AnalysisResult) -> None:
        """Present an analysis result.

        Args:
            result: Completed analysis.
        """


def status_text(result: AnalysisResult) -> str:
    """Return ``PASSED`` when no method was lost, else ``FAILED``."""
    return "PASSED" if result.passed else "FAILED"


def result_to_payload(result: AnalysisResult) -> dict[str, Any]:
    """Convert a result into a JSON-serializable payload.

    Args:
        result: Completed analysis.

    Returns:
        Payload with status, messages, summary counts and signatures.
    """
    return {
        "status": status_text(result),
        "errors": list(result.errors),
        "warnings": list(result.warnings),
        "summary": {
            "removed_methods": len(result.removed_methods),
            "relocated_methods": len(result.relocated_methods),
            "remaining_methods": len(result.remaining_methods),
            "new_files_analyzed": len(result.new_file_methods),
        },
        "removed_methods": [asdict(method) for method in result.removed_methods],
        "remaining_methods": [asdict(method) for method in result.remaining_methods],
        "new_file_methods": {
            file_name: [asdict(method) for method in methods]
            for file_name, methods in result.new_file_methods.items()
        },
    }


class ConsoleResultSink:
    """Render analysis results to a rich console."""

    def __init__(self, console: Console) -> None:
        """Initialize sink.

        Args:
            console: Target console; may be recording for HTML export.
        """
        self._console = console

    def consume(self, result: AnalysisResult) -> None:
        console = self._console
        style = PASSED_STYLE if result.passed else FAILED_STYLE
        console.rule("Refactoring Verification Results", characters="-")
        console.print(f"Status: {status_text(result)}", style=style, markup=False)

        if result.errors:
            self._print_messages("Errors", result.errors, FAILED_STYLE)
        if result.warnings:
            self._print_messages("Warnings", result.warnings, WARNING_STYLE)

        summary = Table(title="Summary", show_header=False, expand=False)
        summary.add_column("metric")
        summary.add_column("value", justify="right")
        summary.add_row(
            "Methods removed from original", str(len(result.removed_methods))
        )
        summary.add_row("Methods remaining", str(len(result.remaining_methods)))
        summary.add_row("New files analyzed", str(len(result.new_file_methods)))
        console.print(summary)

        self._print_methods(
            "Removed Methods", result.removed_methods, line_label="was at line"
        )
        self._print_methods(
            "Remaining Methods in Refactored File", result.remaining_methods
        )
        for file_name, methods in result.new_file_methods.items():
            self._print_methods(f"New File: {file_name}", methods)

    def _print_messages(
        self, title: str, messages: Sequence[str], style: Style
    ) -> None:
        self._console.print(title, style=Style(bold=True), markup=False)
        for message in messages:
            self._console.print(f"  - {message}", style=style, markup=False)

    def _print_methods(
        self,
        title: str,
        methods: Sequence[FunctionSignature],
        line_label: str = "line",
    ) -> None:
        table = Table(title=Text(title), show_header=True, expand=True)
        table.add_column("name", ratio=2, overflow="fold")
        table.add_column(line_label, ratio=1, justify="right")
        table.add_column("declarator", ratio=5, overflow="fold")
        for method in methods:
            table.add_row(
                Text(method.name), str(method.line), Text(method.declarator)
            )
        self._console.print(table)


class JsonResultSink:
    """Write analysis results as JSON to a stream or file."""

    def __init__(self, stdout: TextIO, output_path: Path | None = None) -> None:
        """Initialize sink.

        Args:
            stdout: Stream used when no output path is configured.
            output_path: Optional target file for the raw JSON payload.
        """
        self._stdout = stdout
        self._output_path = output_path

    def consume(self, result: AnalysisResult) -> None:
        """Write the result payload.

        Raises:
            OSError: If the output file cannot be written.
        """
        payload = json.dumps(result_to_payload(result), indent=2, sort_keys=True)
        if self._output_path is not None:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(payload, encoding="utf-8")
            logger.info(f"JSON report written (output_path={self._output_path})")
            return
        console = Console(
            file=self._stdout, force_terminal=False, color_system="truecolor"
        )
        console.print(payload, markup=False, highlight=False, soft_wrap=True)
