# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Compare an original file against its refactored form and extracted files."""

import logging
import re
from collections.abc import Sequence
from types import MappingProxyType

from refverify.extractor import extract_signatures
from refverify.model import AnalysisResult, FunctionSignature, NamedFileContent

logger = logging.getLogger(__name__)


def compare_refactoring(
    original: str, refactored: str, new_files: Sequence[NamedFileContent]
) -> AnalysisResult:
    """Classify what happened to the original file's functions.

    A function missing from the refactored file must reappear (by name) in
    at least one new file, otherwise an error is recorded. Warnings flag a
    refactored file that did not shrink and functions present both in the
    refactored file and in a new file.

    Args:
        original: Source text before the refactor.
        refactored: Source text after the refactor.
        new_files: Files created by the refactor, in selection order.

    Returns:
        Analysis result with removed, remaining and new-file signatures.
    """
    original_methods = extract_signatures(original)
    refactored_methods = extract_signatures(refactored)

    new_file_methods: dict[str, list[FunctionSignature]] = {}
    for new_file in new_files:
        new_file_methods[basename(new_file.path)] = extract_signatures(
            new_file.content
        )

    refactored_names = {method.name for method in refactored_methods}
    removed_methods = [
        method for method in original_methods if method.name not in refactored_names
    ]

    warnings: list[str] = []
    errors: list[str] = []

    for removed in removed_methods:
        found = any(
            method.name == removed.name
            for methods in new_file_methods.values()
            for method in methods
        )
        if not found:
            errors.append(
                f"Method '{removed.name}' was removed but not found in any new file"
            )

    original_lines = count_lines(original)
    refactored_lines = count_lines(refactored)
    if refactored_lines >= original_lines:
        warnings.append(
            f"Refactored file ({refactored_lines} lines) is not smaller than "
            f"original ({original_lines} lines)"
        )

    for file_name, methods in new_file_methods.items():
        for method in methods:
            if method.name in refactored_names:
                warnings.append(
                    f"Method '{method.name}' exists in both refactored file "
                    f"and {file_name}"
                )

    logger.debug(
        f"Refactor comparison completed (removed={len(removed_methods)} "
        f"remaining={len(refactored_methods)} new_files={len(new_file_methods)} "
        f"errors={len(errors)} warnings={len(warnings)})"
    )
    return AnalysisResult(
        removed_methods=tuple(removed_methods),
        remaining_methods=tuple(refactored_methods),
        new_file_methods=MappingProxyType(
            {name: tuple(methods) for name, methods in new_file_methods.items()}
        ),
        warnings=tuple(warnings),
        errors=tuple(errors),
    )


def count_lines(content: str) -> int:
    """Count newline-delimited segments; empty text counts as one line."""
    return len(content.split("\n"))


def basename(path: str) -> str:
    """Return the last segment of a ``/`` or ``\\`` separated path."""
    return re.split(r"[\\/]", path.rstrip("\\/"))[-1]
