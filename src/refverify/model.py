# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for refactor verification."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FunctionSignature:
    """Represent one recognized function declaration.

    Attributes:
        name: Extracted function or method identifier.
        declarator: Trimmed source line the declaration was found on.
        line: Line number in the source text (1-based).
    """

    name: str
    declarator: str
    line: int


@dataclass(frozen=True)
class NamedFileContent:
    """Represent one file supplied to an analysis.

    Attributes:
        path: Path or display name of the file.
        content: Raw file text.
    """

    path: str
    content: str


@dataclass(frozen=True)
class AnalysisResult:
    """Represent the outcome of comparing an original file to its refactor.

    All collections are read-only: sequences are tuples and the per-file
    mapping is a ``MappingProxyType``.

    Attributes:
        removed_methods: Original signatures missing from the refactored file.
        remaining_methods: All signatures extracted from the refactored file.
        new_file_methods: Signatures per new file, keyed by basename. A later
            file with the same basename replaces the earlier entry.
        warnings: Advisory messages.
        errors: Failure messages; any entry marks the refactor as unsafe.
    """

    removed_methods: tuple[FunctionSignature, ...]
    remaining_methods: tuple[FunctionSignature, ...]
    new_file_methods: Mapping[str, tuple[FunctionSignature, ...]]
    warnings: tuple[str, ...]
    errors: tuple[str, ...]

    @property
    def passed(self) -> bool:
        """Return whether no removed method was lost."""
        return not self.errors

    @property
    def relocated_methods(self) -> tuple[FunctionSignature, ...]:
        """Return removed signatures that reappear in at least one new file."""
        relocated_names = {
            signature.name
            for signatures in self.new_file_methods.values()
            for signature in signatures
        }
        return tuple(
            signature
            for signature in self.removed_methods
            if signature.name in relocated_names
        )

    @property
    def lost_methods(self) -> tuple[FunctionSignature, ...]:
        """Return removed signatures not found in any new file."""
        relocated = {signature.name for signature in self.relocated_methods}
        return tuple(
            signature
            for signature in self.removed_methods
            if signature.name not in relocated
        )
