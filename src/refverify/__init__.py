# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for refactor verification components."""

from refverify.comparator import compare_refactoring
from refverify.extractor import SIGNATURE_PATTERNS, extract_signatures
from refverify.model import AnalysisResult, FunctionSignature, NamedFileContent
from refverify.providers import (
    FileProvider,
    PathFileProvider,
    ProviderError,
    discover_new_files,
)
from refverify.report import ConsoleResultSink, JsonResultSink, ResultSink
from refverify.verifier import verify_refactoring

__all__ = [
    "AnalysisResult",
    "ConsoleResultSink",
    "FileProvider",
    "FunctionSignature",
    "JsonResultSink",
    "NamedFileContent",
    "PathFileProvider",
    "ProviderError",
    "ResultSink",
    "SIGNATURE_PATTERNS",
    "compare_refactoring",
    "discover_new_files",
    "extract_signatures",
    "verify_refactoring",
]
