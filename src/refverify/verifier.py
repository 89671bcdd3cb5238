# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run one verification from a file provider into a result sink."""

import logging

from refverify.comparator import compare_refactoring
from refverify.model import AnalysisResult
from refverify.providers import FileProvider
from refverify.report import ResultSink

logger = logging.getLogger(__name__)


def verify_refactoring(provider: FileProvider, sink: ResultSink) -> AnalysisResult:
    """Read inputs, compare them and hand the result to a sink.

    Args:
        provider: Source of the original, refactored and new file texts.
        sink: Presentation target for the result.

    Returns:
        The analysis result passed to the sink.

    Raises:
        ProviderError: If the provider cannot read an input.
    """
    original = provider.provide_original()
    refactored = provider.provide_refactored()
    new_files = provider.provide_new_files()

    result = compare_refactoring(original, refactored, new_files)
    logger.info(
        f"Verification completed (status={'passed' if result.passed else 'failed'} "
        f"errors={len(result.errors)} warnings={len(result.warnings)})"
    )
    sink.consume(result)
    return result
