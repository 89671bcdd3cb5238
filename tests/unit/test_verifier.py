# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from pathlib import Path

import pytest

from refverify.model import AnalysisResult, NamedFileContent
from refverify.providers import ProviderError
from refverify.verifier import verify_refactoring


class _InMemoryProvider:
    def __init__(self, fail_on_refactored: bool = False) -> None:
        self._fail_on_refactored = fail_on_refactored

    def provide_original(self) -> str:
        return "def a():\n    pass\ndef b():\n    pass\n"

    def provide_refactored(self) -> str:
        if self._fail_on_refactored:
            raise ProviderError(Path("refactored.py"), "unreadable")
        return "def a():\n    pass\n"

    def provide_new_files(self) -> list[NamedFileContent]:
        return [NamedFileContent(path="pkg/b.py", content="def b():\n    pass\n")]


class _CollectingSink:
    def __init__(self) -> None:
        self.results: list[AnalysisResult] = []

    def consume(self, result: AnalysisResult) -> None:
        self.results.append(result)


def test_ver_001_pipeline_hands_result_to_sink() -> None:
    sink = _CollectingSink()

    result = verify_refactoring(provider=_InMemoryProvider(), sink=sink)

    assert sink.results == [result]
    assert result.passed is True
    assert [m.name for m in result.relocated_methods] == ["b"]
    assert list(result.new_file_methods) == ["b.py"]


def test_ver_002_provider_failure_propagates_before_sink() -> None:
    sink = _CollectingSink()

    with pytest.raises(ProviderError):
        verify_refactoring(
            provider=_InMemoryProvider(fail_on_refactored=True), sink=sink
        )

    assert sink.results == []
