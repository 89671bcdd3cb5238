# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
from pathlib import Path

import pytest

from refverify.extractor import extract_signatures
from refverify.model import NamedFileContent
from refverify.providers import PathFileProvider, ProviderError, discover_new_files


def test_prv_001_path_provider_reads_all_inputs(tmp_path: Path, write_file) -> None:
    original = write_file(tmp_path / "orig" / "service.ts", "function a() {\n}\n")
    refactored = write_file(tmp_path / "service.ts", "\n")
    extracted = write_file(tmp_path / "parts" / "a.ts", "function a() {\n}\n")

    provider = PathFileProvider(
        original_path=original,
        refactored_path=refactored,
        new_file_paths=[extracted],
    )

    assert provider.provide_original() == "function a() {\n}\n"
    assert provider.provide_refactored() == "\n"
    assert provider.provide_new_files() == [
        NamedFileContent(path=str(extracted), content="function a() {\n}\n")
    ]


def test_prv_002_missing_file_raises_provider_error_with_path(tmp_path: Path) -> None:
    missing = tmp_path / "missing.js"
    provider = PathFileProvider(
        original_path=missing, refactored_path=missing, new_file_paths=[]
    )

    with pytest.raises(ProviderError) as exc_info:
        provider.provide_original()

    assert exc_info.value.path == missing
    assert "missing.js" in str(exc_info.value)


def test_prv_003_invalid_utf8_raises_provider_error(tmp_path: Path) -> None:
    broken = tmp_path / "broken.c"
    broken.write_bytes(b"int main() {\xff\xfe}")
    provider = PathFileProvider(
        original_path=broken, refactored_path=broken, new_file_paths=[broken]
    )

    with pytest.raises(ProviderError):
        provider.provide_new_files()


def test_prv_004_discovery_filters_extensions_in_walk_order(
    tmp_path: Path, write_file
) -> None:
    root = tmp_path / "new"
    write_file(root / "a.js", "")
    write_file(root / "notes.md", "")
    write_file(root / "sub" / "b.py", "")
    write_file(root / "z.go", "")
    write_file(root / ".git" / "hooks" / "pre.py", "")

    found = discover_new_files(root)

    assert [path.relative_to(root).as_posix() for path in found] == [
        "a.js",
        "z.go",
        "sub/b.py",
    ]


def test_prv_005_discovery_honours_root_and_nested_gitignore(
    tmp_path: Path, write_file
) -> None:
    root = tmp_path / "new"
    write_file(root / ".gitignore", "ignored/\n*.tmp.js\n")
    write_file(root / "keep.js", "")
    write_file(root / "build.tmp.js", "")
    write_file(root / "ignored" / "x.js", "")
    write_file(root / "sub" / ".gitignore", "local.py\n")
    write_file(root / "sub" / "local.py", "")
    write_file(root / "sub" / "kept.py", "")

    found = discover_new_files(root)

    assert [path.relative_to(root).as_posix() for path in found] == [
        "keep.js",
        "sub/kept.py",
    ]


def test_prv_006_discovery_accepts_custom_extensions(
    tmp_path: Path, write_file
) -> None:
    root = tmp_path / "new"
    write_file(root / "Main.kt", "")
    write_file(root / "main.js", "")

    found = discover_new_files(root, extensions={".KT"})

    assert [path.name for path in found] == ["Main.kt"]


def test_prv_007_discovery_rejects_non_directory(tmp_path: Path) -> None:
    with pytest.raises(ProviderError):
        discover_new_files(tmp_path / "absent")


def test_prv_008_nested_gitignore_patterns_apply_at_any_depth(
    tmp_path: Path, write_file
) -> None:
    root = tmp_path / "new"
    write_file(root / "other.js", "")
    write_file(root / "sub" / ".gitignore", "*.js\n/top.py\n")
    write_file(root / "sub" / "y.js", "")
    write_file(root / "sub" / "keep.py", "")
    write_file(root / "sub" / "top.py", "")
    write_file(root / "sub" / "deep" / "x.js", "")
    write_file(root / "sub" / "deep" / "top.py", "")

    found = discover_new_files(root)

    assert [path.relative_to(root).as_posix() for path in found] == [
        "other.js",
        "sub/keep.py",
        "sub/deep/top.py",
    ]


def test_prv_009_byte_order_mark_files_keep_comment_lines_skipped(
    tmp_path: Path,
) -> None:
    source = tmp_path / "bom.js"
    source.write_bytes(
        b"\xef\xbb\xbf// function foo() {}\nfunction bar() {\n}\n"
    )
    provider = PathFileProvider(
        original_path=source, refactored_path=source, new_file_paths=[]
    )

    signatures = extract_signatures(provider.provide_original())

    assert [(s.name, s.line) for s in signatures] == [("bar", 2)]
