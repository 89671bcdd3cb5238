# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""File provider contracts and filesystem-backed implementations."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

import pathspec

from refverify.model import NamedFileContent

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS: frozenset[str] = frozenset(
    {".ts", ".js", ".java", ".py", ".cs", ".cpp", ".c", ".go"}
)


class ProviderError(RuntimeError):
    """Represent a failure to read analysis input."""

    def __init__(self, path: Path, message: str) -> None:
        """Initialize the error.

        Args:
            path: File that could not be provided.
            message: Failure detail.
        """
        super().__init__(f"{path}: {message}")
        self.path = path


class FileProvider(Protocol):
    """Supply the texts compared by one analysis."""

    def provide_original(self) -> str:
        """Return the pre-refactor file content."""

    def provide_refactored(self) -> str:
        """Return the post-refactor file content."""

    def provide_new_files(self) -> list[NamedFileContent]:
        """Return the files created during the refactor."""


class PathFileProvider:
    """Read analysis inputs from files on disk."""

    def __init__(
        self,
        original_path: Path,
        refactored_path: Path,
        new_file_paths: Sequence[Path],
    ) -> None:
        """Initialize provider.

        Args:
            original_path: File before the refactor.
            refactored_path: File after the refactor.
            new_file_paths: Files created during the refactor, in order.
        """
        self._original_path = original_path
        self._refactored_path = refactored_path
        self._new_file_paths = list(new_file_paths)

    def provide_original(self) -> str:
        return _read_text(self._original_path)

    def provide_refactored(self) -> str:
        return _read_text(self._refactored_path)

    def provide_new_files(self) -> list[NamedFileContent]:
        return [
            NamedFileContent(path=str(path), content=_read_text(path))
            for path in self._new_file_paths
        ]


def discover_new_files(
    root: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS
) -> list[Path]:
    """Collect source files beneath a directory of newly created files.

    Directories are walked in name order. ``.git`` directories and paths
    matched by ``.gitignore`` files under ``root`` are skipped.

    Args:
        root: Directory to scan.
        extensions: Accepted file suffixes, including the leading dot.

    Returns:
        Matching file paths in walk order.

    Raises:
        ProviderError: If ``root`` is not a directory or cannot be scanned.
    """
    if not root.is_dir():
        raise ProviderError(root, "not a directory")
    accepted = {extension.lower() for extension in extensions}
    try:
        ignore_spec = _load_ignore_spec(root)
    except (OSError, UnicodeDecodeError) as exc:
        raise ProviderError(root, f"failed to read .gitignore files ({exc})") from exc

    found: list[Path] = []
    skipped = 0
    queue: list[Path] = [root]
    while queue:
        current = queue.pop(0)
        try:
            children = sorted(current.iterdir(), key=lambda item: item.name)
        except OSError as exc:
            raise ProviderError(current, str(exc)) from exc
        for child in children:
            is_dir = child.is_dir()
            if is_dir and child.name == ".git":
                continue
            relative = child.relative_to(root).as_posix()
            if ignore_spec.match_file(relative) or (
                is_dir and ignore_spec.match_file(f"{relative}/")
            ):
                skipped += 1
                continue
            if is_dir:
                queue.append(child)
            elif child.suffix.lower() in accepted:
                found.append(child)

    logger.info(
        f"New file discovery completed (root={root} files={len(found)} skipped_by_gitignore={skipped})"
    )
    return found


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read input file (path={path} error={exc})")
        raise ProviderError(path, str(exc)) from exc


def _load_ignore_spec(root: Path) -> pathspec.GitIgnoreSpec:
    """Compile the root and nested .gitignore files into one root-relative spec.

    Raises:
        OSError: If a .gitignore file cannot be read.
        UnicodeDecodeError: If a .gitignore file contains invalid UTF-8.
    """
    patterns: list[str] = []
    for ignore_path in sorted(root.rglob(".gitignore")):
        base = ignore_path.parent.relative_to(root).as_posix()
        if base == ".":
            base = ""
        for line in ignore_path.read_text(encoding="utf-8").splitlines():
            patterns.append(_rebase_gitignore_line(line=line, base=base))
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def _rebase_gitignore_line(line: str, base: str) -> str:
    """Rewrite one nested .gitignore line relative to the scanned root.

    A pattern without a slash (other than a trailing one) applies at any
    depth below its .gitignore, so it is rebased under ``<base>/**/``.
    Patterns with a leading or inner slash are anchored to ``<base>``.

    Args:
        line: Original .gitignore line.
        base: Directory holding the .gitignore, relative to the root.

    Returns:
        Root-relative pattern line.
    """
    if not base or not line.strip() or line.lstrip().startswith("#"):
        return line
    is_negation = line.startswith("!")
    pattern = line[1:] if is_negation else line
    if "/" in pattern.rstrip("/"):
        rebased = f"/{base}/{pattern.lstrip('/')}"
    else:
        rebased = f"{base}/**/{pattern}"
    return f"!{rebased}" if is_negation else rebased
