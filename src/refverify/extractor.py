# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-oriented function signature extraction over raw source text."""

import logging
import re
from dataclasses import dataclass

from refverify.model import FunctionSignature

logger = logging.getLogger(__name__)

COMMENT_PREFIXES: tuple[str, ...] = ("//", "/*", "*", "#")

# Identifiers are ASCII word characters while \s keeps matching Unicode
# whitespace such as NBSP.
_WORD = "[A-Za-z0-9_]"
_JAVA_MODIFIERS = "public|private|protected|static|final|abstract|synchronized|native"
_CSHARP_MODIFIERS = (
    "public|private|protected|internal|static|virtual|override|abstract|sealed|async"
)
# Surrounding whitespace, including the U+FEFF byte order mark.
_EDGE_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


@dataclass(frozen=True)
class SignaturePattern:
    """Describe one declaration pattern in the priority list.

    Attributes:
        label: Declaration style the pattern targets.
        pattern: Compiled expression searched against a raw source line.
        name_group: Capture group holding the function name.
    """

    label: str
    pattern: re.Pattern[str]
    name_group: int = 1


# Order decides which pattern wins on lines several of them match.
SIGNATURE_PATTERNS: tuple[SignaturePattern, ...] = (
    SignaturePattern(
        label="brace_or_arrow",
        pattern=re.compile(
            r"(?:function\s+|(?:public|private|protected|static|async)\s+)*"
            f"({_WORD}+)" r"\s*\([^)]*\)\s*(?:\{|=>)"
        ),
    ),
    SignaturePattern(
        label="assigned_arrow",
        pattern=re.compile(
            r"(?:const|let|var)\s+"
            f"({_WORD}+)" r"\s*=\s*(?:async\s*)?\([^)]*\)\s*=>"
        ),
    ),
    SignaturePattern(
        label="java_method",
        pattern=re.compile(
            f"(?:{_JAVA_MODIFIERS})" r"\s+" f"(?:(?:{_JAVA_MODIFIERS})" r"\s+)*"
            r"(?:<[^>]+>\s+)?"
            f"(?:{_WORD}+" r"(?:<[^>]+>)?(?:\[\])*)\s+"
            f"({_WORD}+)" r"\s*\([^)]*\)\s*(?:throws\s+[A-Za-z0-9_\s,]+)?\s*\{"
        ),
    ),
    SignaturePattern(
        label="csharp_method",
        pattern=re.compile(
            f"(?:{_CSHARP_MODIFIERS})" r"\s+" f"(?:(?:{_CSHARP_MODIFIERS})" r"\s+)*"
            f"{_WORD}+" r"\s+" f"({_WORD}+)" r"\s*\([^)]*\)\s*\{"
        ),
    ),
    SignaturePattern(
        label="python_def",
        pattern=re.compile(r"def\s+" f"({_WORD}+)" r"\s*\([^)]*\)\s*:"),
    ),
    SignaturePattern(
        label="c_function",
        pattern=re.compile(
            r"(?:static|inline|virtual|explicit)?\s*"
            f"{_WORD}+" r"(?:\s*\*|\s+)"
            f"({_WORD}+)" r"\s*\([^)]*\)\s*(?:const)?\s*\{"
        ),
    ),
    SignaturePattern(
        label="go_func",
        pattern=re.compile(
            r"func\s+(?:\([^)]+\)\s+)?"
            f"({_WORD}+)" r"\s*\([^)]*\)\s*(?:[^{]*)?\{"
        ),
    ),
)


def extract_signatures(content: str) -> list[FunctionSignature]:
    """Extract function signatures from raw source text.

    Each physical line yields at most one signature: the first pattern of
    ``SIGNATURE_PATTERNS`` that matches wins. Blank lines and lines starting
    with a comment marker are skipped; a byte order mark counts as whitespace.
    Declarations spanning several lines are not recognized.

    Args:
        content: Raw source text in any supported language.

    Returns:
        Signatures in ascending line order.
    """
    signatures: list[FunctionSignature] = []
    for index, line in enumerate(content.split("\n"), start=1):
        trimmed = _EDGE_SPACE.sub("", line)
        if not trimmed or trimmed.startswith(COMMENT_PREFIXES):
            continue
        name = _match_name(line)
        if name is None:
            continue
        signatures.append(FunctionSignature(name=name, declarator=trimmed, line=index))

    logger.debug(f"Signature extraction completed (signatures={len(signatures)})")
    return signatures


def _match_name(line: str) -> str | None:
    for entry in SIGNATURE_PATTERNS:
        match = entry.pattern.search(line)
        if match:
            return match.group(entry.name_group)
    return None
