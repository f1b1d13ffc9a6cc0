#!/usr/bin/env python3
"""Extract a single version section from a CHANGELOG document.

A section starts at a heading like ``## [v1.0.1] - 2025-08-27`` (brackets and
the leading ``v`` are optional) and runs until the next heading that looks
like a dotted version number, or the end of the document.
"""

from __future__ import annotations

import enum
import io
import re
from pathlib import Path
from typing import Iterable

NEXT_VERSION_HEADING_RE = re.compile(r"^##\s+\[?v?[0-9]+\.[0-9]+")

# Characters that may continue a version token (1.0 vs 1.0.0, 1.0.0 vs 1.0.0-rc.1).
_VERSION_TAIL_GUARD = r"(?![\w.+-])"


class SectionNotFoundError(ValueError):
    """Raised when the changelog has no heading for the requested version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"version {version} not found in changelog")
        self.version = version


class ScanState(enum.Enum):
    SEARCHING = "searching"
    IN_SECTION = "in_section"


def normalize_version(identifier: str) -> str:
    """Drop one leading ``v`` so ``v1.0.1`` and ``1.0.1`` compare equal."""
    if identifier.startswith("v"):
        return identifier[1:]
    return identifier


def heading_pattern(identifier: str) -> re.Pattern[str]:
    version = normalize_version(identifier)
    if not version:
        raise ValueError(f"empty version identifier: {identifier!r}")
    return re.compile(rf"^##\s+\[?v?{re.escape(version)}{_VERSION_TAIL_GUARD}\]?")


def extract_section_lines(lines: Iterable[str], identifier: str) -> str:
    heading_re = heading_pattern(identifier)
    state = ScanState.SEARCHING
    out: list[str] = []

    for raw in lines:
        line = raw.rstrip("\r\n")

        if state is ScanState.SEARCHING:
            if heading_re.match(line):
                state = ScanState.IN_SECTION
                out.append(line + "\n")
            continue

        if NEXT_VERSION_HEADING_RE.match(line):
            break
        out.append(line + "\n")

    if state is ScanState.SEARCHING:
        raise SectionNotFoundError(identifier)

    return "".join(out).rstrip("\n")


def extract_section_text(changelog_text: str, identifier: str) -> str:
    # newline=None splits like a file opened in text mode: \n, \r\n and \r only.
    return extract_section_lines(io.StringIO(changelog_text, newline=None), identifier)


def extract_section(identifier: str, changelog_path: Path | str) -> str:
    """Read ``changelog_path`` and return the section for ``identifier``.

    OSError from opening or reading the file propagates as-is so callers can
    tell an unreadable changelog apart from a missing version
    (SectionNotFoundError). Bytes that are not valid UTF-8 are replaced with
    U+FFFD instead of failing the scan.
    """
    with open(changelog_path, encoding="utf-8", errors="replace") as handle:
        return extract_section_lines(handle, identifier)
