#!/usr/bin/env python3
"""Colored status output and y/N confirmation for the tag CLI."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"

AFFIRMATIVE_ANSWERS = {"y", "yes"}


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@dataclass
class Console:
    """Output sink with an explicit color setting."""

    color: bool = False
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    @classmethod
    def create(
        cls,
        *,
        no_color: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> "Console":
        out = out if out is not None else sys.stdout
        err = err if err is not None else sys.stderr
        color = not no_color and "NO_COLOR" not in os.environ and _is_tty(out)
        return cls(color=color, out=out, err=err)

    def _paint(self, code: str, text: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"

    def info(self, message: str = "") -> None:
        print(message, file=self.out)

    def success(self, message: str) -> None:
        print(self._paint(GREEN, message), file=self.out)

    def warning(self, message: str) -> None:
        print(self._paint(YELLOW, f"Warning: {message}"), file=self.out)

    def error(self, message: str) -> None:
        print(self._paint(RED, f"Error: {message}"), file=self.err)

    def rule(self, width: int = 40) -> None:
        print("-" * width, file=self.out)

    def prompt(self, message: str) -> None:
        print(message, end="", file=self.out, flush=True)


def confirm(prompt: str, stream: TextIO | None = None, console: Console | None = None) -> bool:
    """Ask a y/N question; only "y" or "yes" (any case) count as yes."""
    stream = stream if stream is not None else sys.stdin
    console = console if console is not None else Console.create()

    console.prompt(prompt)
    response = stream.readline()
    if not response:
        return False
    return response.strip().lower() in AFFIRMATIVE_ANSWERS
