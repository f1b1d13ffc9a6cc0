#!/usr/bin/env python3
"""Thin wrappers around the git CLI for tag management."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

PathLike = Path | str


class GitError(RuntimeError):
    """Raised when a git command fails or git is not installed."""

    def __init__(self, cmd: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        if returncode is None:
            message = f"`{' '.join(self.cmd)}` could not be run{detail}"
        else:
            message = f"`{' '.join(self.cmd)}` exited with status {returncode}{detail}"
        super().__init__(message)


def run_git(args: Sequence[str], cwd: PathLike | None = None) -> str:
    cmd: list[str] = ["git", *args]
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise GitError(cmd, None, str(exc)) from exc
    except subprocess.CalledProcessError as exc:
        raise GitError(cmd, exc.returncode, exc.stderr or "") from exc
    return completed.stdout


def is_git_repository(cwd: PathLike | None = None) -> bool:
    try:
        run_git(["rev-parse", "--git-dir"], cwd=cwd)
    except GitError:
        return False
    return True


def tag_exists(tag: str, cwd: PathLike | None = None) -> bool:
    # `git tag -l` treats its argument as a pattern, so compare the output exactly.
    try:
        output = run_git(["tag", "-l", tag], cwd=cwd)
    except GitError:
        return False
    return output.strip() == tag


def delete_tag(tag: str, cwd: PathLike | None = None) -> None:
    run_git(["tag", "-d", tag], cwd=cwd)


def create_annotated_tag(tag: str, message: str, cwd: PathLike | None = None) -> None:
    # verbatim keeps "## [v1.0.0]" style lines, which the default cleanup strips as comments.
    run_git(["tag", "-a", "--cleanup=verbatim", tag, "-m", message], cwd=cwd)


def tag_message(tag: str, cwd: PathLike | None = None) -> str:
    """Return the annotation body of ``tag``."""
    return run_git(["tag", "-l", "--format=%(contents)", tag], cwd=cwd).rstrip("\n")
