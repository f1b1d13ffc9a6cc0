#!/usr/bin/env python3
"""Tests for git tag wrappers against throwaway repositories."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path

import sys

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from changelog_tag.lib.git_tags import (
    GitError,
    create_annotated_tag,
    delete_tag,
    is_git_repository,
    run_git,
    tag_exists,
    tag_message,
)


def init_repo(path: Path) -> None:
    for args in (
        ["init", "-q"],
        ["config", "user.name", "Release Bot"],
        ["config", "user.email", "release-bot@example.com"],
        ["config", "commit.gpgsign", "false"],
        ["config", "tag.gpgSign", "false"],
        ["commit", "-q", "--allow-empty", "-m", "init"],
    ):
        subprocess.run(["git", *args], cwd=path, check=True, capture_output=True)


@unittest.skipUnless(shutil.which("git"), "git is not installed")
class GitTagsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.repo = Path(self._tmp.name)
        init_repo(self.repo)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_is_git_repository(self) -> None:
        self.assertTrue(is_git_repository(self.repo))
        with tempfile.TemporaryDirectory() as td:
            self.assertFalse(is_git_repository(td))

    def test_create_and_delete_tag(self) -> None:
        self.assertFalse(tag_exists("v1.0.0", self.repo))
        create_annotated_tag("v1.0.0", "Release v1.0.0", self.repo)
        self.assertTrue(tag_exists("v1.0.0", self.repo))
        self.assertEqual(tag_message("v1.0.0", self.repo), "Release v1.0.0")

        delete_tag("v1.0.0", self.repo)
        self.assertFalse(tag_exists("v1.0.0", self.repo))

    def test_message_keeps_markdown_headings(self) -> None:
        message = "## [v1.0.0] - 2025-08-26\n\n### Added\n- Initial release"
        create_annotated_tag("v1.0.0", message, self.repo)
        self.assertEqual(tag_message("v1.0.0", self.repo), message)

    def test_tag_exists_is_not_a_pattern_match(self) -> None:
        create_annotated_tag("v1.0.0", "Release v1.0.0", self.repo)
        self.assertFalse(tag_exists("v1.0.*", self.repo))
        self.assertFalse(tag_exists("v1.0", self.repo))

    def test_delete_missing_tag_raises(self) -> None:
        with self.assertRaises(GitError) as ctx:
            delete_tag("v9.9.9", self.repo)
        self.assertIsNotNone(ctx.exception.returncode)
        self.assertEqual(ctx.exception.cmd, ["git", "tag", "-d", "v9.9.9"])
        self.assertIn("v9.9.9", str(ctx.exception))

    def test_run_git_returns_stdout(self) -> None:
        self.assertEqual(run_git(["rev-parse", "--is-inside-work-tree"], cwd=self.repo).strip(), "true")


if __name__ == "__main__":
    unittest.main()
