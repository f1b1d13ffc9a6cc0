#!/usr/bin/env python3
"""Create an annotated git tag whose message is the matching CHANGELOG section."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from changelog_tag.lib.changelog_section import SectionNotFoundError, extract_section, normalize_version
from changelog_tag.lib.console import Console, confirm
from changelog_tag.lib.git_tags import (
    GitError,
    create_annotated_tag,
    delete_tag,
    is_git_repository,
    tag_exists,
)

VERSION = "1.0.0"

EPILOG = """\
Examples:
  changelog-tag --tag v1.0.0
  changelog-tag --tag v1.0.0 --changelog path/to/CHANGELOG.md
  changelog-tag --tag v1.0.0 --force
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changelog-tag",
        description="Git tag automation with CHANGELOG support",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--tag", required=True, help="Tag name to create, e.g. v1.0.0 (used exactly as given)")
    parser.add_argument("--changelog", default="CHANGELOG.md", help="Path to CHANGELOG file")
    parser.add_argument("--repo", default=".", help="Repository directory (default: current directory)")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing tag without confirmation",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--version",
        action="version",
        version=f"changelog-tag version {VERSION}",
        help="Show version information",
    )
    return parser


def resolve_changelog(repo: Path, changelog: str) -> Path:
    path = Path(changelog)
    if path.is_absolute():
        return path
    return repo / path


def release_message(tag: str, changelog: Path, console: Console) -> str:
    """Return the CHANGELOG section for ``tag``, or a generic fallback.

    Only a missing section falls back; OSError from reading the file is left
    to the caller.
    """
    console.success(f"Extracting CHANGELOG entry for '{tag}'...")
    try:
        message = extract_section(tag, changelog)
    except SectionNotFoundError:
        console.warning(f"Could not find CHANGELOG entry for '{tag}'")
        return f"Release {tag}"
    console.success("Found CHANGELOG entry")
    return message


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console.create(no_color=args.no_color)
    tag = args.tag
    repo = Path(args.repo)

    if not tag.strip() or not normalize_version(tag):
        console.error(f"--tag must name a version, got {tag!r}")
        return 1

    if not is_git_repository(repo):
        console.error(f"Not a git repository: {repo.resolve()}")
        return 1

    changelog = resolve_changelog(repo, args.changelog)
    if not changelog.exists():
        console.error(f"CHANGELOG file not found: {args.changelog}")
        return 1

    # Read before touching an existing tag so a failed read leaves it in place.
    try:
        message = release_message(tag, changelog, console)
    except OSError as exc:
        console.error(f"Could not read CHANGELOG file {changelog}: {exc}")
        return 1

    try:
        if tag_exists(tag, repo):
            if not args.force:
                console.warning(f"Tag '{tag}' already exists")
                if not confirm("Do you want to overwrite it? (y/N): ", stream=stdin, console=console):
                    console.info("Operation cancelled")
                    return 0
            delete_tag(tag, repo)
    except GitError as exc:
        console.error(f"Failed to delete existing tag: {exc}")
        return 1

    console.success(f"Creating tag '{tag}'...")
    console.info()
    console.info("Tag message:")
    console.rule()
    console.info(message)
    console.rule()
    console.info()

    try:
        create_annotated_tag(tag, message, repo)
    except GitError as exc:
        console.error(f"Failed to create tag: {exc}")
        return 1

    console.success(f"✓ Tag '{tag}' created successfully")
    console.info()
    console.info("To push this tag to remote:")
    console.info(f"  git push origin {tag}")
    console.info()
    console.info("To push all tags:")
    console.info("  git push --tags")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
