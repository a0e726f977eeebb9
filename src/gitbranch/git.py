"""Git helpers for getting the current branch without shelling out to git."""

from __future__ import annotations

import logging
import os
import stat
import string
from pathlib import Path

logger = logging.getLogger(__name__)

SHORT_HASH_LENGTH = 7


def get_git_branch(path: str | os.PathLike[str]) -> str | None:
    """
    Get the git branch for a path, or None if it is not in a repo.

    Walks up from ``path`` looking for a ``.git`` directory, or a ``.git``
    file pointing at a linked worktree, and parses its HEAD.

    Does not raise — returns None on any error.
    """
    if not os.fspath(path):
        return None

    try:
        start = Path(path).absolute()
    except OSError:
        return None

    for directory in [start, *start.parents]:
        git_path = directory / ".git"
        mode = _stat_mode(git_path)
        if mode is None:
            continue

        if stat.S_ISDIR(mode):
            head = _read_text(git_path / "HEAD")
            if head is None:
                # A .git directory without a readable HEAD is not skipped over
                logger.debug("Unreadable HEAD in %s", git_path)
                return None
            logger.debug("Found git directory %s", git_path)
            return parse_git_head(head)

        if stat.S_ISREG(mode):
            head = _read_worktree_head(git_path)
            if head is not None:
                logger.debug("Found worktree marker %s", git_path)
                return parse_git_head(head)

    logger.debug("No git repository found above %s", start)
    return None


def parse_git_head(contents: str) -> str | None:
    """Parse the contents of a HEAD file into a branch name or short hash."""
    contents = contents.strip()

    if contents.startswith("ref: "):
        ref = contents.removeprefix("ref: ")
        for prefix in ("refs/heads/", "refs/remotes/"):
            if ref.startswith(prefix):
                return ref.removeprefix(prefix)
        return ref

    # Detached HEAD
    if len(contents) >= SHORT_HASH_LENGTH and all(
        c in string.hexdigits for c in contents
    ):
        return f"{contents[:SHORT_HASH_LENGTH]}..."

    return None


def _read_worktree_head(marker: Path) -> str | None:
    contents = _read_text(marker)
    if contents is None or not contents.startswith("gitdir: "):
        logger.debug("Malformed worktree marker %s", marker)
        return None
    # Relative gitdir paths are taken as given, against the working directory
    gitdir = Path(contents.removeprefix("gitdir: ").strip())
    return _read_text(gitdir / "HEAD")


def _stat_mode(path: Path) -> int | None:
    try:
        return path.stat().st_mode
    except (OSError, ValueError):
        return None


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, ValueError):
        return None
