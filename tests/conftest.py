from __future__ import annotations

from pathlib import Path


def make_git_dir(root: Path, head: str | None = "ref: refs/heads/main\n") -> Path:
    """Create ``root/.git`` with the given HEAD contents (no HEAD if None)."""
    git_dir = root / ".git"
    git_dir.mkdir(parents=True)
    if head is not None:
        (git_dir / "HEAD").write_text(head)
    return git_dir


def make_worktree(root: Path, gitdir: Path | str, head: str | None = None) -> Path:
    """Create a ``root/.git`` worktree marker pointing at ``gitdir``.

    A relative ``gitdir`` is created relative to the working directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    marker = root / ".git"
    marker.write_text(f"gitdir: {gitdir}\n")
    if head is not None:
        target = Path(gitdir)
        target.mkdir(parents=True, exist_ok=True)
        (target / "HEAD").write_text(head)
    return marker
