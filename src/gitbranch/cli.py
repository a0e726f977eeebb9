import logging
from pathlib import Path
from typing import Annotated

import cyclopts
from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from . import config, flags, git, output

error_console = Console(stderr=True)
install_rich_traceback(console=error_console)

app = cyclopts.App(
    name="git-branch",
    help="Show the current git branch for a path without running git",
    error_console=error_console,
)

app.register_install_completion_command()


@app.default
def show(
    paths: Annotated[
        list[Path] | None,
        cyclopts.Parameter(
            help="The paths to inspect. Defaults to the current directory.",
        ),
    ] = None,
    *,
    common_flags: flags.CommonFlags = flags.CommonFlags(),
) -> None:
    """Show the checked out branch, or a short commit hash if detached"""
    _setup_logging(common_flags.log_level)
    settings = _get_settings(common_flags)
    results = [
        output.BranchResult(path=str(path), branch=git.get_git_branch(path))
        for path in paths or [Path.cwd()]
    ]
    output.print_branches(results, settings.output_format, settings.placeholder)
    if common_flags.check and any(r.branch is None for r in results):
        raise SystemExit(1)


@app.command(name="parse-head")
def parse_head(
    contents: Annotated[
        str,
        cyclopts.Parameter(
            help="The contents of a HEAD file, e.g. 'ref: refs/heads/main'",
        ),
    ],
    *,
    log_level: flags.LogLevelFlag = flags.DEFAULT_LOG_LEVEL,
) -> None:
    """Parse HEAD file contents into a branch name or short commit hash"""
    _setup_logging(log_level)
    branch = git.parse_git_head(contents)
    if branch is None:
        error_console.print("[red]Error:[/red] Unrecognised HEAD contents")
        raise SystemExit(1)
    output.console.print(branch, markup=False)


def _setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s [%(name)s] %(message)s",
    )


def _get_settings(settings_flags: flags.SettingsFlags) -> config.Settings:
    try:
        return config.get_settings(settings_flags)
    except config.ConfigError as e:
        error_console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise SystemExit(2) from e


def main() -> None:
    app()
