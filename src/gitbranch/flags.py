import dataclasses
from typing import Annotated

import cyclopts

from .output import OutputFormat

LogLevelFlag = Annotated[
    str,
    cyclopts.Parameter(
        name=["--log-level"],
        help="Log level (debug, info, warning, error, critical)",
    ),
]

DEFAULT_LOG_LEVEL = "warning"


@cyclopts.Parameter(name="*")
@dataclasses.dataclass(frozen=True)
class SettingsFlags:
    """Flags that can also be set via environment variables or config files."""

    output_format: Annotated[
        OutputFormat | None,
        cyclopts.Parameter(
            name=["--output-format", "-o"],
            help="Output format. Set via the GIT_BRANCH_OUTPUT_FORMAT environment variable, the .git-branch.toml config file or the --output-format flag",
        ),
    ] = None
    placeholder: Annotated[
        str | None,
        cyclopts.Parameter(
            name=["--placeholder"],
            help="Text to show when no branch is found. Set via the GIT_BRANCH_PLACEHOLDER environment variable, the .git-branch.toml config file or the --placeholder flag",
        ),
    ] = None


@cyclopts.Parameter(name="*")
@dataclasses.dataclass(frozen=True)
class CommonFlags(SettingsFlags):
    """All common flags including settings flags."""

    check: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--check"],
            help="Exit with status 1 if any path has no branch information",
            negative=(),
        ),
    ] = False
    log_level: LogLevelFlag = DEFAULT_LOG_LEVEL
