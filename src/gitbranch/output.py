"""Output formatting for the CLI."""

import enum
import json

import pydantic
from rich.console import Console
from rich.markup import escape

console = Console()


class OutputFormat(enum.StrEnum):
    pretty = "pretty"
    json = "json"


class BranchResult(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    path: str
    branch: str | None


def print_branches(
    results: list[BranchResult],
    output_format: OutputFormat,
    placeholder: str | None = None,
) -> None:
    if output_format == OutputFormat.json:
        data = [r.model_dump(mode="json") for r in results]
        print(json.dumps(data, indent=2))
        return

    if len(results) == 1:
        branch = _format_branch(results[0].branch, placeholder)
        if branch is not None:
            console.print(branch)
        return

    for r in results:
        branch = _format_branch(r.branch, placeholder)
        line = f"[bold]{escape(r.path)}:[/bold]"
        console.print(f"{line} {branch}" if branch is not None else line)


def _format_branch(branch: str | None, placeholder: str | None) -> str | None:
    if branch is not None:
        return escape(branch)
    if placeholder is not None:
        return f"[dim]{escape(placeholder)}[/dim]"
    return None
