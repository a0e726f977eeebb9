"""Configuration loading from CLI args, env vars, and config file."""

from __future__ import annotations

import functools
import os
import tomllib
import typing
from pathlib import Path

import pydantic

from . import flags
from .output import OutputFormat

CONFIG_FILE_NAME = ".git-branch.toml"


class ConfigError(Exception): ...


def _get_home_config_file() -> Path | None:
    """Get the home directory config file if it exists."""
    home_config = Path.home() / CONFIG_FILE_NAME
    if home_config.exists():
        return home_config
    return None


@functools.cache
def _get_home_config() -> dict | None:
    if home_config_path := _get_home_config_file():
        with open(home_config_path, "rb") as f:
            return tomllib.load(f)
    return None


def _get_project_config_file() -> Path | None:
    """Search upward from cwd for .git-branch.toml, stopping at git root."""
    current = Path.cwd()
    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
        # Stop at git repository root
        if (directory / ".git").exists():
            break
    return None


@functools.cache
def _get_project_config() -> dict | None:
    if project_config_path := _get_project_config_file():
        with open(project_config_path, "rb") as f:
            return tomllib.load(f)
    return None


class _Config(typing.TypedDict):
    output_format: object
    placeholder: object


class _PartialConfig(typing.TypedDict, total=False):
    output_format: object
    placeholder: object


def _load_config(
    **flags_: typing.Unpack[_PartialConfig],
) -> _Config:
    """
    Load configuration from CLI args, env vars, project config, and home config.

    Priority: CLI flags > env vars > project config > home config
    """
    home_config = _get_home_config() or {}
    project_config = _get_project_config() or {}

    # Merge: project config overrides home config
    file_config = {**home_config, **project_config}

    config: _Config = {
        "output_format": flags_.get("output_format")
        or os.environ.get("GIT_BRANCH_OUTPUT_FORMAT")
        or file_config.get("output_format")
        or OutputFormat.pretty,
        # An empty placeholder is a valid choice, so only None falls through
        "placeholder": _first_set(
            flags_.get("placeholder"),
            os.environ.get("GIT_BRANCH_PLACEHOLDER"),
            file_config.get("placeholder"),
        ),
    }

    return config


def _first_set(*values: object) -> object:
    return next((v for v in values if v is not None), None)


def get_settings(flags_: flags.SettingsFlags) -> Settings:
    config = _load_config(
        output_format=flags_.output_format, placeholder=flags_.placeholder
    )
    try:
        return Settings(**config)  # ty: ignore
    except pydantic.ValidationError as e:
        raise ConfigError(str(e)) from e


class Settings(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)

    output_format: OutputFormat
    placeholder: str | None
