"""Locating and reading ``crateguard.toml``.

Resolution order: an explicit ``--config`` path, then the
``CRATEGUARD_CONFIG`` environment variable, then the nearest
``crateguard.toml`` in the start directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from crateguard.config.models import CrateguardConfig

CONFIG_FILENAME = "crateguard.toml"
CONFIG_ENV_VAR = "CRATEGUARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A set ``CRATEGUARD_CONFIG`` wins outright, even when it names a
    missing file (in which case no config is used).
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None, start: Path | None = None) -> Path | None:
    """Apply ``--config`` before falling back to :func:`find_config`."""
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return find_config(start)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> CrateguardConfig:
    """Load the ``[database]`` and ``[naming]`` sections, defaults when no file is found."""
    path = path or find_config(cwd)
    if path is None:
        return CrateguardConfig()
    return CrateguardConfig.model_validate(read_toml(path))
