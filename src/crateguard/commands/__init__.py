"""Subcommand modules for crateguard.

Provides register_commands() which uses deferred imports to keep
``crateguard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command group and standalone commands on the root CLI group."""
    from crateguard.commands.check import check
    from crateguard.commands.downloads import downloads
    from crateguard.commands.init_cmd import init_cmd

    cli.add_command(downloads)
    cli.add_command(check)
    cli.add_command(init_cmd)
