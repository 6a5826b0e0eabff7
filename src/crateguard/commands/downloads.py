"""Command group: download-count reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from crateguard.commands._base import GuardGroup

if TYPE_CHECKING:
    from crateguard.commands._context import AppContext


@click.group(
    cls=GuardGroup,
    examples="""\
  crateguard downloads version 42
  crateguard --json downloads crate 7""",
)
def downloads() -> None:
    """Show download-count records."""


@downloads.command(
    examples="""\
  crateguard downloads version 42""",
)
@click.argument("download_id", type=int)
@click.pass_obj
def version(app: AppContext, download_id: int) -> None:
    """Show one version-download record by DOWNLOAD_ID."""
    from crateguard.services.downloads import DownloadService

    app.emit(DownloadService(app.store).version_download(download_id))


@downloads.command(
    examples="""\
  crateguard downloads crate 7""",
)
@click.argument("download_id", type=int)
@click.pass_obj
def crate(app: AppContext, download_id: int) -> None:
    """Show one crate-download record by DOWNLOAD_ID."""
    from crateguard.services.downloads import DownloadService

    app.emit(DownloadService(app.store).crate_download(download_id))
