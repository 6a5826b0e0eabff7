"""Command: create the download-counter database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from crateguard.commands._base import GuardCommand
from crateguard.services.result import ServiceResult

if TYPE_CHECKING:
    from crateguard.commands._context import AppContext


@click.command(
    "init",
    cls=GuardCommand,
    examples="""\
  crateguard init
  CRATEGUARD_DATABASE__PATH=/tmp/registry.db crateguard init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the database and its tables (idempotent)."""
    db_path = app.store.initialize()
    app.emit(ServiceResult(ok=True, op="init", data={"path": str(db_path)}))
