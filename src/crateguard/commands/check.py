"""Command: validate a publish payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from crateguard.commands._base import GuardCommand

if TYPE_CHECKING:
    from crateguard.commands._context import AppContext


@click.command(
    cls=GuardCommand,
    examples="""\
  crateguard check payload.json
  crateguard --json check payload.json
  cat payload.json | crateguard check -""",
)
@click.argument("payload", type=click.File("rb"))
@click.pass_obj
def check(app: AppContext, payload: BinaryIO) -> None:
    """Validate the publish PAYLOAD (a JSON file, or - for stdin)."""
    from crateguard.services.publish import PublishService

    app.emit(PublishService(app.store).check(payload.read()))
