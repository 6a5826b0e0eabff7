"""Click base classes adding an on-demand ``--examples`` flag.

``--help`` stays short; ``--examples`` prints worked invocations for the
command and exits.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Accepts ``examples=`` and exposes it through an eager ``--examples`` option."""

    params: list[click.Parameter]

    def _install_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return

        def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
            if value:
                click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
                ctx.exit(0)

        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=show,
                help="Show usage examples and exit.",
            )
        )


class GuardCommand(ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class GuardGroup(ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`GuardCommand`."""

    command_class = GuardCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)
