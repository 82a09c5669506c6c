"""Subcommand modules for graphedit.

register_commands() imports lazily so ``graphedit --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    # --- Groups ---
    from graphedit.commands.edge import edge
    from graphedit.commands.node import node

    cli.add_command(node)
    cli.add_command(edge)

    # --- Standalone commands ---
    from graphedit.commands.graph import path, search, show

    cli.add_command(show)
    cli.add_command(search)
    cli.add_command(path)
