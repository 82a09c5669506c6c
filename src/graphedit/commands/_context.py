"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands through
``@click.pass_obj``. It owns the lifecycle of the Workspace and the
GraphModel loaded from it, and routes results to stdout/stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphedit.config.logging import configure_logging
from graphedit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from graphedit.config.settings import GraphSettings
    from graphedit.infrastructure.workspace import Workspace
    from graphedit.services.graph import GraphService
    from graphedit.services.model import GraphModel
    from graphedit.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace and model are created on first use, so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: GraphSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None
        self._model: GraphModel | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphedit.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def workspace(self) -> Workspace:
        if self._workspace is None:
            from graphedit.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    @property
    def model(self) -> GraphModel:
        """The graph model, loaded from the workspace on first access."""
        if self._model is None:
            from graphedit.services.model import GraphModel

            self._model = GraphModel(
                self.workspace.persistence,
                node_type=self.settings.canvas.node_type,
            )
        return self._model

    @property
    def service(self) -> GraphService:
        from graphedit.services.graph import GraphService

        return GraphService(self.model)

    def close(self) -> None:
        if self._workspace is not None:
            self._workspace.close()
            self._workspace = None
        self._model = None

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult with correct exit semantics.

        Success goes to stdout (in quiet mode warnings go to stderr);
        failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # Human output renders warnings inline; JSON carries them in the payload.
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
