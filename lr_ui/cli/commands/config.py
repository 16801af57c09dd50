from __future__ import annotations

from typing import Optional

import typer

from lr_ui.cli.commands.common import exit_on_errors
from lr_ui.flows.api_key import prompt_api_key
from lr_ui.tui.system.models import TableModel
from lr_ui.wiring.dependencies import UIContext


def create_config_app(ctx: UIContext) -> typer.Typer:
    """Build the config Typer app, wired to the given context."""
    app = typer.Typer(help="Manage the Luraph API key and endpoint.", no_args_is_help=True)

    @app.command("set-key")
    def set_key(
        key: Optional[str] = typer.Argument(
            None, help="API key; prompted for (hidden) when omitted."
        ),
    ) -> None:
        """Save the Luraph API key."""
        with exit_on_errors(ctx):
            if key is None:
                if prompt_api_key(ctx.ui, ctx.settings_store) is None:
                    raise typer.Exit(1)
                return
            if not key.strip():
                ctx.ui.present.error("API key must not be empty.")
                raise typer.Exit(1)
            path = ctx.settings_store.update_api_key(key)
            ctx.ui.present.success(f"API key saved to {path}")

    @app.command("show")
    def show() -> None:
        """Show the effective settings (the key is masked)."""
        with exit_on_errors(ctx):
            settings = ctx.load_settings()
            ctx.ui.tables.show(
                TableModel(
                    title="Luraph settings",
                    columns=["Setting", "Value"],
                    rows=[
                        ["API key", settings.masked_api_key()],
                        ["API URL", settings.api_url],
                        ["Timeout (s)", f"{settings.timeout_seconds:g}"],
                        ["Config file", str(ctx.settings_store.path)],
                    ],
                )
            )

    return app
