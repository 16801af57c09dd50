"""
Command-line interface for luraph-cli.

Pick a node, walk through its options and submit a script for obfuscation.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

from lr_ui.cli.commands.config import create_config_app
from lr_ui.cli.commands.nodes import register_node_commands
from lr_ui.cli.commands.obfuscate import register_obfuscate_command
from lr_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

config_app = create_config_app(ctx_store)

app = typer.Typer(help="Obfuscate Lua scripts with the Luraph API.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Never prompt; accept default node and option values.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
    log_json: Optional[bool] = typer.Option(
        None, "--log-json/--no-log-json", help="Render log lines as JSON."
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also write logs to this file."
    ),
) -> None:
    """Global entry point handling interactive vs headless modes."""
    configure_logging(
        level=None if os.environ.get("LR_LOG_LEVEL") else "WARNING",
        debug=debug,
        json=log_json,
        log_file=str(log_file) if log_file else None,
        force=True,
    )
    ctx_store.headless = headless

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


register_obfuscate_command(app, ctx_store)
register_node_commands(app, ctx_store)
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
