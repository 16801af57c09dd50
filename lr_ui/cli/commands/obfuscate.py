from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from lr_ui.cli.commands.common import client_or_exit, exit_on_errors, require_tty
from lr_ui.flows.obfuscate import run_obfuscation
from lr_ui.wiring.dependencies import UIContext


def register_obfuscate_command(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("obfuscate")
    def obfuscate(
        source: Path = typer.Argument(..., help="Lua script to obfuscate."),
        node: Optional[str] = typer.Option(
            None,
            "--node",
            "-n",
            help="Node to use; prompts with the recommended node pre-selected when omitted.",
        ),
        output: Optional[Path] = typer.Option(
            None,
            "--output",
            "-o",
            help="Where to write the result; defaults to <name>-obfuscated.lua next to the source.",
        ),
    ) -> None:
        """Configure options interactively and obfuscate a script."""
        with exit_on_errors(ctx):
            require_tty(ctx)
            client = client_or_exit(ctx)
            outcome = run_obfuscation(
                ctx.ui,
                client,
                source.expanduser(),
                node_id=node,
                output=output.expanduser() if output else None,
            )
        if outcome is None:
            return
        ctx.ui.present.summary(
            "Obfuscation complete",
            {
                "Node": outcome.node_id,
                "Job ID": outcome.job_id,
                "Output": str(outcome.output_path),
            },
        )
