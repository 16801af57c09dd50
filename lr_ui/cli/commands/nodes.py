from __future__ import annotations

import typer

from lr_options.models import validate_option_set
from lr_options.resolver import resolve_order
from lr_options.segmenter import segment
from lr_ui.cli.commands.common import client_or_exit, exit_on_errors
from lr_ui.flows.obfuscate import fetch_nodes, select_node
from lr_ui.presenters.nodes import build_nodes_table
from lr_ui.presenters.options import build_order_table
from lr_ui.wiring.dependencies import UIContext


def register_node_commands(app: typer.Typer, ctx: UIContext) -> None:
    @app.command("nodes")
    def list_nodes() -> None:
        """List obfuscation nodes with their load."""
        with exit_on_errors(ctx):
            listing = fetch_nodes(ctx.ui, client_or_exit(ctx))
            ctx.ui.tables.show(build_nodes_table(listing))

    @app.command("options")
    def show_options(
        node: str = typer.Argument(..., help="Node whose options to show."),
    ) -> None:
        """Show a node's options in the order they are asked about."""
        with exit_on_errors(ctx):
            listing = fetch_nodes(ctx.ui, client_or_exit(ctx))
            node_id = select_node(ctx.ui, listing, node)
            options = listing.nodes[node_id].options
            validate_option_set(options)
            units = segment(resolve_order(options), options)
            ctx.ui.tables.show(build_order_table(node_id, options, units))
