"""Presentation helpers for obfuscation nodes."""

from __future__ import annotations

import math

from lr_client.models import NodeInfo, NodeListing
from lr_ui.tui.system.models import PickItem, TableModel


def node_details(info: NodeInfo) -> str:
    return f"{math.floor(info.cpu_usage)}% CPU usage, {info.option_count} options"


def node_pick_items(listing: NodeListing) -> list[PickItem]:
    """Nodes with the recommended one first and pre-selected."""
    items: list[PickItem] = []
    for node_id in listing.ordered_ids():
        info = listing.nodes[node_id]
        recommended = node_id == listing.recommended_id
        items.append(
            PickItem(
                id=node_id,
                title=node_id,
                tags=("♥ recommended",) if recommended else (),
                description=node_details(info) + (" (recommended)" if recommended else ""),
                search_blob=node_id,
                payload=info,
                selected=recommended,
            )
        )
    return items


def build_nodes_table(listing: NodeListing) -> TableModel:
    rows = [
        [
            node_id,
            f"{math.floor(listing.nodes[node_id].cpu_usage)}%",
            str(listing.nodes[node_id].option_count),
            "yes" if node_id == listing.recommended_id else "",
        ]
        for node_id in listing.ordered_ids()
    ]
    return TableModel(
        title="Luraph nodes",
        columns=["Node", "CPU usage", "Options", "Recommended"],
        rows=rows,
    )
