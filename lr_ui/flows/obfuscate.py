"""Workflow for obfuscating one script: node, options, submission, result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from lr_client.client import LuraphClient
from lr_client.models import NodeListing
from lr_common.errors import RemoteApiError
from lr_options.collector import OptionCollector
from lr_options.models import UserValues
from lr_ui.flows.errors import UIFlowError
from lr_ui.presenters.nodes import node_pick_items
from lr_ui.presenters.options import build_values_table
from lr_ui.services.output_paths import obfuscated_output_path
from lr_ui.tui.adapters.prompter_adapter import OptionPrompterAdapter
from lr_ui.tui.system.protocols import UI

logger = logging.getLogger(__name__)

JOB_LABEL_PREFIX = "[luraph-cli]"


@dataclass(frozen=True)
class ObfuscationOutcome:
    node_id: str
    job_id: str
    values: UserValues
    output_path: Path


def _read_source(source: Path) -> str:
    try:
        contents = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise UIFlowError(f"File not found: {source}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise UIFlowError(f"Cannot read {source}: {exc}") from exc
    if not contents:
        raise UIFlowError("Cannot obfuscate an empty file.")
    return contents


def fetch_nodes(ui: UI, client: LuraphClient) -> NodeListing:
    try:
        with ui.progress.status("Fetching Luraph Nodes..."):
            return client.get_nodes()
    except RemoteApiError as exc:
        raise UIFlowError.from_remote(exc) from exc


def select_node(ui: UI, listing: NodeListing, node_id: str | None = None) -> str | None:
    """Return the node to use, asking the user unless ``node_id`` is given."""
    if not listing.nodes:
        raise UIFlowError("The Luraph API returned no nodes.")
    if node_id is not None:
        if node_id not in listing.nodes:
            raise UIFlowError(
                f"Unknown node {node_id!r}; available: {', '.join(listing.ordered_ids())}"
            )
        return node_id
    picked = ui.picker.pick_one(node_pick_items(listing), title="Luraph - Select Node")
    return picked.id if picked is not None else None


def run_obfuscation(
    ui: UI,
    client: LuraphClient,
    source: Path,
    *,
    node_id: str | None = None,
    output: Path | None = None,
) -> ObfuscationOutcome | None:
    """Obfuscate ``source``. Returns None when the user backs out at any prompt."""
    contents = _read_source(source)
    logger.info("Performing Luraph obfuscation for %s", source)

    listing = fetch_nodes(ui, client)
    selected_node = select_node(ui, listing, node_id)
    if selected_node is None:
        ui.present.cancelled("Selection cancelled.")
        return None

    node = listing.nodes[selected_node]
    logger.debug("Selected node %s with %d options", selected_node, node.option_count)

    values = OptionCollector(node.options, OptionPrompterAdapter(ui)).run()
    if values is None:
        ui.present.cancelled("Selection cancelled.")
        return None

    ui.tables.show(build_values_table(node.options, values))
    if not ui.form.confirm("Obfuscate with these options?", default=True):
        ui.present.cancelled("Obfuscation cancelled.")
        return None

    try:
        with ui.progress.status("Obfuscating..."):
            job_id = client.create_job(
                selected_node,
                contents,
                f"{JOB_LABEL_PREFIX} {source.name}",
                values,
            )
        logger.info("Job ID: %s", job_id)
        with ui.progress.status(f"Obfuscating... (Job ID: {job_id})"):
            status = client.get_job_status(job_id)
        if not status.success:
            logger.info("Obfuscation failed: %s", status.error)
            raise UIFlowError.job_failed(job_id, status.error)
        result = client.download_result(job_id)
    except RemoteApiError as exc:
        raise UIFlowError.from_remote(exc) from exc

    logger.info("Obfuscation succeeded! (%d bytes)", len(result.data))
    target = output if output is not None else obfuscated_output_path(source)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.data, encoding="utf-8")
    ui.present.success(f"Saved obfuscated script to {target}")
    return ObfuscationOutcome(
        node_id=selected_node, job_id=job_id, values=values, output_path=target
    )
