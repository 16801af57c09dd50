"""Response models for the Luraph API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lr_common.errors import RemoteApiError
from lr_options.models import OptionSet, parse_option_set


class NodeInfo(BaseModel):
    """One obfuscation node and the options it accepts."""

    cpu_usage: float = Field(default=0.0, alias="cpuUsage")
    options: OptionSet = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def option_count(self) -> int:
        return len(self.options)


class NodeListing(BaseModel):
    recommended_id: str | None = Field(default=None, alias="recommendedId")
    nodes: Dict[str, NodeInfo] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "NodeListing":
        """Parse the /obfuscate/nodes body; option ids come from the mapping keys."""
        raw_nodes = payload.get("nodes") or {}
        if not isinstance(raw_nodes, Mapping):
            raise RemoteApiError("Malformed node listing: 'nodes' is not an object")
        nodes: dict[str, NodeInfo] = {}
        for node_id, raw in raw_nodes.items():
            raw = raw or {}
            if not isinstance(raw, Mapping) or not isinstance(raw.get("options") or {}, Mapping):
                raise RemoteApiError(
                    f"Malformed node entry {node_id!r}",
                    context={"node": node_id},
                )
            try:
                nodes[node_id] = NodeInfo(
                    cpu_usage=float(raw.get("cpuUsage") or 0.0),
                    options=parse_option_set(raw.get("options") or {}),
                )
            except (TypeError, ValueError, ValidationError) as exc:
                raise RemoteApiError(
                    f"Malformed node entry {node_id!r}",
                    context={"node": node_id},
                    cause=exc,
                ) from exc
        return cls(recommended_id=payload.get("recommendedId"), nodes=nodes)

    def ordered_ids(self) -> list[str]:
        """Node ids with the recommended node first."""
        ids = list(self.nodes)
        if self.recommended_id in self.nodes:
            ids.remove(self.recommended_id)
            ids.insert(0, self.recommended_id)
        return ids


@dataclass(frozen=True)
class JobStatus:
    success: bool
    error: str | None = None


@dataclass(frozen=True)
class JobResult:
    data: str
    file_name: str | None = None
