from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from lr_client.models import JobResult, JobStatus, NodeListing
from lr_common.errors import RemoteApiError

NODES_PAYLOAD: dict[str, Any] = {
    "recommendedId": "node-b",
    "nodes": {
        "node-a": {"cpuUsage": 41.7, "options": {}},
        "node-b": {
            "cpuUsage": 3.2,
            "options": {
                "A": {"name": "Alpha", "type": "CHECKBOX", "tier": "CUSTOMER_ONLY"},
                "B": {
                    "name": "Beta",
                    "type": "CHECKBOX",
                    "tier": "PREMIUM_ONLY",
                    "dependencies": {"A": [True]},
                },
                "C": {"name": "Gamma", "type": "DROPDOWN", "choices": ["x", "y"]},
            },
        },
    },
}


@dataclass
class FakeLuraphClient:
    """Stands in for LuraphClient and records submitted jobs."""

    listing: NodeListing = field(default_factory=lambda: NodeListing.from_payload(NODES_PAYLOAD))
    status: JobStatus = field(default_factory=lambda: JobStatus(success=True))
    result: JobResult = field(
        default_factory=lambda: JobResult(data="-- obfuscated", file_name="x.lua")
    )
    fail_with: RemoteApiError | None = None
    jobs: list[dict[str, Any]] = field(default_factory=list)

    def get_nodes(self) -> NodeListing:
        if self.fail_with is not None:
            raise self.fail_with
        return self.listing

    def create_job(self, node_id, script, file_name, options, **kwargs) -> str:
        self.jobs.append(
            {"node": node_id, "script": script, "file_name": file_name, "options": options}
        )
        return f"job-{len(self.jobs)}"

    def get_job_status(self, job_id: str) -> JobStatus:
        return self.status

    def download_result(self, job_id: str) -> JobResult:
        return self.result


@pytest.fixture
def fake_client() -> FakeLuraphClient:
    return FakeLuraphClient()


@pytest.fixture
def lua_script(tmp_path):
    path = tmp_path / "hello.lua"
    path.write_text("print('hello')\n", encoding="utf-8")
    return path
