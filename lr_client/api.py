"""Public API surface for lr_client."""

from lr_client.client import LuraphClient
from lr_client.models import JobResult, JobStatus, NodeInfo, NodeListing

__all__ = ["JobResult", "JobStatus", "LuraphClient", "NodeInfo", "NodeListing"]
