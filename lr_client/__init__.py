"""Client for the remote Luraph obfuscation service."""

from lr_client.api import JobResult, JobStatus, LuraphClient, NodeInfo, NodeListing

__all__ = ["JobResult", "JobStatus", "LuraphClient", "NodeInfo", "NodeListing"]
