"""Shared helpers for luraph-cli."""

from lr_common.api import ConfigurationError, LRError, RemoteApiError, configure_logging

__all__ = ["ConfigurationError", "LRError", "RemoteApiError", "configure_logging"]
