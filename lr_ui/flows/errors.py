"""Failures a flow reports to the user, with the exit code the CLI should use."""

from __future__ import annotations

from typing import Any, Mapping

from lr_common.errors import LRError, RemoteApiError

EXIT_FAILURE = 1
# The Luraph API refused the request or the job failed on the node.
EXIT_REMOTE_FAILURE = 2


class UIFlowError(LRError):
    """Flow failure printed by the CLI, which then exits with ``exit_code``.

    User cancellation is not a failure and never raises this.
    """

    def __init__(
        self,
        message: str,
        exit_code: int = EXIT_FAILURE,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)
        self.exit_code = exit_code

    @classmethod
    def from_remote(cls, exc: RemoteApiError) -> "UIFlowError":
        return cls(
            f"Luraph API Error: {exc}",
            EXIT_REMOTE_FAILURE,
            context=exc.context,
            cause=exc,
        )

    @classmethod
    def job_failed(cls, job_id: str, reason: str | None) -> "UIFlowError":
        return cls(
            f"Obfuscation Error: {reason or 'unknown error'}",
            EXIT_REMOTE_FAILURE,
            context={"job_id": job_id},
        )
