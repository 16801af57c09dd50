"""HTTP client for the Luraph obfuscation API."""

from __future__ import annotations

import base64
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping
from urllib import error, parse, request

from lr_common.config.settings import DEFAULT_API_URL
from lr_common.errors import RemoteApiError
from lr_client.models import JobResult, JobStatus, NodeListing
from lr_options.models import UserValues

logger = logging.getLogger(__name__)

_USER_AGENT = "luraph-cli"
_FILENAME_RE = re.compile(r'filename\*?=(?:UTF-8\'\')?"?([^";]+)"?', re.IGNORECASE)


def _validate_http_url(url: str, label: str) -> str:
    parsed = parse.urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"{label} must be an http(s) URL, got: {url}")
    return url


def _error_messages(body: Any) -> list[str]:
    if not isinstance(body, dict):
        return []
    messages: list[str] = []
    for entry in body.get("errors") or []:
        if isinstance(entry, dict) and entry.get("message"):
            param = entry.get("param")
            text = str(entry["message"])
            messages.append(f"{text} ({param})" if param else text)
        elif isinstance(entry, str):
            messages.append(entry)
    return messages


@dataclass
class _Response:
    status: int
    body: bytes
    headers: Mapping[str, str]

    def json(self) -> Any:
        if not self.body:
            return None
        try:
            return json.loads(self.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return None


@dataclass
class LuraphClient:
    """Thin Luraph API client. Every call is attempted once."""

    api_key: str
    base_url: str = DEFAULT_API_URL
    timeout_seconds: float = 60.0

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("An API key is required to use the Luraph API.")
        self.base_url = _validate_http_url(self.base_url.rstrip("/"), "Luraph API url")

    def get_nodes(self) -> NodeListing:
        data = self._request_json("GET", "/obfuscate/nodes")
        if not isinstance(data, dict):
            raise RemoteApiError("Malformed response from /obfuscate/nodes")
        listing = NodeListing.from_payload(data)
        logger.debug(
            "Fetched %d nodes (recommended: %s)",
            len(listing.nodes),
            listing.recommended_id or "[none]",
        )
        return listing

    def create_job(
        self,
        node_id: str,
        script: str,
        file_name: str,
        options: UserValues,
        *,
        use_tokens: bool = False,
        enforce_settings: bool = False,
    ) -> str:
        """Submit a script and return the new job id."""
        payload = {
            "node": node_id,
            "script": base64.b64encode(script.encode("utf-8")).decode("ascii"),
            "fileName": file_name,
            "options": dict(options),
            "useTokens": use_tokens,
            "enforceSettings": enforce_settings,
        }
        data = self._request_json("POST", "/obfuscate/new", payload=payload)
        job_id = data.get("jobId") if isinstance(data, dict) else None
        if not job_id:
            raise RemoteApiError("Luraph API did not return a job id")
        logger.info("Created job %s on node %s", job_id, node_id)
        return str(job_id)

    def get_job_status(self, job_id: str) -> JobStatus:
        """Wait for the job to finish (the server holds the request) and report it."""
        data = self._request_json("GET", f"/obfuscate/status/{parse.quote(job_id, safe='')}")
        job_error = data.get("error") if isinstance(data, dict) else None
        if job_error:
            return JobStatus(success=False, error=str(job_error))
        return JobStatus(success=True)

    def download_result(self, job_id: str) -> JobResult:
        response = self._request("GET", f"/obfuscate/download/{parse.quote(job_id, safe='')}")
        file_name = None
        match = _FILENAME_RE.search(response.headers.get("Content-Disposition", "") or "")
        if match:
            file_name = parse.unquote(match.group(1))
        return JobResult(data=response.body.decode("utf-8"), file_name=file_name)

    def _request_json(
        self, method: str, path: str, payload: Mapping[str, Any] | None = None
    ) -> Any:
        return self._request(method, path, payload=payload).json()

    def _request(
        self, method: str, path: str, payload: Mapping[str, Any] | None = None
    ) -> _Response:
        url = f"{self.base_url}{path}"
        headers = {
            "Accept": "application/json",
            "Luraph-API-Key": self.api_key,
            "User-Agent": _USER_AGENT,
        }
        data = None
        if payload is not None:
            data = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s", method, url)
        req = request.Request(url, data=data, headers=headers, method=method)
        try:
            with request.urlopen(req, timeout=self.timeout_seconds) as resp:  # nosec B310
                response = _Response(
                    status=resp.status, body=resp.read(), headers=resp.headers
                )
        except error.HTTPError as exc:
            body = exc.read() if exc.fp else b""
            parsed = _Response(status=exc.code, body=body, headers={}).json()
            messages = _error_messages(parsed)
            detail = "; ".join(messages) or exc.reason or f"HTTP {exc.code}"
            raise RemoteApiError(
                str(detail),
                status=exc.code,
                messages=messages,
                context={"method": method, "path": path},
                cause=exc,
            ) from exc
        except error.URLError as exc:
            raise RemoteApiError(
                f"Could not reach the Luraph API: {exc.reason}",
                context={"method": method, "path": path},
                cause=exc,
            ) from exc

        messages = _error_messages(response.json())
        if messages:
            raise RemoteApiError(
                "; ".join(messages),
                status=response.status,
                messages=messages,
                context={"method": method, "path": path},
            )
        return response
