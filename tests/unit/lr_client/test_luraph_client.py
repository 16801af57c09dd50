"""Tests for the Luraph API client with urlopen stubbed out."""

from __future__ import annotations

import base64
import io
import json
from email.message import Message
from urllib import error

import pytest

from lr_client import client as client_module
from lr_client.client import LuraphClient
from lr_client.models import NodeListing
from lr_common.errors import ConfigurationError, RemoteApiError

pytestmark = pytest.mark.unit_client


NODES_PAYLOAD = {
    "recommendedId": "node-b",
    "nodes": {
        "node-a": {
            "cpuUsage": 12.5,
            "options": {
                "ENABLE_GC_FIXES": {
                    "name": "GC fixes",
                    "description": "",
                    "tier": "CUSTOMER_ONLY",
                    "type": "CHECKBOX",
                    "choices": None,
                    "dependencies": None,
                }
            },
        },
        "node-b": {"cpuUsage": 3, "options": {}},
    },
}


class _FakeResponse:
    def __init__(self, body: bytes, status: int = 200, headers: dict | None = None):
        self.status = status
        self._body = body
        self.headers = Message()
        for key, value in (headers or {}).items():
            self.headers[key] = value

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class _Recorder:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, req, timeout=None):
        self.requests.append((req, timeout))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _json_response(payload, status: int = 200, headers: dict | None = None):
    return _FakeResponse(json.dumps(payload).encode("utf-8"), status=status, headers=headers)


def _http_error(code: int, payload) -> error.HTTPError:
    body = json.dumps(payload).encode("utf-8")
    return error.HTTPError(
        "https://api.lura.ph/v1/x", code, "Bad Request", hdrs=Message(), fp=io.BytesIO(body)
    )


@pytest.fixture
def urlopen(monkeypatch):
    def _install(*responses):
        recorder = _Recorder(*responses)
        monkeypatch.setattr(client_module.request, "urlopen", recorder)
        return recorder

    return _install


@pytest.fixture
def client():
    return LuraphClient(api_key="secret-key", timeout_seconds=5)


def test_requires_api_key():
    with pytest.raises(ValueError):
        LuraphClient(api_key="")


def test_rejects_non_http_url():
    with pytest.raises(ValueError):
        LuraphClient(api_key="k", base_url="ftp://example.com")


def test_get_nodes_parses_listing(client, urlopen):
    recorder = urlopen(_json_response(NODES_PAYLOAD))

    listing = client.get_nodes()

    req, timeout = recorder.requests[0]
    assert req.full_url == "https://api.lura.ph/v1/obfuscate/nodes"
    assert req.get_method() == "GET"
    assert req.get_header("Luraph-api-key") == "secret-key"
    assert timeout == 5
    assert isinstance(listing, NodeListing)
    assert listing.ordered_ids() == ["node-b", "node-a"]
    node_a = listing.nodes["node-a"]
    assert node_a.cpu_usage == 12.5
    assert node_a.option_count == 1
    assert node_a.options["ENABLE_GC_FIXES"].id == "ENABLE_GC_FIXES"


def test_get_nodes_with_invalid_option_type(client, urlopen):
    payload = {"nodes": {"n": {"options": {"X": {"type": "SLIDER"}}}}}
    urlopen(_json_response(payload))
    with pytest.raises(ConfigurationError):
        client.get_nodes()


def test_create_job_posts_encoded_script(client, urlopen):
    recorder = urlopen(_json_response({"jobId": "job-1"}))

    job_id = client.create_job(
        "node-a", "print('hi')", "[luraph-cli] hi.lua", {"A": True, "C": "y"}
    )

    assert job_id == "job-1"
    req, _ = recorder.requests[0]
    assert req.full_url.endswith("/obfuscate/new")
    assert req.get_method() == "POST"
    sent = json.loads(req.data.decode("utf-8"))
    assert base64.b64decode(sent["script"]).decode("utf-8") == "print('hi')"
    assert sent["node"] == "node-a"
    assert sent["fileName"] == "[luraph-cli] hi.lua"
    assert sent["options"] == {"A": True, "C": "y"}
    assert sent["useTokens"] is False
    assert sent["enforceSettings"] is False


def test_create_job_without_job_id(client, urlopen):
    urlopen(_json_response({}))
    with pytest.raises(RemoteApiError, match="job id"):
        client.create_job("n", "x", "f", {})


def test_job_status(client, urlopen):
    urlopen(_json_response({"success": True}), _json_response({"error": "Syntax error"}))

    assert client.get_job_status("job-1").success
    failed = client.get_job_status("job-1")
    assert not failed.success
    assert failed.error == "Syntax error"


def test_download_result_uses_content_disposition(client, urlopen):
    recorder = urlopen(
        _FakeResponse(
            b"-- obfuscated",
            headers={"content-disposition": 'attachment; filename="hi-obfuscated.lua"'},
        )
    )

    result = client.download_result("job/1")

    assert result.data == "-- obfuscated"
    assert result.file_name == "hi-obfuscated.lua"
    assert recorder.requests[0][0].full_url.endswith("/obfuscate/download/job%2F1")


def test_http_error_carries_api_messages(client, urlopen):
    urlopen(_http_error(400, {"errors": [{"message": "Invalid node", "param": "node"}]}))

    with pytest.raises(RemoteApiError) as excinfo:
        client.create_job("bad", "x", "f", {})

    exc = excinfo.value
    assert exc.status == 400
    assert exc.messages == ["Invalid node (node)"]
    assert str(exc) == "Invalid node (node)"
    assert exc.context["path"] == "/obfuscate/new"


def test_http_error_without_body(client, urlopen):
    urlopen(_http_error(503, None))
    with pytest.raises(RemoteApiError) as excinfo:
        client.get_nodes()
    assert excinfo.value.status == 503
    assert excinfo.value.messages == []


def test_errors_in_successful_response(client, urlopen):
    urlopen(_json_response({"errors": [{"message": "Quota exceeded"}]}))
    with pytest.raises(RemoteApiError, match="Quota exceeded"):
        client.get_nodes()


def test_network_failure(client, urlopen):
    urlopen(error.URLError("connection refused"))
    with pytest.raises(RemoteApiError, match="Could not reach the Luraph API"):
        client.get_nodes()


def test_malformed_nodes(client, urlopen):
    urlopen(_json_response({"nodes": ["a", "b"]}))
    with pytest.raises(RemoteApiError):
        client.get_nodes()


@pytest.mark.parametrize(
    "entry",
    [
        ["cpuUsage", 3],
        "node",
        {"cpuUsage": 1, "options": ["A", "B"]},
    ],
)
def test_malformed_node_entry(client, urlopen, entry):
    urlopen(_json_response({"nodes": {"node-a": entry}}))
    with pytest.raises(RemoteApiError, match="Malformed node entry 'node-a'") as excinfo:
        client.get_nodes()
    assert excinfo.value.context == {"node": "node-a"}
