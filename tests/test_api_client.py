import importlib.util
import sys
from pathlib import Path

import httpx
import pytest


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "api_client.py"


@pytest.fixture
def api_client():
    spec = importlib.util.spec_from_file_location("nbavalue_api_client", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _route(calls):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path))
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "ok"})
        return httpx.Response(404, json={"detail": "Not Found"})

    return handler


def test_health_flag_checks_endpoint(api_client, monkeypatch, capsys):
    calls = []
    transport = httpx.MockTransport(_route(calls))
    real_client = httpx.Client
    monkeypatch.setattr(
        api_client.httpx,
        "Client",
        lambda base_url: real_client(base_url=base_url, transport=transport),
    )
    monkeypatch.setattr(sys, "argv", ["api_client.py", "http://testserver", "--health"])

    api_client.main()

    assert calls == [("GET", "/health")]
    assert capsys.readouterr().out.strip() == "API status: ok"


def test_valuation_requires_inputs_without_flags(api_client, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["api_client.py", "http://testserver"])
    with pytest.raises(SystemExit, match="--health"):
        api_client.main()
