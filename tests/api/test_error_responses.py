"""Error Responses — 404 envelope, fault barrier, development-mode detail.

Tests:
    - Unmatched path → 404 echoing path (with query) and method, nothing internal
    - 404 path is the raw request target (percent-encoding kept)
    - Known path with unsupported method → 404, not 405
    - Unhandled exception → 500 generic message outside development
    - Development mode exposes the exception text
    - Faults are logged with traceback regardless of mode
"""

import logging

from tests.api.fakes import BOOM_MESSAGE


async def test_unmatched_path_returns_404(client):
    res = await client.get("/nonexistent-path")
    assert res.status_code == 404
    assert res.json() == {
        "error": "Endpoint not found",
        "path": "/nonexistent-path",
        "method": "GET",
    }


async def test_404_never_exposes_internals(client):
    body = (await client.get("/non-existent-endpoint")).json()
    for key in ("stack", "internal", "debug", "detail"):
        assert key not in body


async def test_404_path_keeps_query_string(client):
    body = (await client.get("/missing?page=2")).json()
    assert body["path"] == "/missing?page=2"


async def test_404_path_keeps_percent_encoding(client):
    body = (await client.get("/no%20where?q=a%26b")).json()
    assert body["path"] == "/no%20where?q=a%26b"


async def test_unsupported_method_is_not_found(client):
    res = await client.delete("/api/users")
    assert res.status_code == 404
    assert res.json()["method"] == "DELETE"
    assert res.json()["path"] == "/api/users"


async def test_fault_hidden_outside_development(client):
    res = await client.get("/boom")
    assert res.status_code == 500
    assert res.json() == {
        "error": "Something went wrong!",
        "message": "Internal server error",
    }


async def test_fault_detail_in_development(client_for):
    async with client_for(environment="development") as c:
        res = await c.get("/boom")
    assert res.status_code == 500
    assert res.json()["message"] == BOOM_MESSAGE


async def test_fault_logged_with_traceback(client, caplog):
    caplog.set_level(logging.ERROR, logger="backstage_app.api.middleware")
    await client.get("/boom")
    records = [r for r in caplog.records if r.name == "backstage_app.api.middleware"]
    assert records
    assert records[0].exc_info is not None
    assert records[0].error_category == "internal"
    assert BOOM_MESSAGE in records[0].getMessage()


async def test_fault_response_still_carries_security_headers(client):
    res = await client.get("/boom")
    assert res.headers["x-content-type-options"] == "nosniff"
