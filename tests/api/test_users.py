"""User Listing — verifies the fixed user set and its stability under concurrency."""

import asyncio
from datetime import datetime


async def test_lists_three_users(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 3
    assert body["users"][0] == {
        "id": 1, "name": "John Doe", "email": "john@example.com", "role": "developer",
    }
    assert [u["role"] for u in body["users"]] == ["developer", "designer", "manager"]
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


async def test_concurrent_requests_return_identical_users(client):
    responses = await asyncio.gather(*(client.get("/api/users") for _ in range(10)))
    first = responses[0].json()
    for res in responses:
        assert res.status_code == 200
        assert res.json()["users"] == first["users"]
        assert res.json()["total"] == first["total"]
