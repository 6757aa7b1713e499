"""
Tests for /api/v1/adjustments.
"""
import pytest

from tests.conftest import OWNER, auth_headers, utc

ADJUSTMENTS_URL = "/api/v1/adjustments"


@pytest.mark.asyncio
async def test_create_adjustment(client, store, user_token):
    resp = await client.post(
        ADJUSTMENTS_URL,
        json={"date": "2025-11-05", "amount": -15, "employerId": "emp-1", "note": "Uniform"},
        headers=auth_headers(user_token),
    )

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["date"] == "2025-11-05T00:00:00Z"
    assert data["amount"] == -15
    assert (await store.raw("adjustments", data["id"]))["date"] == utc(2025, 11, 5)


@pytest.mark.asyncio
async def test_create_adjustment_needs_a_link(client, user_token):
    resp = await client.post(
        ADJUSTMENTS_URL,
        json={"date": "2025-11-05", "amount": 10},
        headers=auth_headers(user_token),
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_create_adjustment_note_too_long(client, user_token):
    resp = await client.post(
        ADJUSTMENTS_URL,
        json={"date": "2025-11-05", "amount": 10, "shiftId": "s-1", "note": "n" * 201},
        headers=auth_headers(user_token),
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["details"][0]["path"] == "note"


@pytest.mark.asyncio
async def test_list_adjustments_by_shift(client, store, user_token):
    await store.seed("adjustments", {"ownerUserId": OWNER, "employerId": "emp-1", "amount": 5})
    linked = await store.seed("adjustments", {"ownerUserId": OWNER, "shiftId": "s-1", "amount": 7})

    resp = await client.get(ADJUSTMENTS_URL, params={"shiftId": "s-1"}, headers=auth_headers(user_token))

    assert resp.status_code == 200
    assert [adjustment["id"] for adjustment in resp.json()["data"]] == [linked]


@pytest.mark.asyncio
async def test_update_and_delete_adjustment(client, store, user_token):
    adjustment_id = await store.seed(
        "adjustments", {"ownerUserId": OWNER, "shiftId": "s-1", "amount": 7, "note": "Tip pool"}
    )

    update_resp = await client.put(
        f"{ADJUSTMENTS_URL}/{adjustment_id}", json={"amount": 9}, headers=auth_headers(user_token)
    )
    assert update_resp.status_code == 200
    assert update_resp.json()["data"]["note"] == "Tip pool"
    assert update_resp.json()["data"]["amount"] == 9

    delete_resp = await client.delete(f"{ADJUSTMENTS_URL}/{adjustment_id}", headers=auth_headers(user_token))
    assert delete_resp.status_code == 200
    assert await store.raw("adjustments", adjustment_id) is None


@pytest.mark.parametrize("literal", ["Infinity", "NaN"])
@pytest.mark.asyncio
async def test_create_adjustment_rejects_non_finite_amount(client, store, user_token, literal):
    resp = await client.post(
        ADJUSTMENTS_URL,
        content='{"date": "2025-11-05", "amount": %s, "shiftId": "s-1"}' % literal,
        headers={**auth_headers(user_token), "Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["details"][0]["path"] == "amount"
    assert store.calls_for("create") == []
