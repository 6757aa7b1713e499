"""
Tests for bearer authentication, role checks and the write rate limiter.
"""
from datetime import timedelta

import pytest

from tests.conftest import auth_headers
from worklog.core.config import settings
from worklog.core.errors import RateLimitError
from worklog.core.permissions import CurrentUser, RoleChecker
from worklog.core.rate_limit import WriteRateLimiter
from worklog.core.security import create_access_token, decode_access_token, normalize_roles

EMPLOYERS_URL = "/api/v1/employers"


# ── Tokens ────────────────────────────────────────────────────────────────────

def test_token_round_trip_keeps_subject_and_roles():
    payload = decode_access_token(create_access_token("user-a", roles=["user", "admin"]))
    assert payload["sub"] == "user-a"
    assert payload["roles"] == ["user", "admin"]


def test_token_without_roles_has_no_roles_claim():
    payload = decode_access_token(create_access_token("user-a"))
    assert "roles" not in payload


@pytest.mark.parametrize("raw, expected", [
    (["user", "admin"], ["user", "admin"]),
    ("admin", ["admin"]),
    (None, None),
    (42, None),
])
def test_normalize_roles(raw, expected):
    assert normalize_roles(raw) == expected


# ── Role checks ───────────────────────────────────────────────────────────────

def test_missing_roles_claim_counts_as_user():
    checker = RoleChecker()
    user = CurrentUser(uid="a")
    assert checker.effective_roles(user) == ["user"]
    assert checker.is_allowed(user, ["user"])
    assert not checker.is_allowed(user, ["admin"])


def test_empty_requirement_allows_everyone():
    assert RoleChecker().is_allowed(CurrentUser(uid="a", roles=[]), [])


def test_any_required_role_is_enough():
    user = CurrentUser(uid="a", roles=["manager"])
    assert RoleChecker().is_allowed(user, ["admin", "manager"])


# ── HTTP authentication ───────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_missing_header_is_401(client):
    resp = await client.get(EMPLOYERS_URL)

    assert resp.status_code == 401
    body = resp.json()
    assert body["status"] == "error"
    assert body["error"] == {"message": "Missing or invalid Authorization header.", "code": "UNAUTHORIZED"}


@pytest.mark.asyncio
async def test_non_bearer_header_is_401(client):
    resp = await client.get(EMPLOYERS_URL, headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert resp.status_code == 401
    assert resp.json()["error"]["message"] == "Missing or invalid Authorization header."


@pytest.mark.asyncio
async def test_invalid_token_is_401(client):
    resp = await client.get(EMPLOYERS_URL, headers=auth_headers("not-a-token"))
    assert resp.status_code == 401
    assert resp.json()["error"]["message"] == "Authentication failed. Please provide a valid token."


@pytest.mark.asyncio
async def test_expired_token_is_401(client):
    token = create_access_token("user-a", expires_delta=timedelta(minutes=-5))
    resp = await client.get(EMPLOYERS_URL, headers=auth_headers(token))
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_read_allowed_without_write_role(client, viewer_token):
    resp = await client.get(EMPLOYERS_URL, headers=auth_headers(viewer_token))
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_write_without_role_is_403(client, store, viewer_token):
    resp = await client.post(EMPLOYERS_URL, json={"name": "Cafe", "hourlyRate": 15}, headers=auth_headers(viewer_token))

    assert resp.status_code == 403
    assert resp.json()["error"] == {"message": "Forbidden. Required role is missing.", "code": "FORBIDDEN"}
    assert store.calls == []


@pytest.mark.asyncio
async def test_health_needs_no_token(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "data": None, "message": "OK"}


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    resp = await client.get("/api/v1/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


# ── Rate limiting ─────────────────────────────────────────────────────────────

class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_limiter_blocks_after_max_requests():
    clock = FakeClock()
    limiter = WriteRateLimiter(max_requests=2, window_seconds=60, clock=clock)

    limiter.hit("10.0.0.1")
    limiter.hit("10.0.0.1")
    with pytest.raises(RateLimitError) as error:
        limiter.hit("10.0.0.1")

    assert error.value.retry_after == 60
    assert error.value.code == "RATE_LIMITED"
    # Other clients have their own window
    limiter.hit("10.0.0.2")


def test_limiter_window_resets():
    clock = FakeClock()
    limiter = WriteRateLimiter(max_requests=1, window_seconds=60, clock=clock)

    limiter.hit("a")
    clock.now += 45
    with pytest.raises(RateLimitError) as error:
        limiter.hit("a")
    assert error.value.retry_after == 15

    clock.now += 15
    limiter.hit("a")


def test_limiter_forgets_expired_windows():
    clock = FakeClock()
    limiter = WriteRateLimiter(max_requests=5, window_seconds=60, clock=clock)
    for index in range(1000):
        limiter.hit(f"10.0.{index // 256}.{index % 256}")

    clock.now += 10000
    limiter.hit("10.9.9.9")

    assert list(limiter._windows) == ["10.9.9.9"]


def test_limiter_keeps_live_windows_of_other_clients():
    clock = FakeClock()
    limiter = WriteRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    limiter.hit("a")
    clock.now += 30
    limiter.hit("b")

    with pytest.raises(RateLimitError):
        limiter.hit("a")


def test_limiter_disabled_with_zero_max():
    limiter = WriteRateLimiter(max_requests=0, window_seconds=60)
    for _ in range(100):
        limiter.hit("a")


@pytest.mark.asyncio
async def test_write_routes_are_rate_limited(client, user_token, monkeypatch):
    monkeypatch.setattr(settings, "WRITE_RATE_LIMIT_MAX", 2)

    statuses = []
    for index in range(3):
        resp = await client.post(
            EMPLOYERS_URL,
            json={"name": f"Employer {index}", "hourlyRate": 15},
            headers=auth_headers(user_token),
        )
        statuses.append(resp.status_code)

    assert statuses == [201, 201, 429]
    assert resp.json()["error"]["code"] == "RATE_LIMITED"
    assert int(resp.headers["Retry-After"]) >= 1


@pytest.mark.asyncio
async def test_reads_are_not_rate_limited(client, user_token, monkeypatch):
    monkeypatch.setattr(settings, "WRITE_RATE_LIMIT_MAX", 1)

    for _ in range(3):
        resp = await client.get(EMPLOYERS_URL, headers=auth_headers(user_token))
        assert resp.status_code == 200
