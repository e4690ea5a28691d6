# ABOUTME: Shared pytest fixtures for kontactshare-admin tests.
# ABOUTME: Provides an in-memory fake profile service, clients, stores and temp settings.

import json
import math
import os
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any
from unittest import mock
from urllib.parse import unquote

import httpx
import pytest

from kontactshare_admin.api.client import GatewayClient
from kontactshare_admin.auth.token_store import MemoryTokenStore
from kontactshare_admin.config import get_settings
from kontactshare_admin.stores.local import LocalProfileStore
from kontactshare_admin.stores.remote import RemoteProfileStore

API_BASE_URL = "http://testserver/api"
PUBLIC_BASE_URL = "http://public.test"
ADMIN_EMAIL = "admin@kontactshare.test"
ADMIN_PASSWORD = "s3cret"
VALID_TOKEN = "valid-token"


def _json(status: int, data: Any = None) -> httpx.Response:
    if data is None:
        return httpx.Response(status)
    return httpx.Response(status, json=data)


class FakeProfileService:
    """In-memory stand-in for the profile service behind httpx.MockTransport.

    Profiles are kept as camelCase dicts keyed by unique code, newest last.
    Every request is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.profiles: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.per_item_bulk_results = False
        self.fail_with: httpx.Response | None = None
        # Served for every request after the next successful write.
        self.fail_after_mutation: httpx.Response | None = None
        self._clock = datetime(2026, 1, 1, tzinfo=UTC)

    def add_profile(self, unique_code: str, **fields: Any) -> dict[str, Any]:
        self._clock += timedelta(minutes=1)
        profile = {
            "id": f"20260101-0000-{len(self.profiles):04d}",
            "pin": "12345",
            "uniqueCode": unique_code,
            "fullName": f"Person {unique_code}",
            "email": f"{unique_code}@example.com",
            "jobTitle": "Engineer",
            "companyName": "Acme",
            "status": "active",
            "createdAt": self._clock.isoformat(),
            "updatedAt": self._clock.isoformat(),
        }
        profile.update(fields)
        self.profiles[unique_code] = profile
        return profile

    def seed(self, count: int, prefix: str = "code") -> list[str]:
        """Add ``count`` profiles and return their codes, oldest first."""
        return [self.add_profile(f"{prefix}{i:03d}")["uniqueCode"] for i in range(count)]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return self.fail_with

        response = self._route(request)
        if (
            self.fail_after_mutation is not None
            and request.method in ("POST", "DELETE")
            and "/admin/login" not in request.url.path
            and response.is_success
        ):
            self.fail_with, self.fail_after_mutation = self.fail_after_mutation, None
        return response

    def _route(self, request: httpx.Request) -> httpx.Response:
        raw_path = request.url.raw_path.decode().split("?")[0]
        assert raw_path.startswith("/api/")
        segments = [unquote(segment) for segment in raw_path[len("/api/") :].split("/")]
        method = request.method

        if segments == ["admin", "login"] and method == "POST":
            return self._login(request)
        if segments[0] == "profiles" and len(segments) == 2 and method == "GET":
            return self._get_public(segments[1])

        if request.headers.get("Authorization") != f"Bearer {VALID_TOKEN}":
            return _json(401, {"error": "Invalid or expired token"})

        if segments == ["profiles"] and method == "POST":
            return self._create(json.loads(request.content))
        if segments[0] == "profiles" and len(segments) == 2 and method == "DELETE":
            return self._delete(segments[1])
        if segments == ["admin", "profiles"] and method == "GET":
            return self._list(request.url.params)
        if segments == ["admin", "profiles", "bulk"] and method == "POST":
            return self._bulk(json.loads(request.content))
        if segments[:2] == ["admin", "profiles"] and len(segments) == 4 and method == "POST":
            return self._set_status(segments[2], segments[3])
        if segments == ["admin", "stats"] and method == "GET":
            return self._stats()
        return _json(404, {"error": "Not found"})

    def _login(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if body.get("email") == ADMIN_EMAIL and body.get("password") == ADMIN_PASSWORD:
            return _json(200, {"token": VALID_TOKEN})
        return _json(400, {"error": "Invalid credentials"})

    def _get_public(self, unique_code: str) -> httpx.Response:
        profile = self.profiles.get(unique_code)
        if profile is None:
            return _json(404, {"error": "Profile not found"})
        return _json(200, profile)

    def _create(self, body: dict[str, Any]) -> httpx.Response:
        code = body.get("uniqueCode")
        if not code:
            return _json(400, {"error": "uniqueCode is required"})
        if code in self.profiles:
            return _json(409, {"error": "Unique code already exists"})
        fields = {key: value for key, value in body.items() if key != "uniqueCode"}
        self.add_profile(code, **fields)
        return _json(201, {"message": "Profile created", "uniqueCode": code})

    def _delete(self, unique_code: str) -> httpx.Response:
        if self.profiles.pop(unique_code, None) is None:
            return _json(404, {"error": "Profile not found"})
        return _json(204)

    def _set_status(self, unique_code: str, action: str) -> httpx.Response:
        profile = self.profiles.get(unique_code)
        if profile is None:
            return _json(404, {"error": "Profile not found"})
        if action not in ("ban", "unban"):
            return _json(404, {"error": "Not found"})
        profile["status"] = "banned" if action == "ban" else "active"
        return _json(200, {"message": f"Profile {action}ned"})

    def _list(self, params: httpx.QueryParams) -> httpx.Response:
        page = int(params.get("page", "1"))
        limit = int(params.get("limit", "20"))
        search = (params.get("search") or "").lower()
        status = params.get("status")

        matches = list(reversed(self.profiles.values()))
        if search:
            matches = [
                p
                for p in matches
                if any(
                    search in str(p.get(key, "")).lower()
                    for key in ("fullName", "email", "companyName", "uniqueCode")
                )
            ]
        if status:
            matches = [p for p in matches if p["status"] == status]

        total = len(matches)
        start = (page - 1) * limit
        return _json(
            200,
            {
                "profiles": matches[start : start + limit],
                "pagination": {
                    "page": page,
                    "limit": limit,
                    "total": total,
                    "pages": math.ceil(total / limit),
                },
            },
        )

    def _bulk(self, body: dict[str, Any]) -> httpx.Response:
        action = body["action"]
        results = []
        for code in body["uniqueCodes"]:
            if code not in self.profiles:
                results.append({"uniqueCode": code, "ok": False, "error": "Profile not found"})
                continue
            if action == "delete":
                del self.profiles[code]
            else:
                self.profiles[code]["status"] = "banned" if action == "ban" else "active"
            results.append({"uniqueCode": code, "ok": True})

        if self.per_item_bulk_results:
            return _json(200, {"results": results})
        return _json(200, {"message": f"Bulk {action} completed", "count": len(results)})

    def _stats(self) -> httpx.Response:
        statuses = [p["status"] for p in self.profiles.values()]
        return _json(
            200,
            {
                "totalProfiles": len(statuses),
                "activeProfiles": statuses.count("active"),
                "bannedProfiles": statuses.count("banned"),
                "todayProfiles": 0,
                "weekProfiles": len(statuses),
            },
        )


@pytest.fixture
def fake_service() -> FakeProfileService:
    """Create an empty fake profile service."""
    return FakeProfileService()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    """Create a token store already holding a valid session token."""
    return MemoryTokenStore(VALID_TOKEN)


@pytest.fixture
def gateway_client(fake_service: FakeProfileService, token_store: MemoryTokenStore):
    """Create a GatewayClient wired to the fake profile service."""
    http_client = httpx.Client(transport=fake_service.transport())
    client = GatewayClient(API_BASE_URL, token_store, http_client=http_client)
    yield client
    http_client.close()


@pytest.fixture
def remote_store(gateway_client: GatewayClient) -> RemoteProfileStore:
    """Create a RemoteProfileStore backed by the fake profile service."""
    return RemoteProfileStore(gateway_client, PUBLIC_BASE_URL)


@pytest.fixture
def local_store(tmp_path: Path):
    """Create a LocalProfileStore in a temporary SQLite file."""
    store = LocalProfileStore(db_path=tmp_path / "profiles.db", public_base_url=PUBLIC_BASE_URL)
    store.init_db()
    yield store
    store.close()


@pytest.fixture
def temp_settings_env():
    """Create a temporary environment with fresh settings."""
    with tempfile.TemporaryDirectory() as tmpdir:
        env_vars = {
            "KONTACTSHARE_API_BASE_URL": API_BASE_URL,
            "KONTACTSHARE_PUBLIC_BASE_URL": PUBLIC_BASE_URL,
            "KONTACTSHARE_LOCAL_DB_PATH": str(Path(tmpdir) / "profiles.db"),
            "KONTACTSHARE_BACKEND": "remote",
            "KONTACTSHARE_LOG_LEVEL": "CRITICAL",
        }
        with mock.patch.dict(os.environ, env_vars, clear=False):
            get_settings.cache_clear()
            yield tmpdir
        get_settings.cache_clear()
