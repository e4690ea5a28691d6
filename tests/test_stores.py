# ABOUTME: Tests for the local SQLite and remote profile stores and the store factory.
# ABOUTME: Covers create, listing with filters and pagination, status changes, bulk and stats.

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from conftest import PUBLIC_BASE_URL, FakeProfileService
from kontactshare_admin.api import GatewayClient, RemoteError, UnauthenticatedError
from kontactshare_admin.auth import MemoryTokenStore
from kontactshare_admin.config import Settings, StoreBackend
from kontactshare_admin.models import (
    BulkAction,
    ProfilePayload,
    ProfileStatus,
    QueryState,
    StoredProfile,
)
from kontactshare_admin.stores import (
    DuplicateProfileError,
    LocalProfileStore,
    ProfileNotFoundError,
    RemoteProfileStore,
    create_store,
)


def _payload(code: str, **fields: str) -> ProfilePayload:
    values = {
        "id": "20260101-0000-0001",
        "pin": "12345",
        "unique_code": code,
        "full_name": f"Person {code}",
        "email": f"{code}@example.com",
        "job_title": "Engineer",
        "company_name": "Acme",
    }
    values.update(fields)
    return ProfilePayload(**values)


class TestLocalProfileStoreInit:
    """Tests for LocalProfileStore initialization."""

    def test_default_path(self) -> None:
        store = LocalProfileStore()
        assert store.db_path == Path.home() / ".kontactshare-admin" / "profiles.db"

    def test_init_db_creates_parent_directory(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "dir" / "profiles.db"
        store = LocalProfileStore(db_path=db_path)

        store.init_db()

        assert db_path.parent.exists()
        assert store.list_profiles(QueryState()).profiles == []
        store.close()


class TestLocalProfileStore:
    """Tests for LocalProfileStore operations."""

    def test_create_returns_credentials_and_link(self, local_store: LocalProfileStore) -> None:
        created = local_store.create(_payload("abc"))

        assert created.unique_code == "abc"
        assert created.pin == "12345"
        assert created.id == "20260101-0000-0001"
        assert created.profile_link == f"{PUBLIC_BASE_URL}/myprofile/abc"

    def test_created_profile_is_active(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("abc"))

        profile = local_store.get("abc")

        assert profile.status == ProfileStatus.ACTIVE
        assert profile.full_name == "Person abc"
        assert profile.created_at is not None

    def test_create_duplicate_code_fails(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("abc"))

        with pytest.raises(DuplicateProfileError):
            local_store.create(_payload("abc"))

    def test_get_unknown_code(self, local_store: LocalProfileStore) -> None:
        with pytest.raises(ProfileNotFoundError, match="'nope' not found"):
            local_store.get("nope")

    def test_list_is_newest_first_and_paginated(self, local_store: LocalProfileStore) -> None:
        for i in range(5):
            local_store.create(_payload(f"code{i}"))

        first = local_store.list_profiles(QueryState(page=1, limit=2))
        last = local_store.list_profiles(QueryState(page=3, limit=2))

        assert [p.unique_code for p in first.profiles] == ["code4", "code3"]
        assert [p.unique_code for p in last.profiles] == ["code0"]
        assert first.pagination.total == 5
        assert first.pagination.pages == 3
        assert last.pagination.page == 3

    def test_empty_list_has_zero_pages(self, local_store: LocalProfileStore) -> None:
        page = local_store.list_profiles(QueryState())

        assert page.pagination.total == 0
        assert page.pagination.pages == 0

    def test_search_is_case_insensitive_across_fields(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("aaa", full_name="Jane Doe"))
        local_store.create(_payload("bbb", company_name="Globex"))
        local_store.create(_payload("ccc", email="jane@other.test"))

        by_name = local_store.list_profiles(QueryState(search="JANE"))
        by_company = local_store.list_profiles(QueryState(search="globex"))

        assert {p.unique_code for p in by_name.profiles} == {"aaa", "ccc"}
        assert [p.unique_code for p in by_company.profiles] == ["bbb"]

    def test_search_wildcards_match_literally(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("aaa", full_name="100% Real"))
        local_store.create(_payload("bbb", full_name="1000 Real"))
        local_store.create(_payload("ccc", company_name="a_b Corp"))
        local_store.create(_payload("ddd", company_name="axb Corp"))

        by_percent = local_store.list_profiles(QueryState(search="100%"))
        by_underscore = local_store.list_profiles(QueryState(search="a_b"))

        assert [p.unique_code for p in by_percent.profiles] == ["aaa"]
        assert [p.unique_code for p in by_underscore.profiles] == ["ccc"]

    def test_status_filter(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("aaa"))
        local_store.create(_payload("bbb"))
        local_store.set_status("bbb", ProfileStatus.BANNED)

        banned = local_store.list_profiles(QueryState(status=ProfileStatus.BANNED))

        assert [p.unique_code for p in banned.profiles] == ["bbb"]
        assert banned.pagination.total == 1

    def test_ban_and_unban(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("abc"))

        local_store.set_status("abc", ProfileStatus.BANNED)
        assert local_store.get("abc").is_banned

        local_store.set_status("abc", ProfileStatus.ACTIVE)
        assert local_store.get("abc").status == ProfileStatus.ACTIVE

    def test_set_status_unknown_code(self, local_store: LocalProfileStore) -> None:
        with pytest.raises(ProfileNotFoundError):
            local_store.set_status("nope", ProfileStatus.BANNED)

    def test_delete(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("abc"))

        local_store.delete("abc")

        with pytest.raises(ProfileNotFoundError):
            local_store.get("abc")

    def test_bulk_reports_unknown_codes(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("aaa"))
        local_store.create(_payload("bbb"))

        result = local_store.bulk(BulkAction.BAN, ["aaa", "missing", "bbb"])

        assert result.succeeded == ["aaa", "bbb"]
        assert [item.unique_code for item in result.failed] == ["missing"]
        assert local_store.get("aaa").is_banned
        assert local_store.get("bbb").is_banned

    def test_bulk_delete(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("aaa"))
        local_store.create(_payload("bbb"))

        local_store.bulk(BulkAction.DELETE, ["aaa", "bbb"])

        assert local_store.list_profiles(QueryState()).pagination.total == 0

    def test_stats(self, local_store: LocalProfileStore) -> None:
        local_store.create(_payload("aaa"))
        local_store.create(_payload("bbb"))
        local_store.set_status("bbb", ProfileStatus.BANNED)
        with local_store.get_session() as session:
            old = StoredProfile(
                unique_code="old",
                created_at=datetime.now(UTC) - timedelta(days=30),
            )
            session.add(old)
            session.commit()

        stats = local_store.stats()

        assert stats.total_profiles == 3
        assert stats.active_profiles == 2
        assert stats.banned_profiles == 1
        assert stats.today_profiles == 2
        assert stats.week_profiles == 2

    def test_context_manager_closes(self, tmp_path: Path) -> None:
        with LocalProfileStore(db_path=tmp_path / "profiles.db") as store:
            store.init_db()
            store.create(_payload("abc"))


class TestRemoteProfileStore:
    """Tests for RemoteProfileStore against the fake service."""

    def test_create_sends_camel_case_payload(
        self, remote_store: RemoteProfileStore, fake_service: FakeProfileService
    ) -> None:
        created = remote_store.create(_payload("abc", mobile_primary="555"))

        assert created.unique_code == "abc"
        assert created.pin == "12345"
        assert created.profile_link == f"{PUBLIC_BASE_URL}/myprofile/abc"
        assert fake_service.profiles["abc"]["mobilePrimary"] == "555"

    def test_create_duplicate_surfaces_service_error(
        self, remote_store: RemoteProfileStore, fake_service: FakeProfileService
    ) -> None:
        fake_service.add_profile("abc")

        with pytest.raises(RemoteError, match="Unique code already exists"):
            remote_store.create(_payload("abc"))

    def test_list_profiles(
        self, remote_store: RemoteProfileStore, fake_service: FakeProfileService
    ) -> None:
        fake_service.seed(3)

        page = remote_store.list_profiles(QueryState(page=1, limit=2))

        assert [p.unique_code for p in page.profiles] == ["code002", "code001"]
        assert page.pagination.pages == 2

    def test_get_and_set_status(
        self, remote_store: RemoteProfileStore, fake_service: FakeProfileService
    ) -> None:
        fake_service.add_profile("abc")

        remote_store.set_status("abc", ProfileStatus.BANNED)
        assert remote_store.get("abc").is_banned

        remote_store.set_status("abc", ProfileStatus.ACTIVE)
        assert remote_store.get("abc").status == ProfileStatus.ACTIVE

    def test_delete(self, remote_store: RemoteProfileStore, fake_service: FakeProfileService) -> None:
        fake_service.add_profile("abc")

        remote_store.delete("abc")

        assert fake_service.profiles == {}

    def test_bulk_without_per_item_results(
        self, remote_store: RemoteProfileStore, fake_service: FakeProfileService
    ) -> None:
        fake_service.seed(2)

        result = remote_store.bulk(BulkAction.BAN, ["code000", "code001"])

        assert result.succeeded == ["code000", "code001"]

    def test_bulk_with_per_item_results(
        self, remote_store: RemoteProfileStore, fake_service: FakeProfileService
    ) -> None:
        fake_service.seed(1)
        fake_service.per_item_bulk_results = True

        result = remote_store.bulk(BulkAction.DELETE, ["code000", "missing"])

        assert result.succeeded == ["code000"]
        assert [item.unique_code for item in result.failed] == ["missing"]

    def test_stats(self, remote_store: RemoteProfileStore, fake_service: FakeProfileService) -> None:
        fake_service.add_profile("a")
        fake_service.add_profile("b", status="banned")

        stats = remote_store.stats()

        assert stats.total_profiles == 2
        assert stats.banned_profiles == 1

    def test_logged_out_store_raises_unauthenticated(
        self,
        fake_service: FakeProfileService,
        gateway_client: GatewayClient,
        token_store: MemoryTokenStore,
    ) -> None:
        token_store.clear()
        store = RemoteProfileStore(gateway_client, PUBLIC_BASE_URL)

        with pytest.raises(UnauthenticatedError):
            store.stats()

        assert fake_service.requests == []


class TestCreateStore:
    """Tests for the store factory."""

    def test_local_backend(self, tmp_path: Path) -> None:
        settings = Settings(backend=StoreBackend.LOCAL, local_db_path=tmp_path / "p.db")

        with create_store(settings, MemoryTokenStore()) as store:
            assert isinstance(store, LocalProfileStore)
            assert (tmp_path / "p.db").exists()

    def test_remote_backend(self) -> None:
        settings = Settings(backend=StoreBackend.REMOTE)

        with create_store(settings, MemoryTokenStore()) as store:
            assert isinstance(store, RemoteProfileStore)
