# ABOUTME: Local profile store persisting profiles to SQLite with SQLModel.
# ABOUTME: Implements the same lifecycle as the remote service for offline prototyping.

import math
from collections.abc import Generator
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta
from pathlib import Path

from sqlmodel import Session, SQLModel, col, create_engine, func, or_, select

from kontactshare_admin.api.mapper import build_profile_link
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import (
    BulkAction,
    BulkItemResult,
    BulkResult,
    CreatedProfile,
    DashboardStats,
    Pagination,
    Profile,
    ProfilePage,
    ProfilePayload,
    ProfileStatus,
)
from kontactshare_admin.models.query import QueryState
from kontactshare_admin.models.stored_profile import StoredProfile
from kontactshare_admin.stores.base import ProfileStore
from kontactshare_admin.stores.exceptions import DuplicateProfileError, ProfileNotFoundError

logger = get_logger(__name__)


def _escape_like(text: str) -> str:
    """Make LIKE wildcards in search text match literally (escape char is a backslash)."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class LocalProfileStore(ProfileStore):
    """Profile store keeping every profile in a local SQLite database."""

    DEFAULT_DB_PATH = Path.home() / ".kontactshare-admin" / "profiles.db"

    def __init__(
        self,
        db_path: Path | None = None,
        public_base_url: str = "http://localhost:5173",
    ) -> None:
        """Initialize the local store.

        Args:
            db_path: Path to the SQLite database file.
                Defaults to ~/.kontactshare-admin/profiles.db
            public_base_url: Base URL for shareable profile links.
        """
        self.db_path = db_path if db_path is not None else self.DEFAULT_DB_PATH
        self._public_base_url = public_base_url
        self._engine = create_engine(f"sqlite:///{self.db_path}", echo=False)

    def init_db(self) -> None:
        """Initialize the database by creating tables and parent directories."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        SQLModel.metadata.create_all(self._engine)

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session as a context manager.

        Yields:
            SQLModel Session for database operations.
        """
        with Session(self._engine) as session:
            yield session

    def close(self) -> None:
        self._engine.dispose()

    def _find(self, session: Session, unique_code: str) -> StoredProfile:
        statement = select(StoredProfile).where(StoredProfile.unique_code == unique_code)
        row = session.exec(statement).first()
        if row is None:
            raise ProfileNotFoundError(unique_code)
        return row

    def create(self, payload: ProfilePayload) -> CreatedProfile:
        """Store a new active profile.

        Raises:
            DuplicateProfileError: If the unique code is already in use.
        """
        with self.get_session() as session:
            statement = select(StoredProfile).where(
                StoredProfile.unique_code == payload.unique_code
            )
            if session.exec(statement).first() is not None:
                raise DuplicateProfileError(payload.unique_code)

            now = datetime.now(UTC)
            row = StoredProfile(
                **payload.model_dump(),
                status=ProfileStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
            session.add(row)
            session.commit()
            session.refresh(row)

        logger.info("profile_created", unique_code=row.unique_code, backend="local")
        return CreatedProfile(
            id=row.id,
            pin=row.pin,
            unique_code=row.unique_code,
            profile_link=build_profile_link(self._public_base_url, row.unique_code),
        )

    def list_profiles(self, query: QueryState) -> ProfilePage:
        """Fetch one page of profiles, newest first.

        Search matches name, email, company or unique code, case-insensitively.
        """
        conditions = []
        if query.search:
            pattern = f"%{_escape_like(query.search)}%"
            conditions.append(
                or_(
                    col(StoredProfile.full_name).ilike(pattern, escape="\\"),
                    col(StoredProfile.email).ilike(pattern, escape="\\"),
                    col(StoredProfile.company_name).ilike(pattern, escape="\\"),
                    col(StoredProfile.unique_code).ilike(pattern, escape="\\"),
                )
            )
        if query.status is not None:
            conditions.append(StoredProfile.status == query.status)

        with self.get_session() as session:
            count_stmt = select(func.count()).select_from(StoredProfile)
            page_stmt = select(StoredProfile)
            for condition in conditions:
                count_stmt = count_stmt.where(condition)
                page_stmt = page_stmt.where(condition)

            total = session.exec(count_stmt).one()
            page_stmt = (
                page_stmt.order_by(
                    col(StoredProfile.created_at).desc(), col(StoredProfile.row_id).desc()
                )
                .offset((query.page - 1) * query.limit)
                .limit(query.limit)
            )
            profiles = [row.to_profile() for row in session.exec(page_stmt).all()]

        return ProfilePage(
            profiles=profiles,
            pagination=Pagination(
                page=query.page,
                limit=query.limit,
                total=total,
                pages=math.ceil(total / query.limit),
            ),
        )

    def get(self, unique_code: str) -> Profile:
        with self.get_session() as session:
            return self._find(session, unique_code).to_profile()

    def set_status(self, unique_code: str, status: ProfileStatus) -> None:
        with self.get_session() as session:
            self._set_status(session, unique_code, status)
            session.commit()
        logger.info("profile_status_changed", unique_code=unique_code, status=status.value)

    def _set_status(self, session: Session, unique_code: str, status: ProfileStatus) -> None:
        row = self._find(session, unique_code)
        row.status = status
        row.updated_at = datetime.now(UTC)
        session.add(row)

    def delete(self, unique_code: str) -> None:
        with self.get_session() as session:
            session.delete(self._find(session, unique_code))
            session.commit()
        logger.info("profile_deleted", unique_code=unique_code)

    def bulk(self, action: BulkAction, unique_codes: list[str]) -> BulkResult:
        """Apply an action to each profile, reporting unknown codes individually."""
        results: list[BulkItemResult] = []
        with self.get_session() as session:
            for code in unique_codes:
                try:
                    if action == BulkAction.DELETE:
                        session.delete(self._find(session, code))
                    elif action == BulkAction.BAN:
                        self._set_status(session, code, ProfileStatus.BANNED)
                    else:
                        self._set_status(session, code, ProfileStatus.ACTIVE)
                except ProfileNotFoundError as e:
                    results.append(BulkItemResult(unique_code=code, ok=False, error=str(e)))
                    continue
                results.append(BulkItemResult(unique_code=code, ok=True))
            session.commit()

        result = BulkResult(action=action, requested=list(unique_codes), results=results)
        logger.info(
            "bulk_action_applied",
            action=action.value,
            requested=len(unique_codes),
            failed=len(result.failed),
        )
        return result

    def stats(self) -> DashboardStats:
        """Count profiles by status and by creation time.

        "Today" starts at midnight UTC; "week" covers the last seven days.
        """
        now = datetime.now(UTC)
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_start = now - timedelta(days=7)

        with self.get_session() as session:
            total = session.exec(select(func.count()).select_from(StoredProfile)).one()
            active = session.exec(
                select(func.count())
                .select_from(StoredProfile)
                .where(StoredProfile.status == ProfileStatus.ACTIVE)
            ).one()
            banned = session.exec(
                select(func.count())
                .select_from(StoredProfile)
                .where(StoredProfile.status == ProfileStatus.BANNED)
            ).one()
            today = session.exec(
                select(func.count())
                .select_from(StoredProfile)
                .where(StoredProfile.created_at >= today_start)
            ).one()
            week = session.exec(
                select(func.count())
                .select_from(StoredProfile)
                .where(StoredProfile.created_at >= week_start)
            ).one()

        return DashboardStats(
            total_profiles=total,
            active_profiles=active,
            banned_profiles=banned,
            today_profiles=today,
            week_profiles=week,
        )
