"""
Database abstraction for Postgres and an in-memory implementation.

Both clients satisfy :class:`DbClient`. Lookups that miss return ``None`` (or
``False`` for deletes) instead of raising; the only errors a caller is
expected to handle are the :class:`StorageError` subclasses below.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Dict, List, Optional, Protocol

from sqlalchemy import (
    Boolean,
    Column,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    case,
    create_engine,
    delete,
    event,
    func,
    or_,
    select,
    update,
)
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from hub import fixtures
from hub.schemas import (
    NewsArticleCreate,
    NewsArticleUpdate,
    ScriptCreate,
    ScriptUpdate,
    SystemStatsCreate,
    UserCreate,
)
from hub.security import hash_password
from hub.security import verify_password as check_password
from shared.constants import EMAIL_MAX_LENGTH, STATS_HISTORY_LIMIT

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for conditions a storage caller is expected to handle."""


class DuplicateUserError(StorageError):
    def __init__(self, field_name: str):
        self.field = field_name
        super().__init__(f"A user with this {field_name} already exists")


class OwnerNotFoundError(StorageError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} does not exist")


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class UserRecord:
    id: str
    username: str
    email: str
    password_hash: str = field(repr=False)
    created_at: float = field(default_factory=lambda: time.time())
    updated_at: float = field(default_factory=lambda: time.time())

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class ScriptRecord:
    id: str
    name: str
    description: str
    category: str
    code: str
    author: str = "User"
    user_id: Optional[str] = None
    is_public: bool = True
    is_favorite: int = 0
    execution_count: int = 0
    last_executed: Optional[float] = None
    created_at: float = field(default_factory=lambda: time.time())

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class NewsArticleRecord:
    id: str
    title: str
    content: str
    summary: str
    source: str
    category: str
    published_at: float
    image_url: Optional[str] = None
    created_at: float = field(default_factory=lambda: time.time())

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class SystemStatsRecord:
    id: str
    cpu_usage: int
    gpu_usage: int
    ram_usage: int
    fps: int
    timestamp: float = field(default_factory=lambda: time.time())

    def as_dict(self) -> dict:
        return asdict(self)


class DbClient(Protocol):
    """Interface for storage access shared by every backend."""

    # Users
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        ...

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        ...

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def create_user(self, payload: UserCreate) -> UserRecord:
        ...

    def verify_password(self, user: UserRecord, password: str) -> bool:
        ...

    # Scripts
    def list_scripts(self) -> List[ScriptRecord]:
        ...

    def list_scripts_by_category(self, category: str) -> List[ScriptRecord]:
        ...

    def get_script(self, script_id: str) -> Optional[ScriptRecord]:
        ...

    def create_script(self, payload: ScriptCreate) -> ScriptRecord:
        ...

    def update_script(
        self, script_id: str, patch: ScriptUpdate
    ) -> Optional[ScriptRecord]:
        ...

    def delete_script(self, script_id: str) -> bool:
        ...

    def increment_execution(self, script_id: str) -> None:
        ...

    def toggle_favorite(self, script_id: str) -> None:
        ...

    def search_scripts(self, query: str) -> List[ScriptRecord]:
        ...

    # News
    def list_news(self) -> List[NewsArticleRecord]:
        ...

    def list_news_by_category(self, category: str) -> List[NewsArticleRecord]:
        ...

    def get_news_article(self, article_id: str) -> Optional[NewsArticleRecord]:
        ...

    def create_news_article(self, payload: NewsArticleCreate) -> NewsArticleRecord:
        ...

    def update_news_article(
        self, article_id: str, patch: NewsArticleUpdate
    ) -> Optional[NewsArticleRecord]:
        ...

    def delete_news_article(self, article_id: str) -> bool:
        ...

    # System stats
    def get_current_stats(self) -> Optional[SystemStatsRecord]:
        ...

    def record_stats(self, payload: SystemStatsCreate) -> SystemStatsRecord:
        ...

    def get_stats_history(self) -> List[SystemStatsRecord]:
        ...


def _by_popularity(scripts) -> List[ScriptRecord]:
    # sorted() is stable, so equal counts keep insertion order.
    return sorted(scripts, key=lambda s: s.execution_count, reverse=True)


def _by_recency(articles) -> List[NewsArticleRecord]:
    return sorted(articles, key=lambda a: a.published_at, reverse=True)


class InMemoryDbClient:
    """Dict-backed storage for development, demos and tests."""

    def __init__(self, seed: bool = True, stats_limit: int = STATS_HISTORY_LIMIT):
        # Route handlers run in a thread pool, so every access takes the lock.
        self._lock = threading.RLock()
        self._seed = seed
        self.stats_limit = stats_limit
        self.users: Dict[str, UserRecord] = {}
        self.scripts: Dict[str, ScriptRecord] = {}
        self.news: Dict[str, NewsArticleRecord] = {}
        self.stats_history: List[SystemStatsRecord] = []
        if seed:
            self._load_fixtures()

    def _load_fixtures(self) -> None:
        now = time.time()
        for row in fixtures.sample_scripts(now):
            self.scripts[row["id"]] = ScriptRecord(**row)
        for row in fixtures.sample_news(now):
            self.news[row["id"]] = NewsArticleRecord(**row)
        self._append_stats(SystemStatsRecord(**fixtures.initial_stats(now)))
        logger.info("InMemoryDbClient initialized with %d scripts", len(self.scripts))

    def reset(self) -> None:
        """Drop everything and reload the fixtures (useful in tests)."""
        with self._lock:
            self.users.clear()
            self.scripts.clear()
            self.news.clear()
            self.stats_history.clear()
            if self._seed:
                self._load_fixtures()

    # Users

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            user = self.users.get(user_id)
            return replace(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._lock:
            for user in self.users.values():
                if user.username == username:
                    return replace(user)
        return None

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            for user in self.users.values():
                if user.email == email:
                    return replace(user)
        return None

    def create_user(self, payload: UserCreate) -> UserRecord:
        # Hash before taking the lock; bcrypt is deliberately slow.
        password_hash = hash_password(payload.password)
        with self._lock:
            for user in self.users.values():
                if user.username == payload.username:
                    raise DuplicateUserError("username")
                if user.email == payload.email:
                    raise DuplicateUserError("email")
            now = time.time()
            user = UserRecord(
                id=_new_id(),
                username=payload.username,
                email=payload.email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            self.users[user.id] = user
            return replace(user)

    def verify_password(self, user: UserRecord, password: str) -> bool:
        return check_password(user.password_hash, password)

    # Scripts

    def list_scripts(self) -> List[ScriptRecord]:
        with self._lock:
            return [replace(s) for s in _by_popularity(self.scripts.values())]

    def list_scripts_by_category(self, category: str) -> List[ScriptRecord]:
        with self._lock:
            matches = [s for s in self.scripts.values() if s.category == category]
            return [replace(s) for s in _by_popularity(matches)]

    def get_script(self, script_id: str) -> Optional[ScriptRecord]:
        with self._lock:
            script = self.scripts.get(script_id)
            return replace(script) if script else None

    def _check_owner(self, user_id: Optional[str]) -> None:
        if user_id is not None and user_id not in self.users:
            raise OwnerNotFoundError(user_id)

    def create_script(self, payload: ScriptCreate) -> ScriptRecord:
        with self._lock:
            self._check_owner(payload.user_id)
            script = ScriptRecord(
                id=_new_id(),
                **payload.model_dump(),
                is_favorite=0,
                execution_count=0,
                last_executed=None,
                created_at=time.time(),
            )
            self.scripts[script.id] = script
            return replace(script)

    def update_script(
        self, script_id: str, patch: ScriptUpdate
    ) -> Optional[ScriptRecord]:
        changes = patch.changes()
        with self._lock:
            script = self.scripts.get(script_id)
            if not script:
                return None
            if "user_id" in changes:
                self._check_owner(changes["user_id"])
            updated = replace(script, **changes)
            self.scripts[script_id] = updated
            return replace(updated)

    def delete_script(self, script_id: str) -> bool:
        with self._lock:
            return self.scripts.pop(script_id, None) is not None

    def increment_execution(self, script_id: str) -> None:
        with self._lock:
            script = self.scripts.get(script_id)
            if script:
                script.execution_count += 1
                script.last_executed = time.time()

    def toggle_favorite(self, script_id: str) -> None:
        with self._lock:
            script = self.scripts.get(script_id)
            if script:
                script.is_favorite = 0 if script.is_favorite else 1

    def search_scripts(self, query: str) -> List[ScriptRecord]:
        needle = query.lower()
        with self._lock:
            matches = [
                s
                for s in self.scripts.values()
                if needle in s.name.lower()
                or needle in (s.description or "").lower()
                or needle in (s.code or "").lower()
            ]
            return [replace(s) for s in _by_popularity(matches)]

    # News

    def list_news(self) -> List[NewsArticleRecord]:
        with self._lock:
            return [replace(a) for a in _by_recency(self.news.values())]

    def list_news_by_category(self, category: str) -> List[NewsArticleRecord]:
        with self._lock:
            matches = [a for a in self.news.values() if a.category == category]
            return [replace(a) for a in _by_recency(matches)]

    def get_news_article(self, article_id: str) -> Optional[NewsArticleRecord]:
        with self._lock:
            article = self.news.get(article_id)
            return replace(article) if article else None

    def create_news_article(self, payload: NewsArticleCreate) -> NewsArticleRecord:
        now = time.time()
        data = payload.model_dump()
        if data["published_at"] is None:
            data["published_at"] = now
        article = NewsArticleRecord(id=_new_id(), created_at=now, **data)
        with self._lock:
            self.news[article.id] = article
            return replace(article)

    def update_news_article(
        self, article_id: str, patch: NewsArticleUpdate
    ) -> Optional[NewsArticleRecord]:
        changes = patch.changes()
        with self._lock:
            article = self.news.get(article_id)
            if not article:
                return None
            updated = replace(article, **changes)
            self.news[article_id] = updated
            return replace(updated)

    def delete_news_article(self, article_id: str) -> bool:
        with self._lock:
            return self.news.pop(article_id, None) is not None

    # System stats

    def _append_stats(self, stats: SystemStatsRecord) -> None:
        self.stats_history.append(stats)
        while len(self.stats_history) > self.stats_limit:
            self.stats_history.pop(0)

    def get_current_stats(self) -> Optional[SystemStatsRecord]:
        with self._lock:
            if not self.stats_history:
                return None
            return replace(self.stats_history[-1])

    def record_stats(self, payload: SystemStatsCreate) -> SystemStatsRecord:
        stats = SystemStatsRecord(id=_new_id(), timestamp=time.time(), **payload.model_dump())
        with self._lock:
            self._append_stats(stats)
            return replace(stats)

    def get_stats_history(self) -> List[SystemStatsRecord]:
        with self._lock:
            return [replace(s) for s in self.stats_history]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _to_record(record_cls, row):
    return record_cls(**{f.name: getattr(row, f.name) for f in fields(record_cls)})


class PostgresDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(
        self,
        database_url: str,
        seed: bool = True,
        stats_limit: int = STATS_HISTORY_LIMIT,
    ):
        if not database_url:
            raise ValueError("DATABASE_URL is required for PostgresDbClient")
        if database_url.startswith("postgres://"):
            database_url = "postgresql://" + database_url[len("postgres://"):]
        self.stats_limit = stats_limit
        self._stats_clock_lock = threading.Lock()
        self._last_stats_ts = 0.0

        url = make_url(database_url)
        engine_kwargs: dict = {"future": True}
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(pool_pre_ping=True, pool_recycle=1800)
        self.engine = create_engine(url, **engine_kwargs)
        if url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)
        if seed:
            self._seed_if_empty()

    def _seed_if_empty(self) -> None:
        now = time.time()
        with self.Session() as session:
            if not session.execute(select(func.count()).select_from(ScriptRow)).scalar_one():
                session.add_all(ScriptRow(**row) for row in fixtures.sample_scripts(now))
                logger.info("Seeded scripts table with demo catalog")
            if not session.execute(select(func.count()).select_from(NewsArticleRow)).scalar_one():
                session.add_all(NewsArticleRow(**row) for row in fixtures.sample_news(now))
            if not session.execute(select(func.count()).select_from(SystemStatsRow)).scalar_one():
                session.add(SystemStatsRow(**fixtures.initial_stats(now)))
            session.commit()

    # Users

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.get(UserRow, user_id)
            return _to_record(UserRecord, row) if row else None

    def _find_user(self, session: Session, column, value) -> Optional[UserRow]:
        return session.execute(select(UserRow).where(column == value)).scalar_one_or_none()

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = self._find_user(session, UserRow.username, username)
            return _to_record(UserRecord, row) if row else None

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = self._find_user(session, UserRow.email, email)
            return _to_record(UserRecord, row) if row else None

    def create_user(self, payload: UserCreate) -> UserRecord:
        password_hash = hash_password(payload.password)
        with self.Session() as session:
            if self._find_user(session, UserRow.username, payload.username):
                raise DuplicateUserError("username")
            if self._find_user(session, UserRow.email, payload.email):
                raise DuplicateUserError("email")
            now = time.time()
            row = UserRow(
                id=_new_id(),
                username=payload.username,
                email=payload.email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            session.add(row)
            try:
                session.commit()
            except IntegrityError as exc:
                # A concurrent registration won the race past the checks above.
                session.rollback()
                taken = self._find_user(session, UserRow.username, payload.username)
                raise DuplicateUserError("username" if taken else "email") from exc
            return _to_record(UserRecord, row)

    def verify_password(self, user: UserRecord, password: str) -> bool:
        return check_password(user.password_hash, password)

    # Scripts

    def _popular_scripts(self):
        return select(ScriptRow).order_by(
            ScriptRow.execution_count.desc(),
            ScriptRow.created_at.asc(),
            ScriptRow.id.asc(),
        )

    def _scripts(self, stmt) -> List[ScriptRecord]:
        with self.Session() as session:
            rows = session.execute(stmt).scalars().all()
            return [_to_record(ScriptRecord, row) for row in rows]

    def list_scripts(self) -> List[ScriptRecord]:
        return self._scripts(self._popular_scripts())

    def list_scripts_by_category(self, category: str) -> List[ScriptRecord]:
        return self._scripts(self._popular_scripts().where(ScriptRow.category == category))

    def get_script(self, script_id: str) -> Optional[ScriptRecord]:
        with self.Session() as session:
            row = session.get(ScriptRow, script_id)
            return _to_record(ScriptRecord, row) if row else None

    def _check_owner(self, session: Session, user_id: Optional[str]) -> None:
        if user_id is not None and session.get(UserRow, user_id) is None:
            raise OwnerNotFoundError(user_id)

    def create_script(self, payload: ScriptCreate) -> ScriptRecord:
        with self.Session() as session:
            self._check_owner(session, payload.user_id)
            row = ScriptRow(
                id=_new_id(),
                **payload.model_dump(),
                is_favorite=0,
                execution_count=0,
                last_executed=None,
                created_at=time.time(),
            )
            session.add(row)
            session.commit()
            return _to_record(ScriptRecord, row)

    def update_script(
        self, script_id: str, patch: ScriptUpdate
    ) -> Optional[ScriptRecord]:
        changes = patch.changes()
        with self.Session() as session:
            row = session.get(ScriptRow, script_id)
            if not row:
                return None
            if "user_id" in changes:
                self._check_owner(session, changes["user_id"])
            for key, value in changes.items():
                setattr(row, key, value)
            session.commit()
            return _to_record(ScriptRecord, row)

    def delete_script(self, script_id: str) -> bool:
        with self.Session() as session:
            result = session.execute(delete(ScriptRow).where(ScriptRow.id == script_id))
            session.commit()
            return (result.rowcount or 0) > 0

    def increment_execution(self, script_id: str) -> None:
        # Single UPDATE so concurrent runs never lose an increment.
        with self.Session() as session:
            session.execute(
                update(ScriptRow)
                .where(ScriptRow.id == script_id)
                .values(
                    execution_count=ScriptRow.execution_count + 1,
                    last_executed=time.time(),
                )
            )
            session.commit()

    def toggle_favorite(self, script_id: str) -> None:
        with self.Session() as session:
            session.execute(
                update(ScriptRow)
                .where(ScriptRow.id == script_id)
                .values(is_favorite=case((ScriptRow.is_favorite == 0, 1), else_=0))
            )
            session.commit()

    def search_scripts(self, query: str) -> List[ScriptRecord]:
        pattern = f"%{_escape_like(query)}%"
        stmt = self._popular_scripts().where(
            or_(
                ScriptRow.name.ilike(pattern, escape="\\"),
                ScriptRow.description.ilike(pattern, escape="\\"),
                ScriptRow.code.ilike(pattern, escape="\\"),
            )
        )
        return self._scripts(stmt)

    # News

    def _recent_news(self):
        return select(NewsArticleRow).order_by(
            NewsArticleRow.published_at.desc(), NewsArticleRow.created_at.desc()
        )

    def _articles(self, stmt) -> List[NewsArticleRecord]:
        with self.Session() as session:
            rows = session.execute(stmt).scalars().all()
            return [_to_record(NewsArticleRecord, row) for row in rows]

    def list_news(self) -> List[NewsArticleRecord]:
        return self._articles(self._recent_news())

    def list_news_by_category(self, category: str) -> List[NewsArticleRecord]:
        return self._articles(self._recent_news().where(NewsArticleRow.category == category))

    def get_news_article(self, article_id: str) -> Optional[NewsArticleRecord]:
        with self.Session() as session:
            row = session.get(NewsArticleRow, article_id)
            return _to_record(NewsArticleRecord, row) if row else None

    def create_news_article(self, payload: NewsArticleCreate) -> NewsArticleRecord:
        now = time.time()
        data = payload.model_dump()
        if data["published_at"] is None:
            data["published_at"] = now
        with self.Session() as session:
            row = NewsArticleRow(id=_new_id(), created_at=now, **data)
            session.add(row)
            session.commit()
            return _to_record(NewsArticleRecord, row)

    def update_news_article(
        self, article_id: str, patch: NewsArticleUpdate
    ) -> Optional[NewsArticleRecord]:
        changes = patch.changes()
        with self.Session() as session:
            row = session.get(NewsArticleRow, article_id)
            if not row:
                return None
            for key, value in changes.items():
                setattr(row, key, value)
            session.commit()
            return _to_record(NewsArticleRecord, row)

    def delete_news_article(self, article_id: str) -> bool:
        with self.Session() as session:
            result = session.execute(
                delete(NewsArticleRow).where(NewsArticleRow.id == article_id)
            )
            session.commit()
            return (result.rowcount or 0) > 0

    # System stats

    def _next_stats_timestamp(self) -> float:
        # History order comes from the timestamp column, so keep it strictly increasing.
        with self._stats_clock_lock:
            now = time.time()
            if now <= self._last_stats_ts:
                now = self._last_stats_ts + 1e-6
            self._last_stats_ts = now
            return now

    def _newest_stats(self):
        return select(SystemStatsRow).order_by(
            SystemStatsRow.timestamp.desc(), SystemStatsRow.id.desc()
        )

    def get_current_stats(self) -> Optional[SystemStatsRecord]:
        with self.Session() as session:
            row = session.execute(self._newest_stats().limit(1)).scalar_one_or_none()
            return _to_record(SystemStatsRecord, row) if row else None

    def record_stats(self, payload: SystemStatsCreate) -> SystemStatsRecord:
        with self.Session() as session:
            row = SystemStatsRow(
                id=_new_id(), timestamp=self._next_stats_timestamp(), **payload.model_dump()
            )
            session.add(row)
            session.flush()
            stale_ids = (
                session.execute(
                    select(SystemStatsRow.id)
                    .order_by(SystemStatsRow.timestamp.desc(), SystemStatsRow.id.desc())
                    .offset(self.stats_limit)
                )
                .scalars()
                .all()
            )
            if stale_ids:
                session.execute(
                    delete(SystemStatsRow).where(SystemStatsRow.id.in_(stale_ids))
                )
            session.commit()
            return _to_record(SystemStatsRecord, row)

    def get_stats_history(self) -> List[SystemStatsRecord]:
        with self.Session() as session:
            rows = session.execute(self._newest_stats().limit(self.stats_limit)).scalars().all()
            return [_to_record(SystemStatsRecord, row) for row in reversed(rows)]


Base = declarative_base()


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=_new_id)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    created_at = Column(Float, nullable=False)
    updated_at = Column(Float, nullable=False)


class ScriptRow(Base):
    __tablename__ = "scripts"

    id = Column(String(64), primary_key=True, default=_new_id)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    code = Column(Text, nullable=False)
    author = Column(String(100), nullable=False, default="User")
    user_id = Column(
        String(64), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    is_public = Column(Boolean, nullable=False, default=True)
    is_favorite = Column(Integer, nullable=False, default=0)
    execution_count = Column(Integer, nullable=False, default=0, index=True)
    last_executed = Column(Float, nullable=True)
    created_at = Column(Float, nullable=False)


class NewsArticleRow(Base):
    __tablename__ = "news_articles"

    id = Column(String(64), primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    summary = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    source = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    published_at = Column(Float, nullable=False, index=True)
    created_at = Column(Float, nullable=False)


class SystemStatsRow(Base):
    __tablename__ = "system_stats"

    id = Column(String(64), primary_key=True, default=_new_id)
    cpu_usage = Column(Integer, nullable=False)
    gpu_usage = Column(Integer, nullable=False)
    ram_usage = Column(Integer, nullable=False)
    fps = Column(Integer, nullable=False)
    timestamp = Column(Float, nullable=False, index=True)
