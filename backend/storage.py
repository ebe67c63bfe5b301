"""
Entity store for users, content items, project requests and download events.

Two interchangeable backends implement ``Storage``:

* ``MemStorage`` keeps every collection in a dict keyed by id. This is the
  default; nothing survives a restart.
* ``DatabaseStorage`` goes through SQLAlchemy using the tables in
  ``models.py``.

Store methods never raise for unknown ids. Lookups return ``None`` and
deletes return ``False``; turning that into a 404 is the caller's job.
Records handed out are copies, so callers cannot mutate stored state.
"""
import itertools
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import models
from database import Base, create_db_engine, create_session_factory
from schemas import (
    ContentItemCreate,
    ContentItemRecord,
    DownloadRecord,
    ProjectRequestCreate,
    ProjectRequestRecord,
    ProjectStatus,
    UserRecord,
)
from seed_data import SAMPLE_CONTENT

logger = logging.getLogger(__name__)


def utcnow():
    return datetime.now(timezone.utc)


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def matches_query(item: ContentItemRecord, query: str) -> bool:
    """Case-insensitive substring match on title, description, category or type."""
    needle = query.lower()
    return (
        _contains(item.title, needle)
        or _contains(item.description, needle)
        or _contains(item.category, needle)
        or _contains(item.type, needle)
    )


def _none_if_empty(value):
    return value or None


class Storage(ABC):
    # Whether records outlive the process; non-persistent stores are cleared on shutdown
    persistent = False

    # Users
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRecord]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRecord]: ...

    @abstractmethod
    def create_user(self, username: str, password: str, is_admin: bool = False) -> UserRecord: ...

    def authenticate_user(self, username: str, password: str) -> Optional[UserRecord]:
        # First username match wins; plaintext comparison
        user = self.get_user_by_username(username)
        if user is not None and user.password == password:
            return user
        return None

    # Content
    @abstractmethod
    def get_content_items(self, category: Optional[str] = None) -> List[ContentItemRecord]: ...

    @abstractmethod
    def get_content_item(self, item_id: int) -> Optional[ContentItemRecord]: ...

    @abstractmethod
    def create_content_item(self, item: ContentItemCreate) -> ContentItemRecord: ...

    @abstractmethod
    def update_content_item(self, item_id: int, updates: Dict[str, Any]) -> Optional[ContentItemRecord]: ...

    @abstractmethod
    def delete_content_item(self, item_id: int) -> bool: ...

    def search_content_items(self, query: str) -> List[ContentItemRecord]:
        return [item for item in self.get_content_items() if matches_query(item, query)]

    def get_featured_content_items(self) -> List[ContentItemRecord]:
        return [item for item in self.get_content_items() if item.featured]

    @abstractmethod
    def increment_download_count(self, item_id: int) -> None: ...

    # Project requests
    @abstractmethod
    def get_project_requests(self) -> List[ProjectRequestRecord]: ...

    @abstractmethod
    def get_project_request(self, request_id: int) -> Optional[ProjectRequestRecord]: ...

    @abstractmethod
    def create_project_request(self, request: ProjectRequestCreate) -> ProjectRequestRecord: ...

    @abstractmethod
    def update_project_request(self, request_id: int, updates: Dict[str, Any]) -> Optional[ProjectRequestRecord]: ...

    # Downloads
    @abstractmethod
    def create_download(self, content_item_id: Optional[int], user_agent: Optional[str] = None,
                        ip_address: Optional[str] = None) -> DownloadRecord: ...

    @abstractmethod
    def get_download_stats(self, content_item_id: int) -> int: ...

    # Lifecycle
    @abstractmethod
    def clear(self) -> None: ...

    def seed(self, admin_username: str, admin_password: str, sample_content: bool = False):
        admin = self.get_user_by_username(admin_username)
        if admin is None:
            admin = self.create_user(admin_username, admin_password, is_admin=True)
            logger.info("Admin user created: username=%s", admin.username)
        if sample_content and not self.get_content_items():
            for entry in SAMPLE_CONTENT:
                self.create_content_item(ContentItemCreate.model_validate(entry))
            logger.info("Loaded %d sample content items", len(SAMPLE_CONTENT))
        return admin


class MemStorage(Storage):
    def __init__(self):
        self._users: Dict[int, UserRecord] = {}
        self._content_items: Dict[int, ContentItemRecord] = {}
        self._project_requests: Dict[int, ProjectRequestRecord] = {}
        self._downloads: Dict[int, DownloadRecord] = {}
        self._user_ids = itertools.count(1)
        self._content_ids = itertools.count(1)
        self._project_ids = itertools.count(1)
        self._download_ids = itertools.count(1)

    @staticmethod
    def _copy(record):
        return record.model_copy(deep=True) if record is not None else None

    def get_user(self, user_id):
        return self._copy(self._users.get(user_id))

    def get_user_by_username(self, username):
        for user in self._users.values():
            if user.username == username:
                return self._copy(user)
        return None

    def create_user(self, username, password, is_admin=False):
        user = UserRecord(id=next(self._user_ids), username=username, password=password, is_admin=is_admin)
        self._users[user.id] = user
        return self._copy(user)

    def get_content_items(self, category=None):
        items = self._content_items.values()
        if category:
            items = [item for item in items if item.category == category]
        return [self._copy(item) for item in items]

    def get_content_item(self, item_id):
        return self._copy(self._content_items.get(item_id))

    def create_content_item(self, item):
        record = ContentItemRecord(
            id=next(self._content_ids),
            title=item.title,
            description=item.description or None,
            category=item.category,
            type=item.type,
            file_url=item.file_url,
            thumbnail_url=item.thumbnail_url,
            download_count=0,
            featured=item.featured or False,
            created_at=utcnow(),
        )
        self._content_items[record.id] = record
        return self._copy(record)

    def update_content_item(self, item_id, updates):
        current = self._content_items.get(item_id)
        if current is None:
            return None
        updated = current.model_copy(update=dict(updates))
        self._content_items[item_id] = updated
        return self._copy(updated)

    def delete_content_item(self, item_id):
        return self._content_items.pop(item_id, None) is not None

    def increment_download_count(self, item_id):
        item = self._content_items.get(item_id)
        if item is None:
            return
        # Plain read-then-write with no lock. Concurrent callers can both read
        # the same count and one increment is lost.
        count = item.download_count or 0
        self._content_items[item_id] = item.model_copy(update={"download_count": count + 1})

    def get_project_requests(self):
        return [self._copy(request) for request in self._project_requests.values()]

    def get_project_request(self, request_id):
        return self._copy(self._project_requests.get(request_id))

    def create_project_request(self, request):
        record = ProjectRequestRecord(
            id=next(self._project_ids),
            full_name=request.full_name,
            email=request.email,
            project_type=request.project_type,
            timeline=request.timeline,
            due_date=request.due_date,
            description=request.description,
            contact_method=request.contact_method,
            reference_files=request.reference_files,
            status=ProjectStatus.PENDING,
            created_at=utcnow(),
        )
        self._project_requests[record.id] = record
        return self._copy(record)

    def update_project_request(self, request_id, updates):
        current = self._project_requests.get(request_id)
        if current is None:
            return None
        updated = current.model_copy(update=dict(updates))
        self._project_requests[request_id] = updated
        return self._copy(updated)

    def create_download(self, content_item_id, user_agent=None, ip_address=None):
        record = DownloadRecord(
            id=next(self._download_ids),
            content_item_id=content_item_id,
            user_agent=_none_if_empty(user_agent),
            ip_address=_none_if_empty(ip_address),
            downloaded_at=utcnow(),
        )
        self._downloads[record.id] = record
        return self._copy(record)

    def get_download_stats(self, content_item_id):
        return sum(1 for d in self._downloads.values() if d.content_item_id == content_item_id)

    def clear(self):
        # Counters keep running so ids are never handed out twice
        self._users.clear()
        self._content_items.clear()
        self._project_requests.clear()
        self._downloads.clear()


class DatabaseStorage(Storage):
    persistent = True

    def __init__(self, session_factory):
        self._session_factory = session_factory

    @contextmanager
    def _session(self):
        db = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    def _insert(self, row, schema):
        with self._session() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    def _update(self, model, schema, row_id, updates):
        with self._session() as db:
            row = db.get(model, row_id)
            if row is None:
                return None
            for key, value in updates.items():
                setattr(row, key, value)
            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    def get_user(self, user_id):
        with self._session() as db:
            row = db.get(models.User, user_id)
            return UserRecord.model_validate(row) if row else None

    def get_user_by_username(self, username):
        with self._session() as db:
            row = (db.query(models.User)
                   .filter(models.User.username == username)
                   .order_by(models.User.id)
                   .first())
            return UserRecord.model_validate(row) if row else None

    def create_user(self, username, password, is_admin=False):
        return self._insert(models.User(username=username, password=password, is_admin=is_admin), UserRecord)

    def get_content_items(self, category=None):
        with self._session() as db:
            query = db.query(models.ContentItem)
            if category:
                query = query.filter(models.ContentItem.category == category)
            return [ContentItemRecord.model_validate(row) for row in query.order_by(models.ContentItem.id)]

    def get_content_item(self, item_id):
        with self._session() as db:
            row = db.get(models.ContentItem, item_id)
            return ContentItemRecord.model_validate(row) if row else None

    def create_content_item(self, item):
        row = models.ContentItem(
            title=item.title,
            description=item.description or None,
            category=item.category,
            type=item.type,
            file_url=item.file_url,
            thumbnail_url=item.thumbnail_url,
            download_count=0,
            featured=item.featured or False,
            created_at=utcnow(),
        )
        return self._insert(row, ContentItemRecord)

    def update_content_item(self, item_id, updates):
        return self._update(models.ContentItem, ContentItemRecord, item_id, updates)

    def delete_content_item(self, item_id):
        with self._session() as db:
            row = db.get(models.ContentItem, item_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    def increment_download_count(self, item_id):
        with self._session() as db:
            row = db.get(models.ContentItem, item_id)
            if row is None:
                return
            # Read-modify-write in Python rather than an UPDATE ... SET x = x + 1,
            # so concurrent downloads can lose an increment.
            row.download_count = (row.download_count or 0) + 1
            db.commit()

    def get_project_requests(self):
        with self._session() as db:
            rows = db.query(models.ProjectRequest).order_by(models.ProjectRequest.id)
            return [ProjectRequestRecord.model_validate(row) for row in rows]

    def get_project_request(self, request_id):
        with self._session() as db:
            row = db.get(models.ProjectRequest, request_id)
            return ProjectRequestRecord.model_validate(row) if row else None

    def create_project_request(self, request):
        row = models.ProjectRequest(
            full_name=request.full_name,
            email=request.email,
            project_type=request.project_type,
            timeline=request.timeline,
            due_date=request.due_date,
            description=request.description,
            contact_method=request.contact_method,
            reference_files=request.reference_files,
            status=ProjectStatus.PENDING.value,
            created_at=utcnow(),
        )
        return self._insert(row, ProjectRequestRecord)

    def update_project_request(self, request_id, updates):
        return self._update(models.ProjectRequest, ProjectRequestRecord, request_id, updates)

    def create_download(self, content_item_id, user_agent=None, ip_address=None):
        row = models.Download(
            content_item_id=content_item_id,
            user_agent=_none_if_empty(user_agent),
            ip_address=_none_if_empty(ip_address),
            downloaded_at=utcnow(),
        )
        return self._insert(row, DownloadRecord)

    def get_download_stats(self, content_item_id):
        with self._session() as db:
            return (db.query(models.Download)
                    .filter(models.Download.content_item_id == content_item_id)
                    .count())

    def clear(self):
        with self._session() as db:
            for model in (models.Download, models.ProjectRequest, models.ContentItem, models.User):
                db.query(model).delete()
            db.commit()


def build_storage(backend: str = "memory", database_url: Optional[str] = None) -> Storage:
    if backend == "memory":
        return MemStorage()
    if backend == "database":
        engine = create_db_engine(database_url)
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created/verified (%s)", engine.url.get_backend_name())
        return DatabaseStorage(create_session_factory(engine))
    raise ValueError(f"Unknown storage backend: {backend!r}")
