"""
Pydantic models for the catalog backend.

Record models describe what the store hands out; Create/Update models
describe what clients may send. Everything goes over the wire in camelCase
(``fileUrl``, ``downloadCount`` ...) while Python code uses snake_case.
"""
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

# Minimum notice for a custom project
MIN_NOTICE_DAYS = 21


class Category(str, Enum):
    SOCIAL_MEDIA = "social-media"
    FIELD_TOOLS = "field-tools"
    EVENTS = "events"
    STORE = "store"
    GENERAL = "general"


class ContentType(str, Enum):
    VIDEO = "video"
    GRAPHIC = "graphic"
    TEMPLATE = "template"
    BUNDLE = "bundle"
    MOCKUP = "mockup"


class ProjectStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Records

class UserRecord(CamelModel):
    id: int
    username: str
    password: str
    is_admin: bool = False


class UserSummary(CamelModel):
    id: int
    username: str
    is_admin: bool


class ContentItemRecord(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    category: Category
    type: ContentType
    file_url: str
    thumbnail_url: str
    download_count: int = 0
    featured: bool = False
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class ProjectRequestRecord(CamelModel):
    id: int
    full_name: str
    email: str
    project_type: str
    timeline: str
    due_date: date
    description: str
    contact_method: str
    reference_files: Optional[List[str]] = None
    status: ProjectStatus = ProjectStatus.PENDING
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class DownloadRecord(CamelModel):
    id: int
    content_item_id: Optional[int] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    downloaded_at: datetime

    @field_validator("downloaded_at")
    @classmethod
    def downloaded_at_in_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


# Requests

class ContentItemCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Category
    type: ContentType
    file_url: str = Field(..., min_length=1)
    thumbnail_url: str = Field(..., min_length=1)
    featured: Optional[bool] = False


class ContentItemUpdate(CamelModel):
    # Non-nullable columns default to None but reject an explicit null
    title: str = Field(None, min_length=1)
    description: Optional[str] = None
    category: Category = None
    type: ContentType = None
    file_url: str = Field(None, min_length=1)
    thumbnail_url: str = Field(None, min_length=1)
    featured: bool = None


def _check_due_date(value: date) -> date:
    earliest = date.today() + timedelta(days=MIN_NOTICE_DAYS)
    if value < earliest:
        raise ValueError("Due date must be at least 3 weeks from today")
    return value


class ProjectRequestCreate(CamelModel):
    full_name: str = Field(..., min_length=2)
    email: EmailStr
    project_type: str = Field(..., min_length=1)
    timeline: str = Field(..., min_length=1)
    due_date: date
    description: str = Field(..., min_length=10)
    contact_method: str = Field(..., min_length=1)
    reference_files: Optional[List[str]] = None

    @field_validator("due_date")
    @classmethod
    def due_date_has_notice(cls, value: date) -> date:
        return _check_due_date(value)


class ProjectRequestUpdate(CamelModel):
    # Non-nullable columns default to None but reject an explicit null
    full_name: str = Field(None, min_length=2)
    email: EmailStr = None
    project_type: str = Field(None, min_length=1)
    timeline: str = Field(None, min_length=1)
    due_date: date = None
    description: str = Field(None, min_length=10)
    contact_method: str = Field(None, min_length=1)
    reference_files: Optional[List[str]] = None
    status: ProjectStatus = None


class LoginRequest(BaseModel):
    username: str
    password: str
