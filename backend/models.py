from sqlalchemy import Boolean, Column, Date, DateTime, Integer, JSON, String, Text
from database import Base


class User(Base):
    __tablename__ = "users"
    # sqlite_autoincrement keeps ids from being reused after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Not unique on purpose: lookups take the first match
    username = Column(String, nullable=False, index=True)
    password = Column(String, nullable=False)
    is_admin = Column(Boolean, default=False)


class ContentItem(Base):
    __tablename__ = "content_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=False)  # social-media, field-tools, events, store, general
    type = Column(String, nullable=False)  # video, graphic, template, bundle, mockup
    file_url = Column(String, nullable=False)
    thumbnail_url = Column(String, nullable=False)
    download_count = Column(Integer, default=0)
    featured = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class ProjectRequest(Base):
    __tablename__ = "project_requests"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    project_type = Column(String, nullable=False)
    timeline = Column(String, nullable=False)
    due_date = Column(Date, nullable=False)
    description = Column(Text, nullable=False)
    contact_method = Column(String, nullable=False)
    reference_files = Column(JSON, nullable=True)
    status = Column(String, default="pending")  # pending, in-progress, completed, cancelled
    created_at = Column(DateTime(timezone=True), nullable=False)


class Download(Base):
    __tablename__ = "downloads"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Weak reference to content_items.id, no foreign key
    content_item_id = Column(Integer, nullable=True, index=True)
    user_agent = Column(String, nullable=True)
    ip_address = Column(String, nullable=True)
    downloaded_at = Column(DateTime(timezone=True), nullable=False)
