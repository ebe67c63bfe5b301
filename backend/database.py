from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
import os

Base = declarative_base()


def default_database_url():
    """SQLite file fallback, preferring /tmp when it is writable."""
    db_file = "catalog.db"
    if os.path.exists("/tmp") and os.access("/tmp", os.W_OK):
        return f"sqlite:////tmp/{db_file}"
    return f"sqlite:///./{db_file}"


def create_db_engine(url=None):
    url = url or default_database_url()
    engine_args = {"pool_pre_ping": True}  # Verify connections before using
    if url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url == "sqlite://":
            # One shared connection, otherwise every checkout sees an empty DB
            engine_args["poolclass"] = StaticPool
    return create_engine(url, **engine_args)


def create_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
