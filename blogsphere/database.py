from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from blogsphere.config import get_settings

Base = declarative_base()


def enable_sqlite_foreign_keys(engine):
    """SQLite ignores foreign keys unless asked per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    engine = create_engine(database_url, connect_args=connect_args)
    enable_sqlite_foreign_keys(engine)
    return engine


engine = build_engine(get_settings().database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # Models must be imported so their tables register on Base.metadata
    from blogsphere.models import blog, comment, follow, like, saved_blog, user  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
