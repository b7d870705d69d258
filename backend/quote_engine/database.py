from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from quote_engine.core.config import settings
import os
import logging

logger = logging.getLogger(__name__)

if os.getenv("PYTEST_RUN") == "1":
    SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
else:
    SQLALCHEMY_DATABASE_URL = settings.SQLALCHEMY_DATABASE_URL

is_sqlite = SQLALCHEMY_DATABASE_URL.startswith("sqlite")

pool_kwargs = {
    # Avoid stale idle connections causing first-hit failures after inactivity
    "pool_pre_ping": True,
}
if is_sqlite:
    # SQLite uses a per-process connection; pass connect_args and avoid pool sizing
    connect_args = {"check_same_thread": False, "timeout": 15}
else:
    connect_args = {}
    pool_kwargs.update({
        "pool_size": int(os.getenv("DB_POOL_SIZE") or 6),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW") or 6),
        "pool_recycle": int(os.getenv("DB_POOL_RECYCLE") or 300),
    })

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=connect_args,
    **pool_kwargs,
)

if is_sqlite:

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            # Back off rather than instantly failing on transient locks (ms)
            cursor.execute("PRAGMA busy_timeout=60000;")
        finally:
            cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create missing tables; there is no migration tooling for this schema."""
    from . import models  # noqa: F401  (register tables on Base.metadata)

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured at %s", engine.url.render_as_string(hide_password=True))
