from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from app.config import settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite only enforces (deferred) foreign keys when asked to
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(db_url: str, **kwargs) -> Engine:
    """Create an engine for ``db_url``.

    Postgres connections are pinned to the public schema. SQLite is only used
    by the test-suite and gets foreign key enforcement switched on.
    """
    url = make_url(db_url)

    if url.drivername.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    else:
        connect_args = {"options": "-csearch_path=public"}
    connect_args.update(kwargs.pop("connect_args", {}))

    engine = create_engine(url, connect_args=connect_args, **kwargs)
    if url.drivername.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()



def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
