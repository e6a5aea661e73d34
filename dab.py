# Drop and recreate the database named in DATABASE_URL (run before `alembic upgrade head`).

from sqlalchemy import text
from sqlalchemy.engine import make_url
from app.config import settings
from app.db.session import make_engine


def reset():
    url = make_url(settings.DATABASE_URL)
    name = url.database

    print(f"Connecting to server at {url.host}:{url.port or 5432}...")
    engine = make_engine(
        url.set(database="postgres").render_as_string(hide_password=False),
        isolation_level="AUTOCOMMIT",
    )

    with engine.connect() as connection:
        print(f"Dropping database {name} (if exists)...")
        connection.execute(text(f'DROP DATABASE IF EXISTS "{name}" WITH (FORCE)'))
        print(f"Creating database {name}...")
        connection.execute(text(f'CREATE DATABASE "{name}"'))
    engine.dispose()

    print("Done.")


if __name__ == "__main__":
    reset()
