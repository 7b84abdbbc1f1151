import time
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from services.member_service.app.models.database import Base, engine as default_engine
# Registers the members table on Base.metadata
from services.member_service.app.models import member  # noqa: F401


def connect_to_db(engine: Engine, retries: int = 5, delay: float = 5) -> None:
    while retries > 0:
        try:
            with engine.connect():
                print("Database connection successful")
                return
        except OperationalError:
            print("Database not ready, retrying...")
            retries -= 1
            time.sleep(delay)
    raise RuntimeError("Could not connect to the database")


def init_db(engine: Engine = default_engine, retries: int = 5, delay: float = 5) -> None:
    connect_to_db(engine, retries=retries, delay=delay)
    Base.metadata.create_all(bind=engine)
    print("Database initialized.")


if __name__ == "__main__":
    # Give the database container time to start up
    time.sleep(10)
    init_db()
