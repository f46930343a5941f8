# tracker/db.py
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from typing import Generator

# relative to the working directory
DB_PATH = "tracker.db"
DATABASE_URL = os.environ.get("TRACKER_DATABASE_URL", f"sqlite:///{DB_PATH}")


def make_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db(bind=None):
    # import models so classes register to Base
    import tracker.models  # noqa: F401
    Base.metadata.create_all(bind=bind if bind is not None else engine)

def get_db(session_factory=None) -> Generator:
    db = (session_factory or SessionLocal)()
    try:
        yield db
    finally:
        db.close()
