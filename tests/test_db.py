import os

from sqlalchemy.orm import Session

from tracker import db as tracker_db
from tracker.db import get_db, make_engine


def test_make_engine_sqlite_file(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 't.db'}")
    try:
        with engine.connect() as conn:
            assert conn.exec_driver_sql("select 1").scalar() == 1
    finally:
        engine.dispose()


def test_default_url_points_at_project_db():
    assert tracker_db.DB_PATH.endswith("tracker.db")
    if "TRACKER_DATABASE_URL" not in os.environ:
        assert tracker_db.DATABASE_URL == f"sqlite:///{tracker_db.DB_PATH}"


def test_get_db_yields_and_closes():
    gen = get_db()
    session = next(gen)
    assert isinstance(session, Session)
    gen.close()


def test_default_db_path_is_relative():
    assert not os.path.isabs(tracker_db.DB_PATH)


def test_get_db_uses_given_factory():
    made = []

    def factory():
        session = Session()
        made.append(session)
        return session

    gen = get_db(factory)
    assert next(gen) is made[0]
    gen.close()
