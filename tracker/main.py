# tracker/main.py
import argparse
import logging
from contextlib import contextmanager

from sqlalchemy.orm import sessionmaker

from .db import DATABASE_URL, SessionLocal, get_db, init_db, make_engine
from .errors import ParcelStateError
from .service import ParcelService
from .store import ParcelStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="parcel-tracker",
                                 description="Walk a parcel through its lifecycle")
    ap.add_argument("--client", type=int, default=1)
    ap.add_argument("--address", default="Pskov, Pushkin st. 5")
    ap.add_argument("--database-url", default=None)
    ap.add_argument("--log-level", default="INFO")
    return ap


def run(service: ParcelService, client: int, address: str) -> None:
    p = service.register(client, address)
    print(f"new parcel #{p.number}, client {p.client}, address {p.address}, status {p.status.value}")
    print(service.format_parcels(service.client_parcels(client)))

    service.change_address(p.number, address + ", flat 12")
    service.next_status(p.number)
    print(service.format_parcels(service.client_parcels(client)))

    # sent parcels can no longer be deleted
    try:
        service.delete(p.number)
    except ParcelStateError as e:
        print(f"not deleted: {e}")

    extra = service.register(client, address)
    service.delete(extra.number)
    print(service.format_parcels(service.client_parcels(client)))


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.database_url and args.database_url != DATABASE_URL:
        bind = make_engine(args.database_url)
        session_factory = sessionmaker(autocommit=False, autoflush=False, bind=bind)
    else:
        bind = None
        session_factory = SessionLocal
    init_db(bind)
    logger.info("schema ready on %s", bind.url if bind is not None else DATABASE_URL)

    try:
        with contextmanager(get_db)(session_factory) as db:
            run(ParcelService(ParcelStore(db)), args.client, args.address)
    finally:
        if bind is not None:
            bind.dispose()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
