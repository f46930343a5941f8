# tracker/store.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .models import Parcel, ParcelRecord, ParcelStatus

logger = logging.getLogger(__name__)


class ParcelStore:
    """
    Read/write access to the parcel table over a caller-supplied session.

    Writes are unconditional: updating or deleting a number that does not
    exist affects zero rows and is not an error. Status and address rules
    belong to ParcelService, not here.
    """

    def __init__(self, db: Session):
        self.db = db

    def add(self, p: Parcel) -> int:
        row = ParcelRecord(
            client=p.client,
            status=ParcelStatus(p.status).value,
            address=p.address,
            created_at=p.created_at,
        )
        self.db.add(row)
        try:
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("failed to add parcel for client %s", p.client)
            raise
        logger.debug("added parcel %s for client %s", row.number, row.client)
        return row.number

    def get(self, number: int) -> Parcel:
        # .one() raises NoResultFound when the number is unknown; callers branch on it
        row = (self.db.query(ParcelRecord)
               .populate_existing()
               .filter(ParcelRecord.number == number)
               .one())
        return row.to_parcel()

    def get_by_client(self, client: int) -> list[Parcel]:
        rows = (self.db.query(ParcelRecord)
                .populate_existing()
                .filter(ParcelRecord.client == client)
                .order_by(ParcelRecord.number)
                .all())
        return [r.to_parcel() for r in rows]

    def set_status(self, number: int, status: ParcelStatus) -> None:
        self._update(number, {ParcelRecord.status: ParcelStatus(status).value})

    def set_address(self, number: int, address: str) -> None:
        self._update(number, {ParcelRecord.address: address})

    def delete(self, number: int) -> None:
        try:
            deleted = (self.db.query(ParcelRecord)
                       .filter(ParcelRecord.number == number)
                       .delete(synchronize_session=False))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("failed to delete parcel %s", number)
            raise
        logger.debug("delete parcel %s: %d row(s)", number, deleted)

    def _update(self, number: int, values: dict) -> None:
        try:
            updated = (self.db.query(ParcelRecord)
                       .filter(ParcelRecord.number == number)
                       .update(values, synchronize_session=False))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("failed to update parcel %s", number)
            raise
        logger.debug("update parcel %s %s: %d row(s)", number,
                     sorted(c.key for c in values), updated)
