# tracker/errors.py
from sqlalchemy.exc import NoResultFound

from .models import ParcelStatus

# ParcelStore.get lets the driver's "no row" error through untouched
ParcelNotFound = NoResultFound


class ParcelStateError(ValueError):
    def __init__(self, number: int, status: ParcelStatus, action: str):
        self.number = number
        self.status = status
        self.action = action
        super().__init__(f"cannot {action} parcel {number}: status is {status.value}")
