# tracker/models.py
import enum
from typing import Optional

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Text

from .db import Base


class ParcelStatus(str, enum.Enum):
    """
    Parcel lifecycle: registered -> sent -> delivered.
    The store records whatever it is given; ParcelService walks the chain.
    """
    registered = "registered"
    sent = "sent"
    delivered = "delivered"

    def next(self) -> Optional["ParcelStatus"]:
        order = list(ParcelStatus)
        idx = order.index(self)
        if idx + 1 < len(order):
            return order[idx + 1]
        return None


# value passed in and out of ParcelStore
class Parcel(BaseModel):
    number: int = 0
    client: int
    status: ParcelStatus
    address: str
    created_at: str


# table row; AUTOINCREMENT keeps deleted numbers from coming back
class ParcelRecord(Base):
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}

    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, index=True, nullable=False)
    status = Column(String, nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(String, nullable=False)

    def to_parcel(self) -> Parcel:
        return Parcel(
            number=self.number,
            client=self.client,
            status=ParcelStatus(self.status),
            address=self.address,
            created_at=self.created_at,
        )
