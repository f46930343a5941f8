# tracker/service.py
import logging
from typing import Optional

from .errors import ParcelStateError
from .models import Parcel, ParcelStatus
from .store import ParcelStore
from .utils import utc_timestamp

logger = logging.getLogger(__name__)


class ParcelService:
    """
    Business rules on top of ParcelStore:
    - status only moves forward, one step at a time
    - address changes and deletion only while the parcel is registered
    """

    def __init__(self, store: ParcelStore):
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        parcel = Parcel(
            client=client,
            status=ParcelStatus.registered,
            address=address,
            created_at=utc_timestamp(),
        )
        parcel.number = self.store.add(parcel)
        logger.info("registered parcel %s for client %s", parcel.number, client)
        return parcel

    def client_parcels(self, client: int) -> list[Parcel]:
        return self.store.get_by_client(client)

    @staticmethod
    def format_parcels(parcels: list[Parcel]) -> str:
        if not parcels:
            return "no parcels"
        lines = []
        for p in parcels:
            lines.append(f"#{p.number} to {p.address} from client {p.client}, "
                         f"registered {p.created_at}, status {p.status.value}")
        return "\n".join(lines)

    def next_status(self, number: int) -> Optional[ParcelStatus]:
        parcel = self.store.get(number)
        nxt = parcel.status.next()
        if nxt is None:
            logger.info("parcel %s already %s", number, parcel.status.value)
            return None
        self.store.set_status(number, nxt)
        logger.info("parcel %s: %s -> %s", number, parcel.status.value, nxt.value)
        return nxt

    def change_address(self, number: int, address: str) -> None:
        self._require_registered(number, "change address of")
        self.store.set_address(number, address)

    def delete(self, number: int) -> None:
        self._require_registered(number, "delete")
        self.store.delete(number)

    def _require_registered(self, number: int, action: str) -> None:
        parcel = self.store.get(number)
        if parcel.status != ParcelStatus.registered:
            logger.warning("refused to %s parcel %s in status %s",
                           action, number, parcel.status.value)
            raise ParcelStateError(number, parcel.status, action)
