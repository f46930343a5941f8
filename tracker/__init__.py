# tracker/__init__.py
from .errors import ParcelNotFound, ParcelStateError
from .models import Parcel, ParcelStatus
from .service import ParcelService
from .store import ParcelStore

__all__ = [
    "Parcel",
    "ParcelNotFound",
    "ParcelService",
    "ParcelStateError",
    "ParcelStatus",
    "ParcelStore",
]
