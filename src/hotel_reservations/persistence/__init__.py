"""Persistence layer exports."""

from .errors import NotFoundError, RepositoryError
from .interfaces import CustomerDirectory, RoomCatalog
from .memory import InMemoryCustomerDirectory, InMemoryRoomCatalog

__all__ = [
    "CustomerDirectory",
    "InMemoryCustomerDirectory",
    "InMemoryRoomCatalog",
    "NotFoundError",
    "RepositoryError",
    "RoomCatalog",
]
