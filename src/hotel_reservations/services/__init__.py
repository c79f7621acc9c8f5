"""Application facades over the hotel stores."""

from .admin import AdminService
from .hotel import HotelService

__all__ = ["AdminService", "HotelService"]
