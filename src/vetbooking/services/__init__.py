"""Application services."""

from vetbooking.services.booking_service import BookingService

__all__ = ["BookingService"]
