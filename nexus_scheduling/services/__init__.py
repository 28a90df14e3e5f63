"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .booking_service import BookingService, SchedulingClientProtocol

__all__ = ["BookingService", "SchedulingClientProtocol"]
