"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import ApiError, BookingRejectedError, MalformedInputError, SchedulingError
from .models import (
    AvailabilityRule,
    AvailabilitySnapshot,
    BookingConfirmation,
    BookingRequest,
    OutOfOfficeBlock,
    Owner,
    OwnerDirectory,
    Slot,
    Student,
)
from .slot_projector import HORIZON_WEEKS, SLOT_MINUTES, SlotProjector, project_slots

__all__ = [
    "ApiError",
    "AvailabilityRule",
    "AvailabilitySnapshot",
    "BookingConfirmation",
    "BookingRejectedError",
    "BookingRequest",
    "HORIZON_WEEKS",
    "MalformedInputError",
    "OutOfOfficeBlock",
    "Owner",
    "OwnerDirectory",
    "SLOT_MINUTES",
    "SchedulingError",
    "Slot",
    "SlotProjector",
    "Student",
    "project_slots",
]
