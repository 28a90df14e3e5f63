"""
Application services for listing and booking session slots.

The service coordinates fetching availability via a scheduling client adapter
and delegates the slot derivation to the domain-level ``SlotProjector``. The
client dependency is expressed as a protocol so tests can plug in a stub.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Protocol

import pendulum
from pendulum import DateTime

from ..domain.exceptions import BookingRejectedError, SchedulingError
from ..domain.models import (
    AvailabilitySnapshot,
    BookingConfirmation,
    BookingRequest,
    Owner,
    OwnerDirectory,
    Slot,
    Student,
)
from ..domain.recurrence import to_instant
from ..domain.slot_projector import SlotProjector

logger = logging.getLogger(__name__)


class SchedulingClientProtocol(Protocol):
    """Protocol describing the API client behaviour needed by the service."""

    def get_student(self, disco_user_id: str) -> Student:
        """Return the student for a host-platform user id."""

    def list_owners(self) -> List[Owner]:
        """Return the staff directory."""

    def get_availability(self, pathway_id: int) -> AvailabilitySnapshot:
        """Return availability published for a pathway."""

    def create_booking(self, request: BookingRequest) -> BookingConfirmation:
        """Submit a booking."""


class BookingService:
    """
    Orchestrates availability retrieval, slot projection and booking.
    """

    def __init__(
        self,
        client: SchedulingClientProtocol,
        projector: SlotProjector | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._client = client
        self._projector = projector or SlotProjector()
        self._clock = clock or (lambda: pendulum.now("UTC"))

    def now(self) -> DateTime:
        """Current reference instant as seen by the service."""
        return to_instant(self._clock())

    def list_owners(self) -> List[Owner]:
        """Fetch the staff directory."""
        return self._client.list_owners()

    def owner_directory(self) -> OwnerDirectory:
        """
        Build the owner name lookup from the staff directory.

        A failing directory call is not fatal: names fall back to placeholders.
        """
        try:
            owners = self.list_owners()
        except SchedulingError as exc:
            logger.warning("Could not fetch owner directory, using placeholder names: %s", exc)
            return OwnerDirectory()

        return OwnerDirectory({owner.id: owner.name for owner in owners})

    def available_slots(self, pathway_id: int, now: datetime | None = None) -> List[Slot]:
        """
        Fetch availability for a pathway and project it onto bookable slots.

        Args:
            pathway_id: Pathway to list slots for
            now: Reference instant; defaults to the service clock

        Returns:
            Slots sorted by start time
        """
        snapshot = self._client.get_availability(pathway_id)
        directory = self.owner_directory()

        return self._projector.project(
            snapshot.rules,
            now if now is not None else self.now(),
            directory,
        )

    def book(self, *, disco_user_id: str, pathway_id: int, slot: Slot) -> BookingConfirmation:
        """
        Book a slot for a student.

        Raises:
            BookingRejectedError: If the slot has already started or the
                student may not book
            ApiError: If the API refuses the booking
        """
        if slot.start <= self.now():
            raise BookingRejectedError(f"Slot {slot.label} is no longer in the future")

        student = self._client.get_student(disco_user_id)
        if student.is_banned:
            raise BookingRejectedError(f"{student.full_name} is not allowed to book sessions")

        request = BookingRequest.for_slot(disco_user_id, pathway_id, slot)
        confirmation = self._client.create_booking(request)

        logger.info(
            "Booked slot %s with owner %s for %s (booking %s)",
            slot.start.to_iso8601_string(),
            slot.owner_id,
            disco_user_id,
            confirmation.booking_id,
        )

        return confirmation
