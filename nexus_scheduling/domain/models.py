"""
Domain models for availability rules, projected slots and bookings.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from pendulum import DateTime

from .exceptions import MalformedInputError

DEFAULT_OWNER_NAME = "Owner {id}"


@dataclass(frozen=True)
class AvailabilityRule:
    """
    A weekly recurring window published by one staff member.

    Invariant: day_of_week is in [0, 6] with 0=Sunday.
    """
    owner_id: int
    day_of_week: int
    start_time: str  # "HH:MM" or "HH:MM:SS"
    end_time: str | None = None
    availability_id: int | None = None

    def __post_init__(self):
        if not 0 <= self.day_of_week <= 6:
            raise MalformedInputError(
                f"day_of_week must be between 0 (Sunday) and 6, got {self.day_of_week}"
            )


@dataclass(frozen=True)
class Slot:
    """
    A concrete, dated, bookable window derived from an AvailabilityRule.
    """
    owner_id: int
    start: DateTime
    end: DateTime
    label: str
    owner_name: str

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return int((self.end - self.start).total_seconds() / 60)

    def format_display(self, timezone: str = "UTC") -> str:
        """
        Format the slot for display in the given timezone.
        Format: Ddd, DD.MM.YYYY | HH:mm - HH:mm (owner)
        """
        start = self.start.in_timezone(timezone)
        end = self.end.in_timezone(timezone)
        return (
            f"{start.format('ddd, DD.MM.YYYY')} | "
            f"{start.format('HH:mm')} - {end.format('HH:mm')} ({self.owner_name})"
        )


class OwnerDirectory:
    """
    Total lookup from owner id to display name.

    Ids without an entry resolve to a generated placeholder such as "Owner 7".
    """

    def __init__(self, names: Mapping[int, str] | None = None, default: str = DEFAULT_OWNER_NAME):
        self._names: Dict[int, str] = dict(names or {})
        self._default = default

    def __call__(self, owner_id: int) -> str:
        name = self._names.get(owner_id)
        if name:
            return name
        return self._default.format(id=owner_id)

    def __contains__(self, owner_id: object) -> bool:
        return owner_id in self._names

    def __len__(self) -> int:
        return len(self._names)


@dataclass(frozen=True)
class Owner:
    """A staff member listed in the owner directory."""
    id: int
    name: str
    email: str | None = None


@dataclass(frozen=True)
class Student:
    """The student on whose behalf bookings are made."""
    user_id: int
    email: str
    full_name: str
    role: str
    is_banned: bool = False
    disco_user_id: str | None = None


@dataclass(frozen=True)
class OutOfOfficeBlock:
    """An absence published by a staff member."""
    ooo_id: int
    owner_id: int
    start: DateTime
    end: DateTime
    reason: str | None = None


@dataclass
class AvailabilitySnapshot:
    """Availability published for one pathway."""
    owner_ids: List[int] = field(default_factory=list)
    rules: List[AvailabilityRule] = field(default_factory=list)
    out_of_office: List[OutOfOfficeBlock] = field(default_factory=list)


@dataclass(frozen=True)
class BookingRequest:
    """Payload submitted to create a booking for a chosen slot."""
    student_disco_user_id: str
    ssm_id: int
    pathway_id: int
    start: DateTime
    end: DateTime

    @classmethod
    def for_slot(cls, disco_user_id: str, pathway_id: int, slot: Slot) -> "BookingRequest":
        """Build the request for booking ``slot``."""
        return cls(
            student_disco_user_id=disco_user_id,
            ssm_id=slot.owner_id,
            pathway_id=pathway_id,
            start=slot.start,
            end=slot.end
        )

    def to_payload(self) -> Dict[str, object]:
        """Serialize with datetimes as UTC ISO-8601 strings."""
        return {
            "student_disco_user_id": self.student_disco_user_id,
            "ssm_id": self.ssm_id,
            "pathway_id": self.pathway_id,
            "start_datetime": self.start.in_timezone("UTC").to_iso8601_string(),
            "end_datetime": self.end.in_timezone("UTC").to_iso8601_string(),
        }


@dataclass(frozen=True)
class BookingConfirmation:
    """A booking accepted by the scheduling API."""
    booking_id: int
    student_id: int
    ssm_id: int
    pathway_id: int
    start: DateTime
    end: DateTime
    status: str
    zoom_meeting_id: str | None = None

    def format_display(self, timezone: str = "UTC") -> str:
        """Format the confirmation for display."""
        start = self.start.in_timezone(timezone)
        end = self.end.in_timezone(timezone)
        return (
            f"Booking #{self.booking_id} ({self.status}): "
            f"{start.format('ddd, DD.MM.YYYY HH:mm')} - {end.format('HH:mm')}"
        )
