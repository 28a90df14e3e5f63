"""
Translation of scheduling API payloads into domain models.

Shared by the HTTP client and the mock client so both speak the same shapes.
"""

from typing import Any, Dict, List

import pendulum
from pendulum import DateTime

from ..domain.exceptions import MalformedInputError
from ..domain.models import (
    AvailabilityRule,
    AvailabilitySnapshot,
    BookingConfirmation,
    OutOfOfficeBlock,
    Owner,
    Student,
)


def parse_datetime(value: str) -> DateTime:
    """
    Parse an ISO 8601 string into a pendulum DateTime.

    Strings without an offset are taken as UTC.
    """
    try:
        parsed = pendulum.parse(value, tz="UTC")
    except (TypeError, ValueError) as exc:
        raise MalformedInputError(f"Could not parse datetime: {value!r}") from exc

    if not isinstance(parsed, DateTime):
        raise MalformedInputError(f"Expected a date and time, got: {value!r}")

    return parsed


def parse_availability(data: Dict[str, Any]) -> AvailabilitySnapshot:
    """
    Parse a ``GET /availability/{pathway_id}`` response.

    Response format:
    {
        "ssm_ids": [1, 2],
        "availabilities": [
            {"availability_id": 10, "user_id": 1, "day_of_week": 3,
             "start_time": "09:00:00", "end_time": "09:30:00"}
        ],
        "ooo_blocks": [
            {"ooo_id": 5, "user_id": 1, "start_datetime": "...",
             "end_datetime": "...", "reason": "Conference"}
        ]
    }
    """
    if not isinstance(data, dict):
        raise MalformedInputError("Availability response must be a JSON object")

    try:
        rules = [
            AvailabilityRule(
                owner_id=int(item["user_id"]),
                day_of_week=int(item["day_of_week"]),
                start_time=item["start_time"],
                end_time=item.get("end_time"),
                availability_id=item.get("availability_id")
            )
            for item in data.get("availabilities") or []
        ]

        out_of_office = [
            OutOfOfficeBlock(
                ooo_id=int(item["ooo_id"]),
                owner_id=int(item["user_id"]),
                start=parse_datetime(item["start_datetime"]),
                end=parse_datetime(item["end_datetime"]),
                reason=item.get("reason")
            )
            for item in data.get("ooo_blocks") or []
        ]

        owner_ids = [int(owner_id) for owner_id in data.get("ssm_ids") or []]

    except MalformedInputError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedInputError(f"Invalid availability record: {exc}") from exc

    return AvailabilitySnapshot(owner_ids=owner_ids, rules=rules, out_of_office=out_of_office)


def parse_owners(data: Any) -> List[Owner]:
    """Parse a ``GET /ssms`` response (a list of ``{id, name, email}``)."""
    if not isinstance(data, list):
        raise MalformedInputError("Owner directory response must be a JSON list")

    try:
        return [
            Owner(id=int(item["id"]), name=item["name"], email=item.get("email"))
            for item in data
        ]
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedInputError(f"Invalid owner record: {exc}") from exc


def parse_student(data: Dict[str, Any]) -> Student:
    """Parse a ``GET /user/{disco_user_id}`` response."""
    try:
        return Student(
            user_id=int(data["user_id"]),
            email=data["email"],
            full_name=data["full_name"],
            role=data["role"],
            is_banned=bool(data.get("is_banned", False)),
            disco_user_id=data.get("disco_user_id")
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedInputError(f"Invalid user record: {exc}") from exc


def parse_booking(data: Dict[str, Any]) -> BookingConfirmation:
    """Parse a ``POST /booking`` response."""
    try:
        return BookingConfirmation(
            booking_id=int(data["booking_id"]),
            student_id=int(data["student_id"]),
            ssm_id=int(data["ssm_id"]),
            pathway_id=int(data["pathway_id"]),
            start=parse_datetime(data["start_datetime"]),
            end=parse_datetime(data["end_datetime"]),
            status=data.get("status", "confirmed"),
            zoom_meeting_id=data.get("zoom_meeting_id")
        )
    except MalformedInputError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedInputError(f"Invalid booking record: {exc}") from exc
