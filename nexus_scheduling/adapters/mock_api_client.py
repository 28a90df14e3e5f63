"""
Mock scheduling API client for working without a running backend.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..domain.exceptions import ApiError
from ..domain.models import (
    AvailabilitySnapshot,
    BookingConfirmation,
    BookingRequest,
    Owner,
    Student,
)
from .payloads import parse_availability, parse_booking, parse_owners, parse_student

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).parent / "mock_scheduling_data.json"


class MockSchedulingApiClient:
    """
    Mock client that serves scheduling data from a JSON file.

    Bookings are kept in memory only and receive incrementing ids.
    """

    def __init__(self, data_file: Path | None = None):
        """
        Initialize the mock client.

        Args:
            data_file: Optional JSON file; defaults to the bundled sample data
        """
        self.data_file = data_file or DEFAULT_DATA_FILE
        self.bookings: List[Dict[str, Any]] = []
        self._load_data()

    def _load_data(self):
        """Load mock data from the JSON file."""
        if self.data_file.exists():
            with open(self.data_file, "r", encoding="utf-8") as f:
                self.data = json.load(f)
        else:
            logger.warning("Mock data file %s not found, serving empty data", self.data_file)
            self.data = {}

    def get_student(self, disco_user_id: str) -> Student:
        for user in self.data.get("users", []):
            if user.get("disco_user_id") == disco_user_id:
                return parse_student(user)
        raise ApiError(f"/user/{disco_user_id} failed: 404 Not Found - User not found", status_code=404)

    def list_owners(self) -> List[Owner]:
        return parse_owners(self.data.get("ssms", []))

    def get_availability(self, pathway_id: int) -> AvailabilitySnapshot:
        pathway = self.data.get("pathways", {}).get(str(pathway_id))
        if pathway is None:
            return AvailabilitySnapshot()
        return parse_availability(pathway)

    def create_booking(self, request: BookingRequest) -> BookingConfirmation:
        """Record the booking in memory and confirm it."""
        student = self.get_student(request.student_disco_user_id)
        payload = request.to_payload()

        record = {
            "booking_id": len(self.bookings) + 1,
            "student_id": student.user_id,
            "ssm_id": payload["ssm_id"],
            "pathway_id": payload["pathway_id"],
            "start_datetime": payload["start_datetime"],
            "end_datetime": payload["end_datetime"],
            "zoom_meeting_id": f"mock-{len(self.bookings) + 1}",
            "status": "confirmed",
        }
        self.bookings.append(record)

        return parse_booking(record)
