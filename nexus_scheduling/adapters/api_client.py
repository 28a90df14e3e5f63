"""
HTTP client for the Nexus Scheduling API.
"""

import logging
from typing import Any, Dict, List

import requests

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


class SchedulingApiClient:
    """
    Client for the scheduling backend consumed by the student booking flow.

    Only forwards a pre-issued bearer token; obtaining one is not handled here.
    """

    DEFAULT_BASE_URL = "http://localhost:8000"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        access_token: str | None = None,
        timeout: float = 30,
        session: requests.Session | None = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Root URL of the scheduling API
            access_token: Optional bearer token sent with every request
            timeout: Per-request timeout in seconds
            session: Optional requests session (useful for tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {"Accept": "application/json"}
        if access_token:
            self.headers["Authorization"] = f"Bearer {access_token}"

    def get_student(self, disco_user_id: str) -> Student:
        """Look up the student behind a host-platform user id."""
        data = self._request("GET", f"/user/{disco_user_id}")
        return parse_student(data)

    def list_owners(self) -> List[Owner]:
        """Fetch the staff directory used to resolve display names."""
        data = self._request("GET", "/ssms")
        return parse_owners(data)

    def get_availability(self, pathway_id: int) -> AvailabilitySnapshot:
        """
        Fetch the weekly availability published for a pathway.

        Args:
            pathway_id: Pathway to fetch availability for

        Returns:
            Parsed availability snapshot

        Raises:
            ApiError: If the API call fails
            MalformedInputError: If the response cannot be interpreted
        """
        data = self._request("GET", f"/availability/{pathway_id}")
        snapshot = parse_availability(data)
        logger.info(
            "Fetched %d availability rules for pathway %s",
            len(snapshot.rules),
            pathway_id
        )
        return snapshot

    def create_booking(self, request: BookingRequest) -> BookingConfirmation:
        """Submit a booking for a chosen slot."""
        data = self._request("POST", "/booking", json=request.to_payload())
        return parse_booking(data)

    def _request(self, method: str, path: str, json: Dict[str, Any] | None = None) -> Any:
        """
        Perform a request and decode the JSON body.

        Empty successful bodies decode to None.

        Raises:
            ApiError: On transport failures and non-2xx responses
        """
        url = f"{self.base_url}{path}"
        headers = dict(self.headers)
        if json is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                json=json,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise ApiError(f"{path} failed: {e}") from e

        if not response.ok:
            raise ApiError(self._error_message(response, path), status_code=response.status_code)

        if not response.text:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"{path} returned invalid JSON: {e}", status_code=response.status_code) from e

    @staticmethod
    def _error_message(response: requests.Response, path: str) -> str:
        """
        Build an error message including the server's explanation if present.

        Format: "<path> failed: <status> <reason> - <detail>"
        """
        detail = ""
        try:
            data = response.json()
        except ValueError:
            data = None

        if isinstance(data, dict):
            for key in ("detail", "message"):
                if isinstance(data.get(key), str) and data[key]:
                    detail = data[key]
                    break

        base = f"{response.status_code} {response.reason or ''}".strip()
        message = f"{base} - {detail}" if detail else base
        return f"{path} failed: {message}"
