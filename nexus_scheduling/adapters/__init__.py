"""
Adapters layer - External integrations (scheduling HTTP API).
"""

from .api_client import SchedulingApiClient
from .mock_api_client import MockSchedulingApiClient

__all__ = ["SchedulingApiClient", "MockSchedulingApiClient"]
