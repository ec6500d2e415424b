"""Project-native typed exceptions for distribution probe failures."""

from __future__ import annotations


class DistributionProbeError(Exception):
    """Base exception for front-door request failures.

    Attributes:
        status_code: Optional HTTP status returned by the front door.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DistributionProbeConnectionError(DistributionProbeError, ConnectionError):
    """Transport-level connectivity failure while reaching the front door."""


class DistributionProbeTimeoutError(DistributionProbeError, TimeoutError):
    """Front door did not answer within the request timeout."""


class DistributionProbeResponseError(DistributionProbeError, ValueError):
    """Front door answered with a non-success status or an unreadable body."""
