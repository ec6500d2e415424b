"""Typed interfaces for distribution-check responsibilities."""

from typing import Protocol


class GreetingClientPort(Protocol):
    """Port definition for fetching one greeting body through the front door."""

    def client_target_label(self) -> str:
        """Return a stable label for the probed endpoint.

        Returns:
            str: Endpoint label for diagnostics.

        Raises:
            RuntimeError: Raised when target metadata is unavailable.
        """

    def client_fetch_greeting(self) -> str:
        """Issue one root request and return the response body.

        Returns:
            str: Decoded response body.

        Raises:
            ConnectionError: Raised when the front door cannot be reached.
            TimeoutError: Raised when the request exceeds its timeout.
            ValueError: Raised when the response status is not 200.
        """
