"""Front-door HTTP client used by the distribution check."""

from __future__ import annotations

import http.client
import socket
from typing import Final
from urllib.error import HTTPError, URLError
from urllib.parse import urlsplit
from urllib.request import Request, urlopen

from .errors import (
    DistributionProbeConnectionError,
    DistributionProbeResponseError,
    DistributionProbeTimeoutError,
)
from .interfaces import GreetingClientPort


class HttpGreetingClient(GreetingClientPort):
    """Fetch the root greeting over plain HTTP, one connection per request."""

    _USER_AGENT: Final[str] = "replica-identity-service/1.0 (Python/urllib.request)"

    def __init__(self, base_url: str, request_timeout_seconds: float = 5.0):
        """Initialize front-door client.

        Args:
            base_url: Front-door URL, for example `http://203.0.113.10`.
            request_timeout_seconds: Per-request timeout in seconds.

        Raises:
            ValueError: Raised when the URL or timeout is invalid.
        """

        normalized_base_url = base_url.strip()
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        split_url = urlsplit(normalized_base_url)
        if split_url.scheme not in {"http", "https"} or not split_url.netloc:
            raise ValueError("base_url must be an absolute http(s) URL")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._root_url = normalized_base_url.rstrip("/") + "/"
        self._request_timeout_seconds = request_timeout_seconds

    def client_target_label(self) -> str:
        """Return the probed root URL.

        Returns:
            str: Root URL string.
        """

        return self._root_url

    def client_fetch_greeting(self) -> str:
        """Issue one `GET /` and return the decoded body.

        Each request uses a fresh connection (`Connection: close`).

        Returns:
            str: Decoded response body.

        Raises:
            DistributionProbeConnectionError: Raised for transport failures.
            DistributionProbeTimeoutError: Raised when the request times out.
            DistributionProbeResponseError: Raised for non-200 or malformed responses.
        """

        request = Request(
            self._root_url,
            headers={"User-Agent": self._USER_AGENT, "Connection": "close"},
            method="GET",
        )
        try:
            with urlopen(request, timeout=self._request_timeout_seconds) as response:
                status_code = response.status
                payload = response.read()
        except HTTPError as error:
            raise DistributionProbeResponseError(
                f"front door returned HTTP {error.code}",
                status_code=error.code,
            ) from error
        except URLError as error:
            if isinstance(error.reason, (socket.timeout, TimeoutError)):
                raise DistributionProbeTimeoutError(f"request to {self._root_url} timed out") from error
            raise DistributionProbeConnectionError(
                f"unable to reach {self._root_url}: {error.reason}"
            ) from error
        except (socket.timeout, TimeoutError) as error:
            raise DistributionProbeTimeoutError(f"request to {self._root_url} timed out") from error
        except ConnectionError as error:
            raise DistributionProbeConnectionError(
                f"connection to {self._root_url} dropped: {error}"
            ) from error
        except http.client.HTTPException as error:
            raise DistributionProbeResponseError(
                f"malformed response from {self._root_url}: {type(error).__name__}"
            ) from error

        if status_code != 200:
            raise DistributionProbeResponseError(
                f"front door returned HTTP {status_code}",
                status_code=status_code,
            )
        return payload.decode("utf-8", errors="replace")
