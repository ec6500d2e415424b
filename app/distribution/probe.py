"""Load-distribution check tallying replica identities behind a front door."""

from __future__ import annotations

import logging
from collections import Counter

from app.domain import DistributionReport, domain_parse_greeting

from .errors import DistributionProbeError
from .interfaces import GreetingClientPort

logger = logging.getLogger(__name__)


class ReplicaDistributionProbe:
    """Issue repeated root requests and count which replicas answered.

    The probe only observes routing done by the orchestrator's front door;
    it never selects a replica itself.
    """

    def __init__(self, client: GreetingClientPort):
        """Initialize distribution probe.

        Args:
            client: Front-door greeting client.

        Raises:
            ValueError: Raised when client is None.
        """

        if client is None:
            raise ValueError("client must not be None")
        self._client = client

    def probe_run(self, request_count: int) -> DistributionReport:
        """Issue sequential requests and tally replica identities.

        Failed requests are counted in the report instead of aborting the run.

        Args:
            request_count: Number of requests to issue.

        Returns:
            DistributionReport: Per-identity hit counts and failure total.

        Raises:
            ValueError: Raised when request_count is not positive.
        """

        if request_count < 1:
            raise ValueError("request_count must be >= 1")

        identity_counts: Counter[str] = Counter()
        failed_count = 0
        target_label = self._client.client_target_label()

        for request_index in range(request_count):
            try:
                body = self._client.client_fetch_greeting()
                identity = domain_parse_greeting(body)
            except (DistributionProbeError, ConnectionError, TimeoutError, ValueError) as error:
                failed_count += 1
                logger.warning(
                    "Request %d/%d to %s failed (status=%s): %s",
                    request_index + 1,
                    request_count,
                    target_label,
                    getattr(error, "status_code", None),
                    error,
                )
                continue
            identity_counts[identity] += 1

        logger.info(
            "Distribution check against %s: %d requests, %d failed, %d distinct replicas",
            target_label,
            request_count,
            failed_count,
            len(identity_counts),
        )
        return DistributionReport(
            requested_count=request_count,
            failed_count=failed_count,
            identity_counts=dict(identity_counts),
        )
