"""Typed domain models shared across runtime layers.

This module provides simple data contracts for cross-layer communication
between the HTTP surface, the runtime entrypoint and the distribution check.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HostIdentity:
    """Immutable identity of the executing replica.

    Attributes:
        name: Identity string reported by the root endpoint.
        source: Where the identity came from (`override` or `hostname`).
    """

    name: str
    source: str


@dataclass(frozen=True)
class DistributionReport:
    """Outcome of one load-distribution check against a front door.

    Attributes:
        requested_count: Number of requests issued.
        failed_count: Number of requests that did not yield an identity.
        identity_counts: Hit count per observed replica identity.
    """

    requested_count: int
    failed_count: int
    identity_counts: dict[str, int] = field(default_factory=dict)

    @property
    def succeeded_count(self) -> int:
        """Return number of requests that yielded an identity."""

        return self.requested_count - self.failed_count

    @property
    def distinct_identities(self) -> tuple[str, ...]:
        """Return observed identities sorted by descending hit count, then name."""

        ordered_items = sorted(self.identity_counts.items(), key=lambda item: (-item[1], item[0]))
        return tuple(identity for identity, _ in ordered_items)

    def report_reaches_all_replicas(self, expected_replica_count: int) -> bool:
        """Return whether the check observed exactly the expected replica count.

        Args:
            expected_replica_count: Declared number of replicas behind the front door.

        Returns:
            bool: True when no request failed and distinct identities equal the expected count.

        Raises:
            ValueError: Raised when expected count is not positive.
        """

        if expected_replica_count < 1:
            raise ValueError("expected_replica_count must be >= 1")
        return self.failed_count == 0 and len(self.identity_counts) == expected_replica_count
