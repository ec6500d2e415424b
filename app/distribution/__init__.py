"""Distribution-check package for verifying front-door load spreading."""

from .errors import (
	DistributionProbeConnectionError,
	DistributionProbeError,
	DistributionProbeResponseError,
	DistributionProbeTimeoutError,
)
from .http_client import HttpGreetingClient
from .interfaces import GreetingClientPort
from .probe import ReplicaDistributionProbe

__all__ = [
	"DistributionProbeConnectionError",
	"DistributionProbeError",
	"DistributionProbeResponseError",
	"DistributionProbeTimeoutError",
	"GreetingClientPort",
	"HttpGreetingClient",
	"ReplicaDistributionProbe",
]
