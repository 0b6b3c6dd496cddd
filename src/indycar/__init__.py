"""indycar: typed ESPN IndyCar data client and priced data views."""

from indycar.client import AsyncIndyCarClient, IndyCarClient
from indycar.exceptions import (
    IndyCarError,
    UpstreamConnectionError,
    UpstreamMalformedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

__all__ = [
    "AsyncIndyCarClient",
    "IndyCarClient",
    "IndyCarError",
    "UpstreamConnectionError",
    "UpstreamMalformedError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]

__version__ = "1.0.0"
