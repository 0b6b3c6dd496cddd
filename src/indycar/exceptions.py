"""Custom exceptions for the IndyCar data client."""

from __future__ import annotations


class IndyCarError(Exception):
    """Base exception for all IndyCar data errors."""


class UpstreamConnectionError(IndyCarError):
    """Raised when the client cannot connect to the ESPN API."""


class UpstreamTimeoutError(IndyCarError):
    """Raised when a request to the ESPN API times out."""


class UpstreamUnavailableError(IndyCarError):
    """Raised when the ESPN API returns a non-success response."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"ESPN API error: HTTP {status_code}: {message}")


class UpstreamMalformedError(IndyCarError):
    """Raised when the response body is not a JSON object."""


class PaymentFacilitatorError(IndyCarError):
    """Raised when the payment facilitator cannot be reached or answers badly."""
