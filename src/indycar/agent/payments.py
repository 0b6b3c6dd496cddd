"""x402 payment gate: build requirements, verify and settle through a facilitator.

A priced call carries a base64 JSON payment payload in ``X-PAYMENT``. The
facilitator checks it against the entrypoint's requirements (``/verify``)
and, once the call has succeeded, moves the funds (``/settle``).
"""

from __future__ import annotations

import base64
import json
from typing import Any

import httpx

from indycar.agent.config import Settings
from indycar.agent.entrypoints import Entrypoint
from indycar.exceptions import PaymentFacilitatorError

X402_VERSION = 1


class PaymentRequired(Exception):
    """The call must be answered with 402 and the payment requirements."""

    def __init__(self, reason: str, requirements: dict[str, Any]) -> None:
        self.reason = reason
        self.requirements = requirements
        super().__init__(reason)

    def to_content(self) -> dict[str, Any]:
        return {
            "x402Version": X402_VERSION,
            "error": self.reason,
            "accepts": [self.requirements],
        }


def decode_payment_header(header: str) -> dict[str, Any]:
    """Decode an ``X-PAYMENT`` header; raises ValueError when it is not base64 JSON."""
    try:
        payload = json.loads(base64.b64decode(header, validate=True))
    except ValueError as exc:
        raise ValueError(f"Malformed payment header: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Malformed payment header: expected a JSON object")
    return payload


def encode_payment_response(settlement: dict[str, Any]) -> str:
    return base64.b64encode(json.dumps(settlement).encode()).decode()


class PaymentGate:
    """Talks to an x402 facilitator on behalf of the entrypoint host."""

    def __init__(self, settings: Settings, http: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._http = http or httpx.AsyncClient(
            base_url=settings.payments_facilitator_url,
            timeout=settings.http_timeout,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        await self._http.aclose()

    def requirements(self, entrypoint: Entrypoint, resource: str) -> dict[str, Any]:
        return {
            "scheme": "exact",
            "network": self._settings.payments_network,
            "maxAmountRequired": str(entrypoint.price),
            "resource": resource,
            "description": entrypoint.description,
            "mimeType": "application/json",
            "payTo": self._settings.payments_pay_to,
            "maxTimeoutSeconds": self._settings.payments_max_timeout_seconds,
            "asset": self._settings.payments_asset,
        }

    async def verify(self, header: str | None, requirements: dict[str, Any]) -> dict[str, Any]:
        """Return the decoded payment payload once the facilitator accepts it."""
        if not header:
            raise PaymentRequired("X-PAYMENT header is required", requirements)
        try:
            payload = decode_payment_header(header)
        except ValueError as exc:
            raise PaymentRequired(str(exc), requirements) from exc

        result = await self._post("/verify", payload, requirements)
        if not result.get("isValid"):
            reason = result.get("invalidReason") or "Payment verification failed"
            raise PaymentRequired(str(reason), requirements)
        return payload

    async def settle(self, payload: dict[str, Any], requirements: dict[str, Any]) -> str:
        """Settle a verified payment; returns the ``X-PAYMENT-RESPONSE`` header value."""
        result = await self._post("/settle", payload, requirements)
        if not result.get("success"):
            reason = result.get("errorReason") or "Payment settlement failed"
            raise PaymentRequired(str(reason), requirements)
        return encode_payment_response(result)

    async def _post(
        self, path: str, payload: dict[str, Any], requirements: dict[str, Any],
    ) -> dict[str, Any]:
        body = {
            "x402Version": X402_VERSION,
            "paymentPayload": payload,
            "paymentRequirements": requirements,
        }
        try:
            response = await self._http.post(path, json=body)
        except httpx.TransportError as exc:
            raise PaymentFacilitatorError(f"Facilitator {path} failed: {exc}") from exc
        if not response.is_success:
            raise PaymentFacilitatorError(
                f"Facilitator {path} returned HTTP {response.status_code}: {response.text}"
            )
        try:
            result = response.json()
        except ValueError as exc:
            raise PaymentFacilitatorError(f"Facilitator {path} returned invalid JSON") from exc
        if not isinstance(result, dict):
            raise PaymentFacilitatorError(f"Facilitator {path} returned a non-object")
        return result
