"""Tests for the x402 payment gate."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
import respx

from indycar.agent.config import Settings
from indycar.agent.entrypoints import ENTRYPOINTS
from indycar.agent.payments import (
    PaymentGate,
    PaymentRequired,
    decode_payment_header,
    encode_payment_response,
)
from indycar.exceptions import PaymentFacilitatorError

FACILITATOR = "https://facilitator.test"
RESOURCE = "http://testserver/entrypoints/report/invoke"
PAYLOAD = {"x402Version": 1, "scheme": "exact", "network": "base", "payload": {"signature": "0xsig"}}


def _encode(value) -> str:
    return base64.b64encode(json.dumps(value).encode()).decode()


@pytest.fixture
def gate():
    return PaymentGate(Settings(
        payments_enabled=True,
        payments_pay_to="0xabc",
        payments_facilitator_url=FACILITATOR,
    ))


@pytest.fixture
def requirements(gate):
    return gate.requirements(ENTRYPOINTS["report"], RESOURCE)


class TestDecodeHeader:
    def test_valid(self) -> None:
        assert decode_payment_header(_encode(PAYLOAD)) == PAYLOAD

    @pytest.mark.parametrize("header", ["signed-payload", _encode("just a string"), "bm90IGpzb24="])
    def test_malformed(self, header: str) -> None:
        with pytest.raises(ValueError, match="Malformed payment header"):
            decode_payment_header(header)

    def test_response_encoding(self) -> None:
        encoded = encode_payment_response({"success": True, "transaction": "0xtx"})
        assert json.loads(base64.b64decode(encoded)) == {"success": True, "transaction": "0xtx"}


class TestRequirements:
    def test_fields(self, requirements) -> None:
        assert requirements["scheme"] == "exact"
        assert requirements["network"] == "base"
        assert requirements["maxAmountRequired"] == "5000"
        assert requirements["resource"] == RESOURCE
        assert requirements["payTo"] == "0xabc"
        assert requirements["asset"].startswith("0x")
        assert requirements["maxTimeoutSeconds"] == 60


class TestVerify:
    @pytest.mark.asyncio
    async def test_missing_header(self, gate, requirements) -> None:
        with pytest.raises(PaymentRequired) as exc_info:
            await gate.verify(None, requirements)
        assert exc_info.value.to_content()["accepts"] == [requirements]
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_bad_payload_never_reaches_facilitator(self, gate, requirements) -> None:
        route = respx.post(f"{FACILITATOR}/verify")
        with pytest.raises(PaymentRequired, match="Malformed payment header"):
            await gate.verify("signed-payload", requirements)
        assert not route.called
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_rejected_by_facilitator(self, gate, requirements) -> None:
        respx.post(f"{FACILITATOR}/verify").mock(
            return_value=httpx.Response(200, json={"isValid": False, "invalidReason": "invalid_signature"})
        )
        with pytest.raises(PaymentRequired, match="invalid_signature"):
            await gate.verify(_encode(PAYLOAD), requirements)
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_accepted(self, gate, requirements) -> None:
        route = respx.post(f"{FACILITATOR}/verify").mock(
            return_value=httpx.Response(200, json={"isValid": True})
        )
        assert await gate.verify(_encode(PAYLOAD), requirements) == PAYLOAD
        sent = json.loads(route.calls.last.request.content)
        assert sent == {
            "x402Version": 1,
            "paymentPayload": PAYLOAD,
            "paymentRequirements": requirements,
        }
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_facilitator_error_status(self, gate, requirements) -> None:
        respx.post(f"{FACILITATOR}/verify").mock(return_value=httpx.Response(503, text="busy"))
        with pytest.raises(PaymentFacilitatorError, match="HTTP 503"):
            await gate.verify(_encode(PAYLOAD), requirements)
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_facilitator_unreachable(self, gate, requirements) -> None:
        respx.post(f"{FACILITATOR}/verify").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(PaymentFacilitatorError):
            await gate.verify(_encode(PAYLOAD), requirements)
        await gate.close()


class TestSettle:
    @respx.mock
    @pytest.mark.asyncio
    async def test_success(self, gate, requirements) -> None:
        respx.post(f"{FACILITATOR}/settle").mock(
            return_value=httpx.Response(200, json={"success": True, "transaction": "0xtx"})
        )
        header = await gate.settle(PAYLOAD, requirements)
        assert json.loads(base64.b64decode(header))["transaction"] == "0xtx"
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_failure(self, gate, requirements) -> None:
        respx.post(f"{FACILITATOR}/settle").mock(
            return_value=httpx.Response(200, json={"success": False, "errorReason": "expired"})
        )
        with pytest.raises(PaymentRequired, match="expired"):
            await gate.settle(PAYLOAD, requirements)
        await gate.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_non_json_answer(self, gate, requirements) -> None:
        respx.post(f"{FACILITATOR}/settle").mock(return_value=httpx.Response(200, text="ok"))
        with pytest.raises(PaymentFacilitatorError, match="invalid JSON"):
            await gate.settle(PAYLOAD, requirements)
        await gate.close()
