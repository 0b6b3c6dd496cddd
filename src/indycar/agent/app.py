"""FastAPI host for the IndyCar entrypoints."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from indycar import __version__, api_logging
from indycar.agent.config import Settings, settings as default_settings
from indycar.agent.entrypoints import ENTRYPOINTS, Entrypoint
from indycar.agent.payments import PaymentGate, PaymentRequired
from indycar.client import AsyncIndyCarClient
from indycar.exceptions import IndyCarError, UpstreamTimeoutError, UpstreamUnavailableError

AGENT_NAME = "indycar-data"
AGENT_DESCRIPTION = (
    "Real-time IndyCar racing data: schedules, race events, news, and season reports via ESPN"
)

router = APIRouter()


class InvokeRequest(BaseModel):
    input: dict[str, Any] = {}


def get_client(request: Request) -> AsyncIndyCarClient:
    return request.app.state.client


def get_payment_gate(request: Request) -> PaymentGate:
    return request.app.state.payments


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _get_entrypoint(key: str) -> Entrypoint:
    entrypoint = ENTRYPOINTS.get(key)
    if entrypoint is None:
        raise HTTPException(404, detail=f"Unknown entrypoint '{key}'")
    return entrypoint


@router.get("/", include_in_schema=False)
def manifest():
    return {
        "name": AGENT_NAME,
        "version": __version__,
        "description": AGENT_DESCRIPTION,
        "entrypoints": [ep.describe() for ep in ENTRYPOINTS.values()],
    }


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/entrypoints")
def list_entrypoints():
    return [ep.describe() for ep in ENTRYPOINTS.values()]


@router.post("/entrypoints/{key}/invoke")
async def invoke(
    key: str,
    request: Request,
    body: InvokeRequest | None = None,
    x_payment: str | None = Header(None, alias="X-PAYMENT"),
    client: AsyncIndyCarClient = Depends(get_client),
    settings: Settings = Depends(get_settings),
    gate: PaymentGate = Depends(get_payment_gate),
):
    entrypoint = _get_entrypoint(key)

    payment = None
    if settings.payments_enabled and entrypoint.price > 0:
        requirements = gate.requirements(entrypoint, str(request.url))
        payment = await gate.verify(x_payment, requirements)

    try:
        params = entrypoint.input_model.model_validate((body or InvokeRequest()).input)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc

    result = await entrypoint.handler(client, params)
    response = JSONResponse({"output": result.to_output()})
    if payment is not None:
        # Settle only once the call has produced its output.
        response.headers["X-PAYMENT-RESPONSE"] = await gate.settle(payment, requirements)
    return response


async def _payment_required(request: Request, exc: PaymentRequired) -> JSONResponse:
    return JSONResponse(status_code=402, content=exc.to_content())


async def _upstream_error(request: Request, exc: IndyCarError) -> JSONResponse:
    content: dict[str, Any] = {"detail": str(exc)}
    if isinstance(exc, UpstreamUnavailableError):
        content["upstreamStatus"] = exc.status_code
    status = 504 if isinstance(exc, UpstreamTimeoutError) else 502
    return JSONResponse(status_code=status, content=content)


def create_app(settings: Settings = default_settings) -> FastAPI:
    api_logging.configure(settings.log_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        gate = PaymentGate(settings)
        async with AsyncIndyCarClient(timeout=settings.http_timeout) as client:
            app.state.client = client
            app.state.payments = gate
            try:
                yield
            finally:
                await gate.close()

    app = FastAPI(title="IndyCar Data Agent", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.include_router(router)
    app.add_exception_handler(PaymentRequired, _payment_required)
    app.add_exception_handler(IndyCarError, _upstream_error)
    return app


app = create_app()
