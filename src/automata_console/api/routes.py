"""HTTP routes for the automata console."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from automata_console import __version__
from automata_console.api.handler import AutomataHandler
from automata_console.api.schemas import (
    AutomataResponse,
    ErrorResponse,
    HealthResponse,
    IntentRuleView,
)
from automata_console.intent.rules import iter_rules

router = APIRouter()


def _get_handler(request: Request) -> AutomataHandler:
    return request.app.state.handler


@router.post(
    "/api/automata",
    response_model=AutomataResponse,
    responses={400: {"model": ErrorResponse}},
)
async def submit_task(request: Request) -> JSONResponse:
    # Raw body instead of a pydantic parameter: bad input must be a 400, not a 422.
    raw = await request.body()
    status_code, payload = await _get_handler(request).handle(raw)
    return JSONResponse(content=payload, status_code=status_code)


@router.get("/api/automata/intents", response_model=list[IntentRuleView])
async def list_intents() -> list[IntentRuleView]:
    return [IntentRuleView.from_rule(rule) for rule in iter_rules(include_default=True)]


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    handler = getattr(request.app.state, "handler", None)
    return HealthResponse(
        status="healthy" if handler is not None else "unhealthy",
        version=__version__,
        components={
            "handler": "ready" if handler is not None else "not_initialized",
            "rules": str(sum(1 for _ in iter_rules())),
            "simulate_latency": str(
                handler.config.SIMULATE_LATENCY if handler else False
            ).lower(),
        },
    )
