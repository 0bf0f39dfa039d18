"""Request handling for ``POST /api/automata``."""

from __future__ import annotations

import asyncio
import random
from typing import Any, Awaitable, Callable, Optional

import orjson
from pydantic import ValidationError

from automata_console.api.errors import (
    AutomataError,
    InvalidRequestBody,
    TaskValidationError,
)
from automata_console.api.schemas import AutomataRequest, AutomataResponse
from automata_console.config import Settings, settings as default_settings
from automata_console.intent.resolver import resolve_intent
from automata_console.logging import get_logger
from automata_console.utils.timing import timer

logger = get_logger(__name__)

SleepFn = Callable[[float], Awaitable[Any]]


def draw_delay_seconds(
    rng: random.Random, min_ms: int = 600, max_ms: int = 1000
) -> float:
    """Uniform delay in ``[min_ms, max_ms)`` milliseconds, returned in seconds."""
    return (min_ms + rng.random() * (max_ms - min_ms)) / 1000.0


def compute_confidence(
    rng: random.Random,
    floor: float = 0.82,
    spread: float = 0.15,
    decimals: int = 2,
) -> float:
    """Cosmetic confidence score, ``floor + U[0, 1) * spread`` rounded."""
    return round(floor + rng.random() * spread, decimals)


def parse_request(raw: bytes) -> AutomataRequest:
    """
    Decode and validate a raw request body.

    Args:
        raw: Request body bytes

    Returns:
        Validated request model

    Raises:
        InvalidRequestBody: If the body is not JSON, or is JSON null
        TaskValidationError: If the body is not an object, or ``task`` is
            missing, not a string, or blank
    """
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise InvalidRequestBody() from e

    if payload is None:
        raise InvalidRequestBody()
    if not isinstance(payload, dict):
        # Arrays and scalars parse fine but carry no task field.
        raise TaskValidationError()

    try:
        return AutomataRequest.model_validate(payload)
    except ValidationError as e:
        raise TaskValidationError() from e


class AutomataHandler:
    """Validates a task submission, classifies it and packages the result.

    The random source and sleep function are injectable so callers can pin
    the simulated latency and confidence score.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        sleep: Optional[SleepFn] = None,
    ) -> None:
        self.config = config or default_settings
        self.rng = rng or random.Random(self.config.RANDOM_SEED)
        self.sleep: SleepFn = sleep or asyncio.sleep

    async def process(self, request: AutomataRequest) -> AutomataResponse:
        if self.config.SIMULATE_LATENCY:
            delay = draw_delay_seconds(
                self.rng, self.config.LATENCY_MIN_MS, self.config.LATENCY_MAX_MS
            )
            await self.sleep(delay)

        resolved = resolve_intent(request.task.strip())
        confidence = compute_confidence(
            self.rng,
            floor=self.config.CONFIDENCE_FLOOR,
            spread=self.config.CONFIDENCE_SPREAD,
            decimals=self.config.CONFIDENCE_DECIMALS,
        )
        return AutomataResponse.from_resolved(resolved, confidence)

    async def handle(self, raw: bytes) -> tuple[int, dict[str, Any]]:
        """
        Handle a raw request body.

        Args:
            raw: Request body bytes

        Returns:
            Tuple of HTTP status code and JSON-serializable payload
        """
        with timer() as elapsed_ms:
            try:
                request = parse_request(raw)
                response = await self.process(request)
            except AutomataError as e:
                logger.warning(f"Rejected automata request: {e.message}")
                return e.status_code, e.to_payload()
            except Exception as e:
                logger.error(f"Unexpected error handling automata request: {e}")
                fallback = InvalidRequestBody()
                return fallback.status_code, fallback.to_payload()

            logger.info(
                f"Resolved intent {response.detected_intent} "
                f"(confidence={response.confidence:.2f}) in {elapsed_ms():.2f}ms"
            )
            return 200, response.model_dump()
