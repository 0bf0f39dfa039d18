"""Pytest configuration file."""

import random

import pytest
from automata_console.api.app import create_app
from automata_console.api.handler import AutomataHandler
from automata_console.config import Settings
from fastapi import FastAPI
from fastapi.testclient import TestClient


async def _no_sleep(_: float) -> None:
    return None


@pytest.fixture
def handler() -> AutomataHandler:
    """Handler with a seeded random source and no real latency."""
    return AutomataHandler(Settings(), rng=random.Random(1234), sleep=_no_sleep)


@pytest.fixture
def app(handler: AutomataHandler) -> FastAPI:
    """Create a test FastAPI application."""
    return create_app(handler=handler)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app)
