"""Shared pytest fixtures for fetch-decorators tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from fastapi import FastAPI, HTTPException


async def _echo_fetch(*args: Any) -> list[Any]:
    return list(args)


@pytest.fixture
def fake_fetch() -> Any:
    """Async base function that resolves to the arguments it was called with."""
    return _echo_fetch


@pytest.fixture
def mock_api() -> FastAPI:
    """Small ASGI app standing in for a remote API."""
    app = FastAPI()

    @app.get("/")
    async def hello() -> dict[str, str]:
        return {"hello": "world"}

    @app.get("/bad")
    async def bad() -> dict[str, str]:
        raise HTTPException(status_code=400, detail="Yeet")

    @app.get("/slow")
    async def slow() -> dict[str, str]:
        await asyncio.sleep(5)
        return {"hello": "eventually"}

    @app.post("/echo")
    async def echo(payload: dict[str, Any]) -> dict[str, Any]:
        return {"received": payload}

    return app
