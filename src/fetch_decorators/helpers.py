"""Auth header builders and response helpers."""

from __future__ import annotations

import base64
import inspect
from typing import Any, TypeVar

from toolz import curry

from fetch_decorators._types import Response
from fetch_decorators.exceptions import ResponseNotOkay

R = TypeVar("R", bound=Response)


@curry
def basic_auth_header(username: str, password: str) -> dict[str, str]:
    credentials = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return {"Authorization": f"Basic {credentials}"}


def bearer_auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def json(response: Response) -> Any:
    """Parsed body of ``response``; async ``json()`` implementations are awaited."""
    parsed = response.json()
    if inspect.isawaitable(parsed):
        parsed = await parsed
    return parsed


def reject_if_not_okay(response: R) -> R:
    """Return ``response`` if successful, otherwise raise ResponseNotOkay."""
    if response.is_success:
        return response
    raise ResponseNotOkay(
        response.reason_phrase,
        status_code=getattr(response, "status_code", None),
        response=response,
    )
