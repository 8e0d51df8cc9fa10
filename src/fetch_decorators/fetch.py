"""make_fetch() — httpx-backed base function honouring abort signals."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

import httpx

from fetch_decorators._types import Fetch, Options
from fetch_decorators.signals import AbortSignal

logger = logging.getLogger(__name__)


def make_fetch(client: httpx.AsyncClient | None = None) -> Fetch:
    """Return ``fetch(url, opts=None)`` sending requests through httpx.

    Recognised options are ``method`` (default ``GET``), ``headers``,
    ``body`` (sent as raw content) and ``signal``. Anything else is passed
    straight to ``httpx.AsyncClient.request``. Without ``client`` a
    short-lived client is opened for each call.
    """

    async def fetch(url: Any, opts: Options | None = None) -> httpx.Response:
        kwargs = dict(opts or {})
        signal: AbortSignal | None = kwargs.pop("signal", None)
        http_method = kwargs.pop("method", "GET")
        if "body" in kwargs:
            kwargs["content"] = kwargs.pop("body")

        if signal is not None:
            signal.throw_if_aborted()

        logger.debug("%s %s", http_method, url)
        request = _send(client, http_method, url, kwargs)
        if signal is None:
            return await request
        return await _send_until_aborted(request, signal)

    return fetch


async def _send(
    client: httpx.AsyncClient | None,
    http_method: str,
    url: Any,
    kwargs: dict[str, Any],
) -> httpx.Response:
    if client is not None:
        return await client.request(http_method, url, **kwargs)
    async with httpx.AsyncClient() as own_client:
        return await own_client.request(http_method, url, **kwargs)


async def _send_until_aborted(
    request: Awaitable[httpx.Response], signal: AbortSignal
) -> httpx.Response:
    request_task = asyncio.ensure_future(request)
    abort_task = asyncio.ensure_future(signal.wait())
    try:
        done, _ = await asyncio.wait(
            {request_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
        )
    except asyncio.CancelledError:
        request_task.cancel()
        raise
    finally:
        abort_task.cancel()

    if request_task in done:
        return request_task.result()

    request_task.cancel()
    await asyncio.gather(request_task, return_exceptions=True)
    reason = signal.reason
    assert reason is not None
    logger.debug("Request aborted: %s", reason)
    raise reason
