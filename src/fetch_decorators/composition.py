"""Decorator composition — decorate() and generic combinators."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from toolz import compose, compose_left, curry

from fetch_decorators._types import Decorator, Fetch

pipe = compose_left


@curry
def decorate(fetch: Fetch, decorators: Sequence[Decorator]) -> Fetch:
    """Apply ``decorators`` to ``fetch``; the first one listed is the outermost.

    Read the list top to bottom as the order in which each call passes
    through the decorators. An empty list returns ``fetch`` unchanged.
    """
    return compose(*decorators)(fetch)


@curry
async def and_then(fn: Callable[[Any], Any], awaitable: Awaitable[Any]) -> Any:
    """Await ``awaitable`` and apply ``fn`` to its result."""
    result = fn(await awaitable)
    if inspect.isawaitable(result):
        result = await result
    return result

