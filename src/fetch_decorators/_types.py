"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

Options = Mapping[str, Any]

# (url, opts=None) -> awaitable response
Fetch = Callable[..., Awaitable[Any]]
Decorator = Callable[[Fetch], Fetch]

OptionsFactory = Callable[[Options], Options | Awaitable[Options]]
ValueFactory = Callable[[], Any]


class Response(Protocol):
    """Minimal response surface used by the response helpers."""

    @property
    def is_success(self) -> bool: ...

    @property
    def reason_phrase(self) -> str: ...

    def json(self) -> Any: ...
