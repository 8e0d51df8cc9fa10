"""Fetch Decorators - composable option-injecting decorators for async request functions."""

from fetch_decorators.composition import and_then, compose, decorate, pipe
from fetch_decorators.decorators import (
    body,
    headers,
    method,
    option,
    options,
    timeout,
)
from fetch_decorators.exceptions import (
    AbortError,
    FetchDecoratorError,
    InvalidPatchError,
    ResponseNotOkay,
)
from fetch_decorators.fetch import make_fetch
from fetch_decorators.helpers import (
    basic_auth_header,
    bearer_auth_header,
    json,
    reject_if_not_okay,
)
from fetch_decorators.merge import merge_deep_left
from fetch_decorators.patches import ComputedPatch, LiteralPatch, as_patch
from fetch_decorators.signals import AbortSignal, abort_after

__all__ = [
    "AbortError",
    "AbortSignal",
    "ComputedPatch",
    "FetchDecoratorError",
    "InvalidPatchError",
    "LiteralPatch",
    "ResponseNotOkay",
    "abort_after",
    "and_then",
    "as_patch",
    "basic_auth_header",
    "bearer_auth_header",
    "body",
    "compose",
    "decorate",
    "headers",
    "json",
    "make_fetch",
    "merge_deep_left",
    "method",
    "option",
    "options",
    "pipe",
    "reject_if_not_okay",
    "timeout",
]
