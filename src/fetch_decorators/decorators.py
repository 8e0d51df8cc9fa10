"""Fetch decorators — options(), option() and the named decorators built on them.

Every decorator keeps the ``(url, opts=None) -> awaitable`` shape of the
function it wraps, except :func:`body`, which prepends the JSON payload.
Options supplied at the call site always win over injected options; nested
dicts are merged rather than replaced.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from toolz import curry

from fetch_decorators._types import Fetch, Options
from fetch_decorators.merge import merge_deep_left
from fetch_decorators.patches import as_patch, single_option_patch
from fetch_decorators.signals import abort_after

logger = logging.getLogger(__name__)


@curry
def options(patch: Any, fetch: Fetch) -> Fetch:
    """Merge ``patch`` into the call-site options before calling ``fetch``.

    ``patch`` is a mapping, or a function (sync or async) that receives the
    call-site options and returns a mapping. Functions run once per call.
    """
    resolved_patch = as_patch(patch)

    async def decorated(url: Any, opts: Options | None = None) -> Any:
        call_opts: Options = {} if opts is None else opts
        injected = await resolved_patch.resolve(call_opts)
        logger.debug("Injecting options %s for %s", sorted(injected), url)
        return await fetch(url, merge_deep_left(call_opts, injected))

    return decorated


@curry
def option(key: str, value: Any, fetch: Fetch) -> Fetch:
    """Inject a single option ``key``.

    ``value`` may be a plain value or a zero-argument function (sync or async)
    evaluated on every call.
    """
    return options(single_option_patch(key, value), fetch)


method = option("method")
headers = option("headers")


@curry
def timeout(ms: float, fetch: Fetch) -> Fetch:
    """Inject a fresh abort signal that fires after ``ms`` milliseconds."""
    return option("signal", lambda: abort_after(ms), fetch)


def body(fetch: Fetch) -> Callable[..., Awaitable[Any]]:
    """Turn ``fetch`` into ``(payload, url, opts=None)`` posting ``payload`` as JSON.

    Must sit outermost when combined with other decorators through decorate().
    """

    async def post(payload: Any, url: Any, opts: Options | None = None) -> Any:
        patch = {
            "method": "POST",
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(payload, separators=(",", ":"), ensure_ascii=False),
        }
        return await options(patch, fetch)(url, opts)

    return post
