"""
Basic usage example of fetch-decorators.

Demonstrates:
- Wrapping an httpx-backed fetch with decorate()
- Default headers that call-site options can still override
- Reading JSON through a response pipeline
"""

import asyncio

from fetch_decorators import (
    and_then,
    decorate,
    headers,
    json,
    make_fetch,
    method,
    pipe,
    reject_if_not_okay,
)

fetch = make_fetch()

get_json = pipe(
    decorate(
        fetch,
        [
            headers({"Accept": "application/json", "User-Agent": "fetch-decorators"}),
            method("GET"),
        ],
    ),
    and_then(reject_if_not_okay),
    and_then(json),
)


async def main() -> None:
    print(await get_json("https://httpbin.org/get"))
    # Call-site headers win over the decorator defaults
    print(await get_json("https://httpbin.org/headers", {"headers": {"Accept": "*/*"}}))


if __name__ == "__main__":
    asyncio.run(main())
