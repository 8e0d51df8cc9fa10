"""
Authenticated JSON client with a timeout.

Demonstrates:
- Computing auth headers per request (e.g. refreshing a token)
- Posting JSON bodies with body()
- Aborting slow requests with timeout()
"""

import asyncio

import httpx

from fetch_decorators import (
    AbortError,
    basic_auth_header,
    bearer_auth_header,
    body,
    decorate,
    headers,
    make_fetch,
    timeout,
)


async def current_token() -> dict[str, str]:
    """Look up the current access token (replace with a real token store)."""
    await asyncio.sleep(0)
    return bearer_auth_header("example-token")


async def main() -> None:
    async with httpx.AsyncClient(base_url="https://httpbin.org") as client:
        fetch = make_fetch(client)

        api = decorate(fetch, [headers(current_token), timeout(5000)])
        print((await api("/bearer")).json())

        post = decorate(fetch, [body, headers(basic_auth_header("user", "passwd"))])
        print((await post({"hello": "world"}, "/post")).json()["json"])

        try:
            await timeout(100)(fetch)("/delay/3")
        except AbortError as exc:
            print(f"aborted: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
