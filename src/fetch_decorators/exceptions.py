"""FetchDecoratorError hierarchy."""

from __future__ import annotations

from typing import Any


class FetchDecoratorError(Exception):
    """Base for all fetch decorator exceptions."""


class InvalidPatchError(FetchDecoratorError, TypeError):
    """Option patch is neither a mapping nor a callable producing one."""


class ResponseNotOkay(FetchDecoratorError):
    """Response carried a non-success status."""

    def __init__(
        self,
        status_text: str,
        *,
        status_code: int | None = None,
        response: Any | None = None,
    ) -> None:
        super().__init__(status_text)
        self.status_text = status_text
        self.status_code = status_code
        self.response = response


class AbortError(FetchDecoratorError):
    """Request was cancelled through its abort signal."""

    def __init__(self, detail: str = "The user aborted a request.") -> None:
        super().__init__(detail)
        self.detail = detail
