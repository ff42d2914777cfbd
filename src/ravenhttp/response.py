"""Awaitable result of executing a request, and the raw response it yields."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generator, List, Optional, Tuple

from requests.structures import CaseInsensitiveDict

from ravenhttp.error import ErrorKind, HttpError
from ravenhttp.routing import ResponseShape


@dataclass(frozen=True)
class Response:
    status: int
    headers: Tuple[Tuple[str, str], ...]
    body: bytes
    shape: ResponseShape = ResponseShape.SINGLE

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header_map(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self.headers)

    def text(self) -> str:
        try:
            return self.body.decode("utf-8")
        except UnicodeDecodeError as err:
            raise HttpError(
                ErrorKind.PARSING, f"response body is not valid UTF-8: {err}", status=self.status, body=self.body
            ) from err

    def json(self) -> Any:
        if self.shape is ResponseShape.EMPTY or not self.body:
            return None
        try:
            return json.loads(self.body)
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            raise HttpError(
                ErrorKind.PARSING, f"response body is not valid JSON: {err}", status=self.status, body=self.body
            ) from err

    def models(self) -> List[Any]:
        """Decoded JSON array for list-shaped endpoints."""
        if self.shape is not ResponseShape.LIST:
            raise HttpError(ErrorKind.PARSING, f"response shape is {self.shape.value}, not a list", status=self.status)
        value = self.json()
        if value is None:
            return []
        if not isinstance(value, list):
            raise HttpError(
                ErrorKind.PARSING,
                f"expected a JSON array, got {type(value).__name__}",
                status=self.status,
                body=self.body,
            )
        return value


ResponseFactory = Callable[[], Awaitable[Response]]


class ResponseFuture:
    """Handle returned by ``execute``.

    Holds either an error that is already known (the request never left the
    process) or a factory for the in-flight transport call. The state is fixed
    at construction. Awaiting a pre-failed future raises its error without any
    I/O; awaiting a live future starts the transport call once and every later
    await observes the same outcome.
    """

    def __init__(self, *, error: Optional[HttpError] = None, factory: Optional[ResponseFactory] = None) -> None:
        if (error is None) == (factory is None):
            raise ValueError("ResponseFuture needs exactly one of error or factory")
        self._error = error
        self._factory = factory
        self._task: Optional[asyncio.Future] = None

    @classmethod
    def error(cls, error: HttpError) -> "ResponseFuture":
        return cls(error=error)

    @classmethod
    def pending(cls, factory: ResponseFactory) -> "ResponseFuture":
        return cls(factory=factory)

    @property
    def is_pre_failed(self) -> bool:
        return self._error is not None

    @property
    def started(self) -> bool:
        return self._task is not None

    def done(self) -> bool:
        if self._error is not None:
            return True
        return self._task is not None and self._task.done()

    async def _resolve(self) -> Response:
        if self._error is not None:
            raise self._error
        if self._task is None:
            assert self._factory is not None
            self._task = asyncio.ensure_future(self._factory())
        return await self._task

    def __await__(self) -> Generator[Any, None, Response]:
        return self._resolve().__await__()

    def __repr__(self) -> str:
        if self._error is not None:
            return f"<ResponseFuture pre-failed kind={self._error.kind.value}>"
        state = "done" if self.done() else ("running" if self.started else "pending")
        return f"<ResponseFuture {state}>"


__all__ = ["Response", "ResponseFuture", "ResponseFactory"]
