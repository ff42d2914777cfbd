from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

import httpx
import requests

from ravenhttp.error import ErrorKind, HttpError
from ravenhttp.request.base import Request

LOGGER = logging.getLogger("ravenhttp.transport")

TRANSPORTS = ("httpx", "requests")


@dataclass(frozen=True)
class RawResponse:
    status: int
    headers: Tuple[Tuple[str, str], ...]
    body: bytes


class Transport(Protocol):
    async def send(self, request: Request, *, base_url: str, timeout: Optional[float] = None) -> RawResponse: ...

    async def close(self) -> None: ...


def _url(base_url: str, request: Request) -> str:
    return f"{base_url.rstrip('/')}/{request.path}"


class HttpxTransport:
    def __init__(self, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._inner = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs: Dict[str, Any] = {}
            if self._inner is not None:
                kwargs["transport"] = self._inner
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def send(self, request: Request, *, base_url: str, timeout: Optional[float] = None) -> RawResponse:
        client = self._get_client()
        kwargs: Dict[str, Any] = {
            "params": list(request.query),
            "headers": list(request.headers),
            "content": request.body,
        }
        if timeout is not None:
            kwargs["timeout"] = timeout

        start = time.perf_counter()
        try:
            response = await client.request(request.method.value, _url(base_url, request), **kwargs)
        except httpx.TimeoutException as err:
            raise HttpError(ErrorKind.TIMEOUT, f"request timed out: {request.method.value} {request.path}") from err
        except httpx.ConnectError as err:
            raise HttpError(ErrorKind.CONNECTION, f"connection failed: {err}") from err
        except httpx.HTTPError as err:
            raise HttpError(ErrorKind.PROTOCOL, f"request failed: {err}") from err
        except (httpx.InvalidURL, ValueError) as err:
            raise HttpError(ErrorKind.PROTOCOL, f"request could not be sent: {err}") from err
        LOGGER.debug(
            f"[http] httpx status={response.status_code} bytes={len(response.content)} "
            f"elapsed={time.perf_counter() - start:.2f}s"
        )
        return RawResponse(
            status=response.status_code,
            headers=tuple(response.headers.multi_items()),
            body=response.content,
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


class RequestsTransport:
    """Blocking ``requests`` session driven from a worker thread."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()

    async def send(self, request: Request, *, base_url: str, timeout: Optional[float] = None) -> RawResponse:
        return await asyncio.to_thread(self._send_blocking, request, base_url, timeout)

    def _send_blocking(self, request: Request, base_url: str, timeout: Optional[float]) -> RawResponse:
        start = time.perf_counter()
        try:
            response = self.session.request(
                request.method.value,
                _url(base_url, request),
                params=list(request.query),
                headers=dict(request.headers),
                data=request.body,
                timeout=timeout,
            )
        except requests.Timeout as err:
            raise HttpError(ErrorKind.TIMEOUT, f"request timed out: {request.method.value} {request.path}") from err
        except requests.ConnectionError as err:
            raise HttpError(ErrorKind.CONNECTION, f"connection failed: {err}") from err
        except requests.RequestException as err:
            raise HttpError(ErrorKind.PROTOCOL, f"request failed: {err}") from err
        except ValueError as err:
            raise HttpError(ErrorKind.PROTOCOL, f"request could not be sent: {err}") from err
        LOGGER.debug(
            f"[http] requests status={response.status_code} bytes={len(response.content)} "
            f"elapsed={time.perf_counter() - start:.2f}s"
        )
        return RawResponse(
            status=response.status_code,
            headers=tuple(response.headers.items()),
            body=response.content,
        )

    async def close(self) -> None:
        self.session.close()


def build_transport(name: str) -> Transport:
    normalized = str(name or "httpx").strip().lower()
    if normalized == "httpx":
        return HttpxTransport()
    if normalized == "requests":
        return RequestsTransport()
    raise ValueError(f"Unknown transport `{name}`; expected one of: {', '.join(TRANSPORTS)}")


__all__ = ["RawResponse", "Transport", "HttpxTransport", "RequestsTransport", "build_transport", "TRANSPORTS"]
