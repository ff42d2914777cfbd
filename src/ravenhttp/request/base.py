"""Request descriptor, its builder, and the endpoint conversion contract."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Iterable, Optional, Protocol, Tuple, runtime_checkable
from urllib.parse import urlencode

from requests.structures import CaseInsensitiveDict

from ravenhttp.error import ErrorKind, HttpError
from ravenhttp.response import ResponseFuture
from ravenhttp.routing import Method, QueryPairs, ResponseShape, Route

if TYPE_CHECKING:
    from ravenhttp.client import Client

HeaderPairs = Tuple[Tuple[str, str], ...]

LOGGER = logging.getLogger("ravenhttp.request")


def _freeze_headers(headers: CaseInsensitiveDict) -> HeaderPairs:
    return tuple((str(name), str(value)) for name, value in headers.items())


@dataclass(frozen=True)
class Request:
    """Transport-agnostic description of one HTTP call.

    Header names are case-insensitive; ``headers`` keeps the casing of the last
    write for each name. ``path`` has no leading slash and no query string.
    """

    method: Method
    path: str
    query: QueryPairs = ()
    headers: HeaderPairs = ()
    body: Optional[bytes] = None
    shape: ResponseShape = ResponseShape.SINGLE
    use_authorization_token: bool = True

    @classmethod
    def builder(cls, route: Route) -> "RequestBuilder":
        return RequestBuilder(route)

    @classmethod
    def from_route(cls, route: Route) -> "Request":
        return cls.builder(route).build()

    @property
    def query_string(self) -> str:
        return urlencode(self.query)

    @property
    def path_with_query(self) -> str:
        query = self.query_string
        return f"{self.path}?{query}" if query else self.path

    def header(self, name: str) -> Optional[str]:
        return self.header_map().get(name)

    def header_map(self) -> CaseInsensitiveDict:
        return CaseInsensitiveDict(self.headers)

    def with_default_headers(self, defaults: Iterable[Tuple[str, str]]) -> "Request":
        """Return a copy with ``defaults`` added where the name is not already set."""
        merged = self.header_map()
        changed = False
        for name, value in defaults:
            if name in merged:
                continue
            merged[name] = value
            changed = True
        if not changed:
            return self
        return replace(self, headers=_freeze_headers(merged))


class RequestBuilder:
    def __init__(self, route: Route) -> None:
        self._method = route.method
        self._path = route.path
        self._query = route.query
        self._shape = route.shape
        self._headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self._body: Optional[bytes] = None
        self._use_authorization_token = True

    def headers(self, pairs: Iterable[Tuple[str, str]]) -> "RequestBuilder":
        for name, value in pairs:
            self._headers[name] = value
        return self

    def body(self, body: bytes) -> "RequestBuilder":
        self._body = body
        return self

    def json(self, value: Any) -> "RequestBuilder":
        encoded = json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        return self.body(encoded).headers([("Content-Type", "application/json")])

    def use_authorization_token(self, enabled: bool) -> "RequestBuilder":
        self._use_authorization_token = enabled
        return self

    def build(self) -> Request:
        return Request(
            method=self._method,
            path=self._path,
            query=self._query,
            headers=_freeze_headers(self._headers),
            body=self._body,
            shape=self._shape,
            use_authorization_token=self._use_authorization_token,
        )


@runtime_checkable
class TryIntoRequest(Protocol):
    def try_into_request(self) -> Request: ...


def dispatch(http: "Client", convertible: TryIntoRequest) -> ResponseFuture:
    """Convert ``convertible`` and hand the result to ``http``.

    Conversion failures come back as an already-failed future; the transport is
    never touched on that path.
    """
    try:
        request = convertible.try_into_request()
    except HttpError as err:
        LOGGER.debug(f"[http] conversion failed request={type(convertible).__name__} kind={err.kind.value}: {err}")
        return ResponseFuture.error(err)
    return http.request(request)


class EndpointRequest(ABC):
    """Shared lifecycle for endpoint builders.

    Builders are single use: the first call to :meth:`try_into_request` or
    :meth:`execute` consumes the builder, and any later call fails with
    ``ErrorKind.BUILDER_CONSUMED``. Subclasses implement ``try_into_request``
    and start it with ``self._consume()``.
    """

    def __init__(self, http: "Client") -> None:
        self._http = http
        self._consumed = False

    def _consume(self) -> None:
        if self._consumed:
            raise HttpError(ErrorKind.BUILDER_CONSUMED, f"{type(self).__name__} has already been executed")
        self._consumed = True

    @abstractmethod
    def try_into_request(self) -> Request:
        """Consume the builder and produce its request."""

    def execute(self) -> ResponseFuture:
        return dispatch(self._http, self)


def require_id(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise HttpError(ErrorKind.BUILDING_REQUEST, f"{name} must be a positive integer id, got {value!r}")
    return value


def require_limit(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise HttpError(ErrorKind.VALIDATION, f"limit must be a positive integer, got {value!r}")
    return value
