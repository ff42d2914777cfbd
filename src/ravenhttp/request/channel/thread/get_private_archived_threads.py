from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union

from ravenhttp import routing
from ravenhttp.error import ErrorKind, HttpError
from ravenhttp.request.base import EndpointRequest, Request, require_id, require_limit

if TYPE_CHECKING:
    from ravenhttp.client import Client


def archive_timestamp(value: Union[str, datetime, None]) -> Optional[str]:
    """Normalize a ``before`` filter to an ISO8601 timestamp with a UTC offset."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
        text = value.isoformat()
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            # fromisoformat only accepts a trailing "Z" from Python 3.11 on
            parsed = datetime.fromisoformat(text[:-1] + "+00:00" if text.endswith("Z") else text)
        except ValueError:
            raise HttpError(ErrorKind.VALIDATION, f"before must be an ISO8601 timestamp, got {value!r}") from None
    else:
        raise HttpError(ErrorKind.VALIDATION, f"before must be an ISO8601 timestamp, got {value!r}")
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise HttpError(ErrorKind.VALIDATION, f"before must carry a UTC offset, got {value!r}")
    return text


class GetPrivateArchivedThreads(EndpointRequest):
    """Archived private threads in a channel.

    Threads are ordered by their archive timestamp in descending order.
    Requires the permission to manage threads.
    """

    def __init__(self, http: "Client", channel_id: int) -> None:
        super().__init__(http)
        self.channel_id = channel_id
        self._before: Union[str, datetime, None] = None
        self._limit: Optional[int] = None

    def before(self, before: Union[str, datetime]) -> "GetPrivateArchivedThreads":
        """Return threads archived before this timestamp."""
        self._before = before
        return self

    def limit(self, limit: int) -> "GetPrivateArchivedThreads":
        self._limit = limit
        return self

    def try_into_request(self) -> Request:
        self._consume()
        return Request.from_route(
            routing.GetPrivateArchivedThreads(
                channel_id=require_id("channel_id", self.channel_id),
                before=archive_timestamp(self._before),
                limit=require_limit(self._limit),
            )
        )
