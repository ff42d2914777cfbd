from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ravenhttp import routing
from ravenhttp.request.base import EndpointRequest, Request, require_id, require_limit

if TYPE_CHECKING:
    from ravenhttp.client import Client


class GetJoinedPrivateArchivedThreads(EndpointRequest):
    """Archived private threads in the channel that the current user has joined.

    Threads are ordered by their id in descending order.
    """

    def __init__(self, http: "Client", channel_id: int) -> None:
        super().__init__(http)
        self.channel_id = channel_id
        self._before: Optional[int] = None
        self._limit: Optional[int] = None

    def before(self, before: int) -> "GetJoinedPrivateArchivedThreads":
        """Return threads before this thread id."""
        self._before = before
        return self

    def limit(self, limit: int) -> "GetJoinedPrivateArchivedThreads":
        """Maximum number of threads to return."""
        self._limit = limit
        return self

    def try_into_request(self) -> Request:
        self._consume()
        before = require_id("before", self._before) if self._before is not None else None
        return Request.from_route(
            routing.GetJoinedPrivateArchivedThreads(
                channel_id=require_id("channel_id", self.channel_id),
                before=before,
                limit=require_limit(self._limit),
            )
        )
