from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union

from ravenhttp import routing
from ravenhttp.request.base import EndpointRequest, Request, require_id, require_limit
from ravenhttp.request.channel.thread.get_private_archived_threads import archive_timestamp

if TYPE_CHECKING:
    from ravenhttp.client import Client


class GetPublicArchivedThreads(EndpointRequest):
    """Archived public threads in a channel, newest archive timestamp first."""

    def __init__(self, http: "Client", channel_id: int) -> None:
        super().__init__(http)
        self.channel_id = channel_id
        self._before: Union[str, datetime, None] = None
        self._limit: Optional[int] = None

    def before(self, before: Union[str, datetime]) -> "GetPublicArchivedThreads":
        self._before = before
        return self

    def limit(self, limit: int) -> "GetPublicArchivedThreads":
        self._limit = limit
        return self

    def try_into_request(self) -> Request:
        self._consume()
        return Request.from_route(
            routing.GetPublicArchivedThreads(
                channel_id=require_id("channel_id", self.channel_id),
                before=archive_timestamp(self._before),
                limit=require_limit(self._limit),
            )
        )
