from __future__ import annotations

from typing import TYPE_CHECKING

from ravenhttp import routing
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class GetPins(EndpointRequest):
    """Get the pins of a channel."""

    def __init__(self, http: "Client", channel_id: int) -> None:
        super().__init__(http)
        self.channel_id = channel_id

    def try_into_request(self) -> Request:
        self._consume()
        return Request.from_route(routing.GetPins(channel_id=require_id("channel_id", self.channel_id)))
