from __future__ import annotations

from typing import TYPE_CHECKING

from ravenhttp import routing
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class GetBans(EndpointRequest):
    """Retrieve the bans for a guild."""

    def __init__(self, http: "Client", guild_id: int) -> None:
        super().__init__(http)
        self.guild_id = guild_id

    def try_into_request(self) -> Request:
        self._consume()
        return Request.from_route(routing.GetBans(guild_id=require_id("guild_id", self.guild_id)))
