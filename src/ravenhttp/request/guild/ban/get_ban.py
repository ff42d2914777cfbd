from __future__ import annotations

from typing import TYPE_CHECKING

from ravenhttp import routing
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class GetBan(EndpointRequest):
    """Get information about a ban of a user in a guild."""

    def __init__(self, http: "Client", guild_id: int, user_id: int) -> None:
        super().__init__(http)
        self.guild_id = guild_id
        self.user_id = user_id

    def try_into_request(self) -> Request:
        self._consume()
        return Request.from_route(
            routing.GetBan(
                guild_id=require_id("guild_id", self.guild_id),
                user_id=require_id("user_id", self.user_id),
            )
        )
