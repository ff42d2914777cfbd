from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ravenhttp import routing
from ravenhttp.error import AuditLogReasonError
from ravenhttp.request.audit_reason import audit_header
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class DeleteBan(EndpointRequest):
    """Remove a ban from a user in a guild.

    Unban user ``200`` from guild ``100``::

        client = Client("my token")
        await client.delete_ban(100, 200).reason("appealed").execute()
    """

    def __init__(self, http: "Client", guild_id: int, user_id: int) -> None:
        super().__init__(http)
        self.guild_id = guild_id
        self.user_id = user_id
        self._reason: Optional[str] = None

    def reason(self, reason: str) -> "DeleteBan":
        self._reason = AuditLogReasonError.validate(reason)
        return self

    def try_into_request(self) -> Request:
        self._consume()
        builder = Request.builder(
            routing.DeleteBan(
                guild_id=require_id("guild_id", self.guild_id),
                user_id=require_id("user_id", self.user_id),
            )
        )
        if self._reason is not None:
            builder.headers(audit_header(self._reason))
        return builder.build()
