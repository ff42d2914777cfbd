from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ravenhttp import routing
from ravenhttp.error import AuditLogReasonError
from ravenhttp.request.audit_reason import audit_header
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class DeleteEmoji(EndpointRequest):
    """Delete an emoji in a guild, by id."""

    def __init__(self, http: "Client", guild_id: int, emoji_id: int) -> None:
        super().__init__(http)
        self.guild_id = guild_id
        self.emoji_id = emoji_id
        self._reason: Optional[str] = None

    def reason(self, reason: str) -> "DeleteEmoji":
        self._reason = AuditLogReasonError.validate(reason)
        return self

    def try_into_request(self) -> Request:
        self._consume()
        builder = Request.builder(
            routing.DeleteEmoji(
                guild_id=require_id("guild_id", self.guild_id),
                emoji_id=require_id("emoji_id", self.emoji_id),
            )
        )
        if self._reason is not None:
            builder.headers(audit_header(self._reason))
        return builder.build()
