from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ravenhttp import routing
from ravenhttp.error import AuditLogReasonError
from ravenhttp.request.audit_reason import audit_header
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class DeletePin(EndpointRequest):
    """Unpin a message from a channel."""

    def __init__(self, http: "Client", channel_id: int, message_id: int) -> None:
        super().__init__(http)
        self.channel_id = channel_id
        self.message_id = message_id
        self._reason: Optional[str] = None

    def reason(self, reason: str) -> "DeletePin":
        self._reason = AuditLogReasonError.validate(reason)
        return self

    def try_into_request(self) -> Request:
        self._consume()
        builder = Request.builder(
            routing.DeletePin(
                channel_id=require_id("channel_id", self.channel_id),
                message_id=require_id("message_id", self.message_id),
            )
        )
        if self._reason is not None:
            builder.headers(audit_header(self._reason))
        return builder.build()
