from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ravenhttp import routing
from ravenhttp.error import AuditLogReasonError, CreateBanError, CreateBanErrorKind
from ravenhttp.request.audit_reason import audit_header
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client

DELETE_MESSAGE_DAYS_MAX = 7


class CreateBan(EndpointRequest):
    """Bind a ban to a user in a guild, optionally deleting their recent messages."""

    def __init__(self, http: "Client", guild_id: int, user_id: int) -> None:
        super().__init__(http)
        self.guild_id = guild_id
        self.user_id = user_id
        self._delete_message_days: Optional[int] = None
        self._reason: Optional[str] = None

    def delete_message_days(self, days: int) -> "CreateBan":
        """Delete the user's messages from the last ``days`` days (0 to 7).

        Raises:
            CreateBanError: ``days`` is outside the accepted range.
        """
        if isinstance(days, bool) or not isinstance(days, int) or not 0 <= days <= DELETE_MESSAGE_DAYS_MAX:
            raise CreateBanError(
                CreateBanErrorKind.DELETE_MESSAGE_DAYS_INVALID,
                f"delete_message_days must be between 0 and {DELETE_MESSAGE_DAYS_MAX}, got {days!r}",
            )
        self._delete_message_days = days
        return self

    def reason(self, reason: str) -> "CreateBan":
        self._reason = AuditLogReasonError.validate(reason)
        return self

    def try_into_request(self) -> Request:
        self._consume()
        builder = Request.builder(
            routing.CreateBan(
                guild_id=require_id("guild_id", self.guild_id),
                user_id=require_id("user_id", self.user_id),
                delete_message_days=self._delete_message_days,
            )
        )
        if self._reason is not None:
            builder.headers(audit_header(self._reason))
        return builder.build()
