from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from ravenhttp import routing
from ravenhttp.error import AuditLogReasonError, ErrorKind, HttpError
from ravenhttp.request.audit_reason import audit_header
from ravenhttp.request.base import EndpointRequest, Request, require_id

if TYPE_CHECKING:
    from ravenhttp.client import Client


class CreateEmoji(EndpointRequest):
    """Create an emoji in a guild.

    ``image`` is a base64 data URI such as ``data:image/png;base64,...``. Use
    :meth:`roles` to restrict the emoji to members holding one of the roles.
    """

    def __init__(self, http: "Client", guild_id: int, name: str, image: str) -> None:
        super().__init__(http)
        self.guild_id = guild_id
        self.name = name
        self.image = image
        self._roles: Optional[List[int]] = None
        self._reason: Optional[str] = None

    def roles(self, roles: Iterable[int]) -> "CreateEmoji":
        self._roles = list(roles)
        return self

    def reason(self, reason: str) -> "CreateEmoji":
        self._reason = AuditLogReasonError.validate(reason)
        return self

    def try_into_request(self) -> Request:
        self._consume()
        guild_id = require_id("guild_id", self.guild_id)
        if not isinstance(self.name, str) or not self.name.strip():
            raise HttpError(ErrorKind.VALIDATION, "emoji name must be a non-empty string")
        if not isinstance(self.image, str) or not self.image.startswith("data:image/"):
            raise HttpError(ErrorKind.VALIDATION, "emoji image must be a data URI starting with `data:image/`")

        body: Dict[str, Any] = {"image": self.image, "name": self.name}
        if self._roles is not None:
            body["roles"] = [str(require_id("roles", role)) for role in self._roles]

        builder = Request.builder(routing.CreateEmoji(guild_id=guild_id)).json(body)
        if self._reason is not None:
            builder.headers(audit_header(self._reason))
        return builder.build()
