from ravenhttp.request.audit_reason import AUDIT_REASON_HEADER, AuditLogReason, audit_header
from ravenhttp.request.base import EndpointRequest, Request, RequestBuilder, TryIntoRequest, dispatch
from ravenhttp.request.channel import (
    CreatePin,
    DeletePin,
    GetJoinedPrivateArchivedThreads,
    GetPins,
    GetPrivateArchivedThreads,
    GetPublicArchivedThreads,
)
from ravenhttp.request.guild import (
    CreateBan,
    CreateEmoji,
    DeleteBan,
    DeleteEmoji,
    GetBan,
    GetBans,
    GetEmoji,
    GetEmojis,
)

__all__ = [
    "AUDIT_REASON_HEADER",
    "AuditLogReason",
    "audit_header",
    "EndpointRequest",
    "Request",
    "RequestBuilder",
    "TryIntoRequest",
    "dispatch",
    "CreateBan",
    "DeleteBan",
    "GetBan",
    "GetBans",
    "CreateEmoji",
    "DeleteEmoji",
    "GetEmoji",
    "GetEmojis",
    "CreatePin",
    "DeletePin",
    "GetPins",
    "GetJoinedPrivateArchivedThreads",
    "GetPrivateArchivedThreads",
    "GetPublicArchivedThreads",
]
