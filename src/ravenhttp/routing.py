"""Route table for the REST API.

Every supported endpoint call is one frozen dataclass subclass of
:class:`Route`. A variant's fields are exactly the identifiers and filters the
endpoint takes; method, path, query and expected response shape are pure
functions of those fields.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Tuple, Type
from urllib.parse import urlencode

QueryPairs = Tuple[Tuple[str, str], ...]


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ResponseShape(str, Enum):
    """Hint for the decoder about what the response body holds."""

    EMPTY = "empty"
    SINGLE = "single"
    LIST = "list"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Route:
    method_: ClassVar[Method]
    shape_: ClassVar[ResponseShape]
    template: ClassVar[str]
    query_fields: ClassVar[Tuple[str, ...]] = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def method(self) -> Method:
        return self.method_

    @property
    def shape(self) -> ResponseShape:
        return self.shape_

    @property
    def path(self) -> str:
        values: Dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        return self.template.format(**values)

    @property
    def query(self) -> QueryPairs:
        pairs = []
        for name in self.query_fields:
            value = getattr(self, name)
            if value is None:
                continue
            pairs.append((name, _query_value(value)))
        return tuple(pairs)

    @property
    def path_with_query(self) -> str:
        query = self.query
        if not query:
            return self.path
        return f"{self.path}?{urlencode(query)}"


# Bans


@dataclass(frozen=True)
class CreateBan(Route):
    method_ = Method.PUT
    shape_ = ResponseShape.EMPTY
    template = "guilds/{guild_id}/bans/{user_id}"
    query_fields = ("delete_message_days",)

    guild_id: int
    user_id: int
    delete_message_days: Optional[int] = None


@dataclass(frozen=True)
class DeleteBan(Route):
    method_ = Method.DELETE
    shape_ = ResponseShape.EMPTY
    template = "guilds/{guild_id}/bans/{user_id}"

    guild_id: int
    user_id: int


@dataclass(frozen=True)
class GetBan(Route):
    method_ = Method.GET
    shape_ = ResponseShape.SINGLE
    template = "guilds/{guild_id}/bans/{user_id}"

    guild_id: int
    user_id: int


@dataclass(frozen=True)
class GetBans(Route):
    method_ = Method.GET
    shape_ = ResponseShape.LIST
    template = "guilds/{guild_id}/bans"

    guild_id: int


# Emojis


@dataclass(frozen=True)
class CreateEmoji(Route):
    method_ = Method.POST
    shape_ = ResponseShape.SINGLE
    template = "guilds/{guild_id}/emojis"

    guild_id: int


@dataclass(frozen=True)
class DeleteEmoji(Route):
    method_ = Method.DELETE
    shape_ = ResponseShape.EMPTY
    template = "guilds/{guild_id}/emojis/{emoji_id}"

    guild_id: int
    emoji_id: int


@dataclass(frozen=True)
class GetEmoji(Route):
    method_ = Method.GET
    shape_ = ResponseShape.SINGLE
    template = "guilds/{guild_id}/emojis/{emoji_id}"

    guild_id: int
    emoji_id: int


@dataclass(frozen=True)
class GetEmojis(Route):
    method_ = Method.GET
    shape_ = ResponseShape.LIST
    template = "guilds/{guild_id}/emojis"

    guild_id: int


# Pins


@dataclass(frozen=True)
class CreatePin(Route):
    method_ = Method.PUT
    shape_ = ResponseShape.EMPTY
    template = "channels/{channel_id}/pins/{message_id}"

    channel_id: int
    message_id: int


@dataclass(frozen=True)
class DeletePin(Route):
    method_ = Method.DELETE
    shape_ = ResponseShape.EMPTY
    template = "channels/{channel_id}/pins/{message_id}"

    channel_id: int
    message_id: int


@dataclass(frozen=True)
class GetPins(Route):
    method_ = Method.GET
    shape_ = ResponseShape.LIST
    template = "channels/{channel_id}/pins"

    channel_id: int


# Archived threads


@dataclass(frozen=True)
class GetJoinedPrivateArchivedThreads(Route):
    """Private archived threads the current user joined.

    The API orders results by thread id, descending. ``before`` is a thread id.
    """

    method_ = Method.GET
    shape_ = ResponseShape.SINGLE
    template = "channels/{channel_id}/users/@me/threads/archived/private"
    query_fields = ("before", "limit")

    channel_id: int
    before: Optional[int] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class GetPrivateArchivedThreads(Route):
    """The API orders results by archive timestamp, descending. ``before`` is an ISO8601 timestamp."""

    method_ = Method.GET
    shape_ = ResponseShape.SINGLE
    template = "channels/{channel_id}/threads/archived/private"
    query_fields = ("before", "limit")

    channel_id: int
    before: Optional[str] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class GetPublicArchivedThreads(Route):
    """The API orders results by archive timestamp, descending. ``before`` is an ISO8601 timestamp."""

    method_ = Method.GET
    shape_ = ResponseShape.SINGLE
    template = "channels/{channel_id}/threads/archived/public"
    query_fields = ("before", "limit")

    channel_id: int
    before: Optional[str] = None
    limit: Optional[int] = None


ROUTES: Tuple[Type[Route], ...] = (
    CreateBan,
    DeleteBan,
    GetBan,
    GetBans,
    CreateEmoji,
    DeleteEmoji,
    GetEmoji,
    GetEmojis,
    CreatePin,
    DeletePin,
    GetPins,
    GetJoinedPrivateArchivedThreads,
    GetPrivateArchivedThreads,
    GetPublicArchivedThreads,
)

__all__ = [
    "Method",
    "ResponseShape",
    "QueryPairs",
    "Route",
    "ROUTES",
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
