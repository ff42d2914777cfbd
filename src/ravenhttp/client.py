from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional, Tuple, Union

from ravenhttp.config.settings import ClientConfig
from ravenhttp.error import ErrorKind, HttpError
from ravenhttp.request import (
    CreateBan,
    CreateEmoji,
    CreatePin,
    DeleteBan,
    DeleteEmoji,
    DeletePin,
    GetBan,
    GetBans,
    GetEmoji,
    GetEmojis,
    GetJoinedPrivateArchivedThreads,
    GetPins,
    GetPrivateArchivedThreads,
    GetPublicArchivedThreads,
    Request,
)
from ravenhttp.response import Response, ResponseFuture
from ravenhttp.transport import Transport, build_transport

LOGGER = logging.getLogger("ravenhttp.client")

_TOKEN_PREFIXES = ("Bot ", "Bearer ")


def _normalize_token(token: Optional[str]) -> Optional[str]:
    token = (token or "").strip()
    if not token:
        return None
    if token.startswith(_TOKEN_PREFIXES):
        return token
    return f"Bot {token}"


class Client:
    """Entry point for building and sending API requests.

    Each endpoint has a factory method returning a single-use builder. The
    client holds no per-request state, so builders created from the same
    client may be executed concurrently.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._token = _normalize_token(token)
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        cfg: Union[Dict[str, Any], ClientConfig],
        *,
        token: Optional[str] = None,
        transport: Optional[Transport] = None,
    ) -> "Client":
        config = cfg if isinstance(cfg, ClientConfig) else ClientConfig.from_dict(cfg)
        return cls(token if token is not None else config.resolve_token(), transport=transport, config=config)

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = build_transport(self.config.transport)
        return self._transport

    @property
    def has_token(self) -> bool:
        return self._token is not None

    async def close(self) -> None:
        if self._transport is not None:
            await self._transport.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # --- Dispatch ---

    def default_headers(self, request: Request) -> List[Tuple[str, str]]:
        headers: List[Tuple[str, str]] = []
        if request.use_authorization_token and self._token is not None:
            headers.append(("Authorization", self._token))
        headers.append(("User-Agent", self.config.user_agent))
        headers.extend(self.config.default_headers)
        return headers

    def request(self, request: Request) -> ResponseFuture:
        """Return a live future that sends ``request`` when first awaited."""
        prepared = request.with_default_headers(self.default_headers(request))
        return ResponseFuture.pending(lambda: self._send(prepared))

    async def _send(self, request: Request) -> Response:
        start = time.perf_counter()
        LOGGER.info(f"[http] request method={request.method.value} path={request.path_with_query}")
        try:
            raw = await self.transport.send(request, base_url=self.config.api_base_url, timeout=self.config.timeout)
        except HttpError as err:
            LOGGER.error(
                f"[http] request failed method={request.method.value} path={request.path} kind={err.kind.value}: {err}"
            )
            raise

        response = Response(status=raw.status, headers=raw.headers, body=raw.body, shape=request.shape)
        LOGGER.info(
            f"[http] response status={raw.status} path={request.path} bytes={len(raw.body)} "
            f"elapsed={time.perf_counter() - start:.2f}s"
        )
        if raw.status == 401:
            raise HttpError(ErrorKind.UNAUTHORIZED, "token is invalid or missing", status=raw.status, body=raw.body)
        if not response.ok:
            LOGGER.warning(f"[http] {request.method.value} {request.path} returned status {raw.status}")
            raise HttpError(
                ErrorKind.RESPONSE,
                f"{request.method.value} {request.path} returned status {raw.status}",
                status=raw.status,
                body=raw.body,
            )
        return response

    # --- Bans ---

    def ban(self, guild_id: int, user_id: int) -> GetBan:
        return GetBan(self, guild_id, user_id)

    def bans(self, guild_id: int) -> GetBans:
        return GetBans(self, guild_id)

    def create_ban(self, guild_id: int, user_id: int) -> CreateBan:
        return CreateBan(self, guild_id, user_id)

    def delete_ban(self, guild_id: int, user_id: int) -> DeleteBan:
        return DeleteBan(self, guild_id, user_id)

    # --- Emojis ---

    def emoji(self, guild_id: int, emoji_id: int) -> GetEmoji:
        return GetEmoji(self, guild_id, emoji_id)

    def emojis(self, guild_id: int) -> GetEmojis:
        return GetEmojis(self, guild_id)

    def create_emoji(self, guild_id: int, name: str, image: str) -> CreateEmoji:
        return CreateEmoji(self, guild_id, name, image)

    def delete_emoji(self, guild_id: int, emoji_id: int) -> DeleteEmoji:
        return DeleteEmoji(self, guild_id, emoji_id)

    # --- Pins ---

    def pins(self, channel_id: int) -> GetPins:
        return GetPins(self, channel_id)

    def create_pin(self, channel_id: int, message_id: int) -> CreatePin:
        return CreatePin(self, channel_id, message_id)

    def delete_pin(self, channel_id: int, message_id: int) -> DeletePin:
        return DeletePin(self, channel_id, message_id)

    # --- Threads ---

    def joined_private_archived_threads(self, channel_id: int) -> GetJoinedPrivateArchivedThreads:
        return GetJoinedPrivateArchivedThreads(self, channel_id)

    def private_archived_threads(self, channel_id: int) -> GetPrivateArchivedThreads:
        return GetPrivateArchivedThreads(self, channel_id)

    def public_archived_threads(self, channel_id: int) -> GetPublicArchivedThreads:
        return GetPublicArchivedThreads(self, channel_id)


__all__ = ["Client"]
