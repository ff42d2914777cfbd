"""Tests for endpoint builders and their conversion into requests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, List

import pytest

from ravenhttp import Client
from ravenhttp.error import CreateBanError, CreateBanErrorKind, ErrorKind, HttpError
from ravenhttp.request import AUDIT_REASON_HEADER, EndpointRequest, TryIntoRequest
from ravenhttp.routing import Method, ResponseShape


@dataclass
class _RecordingTransport:
    calls: List[Any] = field(default_factory=list)

    async def send(self, request: Any, *, base_url: str, timeout: Any = None) -> Any:
        self.calls.append(request)
        raise AssertionError("conversion tests never send")

    async def close(self) -> None:
        return None


@pytest.fixture
def client() -> Client:
    return Client("token", transport=_RecordingTransport())


def test_scenario_remove_ban_without_reason(client: Client) -> None:
    request = client.delete_ban(100, 200).try_into_request()

    assert request.method is Method.DELETE
    assert "100" in request.path and "200" in request.path
    assert request.header(AUDIT_REASON_HEADER) is None
    assert request.shape is ResponseShape.EMPTY


def test_scenario_remove_ban_with_reason(client: Client) -> None:
    request = client.delete_ban(100, 200).reason("spamming").try_into_request()

    assert request.method is Method.DELETE
    assert request.path == "guilds/100/bans/200"
    assert request.header(AUDIT_REASON_HEADER) == "spamming"


def test_scenario_list_guild_emojis(client: Client) -> None:
    request = client.emojis(100).try_into_request()

    assert request.method is Method.GET
    assert "100" in request.path
    assert request.query == ()
    assert request.query_string == ""
    assert request.shape is ResponseShape.LIST


def test_scenario_joined_private_archived_threads_with_and_without_filters(client: Client) -> None:
    request = client.joined_private_archived_threads(50).before(40).limit(25).try_into_request()

    assert ("before", "40") in request.query
    assert ("limit", "25") in request.query
    assert "before=40" in request.query_string
    assert "limit=25" in request.query_string

    bare = client.joined_private_archived_threads(50).try_into_request()
    keys = [name for name, _ in bare.query]
    assert "before" not in keys
    assert "limit" not in keys
    assert "before" not in bare.path_with_query


_REQUIRED_ONLY: List[tuple] = [
    (lambda c: c.ban(11, 22), "guilds/11/bans/22"),
    (lambda c: c.bans(11), "guilds/11/bans"),
    (lambda c: c.create_ban(11, 22), "guilds/11/bans/22"),
    (lambda c: c.delete_ban(11, 22), "guilds/11/bans/22"),
    (lambda c: c.emoji(11, 33), "guilds/11/emojis/33"),
    (lambda c: c.emojis(11), "guilds/11/emojis"),
    (lambda c: c.create_emoji(11, "blob", "data:image/png;base64,AA=="), "guilds/11/emojis"),
    (lambda c: c.delete_emoji(11, 33), "guilds/11/emojis/33"),
    (lambda c: c.pins(44), "channels/44/pins"),
    (lambda c: c.create_pin(44, 55), "channels/44/pins/55"),
    (lambda c: c.delete_pin(44, 55), "channels/44/pins/55"),
    (lambda c: c.joined_private_archived_threads(44), "channels/44/users/@me/threads/archived/private"),
    (lambda c: c.private_archived_threads(44), "channels/44/threads/archived/private"),
    (lambda c: c.public_archived_threads(44), "channels/44/threads/archived/public"),
]


@pytest.mark.parametrize("factory, path", _REQUIRED_ONLY)
def test_required_only_builders_produce_bare_paths(
    client: Client, factory: Callable[[Client], EndpointRequest], path: str
) -> None:
    builder = factory(client)
    request = builder.try_into_request()

    assert isinstance(builder, TryIntoRequest)
    assert request.path == path
    assert request.query == ()
    assert request.header(AUDIT_REASON_HEADER) is None


def test_create_ban_delete_message_days_is_encoded(client: Client) -> None:
    request = client.create_ban(1, 2).delete_message_days(3).try_into_request()

    assert request.method is Method.PUT
    assert request.query == (("delete_message_days", "3"),)


@pytest.mark.parametrize("days", [-1, 8, True, "3"])
def test_create_ban_rejects_invalid_delete_message_days(client: Client, days: Any) -> None:
    builder = client.create_ban(1, 2).reason("raid")

    with pytest.raises(CreateBanError) as excinfo:
        builder.delete_message_days(days)

    assert excinfo.value.kind is CreateBanErrorKind.DELETE_MESSAGE_DAYS_INVALID
    request = builder.try_into_request()
    assert request.query == ()
    assert request.header(AUDIT_REASON_HEADER) == "raid"


def test_create_emoji_builds_json_body(client: Client) -> None:
    request = (
        client.create_emoji(1, "blob", "data:image/png;base64,AA==")
        .roles([5, 6])
        .reason("new emoji")
        .try_into_request()
    )

    assert request.method is Method.POST
    assert request.header("Content-Type") == "application/json"
    assert request.header(AUDIT_REASON_HEADER) == "new%20emoji"
    assert json.loads(request.body) == {"image": "data:image/png;base64,AA==", "name": "blob", "roles": ["5", "6"]}


def test_create_emoji_without_roles_omits_the_field(client: Client) -> None:
    request = client.create_emoji(1, "blob", "data:image/png;base64,AA==").try_into_request()

    assert "roles" not in json.loads(request.body)


@pytest.mark.parametrize("name, image", [("", "data:image/png;base64,AA=="), ("blob", "https://example.com/a.png")])
def test_create_emoji_rejects_invalid_fields_at_conversion(client: Client, name: str, image: str) -> None:
    with pytest.raises(HttpError) as excinfo:
        client.create_emoji(1, name, image).try_into_request()

    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert excinfo.value.is_conversion_error


def test_archived_threads_accept_timestamp_strings_and_datetimes(client: Client) -> None:
    text = client.public_archived_threads(9).before("2021-06-01T00:00:00+00:00").limit(2).try_into_request()
    moment = datetime(2021, 6, 1, tzinfo=timezone.utc)
    from_datetime = client.private_archived_threads(9).before(moment).try_into_request()

    assert text.query == (("before", "2021-06-01T00:00:00+00:00"), ("limit", "2"))
    assert from_datetime.query == (("before", "2021-06-01T00:00:00+00:00"),)


@pytest.mark.parametrize("bad_id", [0, -5, True, "100", None])
def test_invalid_identifiers_fail_conversion(client: Client, bad_id: Any) -> None:
    with pytest.raises(HttpError) as excinfo:
        client.pins(bad_id).try_into_request()

    assert excinfo.value.kind is ErrorKind.BUILDING_REQUEST


def test_invalid_limit_fails_conversion(client: Client) -> None:
    with pytest.raises(HttpError) as excinfo:
        client.joined_private_archived_threads(50).limit(0).try_into_request()

    assert excinfo.value.kind is ErrorKind.VALIDATION


def test_builders_are_single_use(client: Client) -> None:
    builder = client.emojis(100)
    builder.try_into_request()

    with pytest.raises(HttpError) as excinfo:
        builder.try_into_request()

    assert excinfo.value.kind is ErrorKind.BUILDER_CONSUMED


def test_failed_conversion_still_consumes_the_builder(client: Client) -> None:
    builder = client.pins(0)
    with pytest.raises(HttpError):
        builder.try_into_request()

    with pytest.raises(HttpError) as excinfo:
        builder.try_into_request()

    assert excinfo.value.kind is ErrorKind.BUILDER_CONSUMED


def test_identical_builders_convert_to_equal_requests(client: Client) -> None:
    first = client.delete_ban(100, 200).reason("spamming").try_into_request()
    second = client.delete_ban(100, 200).reason("spamming").try_into_request()

    assert first == second
    assert (first.method, first.path, first.query, first.headers) == (
        second.method,
        second.path,
        second.query,
        second.headers,
    )


def test_conversion_does_not_touch_the_transport(client: Client) -> None:
    client.delete_ban(100, 200).reason("spamming").try_into_request()

    assert client.transport.calls == []  # type: ignore[attr-defined]


def test_archived_threads_accept_utc_suffix(client: Client) -> None:
    request = client.public_archived_threads(9).before("2021-06-01T00:00:00Z").try_into_request()

    assert request.query == (("before", "2021-06-01T00:00:00Z"),)


@pytest.mark.parametrize(
    "before",
    ["yesterday", "2021-06-01T00:00:00", datetime(2021, 6, 1), "   ", 1622505600],
)
def test_archived_threads_reject_values_that_are_not_offset_timestamps(client: Client, before: Any) -> None:
    with pytest.raises(HttpError) as excinfo:
        client.private_archived_threads(9).before(before).try_into_request()

    assert excinfo.value.kind is ErrorKind.VALIDATION
    assert excinfo.value.is_conversion_error


def test_endpoint_builders_must_implement_conversion(client: Client) -> None:
    class _Incomplete(EndpointRequest):
        pass

    with pytest.raises(TypeError):
        _Incomplete(client)  # type: ignore[abstract]
