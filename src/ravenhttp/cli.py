from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any, Callable, Dict

from ravenhttp.client import Client
from ravenhttp.config import load_config, resolve_log_level
from ravenhttp.request import AuditLogReason, EndpointRequest, Request
from ravenhttp.utils import setup_logging

EndpointFactory = Callable[[Client, argparse.Namespace], EndpointRequest]


def _create_ban(client: Client, args: argparse.Namespace) -> EndpointRequest:
    builder = client.create_ban(args.guild_id, args.user_id)
    if args.delete_message_days is not None:
        builder.delete_message_days(args.delete_message_days)
    return builder


def _create_emoji(client: Client, args: argparse.Namespace) -> EndpointRequest:
    return client.create_emoji(args.guild_id, args.name or "", args.image or "")


def _joined_threads(client: Client, args: argparse.Namespace) -> EndpointRequest:
    builder = client.joined_private_archived_threads(args.channel_id)
    if args.before is not None:
        builder.before(int(args.before))
    if args.limit is not None:
        builder.limit(args.limit)
    return builder


def _archived_threads(public: bool) -> EndpointFactory:
    def factory(client: Client, args: argparse.Namespace) -> EndpointRequest:
        if public:
            builder = client.public_archived_threads(args.channel_id)
        else:
            builder = client.private_archived_threads(args.channel_id)
        if args.before is not None:
            builder.before(args.before)
        if args.limit is not None:
            builder.limit(args.limit)
        return builder

    return factory


ENDPOINTS: Dict[str, EndpointFactory] = {
    "get-ban": lambda client, args: client.ban(args.guild_id, args.user_id),
    "get-bans": lambda client, args: client.bans(args.guild_id),
    "create-ban": _create_ban,
    "delete-ban": lambda client, args: client.delete_ban(args.guild_id, args.user_id),
    "get-emoji": lambda client, args: client.emoji(args.guild_id, args.emoji_id),
    "get-emojis": lambda client, args: client.emojis(args.guild_id),
    "create-emoji": _create_emoji,
    "delete-emoji": lambda client, args: client.delete_emoji(args.guild_id, args.emoji_id),
    "get-pins": lambda client, args: client.pins(args.channel_id),
    "create-pin": lambda client, args: client.create_pin(args.channel_id, args.message_id),
    "delete-pin": lambda client, args: client.delete_pin(args.channel_id, args.message_id),
    "get-joined-private-archived-threads": _joined_threads,
    "get-private-archived-threads": _archived_threads(public=False),
    "get-public-archived-threads": _archived_threads(public=True),
}


def _add_endpoint_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("endpoint", choices=sorted(ENDPOINTS), help="Endpoint to build")
    parser.add_argument("--guild-id", type=int, default=None)
    parser.add_argument("--user-id", type=int, default=None)
    parser.add_argument("--channel-id", type=int, default=None)
    parser.add_argument("--message-id", type=int, default=None)
    parser.add_argument("--emoji-id", type=int, default=None)
    parser.add_argument("--before", default=None, help="Thread id or ISO8601 timestamp, depending on the endpoint.")
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--reason", default=None, help="Audit log reason, for endpoints that support one.")
    parser.add_argument("--delete-message-days", type=int, default=None)
    parser.add_argument("--name", default=None, help="Emoji name.")
    parser.add_argument("--image", default=None, help="Emoji image as a data URI.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ravenhttp", description="Build and send REST API requests")
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser("describe", help="Print the request an endpoint would send")
    _add_endpoint_arguments(describe_parser)

    send_parser = subparsers.add_parser("send", help="Send a request and print the response")
    _add_endpoint_arguments(send_parser)
    send_parser.add_argument("--config", required=True, help="Path to config.yaml")

    return parser


def build_endpoint(client: Client, args: argparse.Namespace) -> EndpointRequest:
    builder = ENDPOINTS[args.endpoint](client, args)
    if args.reason is not None:
        if not isinstance(builder, AuditLogReason):
            raise ValueError(f"{args.endpoint} does not accept an audit log reason")
        builder.reason(args.reason)
    return builder


def describe_request(request: Request) -> Dict[str, Any]:
    return {
        "method": request.method.value,
        "path": request.path,
        "query": [list(pair) for pair in request.query],
        "headers": dict(request.headers),
        "body": request.body.decode("utf-8") if request.body is not None else None,
        "shape": request.shape.value,
    }


def _describe(args: argparse.Namespace) -> None:
    request = build_endpoint(Client(), args).try_into_request()
    print(json.dumps(describe_request(request), indent=2))


async def _send(args: argparse.Namespace) -> None:
    cfg, _ = load_config(args.config)
    logs_dir = str((cfg.get("logging", {}) or {}).get("dir") or "").strip()
    setup_logging(resolve_log_level(cfg), Path(logs_dir) if logs_dir else None)

    async with Client.from_config(cfg) as client:
        response = await build_endpoint(client, args).execute()
    print(f"status: {response.status}")
    if response.body:
        print(response.text())


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "describe":
        try:
            _describe(args)
        except Exception as err:
            raise SystemExit(f"ravenhttp describe failed: {err}") from None
        return

    if args.command == "send":
        try:
            asyncio.run(_send(args))
        except Exception as err:
            raise SystemExit(f"ravenhttp send failed: {err}") from None
        return

    parser.error(f"Unknown command: {args.command}")
