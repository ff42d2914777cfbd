"""Tests for the ravenhttp command line."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional
from unittest.mock import patch

import pytest

from ravenhttp import cli
from ravenhttp.client import Client
from ravenhttp.transport import RawResponse


@dataclass
class _FakeTransport:
    calls: List[Any] = field(default_factory=list)

    async def send(self, request: Any, *, base_url: str, timeout: Optional[float] = None) -> RawResponse:
        self.calls.append(request)
        return RawResponse(status=200, headers=(), body=b'[{"id": "1"}]')

    async def close(self) -> None:
        return None


def _run(argv: List[str]) -> None:
    with patch.object(sys, "argv", ["ravenhttp", *argv]):
        cli.main()


def test_describe_prints_request_with_reason_header(capsys) -> None:
    _run(["describe", "delete-ban", "--guild-id", "100", "--user-id", "200", "--reason", "spamming"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["method"] == "DELETE"
    assert payload["path"] == "guilds/100/bans/200"
    assert payload["headers"]["X-Audit-Log-Reason"] == "spamming"
    assert payload["shape"] == "empty"
    assert payload["body"] is None


def test_describe_thread_listing_with_filters(capsys) -> None:
    _run(["describe", "get-joined-private-archived-threads", "--channel-id", "50", "--before", "40", "--limit", "25"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["query"] == [["before", "40"], ["limit", "25"]]
    assert payload["shape"] == "single"


def test_describe_rejects_reason_on_read_endpoint() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["describe", "get-emojis", "--guild-id", "1", "--reason", "nope"])

    assert "does not accept an audit log reason" in str(excinfo.value)


def test_describe_reports_missing_identifier() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["describe", "get-pins"])

    assert str(excinfo.value).startswith("ravenhttp describe failed:")


def test_send_prints_status_and_body(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    transport = _FakeTransport()
    client = Client("token", transport=transport)

    with patch.object(cli.Client, "from_config", return_value=client):
        _run(["send", "get-emojis", "--guild-id", "100", "--config", str(config_path)])

    out = capsys.readouterr().out
    assert "status: 200" in out
    assert '"id": "1"' in out
    assert transport.calls[0].path == "guilds/100/emojis"


def test_send_requires_config() -> None:
    with pytest.raises(SystemExit):
        _run(["send", "get-emojis", "--guild-id", "100"])
