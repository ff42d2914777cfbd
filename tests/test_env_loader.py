"""Tests for dotenv loading policy."""

from __future__ import annotations

import os
from pathlib import Path

from ravenhttp.utils.env import _is_allowed_dotenv_key, env_float, env_int, load_dotenv_files


def test_is_allowed_dotenv_key_accepts_only_token_variables() -> None:
    assert _is_allowed_dotenv_key("DISCORD_TOKEN")
    assert _is_allowed_dotenv_key("STAGING_BOT_TOKEN")
    assert _is_allowed_dotenv_key("RAVENHTTP_TOKEN_ENV")
    assert not _is_allowed_dotenv_key("RAVENHTTP_BASE_URL")
    assert not _is_allowed_dotenv_key("discord_token")
    assert not _is_allowed_dotenv_key("TOKEN")


def test_load_dotenv_files_loads_only_token_keys(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "# local credentials",
                "DISCORD_TOKEN=abc.def",
                "export STAGING_BOT_TOKEN='quoted'",
                "RAVENHTTP_BASE_URL=https://example.invalid/api",
                "not a pair",
            ]
        ),
        encoding="utf-8",
    )
    for key in ["DISCORD_TOKEN", "STAGING_BOT_TOKEN", "RAVENHTTP_BASE_URL"]:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)

    load_dotenv_files(tmp_path)

    assert os.getenv("DISCORD_TOKEN") == "abc.def"
    assert os.getenv("STAGING_BOT_TOKEN") == "quoted"
    assert os.getenv("RAVENHTTP_BASE_URL") is None


def test_load_dotenv_files_never_overwrites_existing_values(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("DISCORD_TOKEN=from-file\n", encoding="utf-8")
    monkeypatch.setenv("DISCORD_TOKEN", "from-shell")

    load_dotenv_files(tmp_path)

    assert os.getenv("DISCORD_TOKEN") == "from-shell"


def test_load_dotenv_files_without_file_is_a_no_op(tmp_path: Path) -> None:
    load_dotenv_files(tmp_path)


def test_numeric_env_helpers_fall_back_on_garbage(monkeypatch) -> None:
    monkeypatch.setenv("RAVENHTTP_API_VERSION", "ten")
    monkeypatch.setenv("RAVENHTTP_TIMEOUT", "2.5")

    assert env_int("RAVENHTTP_API_VERSION", 9) == 9
    assert env_float("RAVENHTTP_TIMEOUT", 10.0) == 2.5
