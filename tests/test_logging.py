from __future__ import annotations

import logging
from pathlib import Path

from ravenhttp.utils import setup_logging


def _reset() -> None:
    root = logging.getLogger("ravenhttp")
    for name in ("ravenhttp", "ravenhttp.client", "ravenhttp.transport"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
    for attr in ("_ravenhttp_logs_dir", "_ravenhttp_logs_level"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_setup_logging_writes_run_and_component_logs(tmp_path: Path) -> None:
    logs_dir = tmp_path / "logs"
    try:
        setup_logging(logging.INFO, logs_dir)
        logging.getLogger("ravenhttp.client").info("[http] hello")
        for handler in logging.getLogger("ravenhttp").handlers + logging.getLogger("ravenhttp.client").handlers:
            handler.flush()

        assert "[http] hello" in (logs_dir / "run.log").read_text(encoding="utf-8")
        assert "[http] hello" in (logs_dir / "client.log").read_text(encoding="utf-8")
        assert (logs_dir / "transport.log").exists()
    finally:
        _reset()


def test_setup_logging_is_idempotent(tmp_path: Path) -> None:
    try:
        setup_logging(logging.DEBUG, tmp_path)
        handlers = list(logging.getLogger("ravenhttp").handlers)
        setup_logging(logging.DEBUG, tmp_path)

        assert logging.getLogger("ravenhttp").handlers == handlers
        assert logging.getLogger("ravenhttp").propagate is False
    finally:
        _reset()
