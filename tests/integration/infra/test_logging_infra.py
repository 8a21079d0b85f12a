from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
file output and the shutdown path used by the CLI.
"""

import logging
from logging.handlers import QueueHandler
from pathlib import Path

import pytest

from gittree.infra.logging import (
    LoggingConfig,
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach gittree handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency():
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    configure_logging(cfg)

    handlers = _our_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0], QueueHandler)


def test_force_replaces_listener():
    configure_logging(LoggingConfig(level="INFO"))
    first = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_file_output_is_flushed_on_shutdown(tmp_path: Path):
    log_file = tmp_path / "nested" / "gittree.log"
    configure_logging(LoggingConfig(level="INFO", console=False, log_file=str(log_file)))

    logging.getLogger("gittree.test").info("hello from test")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO | gittree.test | hello from test" in content


def test_shutdown_clears_state():
    configure_logging(LoggingConfig())
    shutdown_logging()

    root = logging.getLogger()
    assert _our_handlers() == []
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)


def test_unknown_level_falls_back_to_warning():
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.WARNING


def test_no_sinks_installs_nothing():
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []
