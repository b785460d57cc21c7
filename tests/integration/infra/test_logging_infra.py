from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation, and explicit shutdown.
"""

import logging
import time
from pathlib import Path

import pytest

from sizescan.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from sizescan.infra.logging.core import _QUEUE_LISTENER_ATTR
from sizescan.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach sizescan handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple configuration calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    count = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == count == 1


def test_force_reconfigures() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: File rotation happens when the size limit is exceeded."""
    log_file = tmp_path / "logs" / "scan.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()
    time.sleep(0.05)

    assert log_file.exists()
    assert (tmp_path / "logs" / "scan.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-03: The root logger holds one tagged QueueHandler fed to a listener."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None

    shutdown_logging()
    assert getattr(root, _QUEUE_LISTENER_ATTR) is None
    assert _our_handlers() == []


def test_config_from_cli_settings(mock_config_dict) -> None:
    """TC-04: Validated CLI settings map onto the logging settings."""
    mock_config_dict["log_level"] = "DEBUG"
    mock_config_dict["log_file"] = "/tmp/sizescan.log"

    cfg = LoggingConfig.from_settings(mock_config_dict)

    assert cfg.level_int == logging.DEBUG
    assert cfg.log_file == "/tmp/sizescan.log"
    assert cfg.console is True

    mock_config_dict["log_file"] = ""
    assert LoggingConfig.from_settings(mock_config_dict).log_file is None


def test_debug_console_names_worker_thread() -> None:
    assert "%(threadName)s" in LoggingConfig(level="DEBUG").console_format
    assert "%(threadName)s" not in LoggingConfig(level="INFO").console_format


def test_unknown_level_falls_back_to_info() -> None:
    assert LoggingConfig(level="chatty").level_int == logging.INFO
