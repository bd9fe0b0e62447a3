"""Pytest hooks and fixtures."""

import sys

import pytest
from loguru import logger

from devicerpc.config import DecoderConfig, clear_config_cache


@pytest.fixture(autouse=True)
def _isolate_config_and_logging(monkeypatch, tmp_path):
    """Keep tests away from ~/.devicerpc and restore loguru sinks after CLI runs."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in ("DEVICERPC_STRICT", "DEVICERPC_LOG_DECODE_FAILURES", "DEVICERPC_MAX_MESSAGE_BYTES", "DEVICERPC_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def config() -> DecoderConfig:
    return DecoderConfig()


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
