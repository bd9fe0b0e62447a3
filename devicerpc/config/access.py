"""Process-wide decoder config, loaded once from the default path."""

from __future__ import annotations

import threading

from devicerpc.config.loader import load_config
from devicerpc.config.schema import DecoderConfig

_lock = threading.RLock()
_current: DecoderConfig | None = None


def get_config(*, force_reload: bool = False) -> DecoderConfig:
    """Return the cached config, reading ~/.devicerpc/config.json on first use."""
    global _current
    with _lock:
        if force_reload or _current is None:
            _current = load_config()
        return _current


def clear_config_cache() -> None:
    global _current
    with _lock:
        _current = None
