"""Configuration module for devicerpc."""

from devicerpc.config.loader import load_config, get_config_path
from devicerpc.config.schema import DecoderConfig
from devicerpc.config.access import get_config, clear_config_cache

__all__ = ["DecoderConfig", "load_config", "get_config_path", "get_config", "clear_config_cache"]
