"""Configuration schema using Pydantic."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DecoderConfig(BaseSettings):
    """Response decoder settings. Environment variables use the DEVICERPC_ prefix."""
    strict: bool = True  # False allows pydantic lax coercion of invoke return values ("1" -> 1)
    log_decode_failures: bool = True
    max_message_bytes: int = Field(default=4 * 1024 * 1024, gt=0)  # Raw responses above this are rejected unparsed
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="DEVICERPC_")
