"""Configuration module — loads and validates environment variables."""

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, field_validator

ENV_PREFIX = "TMUX_MCP_"


class Settings(BaseModel):
    tmux_binary: str = "tmux"
    socket_name: str = ""
    log_level: str = "INFO"
    server_name: str = "tmux-mcp"

    @field_validator("tmux_binary")
    @classmethod
    def validate_tmux_binary(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("tmux_binary must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        numeric = getattr(logging, v.upper(), None)
        if not isinstance(numeric, int):
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


def _load_from_env() -> Settings:
    """Build Settings from TMUX_MCP_* environment variables."""
    env = {}
    for field_name in Settings.model_fields:
        env_key = ENV_PREFIX + field_name.upper()
        val = os.environ.get(env_key)
        if val is not None:
            env[field_name] = val
    return Settings(**env)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    return _load_from_env()
