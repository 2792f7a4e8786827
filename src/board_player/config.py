# Area: Runner
"""
board_player.config — Player configuration
===========================================

PlayerConfig holds everything the command line can set. Defaults can
be overridden from the environment (a .env file is read first):

    BOARD_PLAYER_PORT       local listening port
    BOARD_PLAYER_HOST       remote peer, "host" or "host:port"
    BOARD_PLAYER_LOG_FILE   JSON log file path ("" disables it)
"""

from __future__ import annotations
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ._network.domain import DEFAULT_PORT
from ._search.registry import DEFAULT_STRATEGY
from .board import Color
from .errors import ConfigurationError

ENV_MAPPINGS = {
    "BOARD_PLAYER_PORT": "lport",
    "BOARD_PLAYER_HOST": "host",
    "BOARD_PLAYER_LOG_FILE": "log_file",
}


class PlayerConfig(BaseModel):
    """Validated startup configuration of one player process."""

    color: str = Field(default="O", description="Side to play: O or X")
    strategy: int = Field(default=DEFAULT_STRATEGY, ge=0, le=9)
    max_depth: int = Field(default=0, ge=0)
    max_moves: int = -1
    change_eval: bool = True
    host: Optional[str] = None
    rport: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    lport: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    verbose: int = Field(default=0, ge=0)
    log_file: str = "board_player.log"
    start: bool = False
    board_size: int = Field(default=5, ge=2, le=11)
    time_limit_ms: int = Field(default=0, ge=0)

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        value = value.upper()
        if value not in ("O", "X"):
            raise ValueError("color must be 'O' or 'X'")
        return value

    @property
    def player_color(self) -> Color:
        return Color.from_symbol(self.color)

    @property
    def remote(self) -> Optional[str]:
        if not self.host:
            return None
        return f"{self.host}:{self.rport}"


def split_endpoint(value: str, default_port: int) -> tuple:
    """'host:port' or 'host' → (host, port)."""
    host, sep, port = value.rpartition(":")
    if not sep:
        return value, default_port
    try:
        return host, int(port)
    except ValueError:
        raise ConfigurationError(f"Invalid port in endpoint {value!r}")


def load_env_overrides(dotenv_path: Optional[str] = None) -> Dict[str, Any]:
    """Read BOARD_PLAYER_* variables (after loading .env) into config keys."""
    load_dotenv(dotenv_path)
    overrides: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key not in os.environ:
            continue
        value = os.environ[env_key]
        if config_key == "host":
            host, port = split_endpoint(value, DEFAULT_PORT)
            overrides["host"] = host
            overrides["rport"] = port
        else:
            overrides[config_key] = value
    return overrides


def build_config(values: Dict[str, Any]) -> PlayerConfig:
    """
    Validate raw values into a PlayerConfig.

    Raises:
        ConfigurationError: If any value is out of range or malformed
    """
    try:
        return PlayerConfig(**values)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError("Invalid configuration", errors) from e
