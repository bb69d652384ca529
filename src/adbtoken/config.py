"""
Configuration for a token-authenticated run.
"""

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

DEFAULT_TOKEN_DIR = "~/.oci/db-token"
DEFAULT_TOKEN_COMMAND: tuple[str, ...] = ("oci", "iam", "db-token", "get")
DEFAULT_COMMAND_TIMEOUT: float = 60.0

TOKEN_DIR_ENV = "ADBTOKEN_ACCESS_TOKEN_LOC"
CONNECT_STRING_ENV = "ADBTOKEN_CONNECT_STRING"
TOKEN_COMMAND_ENV = "ADBTOKEN_TOKEN_COMMAND"
STRICT_ENV = "ADBTOKEN_STRICT"
DEBUGGING_ENV = "ADBTOKEN_DEBUGGING"


def debugging_enabled() -> bool:
    """Return True when verbose diagnostics were requested."""
    return os.environ.get(DEBUGGING_ENV) == "true"


@dataclass(frozen=True)
class TokenAuthConfig:
    """Everything a run needs, read once instead of from ambient state."""

    token_dir: str
    dsn: Optional[str] = None
    token_command: tuple[str, ...] = DEFAULT_TOKEN_COMMAND
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TokenAuthConfig":
        """
        Build a configuration from environment variables.

        The connect string is not validated here; a missing value surfaces as a
        connection failure.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            TokenAuthConfig
        """
        env = os.environ if environ is None else environ

        token_dir = env.get(TOKEN_DIR_ENV) or DEFAULT_TOKEN_DIR
        command = env.get(TOKEN_COMMAND_ENV)
        token_command = tuple(shlex.split(command)) if command else DEFAULT_TOKEN_COMMAND

        return cls(
            token_dir=os.path.expanduser(token_dir),
            dsn=env.get(CONNECT_STRING_ENV),
            token_command=token_command,
            strict=env.get(STRICT_ENV, "").lower() == "true",
        )
