"""
adbtoken - token based authentication to Oracle Autonomous Database

Mints a db-token with the OCI CLI, loads the token and private key it writes
and uses them for a single externally authenticated connection.
"""

__version__ = "0.1.0"

from .api import run
from .claims import is_expired, token_expiry
from .command import mint_token
from .config import TokenAuthConfig
from .credentials import read_access_token, strip_pem_framing
from .models import (
    AccessToken,
    ConnectionConfig,
    CredentialUnavailable,
    SessionFailed,
    TokenAuthError,
    TokenCommandFailed,
)
from .session import DEFAULT_QUERY, build_connection_config, run_session

__all__ = [
    "run",
    "mint_token",
    "read_access_token",
    "strip_pem_framing",
    "build_connection_config",
    "run_session",
    "token_expiry",
    "is_expired",
    "DEFAULT_QUERY",
    "TokenAuthConfig",
    "AccessToken",
    "ConnectionConfig",
    "TokenAuthError",
    "TokenCommandFailed",
    "CredentialUnavailable",
    "SessionFailed",
]
