"""
A single token-authenticated database round trip.
"""

from collections.abc import Awaitable
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import oracledb

from .claims import token_expiry
from .config import debugging_enabled
from .models import (
    AccessToken,
    ConnectionConfig,
    DefaultLogger,
    Logger,
    SessionFailed,
)

DEFAULT_QUERY = "SELECT TO_CHAR(current_date, 'DD-Mon-YYYY HH24:MI') AS D FROM DUAL"

Connect = Callable[..., Awaitable[Any]]


def build_connection_config(access_token: AccessToken, dsn: Optional[str]) -> ConnectionConfig:
    """Build the connection configuration for token based authentication."""
    return ConnectionConfig(access_token=access_token, dsn=dsn, externalauth=True)


async def run_session(
    access_token: AccessToken,
    dsn: Optional[str],
    query: str = DEFAULT_QUERY,
    connect: Optional[Connect] = None,
    logger: Optional[Logger] = None,
    strict: bool = False,
) -> Optional[list[Any]]:
    """
    Open one connection, run one query and close the connection.

    There is a single connection attempt and no retry. The connection, once
    acquired, is closed exactly once whatever happens to the query; a failure
    to close is logged and never replaces an earlier error.

    Args:
        access_token: Token and private key to authenticate with
        dsn: Net service alias or connect descriptor of the database
        query: Parameterless read-only statement to execute
        connect: Connection factory, defaults to oracledb.connect_async
        logger: Logger for the result and for errors
        strict: Raise SessionFailed instead of only logging failures

    Returns:
        The fetched rows, or None if the connection or query failed

    Raises:
        SessionFailed: In strict mode, if the connection or query fails
    """
    if logger is None:
        logger = DefaultLogger()
    if connect is None:
        connect = oracledb.connect_async

    config = build_connection_config(access_token, dsn)

    expiry = token_expiry(access_token.token)
    if expiry is not None and expiry <= datetime.now(timezone.utc):
        logger.log(f"session: token expired at {expiry}; connecting anyway")

    connection = None
    stage = "connect"
    try:
        if debugging_enabled():
            logger.log(f"session: connecting to {dsn!r} with external authentication")
        connection = await connect(**config.connect_params())

        stage = "query"
        with connection.cursor() as cursor:
            await cursor.execute(query)
            rows = await cursor.fetchall()
        logger.log(f"Result is:\n{rows}")
        return rows
    except Exception as e:
        if strict:
            raise SessionFailed(f"{stage} failed: {e}") from e
        logger.log(f"session: {stage} failed: {e}")
        return None
    finally:
        if connection is not None:
            try:
                await connection.close()
            except Exception as e:
                logger.log(f"session: close failed: {e}")
