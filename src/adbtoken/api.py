"""
Main API for the adbtoken library.
"""

from typing import Any, Optional

from .command import mint_token
from .config import TokenAuthConfig
from .credentials import read_access_token
from .models import DefaultLogger, Logger
from .session import Connect, run_session


async def run(
    config: Optional[TokenAuthConfig] = None,
    logger: Optional[Logger] = None,
    connect: Optional[Connect] = None,
) -> Optional[list[Any]]:
    """
    Mint a db-token, load it and use it for one database query.

    Steps run strictly in order and each is attempted once. Outside strict
    mode a failing step is logged and the run carries on; the files may still
    be present from an earlier run.

    Args:
        config: Run configuration (read from the environment when None)
        logger: Logger instance, DefaultLogger when None
        connect: Connection factory override

    Returns:
        Rows returned by the query, or None if it did not run
    """
    if config is None:
        config = TokenAuthConfig.from_env()
    if logger is None:
        logger = DefaultLogger()

    await mint_token(
        config.token_command,
        timeout=config.command_timeout,
        logger=logger,
        strict=config.strict,
    )
    access_token = read_access_token(config.token_dir, logger=logger, strict=config.strict)
    return await run_session(
        access_token,
        config.dsn,
        connect=connect,
        logger=logger,
        strict=config.strict,
    )
