"""
Invocation of the OCI CLI command that writes a fresh db-token to disk.
"""

import asyncio
from collections.abc import Sequence
from typing import Optional

from .config import DEFAULT_COMMAND_TIMEOUT, DEFAULT_TOKEN_COMMAND, debugging_enabled
from .models import DefaultLogger, Logger, TokenCommandFailed


async def mint_token(
    command: Sequence[str] = DEFAULT_TOKEN_COMMAND,
    timeout: float = DEFAULT_COMMAND_TIMEOUT,
    logger: Optional[Logger] = None,
    strict: bool = False,
) -> Optional[str]:
    """
    Run the token-minting command once.

    The command is expected to create the ``token`` and ``oci_db_key.pem``
    files. Its failure is not fatal by default: the files may already exist
    from an earlier run.

    Args:
        command: Command line to execute, without a shell
        timeout: Seconds to wait before killing the process
        logger: Logger for command output and errors
        strict: Raise TokenCommandFailed instead of logging failures

    Returns:
        The command's standard output, or None if it failed

    Raises:
        TokenCommandFailed: In strict mode, if the command cannot run, times out
            or exits nonzero
    """
    if logger is None:
        logger = DefaultLogger()
    argv = list(command)
    if not argv:
        return _fail("empty token command", logger, strict)

    if debugging_enabled():
        logger.log(f"command: running {' '.join(argv)}")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        return _fail(f"cannot run {argv[0]!r}: {e}", logger, strict)

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.CancelledError:
        await _kill(process)
        raise
    except asyncio.TimeoutError:
        await _kill(process)
        return _fail(f"{argv[0]!r} timed out after {timeout}s", logger, strict)

    output = stdout.decode("utf-8", errors="replace")
    if process.returncode != 0:
        error_text = stderr.decode("utf-8", errors="replace").strip()
        return _fail(
            f"{' '.join(argv)} exited with status {process.returncode}: "
            f"stdout={output.strip()!r} stderr={error_text!r}",
            logger,
            strict,
        )

    logger.log(f"command: {output.strip()}")
    return output


async def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        # already exited
        pass
    await process.wait()


def _fail(message: str, logger: Logger, strict: bool) -> None:
    if strict:
        raise TokenCommandFailed(message)
    logger.log(f"command: {message}")
    return None
