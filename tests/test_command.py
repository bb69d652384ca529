"""
Tests for running the token-minting command.
"""

import asyncio
import sys
from unittest.mock import patch

import pytest

from adbtoken.command import _kill, mint_token
from adbtoken.models import TokenCommandFailed


@pytest.mark.asyncio
class TestMintToken:
    async def test_success_logs_output(self, logger):
        output = await mint_token([sys.executable, "-c", "print('Private key written')"], logger=logger)

        assert output is not None
        assert output.strip() == "Private key written"
        assert logger.messages == ["command: Private key written"]

    async def test_nonzero_exit_is_logged(self, logger):
        command = [sys.executable, "-c", "import sys; sys.stderr.write('not authorized'); sys.exit(3)"]

        output = await mint_token(command, logger=logger)

        assert output is None
        assert len(logger.messages) == 1
        assert "exited with status 3" in logger.messages[0]
        assert "not authorized" in logger.messages[0]

    async def test_missing_executable_is_logged(self, logger):
        output = await mint_token(["adbtoken-no-such-command"], logger=logger)

        assert output is None
        assert logger.contains("cannot run 'adbtoken-no-such-command'")

    async def test_timeout_kills_process(self, logger):
        command = [sys.executable, "-c", "import time; time.sleep(30)"]

        output = await mint_token(command, timeout=0.5, logger=logger)

        assert output is None
        assert logger.contains("timed out after 0.5s")

    async def test_empty_command(self, logger):
        assert await mint_token([], logger=logger) is None
        assert logger.messages == ["command: empty token command"]

    async def test_strict_raises(self, logger):
        command = [sys.executable, "-c", "import sys; sys.exit(1)"]

        with pytest.raises(TokenCommandFailed, match="exited with status 1"):
            await mint_token(command, logger=logger, strict=True)

        assert logger.messages == []

    async def test_strict_missing_executable(self, logger):
        with pytest.raises(TokenCommandFailed):
            await mint_token(["adbtoken-no-such-command"], logger=logger, strict=True)

    async def test_debug_logs_command_line(self, logger, monkeypatch):
        monkeypatch.setenv("ADBTOKEN_DEBUGGING", "true")

        await mint_token([sys.executable, "-c", "pass"], logger=logger)

        assert logger.messages[0].startswith("command: running ")

    async def test_nonzero_exit_keeps_stdout(self, logger):
        command = [sys.executable, "-c", "import sys; print('Token request denied'); sys.exit(1)"]

        await mint_token(command, logger=logger)

        assert logger.contains("stdout='Token request denied'")

    async def test_cancel_kills_process(self, logger):
        started = []
        real_exec = asyncio.create_subprocess_exec

        async def recording_exec(*args, **kwargs):
            process = await real_exec(*args, **kwargs)
            started.append(process)
            return process

        with patch("asyncio.create_subprocess_exec", recording_exec):
            task = asyncio.create_task(
                mint_token([sys.executable, "-c", "import time; time.sleep(30)"], logger=logger)
            )
            while not started:
                await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        assert started[0].returncode is not None


@pytest.mark.asyncio
async def test_kill_after_exit_is_harmless():
    process = await asyncio.create_subprocess_exec(sys.executable, "-c", "pass")
    await process.wait()

    await _kill(process)

    assert process.returncode == 0
