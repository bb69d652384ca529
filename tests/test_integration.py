"""
Integration tests for adbtoken.

These tests require the OCI CLI and a reachable Autonomous Database. Set
ADBTOKEN_TEST_CONNECT_STRING (and optionally ADBTOKEN_ACCESS_TOKEN_LOC) to run
them.
"""

import os

import pytest

import adbtoken
from adbtoken.config import TokenAuthConfig


@pytest.mark.asyncio
@pytest.mark.requires_database
class TestLiveDatabase:
    async def test_round_trip(self):
        base = TokenAuthConfig.from_env()
        config = TokenAuthConfig(
            token_dir=base.token_dir,
            dsn=os.environ["ADBTOKEN_TEST_CONNECT_STRING"],
            token_command=base.token_command,
            strict=True,
        )

        rows = await adbtoken.run(config)

        assert rows is not None
        assert len(rows) == 1
        print(f"Database date: {rows[0][0]}")
