#!/usr/bin/env python3
"""
Example usage of the adbtoken Python library.

This script connects to an Oracle Autonomous Database with a db-token minted
by the OCI CLI instead of a username and password.

Set these environment variables first:
    ADBTOKEN_ACCESS_TOKEN_LOC   directory holding "token" and "oci_db_key.pem"
                                (the OCI CLI writes them to ~/.oci/db-token)
    ADBTOKEN_CONNECT_STRING     Net alias or connect descriptor of the database
"""

import asyncio

import adbtoken


async def main():
    """Main example function."""
    print("Autonomous Database Token Authentication Example")
    print("=" * 48)

    rows = await adbtoken.run()
    if rows is not None:
        print(f"✓ Query returned {len(rows)} row(s)")
    else:
        print("❌ Query did not complete, see the errors above")


if __name__ == "__main__":
    asyncio.run(main())
