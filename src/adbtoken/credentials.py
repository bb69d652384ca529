"""
Loading of the db-token and private key files written by the OCI CLI.
"""

import os
import re
from typing import Optional

from .config import debugging_enabled
from .models import (
    PEM_FOOTER,
    PEM_HEADER,
    PRIVATE_KEY_FILE_NAME,
    TOKEN_FILE_NAME,
    AccessToken,
    CredentialUnavailable,
    DefaultLogger,
    Logger,
)

_LINE_BREAK = re.compile(r"\r?\n")


def strip_pem_framing(text: str) -> str:
    """
    Return the base64 body of a PEM private key.

    Lines equal to the BEGIN/END sentinels are dropped and every other line is
    joined without separators. Whitespace inside a line is kept as is.
    """
    return "".join(line for line in _LINE_BREAK.split(text) if line not in (PEM_HEADER, PEM_FOOTER))


def _read_text(path: str) -> str:
    # newline="" keeps "\r\n" so the token is returned byte for byte
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def read_access_token(
    token_dir: str,
    logger: Optional[Logger] = None,
    strict: bool = False,
) -> AccessToken:
    """
    Read the token and private key from ``token_dir``.

    Each file is read independently. A file that cannot be read is logged and
    its field is left empty, so the run can still go on to attempt a
    connection.

    Args:
        token_dir: Directory holding ``token`` and ``oci_db_key.pem``
        logger: Logger for read errors
        strict: Raise CredentialUnavailable instead of defaulting to ""

    Returns:
        AccessToken with the raw token and the unframed private key

    Raises:
        CredentialUnavailable: In strict mode, if either file cannot be read
    """
    if logger is None:
        logger = DefaultLogger()

    token_path = os.path.join(token_dir, TOKEN_FILE_NAME)
    key_path = os.path.join(token_dir, PRIVATE_KEY_FILE_NAME)

    token = ""
    try:
        token = _read_text(token_path)
    except (OSError, UnicodeDecodeError) as e:
        if strict:
            raise CredentialUnavailable(f"cannot read token file: {e}", path=token_path) from e
        logger.log(f"credentials: cannot read token file {token_path}: {e}")

    private_key = ""
    try:
        private_key = strip_pem_framing(_read_text(key_path))
    except (OSError, UnicodeDecodeError) as e:
        if strict:
            raise CredentialUnavailable(f"cannot read private key file: {e}", path=key_path) from e
        logger.log(f"credentials: cannot read private key file {key_path}: {e}")

    if debugging_enabled():
        logger.log(f"credentials: loaded token ({len(token)} chars) and key ({len(private_key)} chars)")

    return AccessToken(token=token, private_key=private_key)
