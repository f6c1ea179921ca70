"""
Utility helpers shared across repositories/services.
"""

import secrets
import string
import time

ID_ALPHABET = string.ascii_letters + string.digits


def make_id(length: int = 8) -> str:
    """Random alphanumeric id; 62**8 values is plenty for one site's records."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)
