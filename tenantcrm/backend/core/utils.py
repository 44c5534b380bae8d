"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

import os
import time
import uuid
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    Used for JWT expiry and health check timing. Entity timestamps are
    epoch milliseconds, see `now_ms`.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def now_ms() -> int:
    """Return the current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def new_id() -> str:
    """
    Generate a time-ordered random identifier.

    UUIDv7 layout: 48-bit millisecond timestamp, version and variant bits,
    74 random bits. Rendered as 32 lowercase hex characters so it is a valid
    entity id (letters and digits only). Ids generated later sort after
    ids generated earlier at millisecond granularity.
    """
    timestamp = now_ms() & ((1 << 48) - 1)
    rand = int.from_bytes(os.urandom(10), "big")
    rand_a = rand >> 68
    rand_b = rand & ((1 << 62) - 1)
    value = (timestamp << 80) | (0x7 << 76) | (rand_a << 64) | (0b10 << 62) | rand_b
    return uuid.UUID(int=value).hex
