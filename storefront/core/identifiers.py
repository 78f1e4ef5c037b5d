"""Identifiers — unique, creation-ordered entity ids and their parsing.

Invariants:
    - new_id() never fails and never repeats within practical bounds (74 random bits per ms)
    - Ids generated later sort after ids generated earlier (millisecond resolution)
    - parse_id() accepts canonical UUID text only; anything else is InvalidIdentifierError

Design Decisions:
    - UUID version 7 layout (48-bit unix-ms prefix + random tail): sortable by creation
      and still a plain uuid.UUID, so ORM Uuid columns and JSON encoding need nothing extra
    - Built by hand: uuid.uuid7() only exists from Python 3.14
"""

import os
import re
import time
from uuid import UUID

from storefront.core.errors import InvalidIdentifierError

_CANONICAL = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
)


def new_id() -> UUID:
    """Return a fresh time-ordered identifier."""
    unix_ms = time.time_ns() // 1_000_000
    value = (unix_ms & 0xFFFF_FFFF_FFFF) << 80
    value |= int.from_bytes(os.urandom(10), "big")
    # RFC 9562 UUIDv7: unix_ts_ms (48) | ver=0b0111 (4) | rand_a (12) | var=0b10 (2) | rand_b (62)
    value = (value & ~(0xF << 76)) | (0x7 << 76)
    value = (value & ~(0x3 << 62)) | (0x2 << 62)
    return UUID(int=value)


def parse_id(text: str) -> UUID:
    """Parse canonical UUID text (e.g. a path segment)."""
    if not isinstance(text, str) or not _CANONICAL.match(text):
        raise InvalidIdentifierError(str(text))
    return UUID(text)
