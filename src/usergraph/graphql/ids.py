"""
Parsing of identifier arguments received as text.
"""

import re
from uuid import UUID

from ..results import Err, ErrorKind, Ok

# Canonical 8-4-4-4-12 form only; uuid.UUID() alone also accepts braces,
# urn prefixes and unhyphenated hex.
_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def parse_user_id(text: str | None) -> Ok[UUID] | Err:
    if text is None or not _CANONICAL_UUID.fullmatch(text):
        return Err(ErrorKind.INVALID_ID)
    return Ok(UUID(text))
