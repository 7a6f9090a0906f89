"""
Request parsing helpers shared by the endpoints.
"""

import re
from backend.app.core.exceptions import InvalidIdError

# ASCII digits only: no sign, underscores, whitespace or other scripts
ID_PATTERN = re.compile(r"[0-9]+")


def parse_id(raw: str, resource: str) -> int:
    """
    Convert a path segment to an integer id.
    
    Runs before any store access so a bad id never reaches the database.
    
    Args:
        raw: Path segment as received
        resource: Resource name used in the error message ("brand", "truck", ...)
        
    Raises:
        InvalidIdError: 400 "Invalid <resource> ID"
    """
    if not isinstance(raw, str) or not ID_PATTERN.fullmatch(raw):
        raise InvalidIdError(f"Invalid {resource} ID")
    return int(raw)


def provided_fields(body, zero_allowed=()) -> dict:
    """
    Fields an update body actually sets.
    
    Null, empty and zero values keep the stored value, the same values the
    create handlers treat as missing. Fields named in ``zero_allowed``
    accept an explicit 0.
    """
    return {
        field: value
        for field, value in body.model_dump(exclude_none=True).items()
        if value or (field in zero_allowed and value == 0)
    }
