import re
from typing import Mapping

from fastapi import HTTPException, status

INVALID_ID = "Invalid ID"

# Plain decimal only: no whitespace, underscores or empty segments
_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_identity(value: str) -> bool:
    return _INTEGER.fullmatch(value) is not None


def parse_identity(value: str) -> int:
    """Parse the trailing path segment as a record identity or fail with 400."""
    if not is_identity(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    return int(value)


def has_invalid_identity(path_params: Mapping[str, str]) -> bool:
    return any(
        name.endswith("_id") and not is_identity(str(value))
        for name, value in path_params.items()
    )
