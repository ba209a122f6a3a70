"""
Validation utilities
"""
from typing import Optional
from fastapi import HTTPException


def require_param(value: Optional[str], name: str) -> str:
    """
    Ensure a query parameter was supplied

    Raises:
        HTTPException: 400 "<name> is required" when missing or blank
    """
    if not value:
        raise HTTPException(status_code=400, detail=f"{name} is required")
    return value


def parse_weight_id(raw_id: Optional[str]) -> int:
    """
    Validate the `id` query parameter of DELETE /weights

    Returns:
        The id as an integer

    Raises:
        HTTPException: If id is missing or not an integer
    """
    raw_id = require_param(raw_id, "id").strip()
    # int() alone also accepts "1_000" and "+7"
    digits = raw_id[1:] if raw_id.startswith("-") else raw_id
    if not (digits.isascii() and digits.isdigit()):
        raise HTTPException(status_code=400, detail="id must be an integer")
    return int(raw_id)
