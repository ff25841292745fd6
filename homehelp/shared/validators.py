"""Shared validation utilities"""

import re
from typing import Optional

SLOT_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_us_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate and normalize US phone number to E.164 format.

    Args:
        phone: Phone number string in various formats

    Returns:
        Normalized phone number in E.164 format (+1XXXXXXXXXX)

    Raises:
        ValueError: If phone number is invalid
    """
    if not phone:
        return phone

    # Remove all non-digit characters
    digits = re.sub(r"\D", "", phone)

    # Handle +1 prefix
    if digits.startswith("1") and len(digits) == 11:
        digits = digits[1:]

    if len(digits) != 10:
        raise ValueError("Phone number must be 10 digits for US numbers")

    return f"+1{digits}"


def validate_username(username: str) -> str:
    """Usernames are 3-50 characters of letters, digits, dot, dash or underscore"""
    username = (username or "").strip()
    if not re.match(r"^[A-Za-z0-9._-]{3,50}$", username):
        raise ValueError(
            "Username must be 3-50 characters (letters, numbers, '.', '_' or '-')"
        )
    return username


def validate_slot(slot: str) -> str:
    """
    Validate a time-of-day slot string.

    Raises:
        ValueError: If the slot is not zero-padded 24h HH:MM
    """
    slot = (slot or "").strip()
    if not SLOT_PATTERN.match(slot):
        raise ValueError(f"Invalid time slot '{slot}', expected HH:MM")
    return slot
