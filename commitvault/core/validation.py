"""
Input validation rules.

Every check raises InvalidParameters. The checks know nothing about stored
state; callers decide the order in which existence and content are checked.
"""

from typing import Any

from .errors import InvalidParameters
from .records import MAX_DECLARATION_LENGTH, MAX_TIER, MIN_TIER


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count or tier
    return isinstance(value, int) and not isinstance(value, bool)


def check_identity(identity: Any) -> str:
    if not isinstance(identity, str) or not identity:
        raise InvalidParameters("identity must be a non-empty string")
    return identity


def check_declaration(text: Any) -> str:
    """
    Validate commitment text.

    Length is counted in characters, not encoded bytes.
    """
    if not isinstance(text, str):
        raise InvalidParameters("declaration must be a string")
    if len(text) == 0:
        raise InvalidParameters("declaration must not be empty")
    if len(text) > MAX_DECLARATION_LENGTH:
        raise InvalidParameters(
            f"declaration exceeds {MAX_DECLARATION_LENGTH} characters ({len(text)})"
        )
    return text


def check_completed(flag: Any) -> bool:
    if not isinstance(flag, bool):
        raise InvalidParameters(f"completed must be a boolean, got {type(flag).__name__}")
    return flag


def check_duration(duration: Any) -> int:
    if not _is_int(duration):
        raise InvalidParameters("duration must be an integer")
    if duration <= 0:
        raise InvalidParameters(f"duration must be positive, got {duration}")
    return duration


def check_tier(tier: Any) -> int:
    if not _is_int(tier):
        raise InvalidParameters("tier must be an integer")
    if not MIN_TIER <= tier <= MAX_TIER:
        raise InvalidParameters(f"tier must be in [{MIN_TIER}, {MAX_TIER}], got {tier}")
    return tier
