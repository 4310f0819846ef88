"""
Password Hygiene Coach Validation Module
Input validation and generation limits
"""

from typing import Optional, Tuple

# Generation configuration
MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = 32
DEFAULT_PASSWORD_LENGTH = 12
RECOMMENDED_LENGTH = 12  # Below this the strength feedback suggests a longer password

# Session configuration
CLIPBOARD_TIMEOUT = 30  # seconds
PASSING_RATIO = 0.75


def validate_length(length) -> Tuple[bool, str]:
    """
    Check a requested password length against the generation limits

    Returns:
        (is_valid, validation_message)
    """
    # bool is an int subclass but never a meaningful length
    if isinstance(length, bool) or not isinstance(length, int):
        return False, "Password length must be a whole number"

    if length < MIN_PASSWORD_LENGTH:
        return False, f"Password length must be at least {MIN_PASSWORD_LENGTH} character"

    if length > MAX_PASSWORD_LENGTH:
        return False, f"Password length cannot exceed {MAX_PASSWORD_LENGTH} characters"

    return True, "Length accepted"


def validate_seed(seed: str, length: int) -> Tuple[bool, str]:
    """
    Check that user supplied characters fit into the requested length

    Returns:
        (is_valid, validation_message)
    """
    is_valid, message = validate_length(length)
    if not is_valid:
        return False, message

    if not isinstance(seed, str):
        return False, "Characters must be given as text"

    if len(seed) > length:
        return False, "Too many characters - reduce input or increase length"

    return True, "Characters accepted"


def parse_length(text: Optional[str], default: int = DEFAULT_PASSWORD_LENGTH) -> int:
    """Turn raw prompt input into a length, using the default for blank input"""
    if text is None:
        return default

    text = text.strip()
    if not text:
        return default

    if not text.isdecimal():
        raise ValueError("Please enter a valid number")

    return int(text)
