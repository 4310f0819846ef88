"""
Secure Password Generation Module for Password Hygiene Coach

This module provides the two password generation strategies offered by the
coach:
- Class-based generation: random passwords guaranteed to contain at least one
  character of each requested character class
- Seed-based generation: passwords built around characters the user typed,
  padded with random characters from the default alphabet

Both strategies take an optional randomness source. By default it is the
secure source from hygiene.randomness, which draws from the operating system
through the secrets module. Tests pass a SeededRandomSource instead.

SECURITY NOTES:
- Every draw and the final shuffle use the same injected source; there is no
  hidden use of the random module
- Generated passwords are returned to the caller and never logged or retained
- Invalid requests raise instead of silently returning a shorter password
"""

import logging
from typing import Iterable, Tuple

from .charsets import CLASS_NAMES, DEFAULT_ALPHABET, resolve_classes
from .permutation import shuffled
from .randomness import RandomUnavailable, choice, resolve_source
from .validation import validate_length, validate_seed

logger = logging.getLogger(__name__)

# ==============================================================================
# CUSTOM EXCEPTION CLASSES
# ==============================================================================

class PasswordGenerationError(Exception):
    """
    Base exception class for password generation errors.

    Attributes:
        message (str): Human-readable error description
    """
    pass


class InvalidRequest(PasswordGenerationError, ValueError):
    """
    Raised when a generation request cannot be satisfied as given.

    Covers lengths outside the allowed range, an empty or unknown set of
    character classes, and seed characters that do not fit the length.
    These are user input problems: report the message and let the user fix it.
    """
    pass

# ==============================================================================
# MAIN PASSWORD GENERATION FUNCTIONS
# ==============================================================================

def generate_secure_password(length: int,
                             classes: Iterable[str] = CLASS_NAMES,
                             source=None) -> str:
    """
    Generate a random password containing each requested character class.

    Algorithm:
    1. Resolve the requested classes into canonical order
       (lowercase, uppercase, digits, symbols) and join their pools
    2. Draw one character from each class pool, in that order, but never
       more than ``length`` draws
    3. Fill the remaining positions uniformly from the joined pool
    4. Shuffle the whole sequence so guaranteed characters are not at the front

    Args:
        length (int): Desired password length, 1 to MAX_PASSWORD_LENGTH (32)

        classes (Iterable[str]): Names of the character classes to use.
                                 Default: all four classes

        source: Randomness source with a randbelow(n) method.
                Default: the secure source

    Returns:
        str: Password of exactly ``length`` characters.

    Raises:
        InvalidRequest: If length is out of range or classes is empty/unknown
        RandomUnavailable: If the secure random source fails

    Boundary Note:
        When ``length`` is smaller than the number of requested classes only
        the first ``length`` classes in canonical order are guaranteed. For
        example length 2 with all four classes guarantees one lowercase and
        one uppercase character and nothing more.

    Examples:
        >>> len(generate_secure_password(16))
        16

        >>> generate_secure_password(8, classes=["digits"]).isdigit()
        True
    """
    is_valid, message = validate_length(length)
    if not is_valid:
        raise InvalidRequest(message)

    if isinstance(classes, str):
        classes = [classes]

    try:
        requested = resolve_classes(classes)
    except KeyError as e:
        raise InvalidRequest(e.args[0]) from None

    if not requested:
        raise InvalidRequest("At least one character type must be selected")

    source = resolve_source(source)
    logger.debug("Generating %d-character password from classes: %s",
                 length, ', '.join(cls.name for cls in requested))

    # One guaranteed character per class, in canonical order
    password_chars = [choice(cls.pool, source) for cls in requested[:length]]

    # Fill remaining slots from the combined pool
    all_chars = ''.join(cls.pool for cls in requested)
    while len(password_chars) < length:
        password_chars.append(choice(all_chars, source))

    # Shuffle so guaranteed characters do not sit at predictable positions
    return ''.join(shuffled(password_chars, source))


def generate_password_from_seed(length: int, seed: str, source=None) -> str:
    """
    Generate a password built around user supplied characters.

    Every character of ``seed`` appears in the result exactly as often as it
    appears in the seed. The remaining ``length - len(seed)`` positions are
    drawn uniformly from the default 94-character alphabet and the whole
    sequence is shuffled.

    Args:
        length (int): Desired password length, 1 to MAX_PASSWORD_LENGTH (32)
        seed (str): Characters to include. May be empty.
        source: Randomness source. Default: the secure source

    Returns:
        str: Password of exactly ``length`` characters.

    Raises:
        InvalidRequest: If length is out of range or the seed is longer than
                        length. The seed is never truncated.
        RandomUnavailable: If the secure random source fails

    Examples:
        >>> sorted(generate_password_from_seed(3, "abc"))
        ['a', 'b', 'c']

        >>> len(generate_password_from_seed(12, ""))
        12
    """
    is_valid, message = validate_seed(seed, length)
    if not is_valid:
        raise InvalidRequest(message)

    source = resolve_source(source)
    logger.debug("Generating %d-character password around %d seed character(s)",
                 length, len(seed))

    working = list(seed)
    while len(working) < length:
        working.append(choice(DEFAULT_ALPHABET, source))

    return ''.join(shuffled(working, source))


def generate_password_safe(length: int,
                           classes: Iterable[str] = CLASS_NAMES,
                           source=None) -> Tuple[bool, str]:
    """
    Safe password generation wrapper that never raises for bad input.

    Returns:
        Tuple[bool, str]:
            - First element: True if generation succeeded, False otherwise
            - Second element: Generated password or error message

    Example:
        >>> generate_password_safe(40)
        (False, 'Password length cannot exceed 32 characters')
    """
    try:
        return True, generate_secure_password(length, classes, source)
    except InvalidRequest as e:
        return False, str(e)


__all__ = [
    'PasswordGenerationError',
    'InvalidRequest',
    'RandomUnavailable',
    'generate_secure_password',
    'generate_password_from_seed',
    'generate_password_safe',
]
