"""
Permutation Remapping Module for Password Hygiene Coach

Shuffles a sequence while keeping track of where one distinguished element
ended up. Used for quiz options (the correct answer must follow its option
through the shuffle) and, through shuffled(), for password characters.

The distinguished element is tracked by its ORIGINAL POSITION, never by value.
Two options with identical text are still two different options, and looking
the answer up with an equality search after shuffling can land on the wrong
copy.
"""

import logging
from typing import Any, List, NamedTuple, Sequence, Tuple

from .randomness import resolve_source

logger = logging.getLogger(__name__)


class IndexOutOfRange(IndexError):
    """
    Raised when the correct index is not a valid position in the option list.

    Negative indices are rejected too: the index is a 0-based position, not
    a Python slice offset.
    """
    pass


class PermutationResult(NamedTuple):
    """Shuffled items plus the new position of the originally correct item."""
    items: Tuple[Any, ...]
    correct_index: int

    @property
    def correct_item(self) -> Any:
        return self.items[self.correct_index]


def shuffled(items: Sequence, source=None) -> List:
    """
    Return a new list holding ``items`` in uniformly random order.

    Uses the Fisher-Yates algorithm driven by ``source.randbelow`` so every
    permutation is equally likely. The input sequence is left untouched.

    Args:
        items: Any finite sequence
        source: Randomness source (defaults to the secure source)

    Returns:
        List: Permuted copy of ``items``
    """
    source = resolve_source(source)
    result = list(items)

    # Walk from the end, swapping each slot with a random slot at or before it
    for i in range(len(result) - 1, 0, -1):
        j = source.randbelow(i + 1)
        result[i], result[j] = result[j], result[i]

    return result


def remap_correct_option(items: Sequence, correct_index: int, source=None) -> PermutationResult:
    """
    Shuffle ``items`` and report where the item at ``correct_index`` moved to.

    Each item is paired with its original position before shuffling; the new
    correct index is the position of the pair tagged ``correct_index``.

    Args:
        items: Options in their stored order (values may repeat)
        correct_index: 0-based position of the correct option
        source: Randomness source (defaults to the secure source)

    Returns:
        PermutationResult: (shuffled items, new correct index)

    Raises:
        IndexOutOfRange: If correct_index is not a valid position in items

    Example:
        >>> result = remap_correct_option(["X", "Y", "X"], 2)
        >>> result.items[result.correct_index]
        'X'
    """
    items = list(items)

    if isinstance(correct_index, bool) or not isinstance(correct_index, int):
        raise IndexOutOfRange(f"Correct index must be an integer, got {type(correct_index).__name__}")

    if not 0 <= correct_index < len(items):
        raise IndexOutOfRange(
            f"Correct index {correct_index} is out of range for {len(items)} option(s)"
        )

    tagged = shuffled(list(enumerate(items)), source)

    new_index = next(pos for pos, (original, _) in enumerate(tagged) if original == correct_index)
    logger.debug("Remapped correct option %d -> %d among %d items", correct_index, new_index, len(items))

    return PermutationResult(tuple(value for _, value in tagged), new_index)


__all__ = ['IndexOutOfRange', 'PermutationResult', 'shuffled', 'remap_correct_option']
