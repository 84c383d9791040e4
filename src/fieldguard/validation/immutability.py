"""
Append-only policy for ordered list fields.

Some list fields may only grow once set: new entries go at the end and the
existing entries keep their values and order. Anything else (reorder,
removal, in-place edit, insertion in the middle) means the field's
immutability has to be enforced.
"""

from typing import Sequence

from ..logging import get_logger

logger = get_logger(__name__)


def should_enforce_immutability(new: Sequence[str], old: Sequence[str]) -> bool:
    """
    Compare the given sequences and decide whether immutability is enforced.

    Only a pure trailing append from ``old`` to ``new`` is let through.
    Equal lengths always enforce, even when both sequences are identical.

    Args:
        new: The updated sequence
        old: The current sequence

    Returns:
        True if the caller must enforce immutability, False if the update
        only appends elements
    """
    size_delta = len(new) - len(old)
    if size_delta > 0:
        new_prefix = new[:len(new) - size_delta]
        if _equal(new_prefix, old):
            logger.debug(f"{size_delta} element(s) appended, update allowed")
            return False
        return should_enforce_immutability(new_prefix, old)
    return size_delta <= 0


def _equal(new: Sequence[str], old: Sequence[str]) -> bool:
    # callers pass sequences of the same length
    return all(a == b for a, b in zip(new, old))
