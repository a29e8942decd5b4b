"""
Split reconciliation — merges split-mode output back into (head, tail).

A SplitResult holds ``n * arity`` slots, one repetition per delimiter
occurrence (nested forwards produce n > 1). Reconciliation keeps:

    head = slot 0 of repetition 0 (text before the first delimiter)
    tail = default slots of repetition 0
           + every non-excluded slot of repetitions 1..n-1

which rebuilds the text after the first delimiter, minus the excluded
delimiter parts.
"""
from typing import Callable, Optional, Sequence, Tuple

from src.models.match_outcome import SplitResult

SlotPredicate = Callable[[int], bool]


def exclude_delimiter_line(slot: int) -> bool:
    """[before, line, after]: drop nested separator lines."""
    return slot == 1


def exclude_header_value(slot: int) -> bool:
    """[before, line, value, after]: drop the captured header value, keep its line."""
    return slot == 2


def reconcile_split(
    result: Optional[SplitResult],
    arity: int,
    default_slots: Sequence[int],
    exclude: Optional[SlotPredicate] = None,
) -> Optional[Tuple[str, str]]:
    """
    Reconcile a SplitResult of the given arity into ``(head, tail)``.

    Args:
        result: Output of match_split (None when nothing matched).
        arity: Expected number of slots per repetition.
        default_slots: Slots of repetition 0 that form the start of the tail.
        exclude: Predicate on the slot index within a repetition; matching
                 slots of repetitions 1..n-1 are dropped.

    Returns:
        (head, tail), or None if *result* is absent or its length is not a
        positive multiple of *arity* (treated as no match).
    """
    if result is None or arity <= 0:
        return None

    slots = result.slots
    if not slots or len(slots) % arity != 0:
        return None

    parts = [slots[i] for i in default_slots]

    for repetition in range(1, len(slots) // arity):
        for slot, value in enumerate(result.repetition(repetition)):
            if exclude is not None and exclude(slot):
                continue
            parts.append(value)

    return slots[0], "".join(parts)
