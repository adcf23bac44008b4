from __future__ import annotations

from typing import AbstractSet, Dict, Optional, Sequence, Set, Tuple

from loguru import logger


def _has_dead_end(people: Sequence[str], forbidden: AbstractSet[Tuple[str, str]]) -> bool:
    for person in people:
        if not any(other != person and (person, other) not in forbidden for other in people):
            return True
        if not any(other != person and (other, person) not in forbidden for other in people):
            return True
    return False


def search(order: Sequence[str], forbidden: AbstractSet[Tuple[str, str]]) -> Optional[Dict[str, str]]:
    """Find one gift cycle through every person in ``order``, or ``None``.

    The walk starts at ``order[0]`` and each receiver becomes the next giver.
    ``order[0]`` may only be picked as receiver by the last giver, which closes
    the loop, so the result is always a single cycle. Receivers are tried in
    exploration order, which makes the result deterministic for a given order.

    The walk recurses once per person, so groups approaching Python's recursion
    limit (about 1000 people) raise ``RecursionError``.
    """
    people = list(order)
    if len(people) < 2:
        return None
    if _has_dead_end(people, forbidden):
        logger.debug("Someone has no allowed giver or receiver, skipping search")
        return None

    first = people[0]
    candidates = people[1:]
    total = len(people)
    assignment: Dict[str, str] = {}
    available: Set[str] = set(candidates)

    def allowed(giver: str, receiver: str) -> bool:
        return giver != receiver and (giver, receiver) not in forbidden

    def backtrack(giver: str, depth: int) -> bool:
        if depth == total - 1:
            if allowed(giver, first):
                assignment[giver] = first
                return True
            return False

        for receiver in candidates:
            if receiver not in available or not allowed(giver, receiver):
                continue
            assignment[giver] = receiver
            available.remove(receiver)
            if backtrack(receiver, depth + 1):
                return True
            available.add(receiver)
            del assignment[giver]
        return False

    if backtrack(first, 0):
        return dict(assignment)
    return None
