from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from secret_santa.core.config import Settings, load_settings
from secret_santa.services.cycle_search import search
from secret_santa.services.errors import (
    DuplicatePeopleError,
    InsufficientParticipantsError,
    NoValidAssignmentError,
)
from secret_santa.services.exclusions import RawRule, normalize


def validate_participants(participants: Sequence[str]) -> List[str]:
    people = list(participants)
    if len(people) < 2:
        raise InsufficientParticipantsError(len(people))

    seen = set()
    duplicates: List[str] = []
    for person in people:
        if person in seen and person not in duplicates:
            duplicates.append(person)
        seen.add(person)
    if duplicates:
        raise DuplicatePeopleError(duplicates)

    return people


def compute_assignment(
    participants: Sequence[str],
    exclusions: Optional[Iterable[RawRule]] = None,
) -> Dict[str, str]:
    """Deterministic draw: the participants' own order is the exploration order."""
    people = validate_participants(participants)
    forbidden = normalize(people, exclusions or [])

    result = search(people, forbidden)
    if result is None:
        raise NoValidAssignmentError(attempts=1)
    return result


def compute_random_assignment(
    participants: Sequence[str],
    exclusions: Optional[Iterable[RawRule]] = None,
    seed: Optional[int] = None,
    max_attempts: Optional[int] = None,
    rng: Optional[random.Random] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, str]:
    """Draw with a shuffled exploration order, retrying up to ``max_attempts`` times.

    ``rng`` wins over ``seed``; unset ``seed`` and ``max_attempts`` fall back to
    the environment settings, and the budget defaults to ``len(participants) ** 2``.
    """
    people = validate_participants(participants)
    forbidden = normalize(people, exclusions or [])

    if settings is None:
        settings = load_settings()
    if seed is None:
        seed = settings.seed
    if max_attempts is None:
        max_attempts = settings.max_attempts or len(people) ** 2
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1.")
    if rng is None:
        rng = random.Random(seed)

    log = logger.bind(participants=len(people), forbidden=len(forbidden), seed=seed)
    order = list(people)
    for attempt in range(1, max_attempts + 1):
        rng.shuffle(order)
        result = search(order, forbidden)
        if result is not None:
            log.bind(attempt=attempt).info("Assignments generated")
            return result
        log.debug("Attempt {attempt}/{total} found no cycle", attempt=attempt, total=max_attempts)

    log.warning("No valid assignment after {total} attempts", total=max_attempts)
    raise NoValidAssignmentError(attempts=max_attempts)
