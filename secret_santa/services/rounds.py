from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from secret_santa.services.assignment import compute_random_assignment
from secret_santa.services.exclusions import ExclusionRule, RawRule


def recent_rounds(
    past_assignments: Sequence[Mapping[str, str]],
    lookback: Optional[int] = None,
) -> List[Mapping[str, str]]:
    """Rounds are oldest first; keep the last ``lookback`` of them (all when ``None``)."""
    rounds = list(past_assignments)
    if lookback is None:
        return rounds
    if lookback < 0:
        raise ValueError("lookback must not be negative.")
    if lookback == 0:
        return []
    return rounds[-lookback:]


def merge_history(
    manual_rules: Optional[Iterable[RawRule]],
    past_assignments: Optional[Iterable[Mapping[str, str]]],
) -> List[ExclusionRule]:
    rules = [ExclusionRule.coerce(rule) for rule in manual_rules or []]
    for past in past_assignments or []:
        for giver, receiver in past.items():
            rules.append(ExclusionRule(giver, receiver))

    return list(dict.fromkeys(rules))


def compute_assignment_with_history(
    participants: Sequence[str],
    exclusions: Optional[Iterable[RawRule]] = None,
    past_assignments: Optional[Sequence[Mapping[str, str]]] = None,
    lookback: Optional[int] = None,
    **options,
) -> Dict[str, str]:
    history = recent_rounds(past_assignments or [], lookback)
    rules = merge_history(exclusions, history)
    logger.bind(rounds=len(history), rules=len(rules)).debug("Merged past rounds into exclusions")
    return compute_random_assignment(participants, rules, **options)
