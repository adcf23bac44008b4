from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Sequence, Set, Tuple, Union

from secret_santa.services.errors import UnknownPersonError

WILDCARD = "*"

Target = Union[str, FrozenSet[str]]
Pair = Tuple[str, str]
RawRule = Union["ExclusionRule", Tuple]


def _coerce_people(value: object, side: str) -> Target:
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        members = frozenset(value)
        if not all(isinstance(member, str) for member in members):
            raise TypeError(f"Exclusion {side} must be strings, got {sorted(map(repr, members))}")
        return members
    raise TypeError(f"Exclusion {side} must be a person, a group of people or {WILDCARD!r}, got {value!r}")


@dataclass(frozen=True)
class ExclusionRule:
    """Forbid every person in ``givers`` from giving to every person in ``receivers``.

    Either side may be a single person, a group (stored as a frozenset) or the
    ``"*"`` wildcard meaning every participant. With ``bidirectional`` set the
    reverse pairings are forbidden as well.
    """

    givers: Target
    receivers: Target
    bidirectional: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "givers", _coerce_people(self.givers, "givers"))
        object.__setattr__(self, "receivers", _coerce_people(self.receivers, "receivers"))
        object.__setattr__(self, "bidirectional", bool(self.bidirectional))

    @classmethod
    def coerce(cls, rule: RawRule) -> "ExclusionRule":
        if isinstance(rule, ExclusionRule):
            return rule
        if not isinstance(rule, (tuple, list)) or len(rule) not in (2, 3):
            raise ValueError(
                f"Exclusion must be (givers, receivers) or (givers, receivers, bidirectional), got {rule!r}"
            )
        return cls(*rule)


def exclude_family(members: Iterable[str]) -> ExclusionRule:
    """Nobody in ``members`` gives to anybody else in ``members``."""
    group = frozenset(members)
    return ExclusionRule(givers=group, receivers=group, bidirectional=True)


def _expand(target: Target, participants: Sequence[str], known: Set[str]) -> Iterable[str]:
    if target == WILDCARD:
        return participants
    people = (target,) if isinstance(target, str) else sorted(target)
    for person in people:
        if person not in known:
            raise UnknownPersonError(person)
    return people


def normalize(participants: Sequence[str], rules: Iterable[RawRule]) -> FrozenSet[Pair]:
    known = set(participants)
    forbidden: Set[Pair] = set()

    for raw in rules:
        rule = ExclusionRule.coerce(raw)
        givers = _expand(rule.givers, participants, known)
        receivers = _expand(rule.receivers, participants, known)
        for giver in givers:
            for receiver in receivers:
                forbidden.add((giver, receiver))
                if rule.bidirectional:
                    forbidden.add((receiver, giver))

    return frozenset(forbidden)
