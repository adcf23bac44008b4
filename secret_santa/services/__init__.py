from secret_santa.core.logging import configure_logging
from secret_santa.services.assignment import compute_assignment, compute_random_assignment
from secret_santa.services.errors import (
    AssignmentError,
    DuplicatePeopleError,
    InsufficientParticipantsError,
    NoValidAssignmentError,
    UnknownPersonError,
)
from secret_santa.services.exclusions import WILDCARD, ExclusionRule, exclude_family, normalize
from secret_santa.services.rounds import compute_assignment_with_history, merge_history

__all__ = [
    "AssignmentError",
    "DuplicatePeopleError",
    "ExclusionRule",
    "InsufficientParticipantsError",
    "NoValidAssignmentError",
    "UnknownPersonError",
    "WILDCARD",
    "compute_assignment",
    "compute_assignment_with_history",
    "compute_random_assignment",
    "configure_logging",
    "exclude_family",
    "merge_history",
    "normalize",
]
