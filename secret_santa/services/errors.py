from __future__ import annotations

from typing import Sequence


class AssignmentError(RuntimeError):
    pass


class InsufficientParticipantsError(AssignmentError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Need at least 2 people for secret santa, got {count}.")
        self.count = count


class DuplicatePeopleError(AssignmentError):
    def __init__(self, duplicates: Sequence[str]) -> None:
        super().__init__("Duplicate people found: " + ", ".join(map(str, duplicates)))
        self.duplicates = tuple(duplicates)


class UnknownPersonError(AssignmentError):
    def __init__(self, person: str) -> None:
        super().__init__(f"Unknown person in exclusion: {person}")
        self.person = person


class NoValidAssignmentError(AssignmentError):
    def __init__(self, attempts: int) -> None:
        super().__init__(
            "No valid secret santa assignment exists with the given exclusions "
            f"(gave up after {attempts} attempt{'s' if attempts != 1 else ''})."
        )
        self.attempts = attempts
