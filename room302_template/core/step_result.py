"""Outcome of a single setup step.

Steps never exit the process themselves. They return a ``StepResult`` and the
pipeline driver decides whether to continue (OK / ADVISORY) or stop with a
non-zero status (FATAL).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class StepStatus(IntEnum):
    """Ordered by severity so the worst of several results wins."""

    OK = 0
    ADVISORY = 1
    FATAL = 2


class Note(NamedTuple):
    """One line of step output: a failure message or a follow-up hint."""

    text: str
    is_hint: bool = False


def _notes(messages: tuple[str, ...], hints: tuple[str, ...]) -> tuple[Note, ...]:
    return tuple(Note(m) for m in messages) + tuple(Note(h, True) for h in hints)


@dataclass(frozen=True)
class StepResult:
    """Status plus the lines to show the operator, in display order."""

    status: StepStatus = StepStatus.OK
    notes: tuple[Note, ...] = ()

    @classmethod
    def ok(cls) -> StepResult:
        return cls()

    @classmethod
    def advisory(cls, *messages: str, hints: tuple[str, ...] = ()) -> StepResult:
        return cls(StepStatus.ADVISORY, _notes(messages, hints))

    @classmethod
    def fatal(cls, *messages: str, hints: tuple[str, ...] = ()) -> StepResult:
        return cls(StepStatus.FATAL, _notes(messages, hints))

    @property
    def messages(self) -> tuple[str, ...]:
        """Failure messages without the hints."""
        return tuple(note.text for note in self.notes if not note.is_hint)

    @property
    def hints(self) -> tuple[str, ...]:
        return tuple(note.text for note in self.notes if note.is_hint)

    @property
    def is_ok(self) -> bool:
        return self.status is StepStatus.OK

    @property
    def is_fatal(self) -> bool:
        return self.status is StepStatus.FATAL

    def merge(self, other: StepResult) -> StepResult:
        """Combine two results: worst status, notes in order."""
        return StepResult(max(self.status, other.status), self.notes + other.notes)


def merge_results(results: list[StepResult]) -> StepResult:
    """Fold a list of sub-step results into one."""
    combined = StepResult.ok()
    for result in results:
        combined = combined.merge(result)
    return combined
