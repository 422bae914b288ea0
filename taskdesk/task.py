"""Tasks, their priorities and their progress states."""

from __future__ import annotations

import dataclasses
import itertools
from dataclasses import dataclass, field
from enum import IntEnum

_task_ids = itertools.count()


def _next_task_id() -> str:
    return f"TID{next(_task_ids)}"


class Priority(IntEnum):
    """How urgent a task is; larger values are more urgent."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    URGENT = 3

    def __str__(self) -> str:
        return self.name.capitalize()


class Status(IntEnum):
    """How far along a task is."""

    NOT_STARTED = 0
    IN_PROGRESS = 1
    COMPLETED = 2

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def _parse_enum(text: str, enum_type: type[IntEnum]) -> IntEnum:
    try:
        value = int(text.strip())
    except ValueError:
        raise ValueError(f"not a number: {text!r}") from None
    try:
        return enum_type(value)
    except ValueError:
        raise ValueError(
            f"{enum_type.__name__.lower()} must be between "
            f"{min(enum_type)} and {max(enum_type)}, got {value}"
        ) from None


def parse_priority(text: str) -> Priority:
    """Turn a number such as ``"2"`` into a Priority; raise ValueError if out of range."""
    return _parse_enum(text, Priority)


def parse_status(text: str) -> Status:
    """Turn a number such as ``"1"`` into a Status; raise ValueError if out of range."""
    return _parse_enum(text, Status)


@dataclass(eq=False)
class Task:
    """A unit of work owned by a user.

    Tasks are equal when they share a task id and are ordered by priority.
    """

    title: str = "Unknown"
    description: str = "Empty"
    deadline: str = "Unknown"
    category: str = "Unknown"
    priority: Priority = Priority.LOW
    status: Status = Status.NOT_STARTED
    uid: str = ""
    task_id: str = field(default_factory=_next_task_id)

    def update_from(self, other: Task) -> None:
        """Take over the editable fields of *other*, keeping this task's ids."""
        self.title = other.title
        self.description = other.description
        self.deadline = other.deadline
        self.category = other.category
        self.status = other.status
        self.priority = other.priority

    def advance(self) -> Status:
        """Move the status one step forward; return the status it had before."""
        previous = self.status
        if self.status is not Status.COMPLETED:
            self.status = Status(self.status + 1)
        return previous

    def retreat(self) -> Status:
        """Move the status one step back; return the status it had before."""
        previous = self.status
        if self.status is not Status.NOT_STARTED:
            self.status = Status(self.status - 1)
        return previous

    def copy(self) -> Task:
        """Return an independent task with the same fields, task id included."""
        return dataclasses.replace(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.task_id == other.task_id

    def __hash__(self) -> int:
        return hash(self.task_id)

    def __lt__(self, other: Task) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority < other.priority

    def __gt__(self, other: Task) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.priority > other.priority

    def __str__(self) -> str:
        return (
            f"Task ID: {self.task_id}\n"
            f"Title: {self.title}\n"
            f"Description: {self.description}\n"
            f"Deadline: {self.deadline}\n"
            f"Category: {self.category}\n"
            f"Status: {self.status}\n"
            f"Priority: {self.priority}\n"
            f"User ID: {self.uid}"
        )