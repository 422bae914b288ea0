"""Users and the tasks they own."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field

from taskdesk.task import Task

_user_ids = itertools.count()


def _next_user_id() -> str:
    return f"ID{next(_user_ids)}"


class TaskNotFoundError(LookupError):
    """Raised when a user has no task matching a title or id."""


@dataclass(eq=False)
class User:
    """An account holding a list of tasks; truthy while logged in."""

    name: str
    password: str = field(repr=False)
    user_id: str = field(default_factory=_next_user_id)
    tasks: list[Task] = field(default_factory=list)
    logged_in: bool = False

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def delete_task(self, title: str) -> None:
        """Remove the first task with *title*."""
        self.tasks.remove(self.find_task(title))

    def edit_task(self, title: str, updated: Task) -> None:
        """Overwrite the first task with *title* using the fields of *updated*."""
        self.find_task(title).update_from(updated)

    def find_task(self, title: str) -> Task:
        for task in self.tasks:
            if task.title == title:
                return task
        raise TaskNotFoundError(f"Task not found: {title}")

    def find_task_by_id(self, task_id: str) -> Task:
        for task in self.tasks:
            if task.task_id == task_id:
                return task
        raise TaskNotFoundError(f"Task not found: {task_id}")

    def check_password(self, password: str) -> bool:
        return password == self.password

    def login(self) -> None:
        self.logged_in = True

    def logout(self) -> None:
        self.logged_in = False

    def describe_tasks(self) -> str:
        """Every task's description, each followed by a newline."""
        return "".join(f"{task}\n" for task in self.tasks)

    def copy(self) -> User:
        """Return a user with the same id and independent copies of the tasks."""
        return User(
            self.name,
            self.password,
            user_id=self.user_id,
            tasks=[task.copy() for task in self.tasks],
            logged_in=self.logged_in,
        )

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __bool__(self) -> bool:
        return self.logged_in

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)

    def __str__(self) -> str:
        return (
            f"Username: {self.name}\n"
            f"User ID: {self.user_id}\n"
            f"Is logged: {int(self.logged_in)}"
        )