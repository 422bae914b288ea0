"""Interactive menu for registering users and managing their tasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from taskdesk.manager import AuthenticationError, TaskManager, UserNotFoundError
from taskdesk.task import Task, parse_priority, parse_status
from taskdesk.user import TaskNotFoundError, User

MENU = (
    "1. Register\n"
    "2. Login\n"
    "3. Logout\n"
    "4. Add Task\n"
    "5. Edit Task\n"
    "6. Delete Task\n"
    "7. Display Task\n"
    "8. Display All Tasks\n"
    "9. Exit\n"
    "Choose an option: "
)

_NOT_LOGGED_IN = "You are not logged in\n"
_TASK_NOT_FOUND = "Task not found\n"
_SIGN_IN_PROMPTS = ("Enter the username: ", "Enter the password: ")


class _EndOfInput(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Session:
    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self._tokens = _tokens(input_stream)
        self._out = output_stream
        self.manager = TaskManager()
        self.user: User | None = None

    def write(self, text: str) -> None:
        self._out.write(text)

    def read(self, prompt: str = "") -> str:
        self.write(prompt)
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def _read_credentials(self) -> tuple[str, str]:
        name, secret = (self.read(prompt) for prompt in _SIGN_IN_PROMPTS)
        return name, secret

    def _read_checked(self, prompt, parser):
        text = self.read(prompt)
        while True:
            try:
                return parser(text)
            except ValueError:
                text = self.read("You entered wrong value, try again: ")

    def _read_task(self) -> Task:
        title = self.read("Enter the task title: ")
        description = self.read("Enter the task description: ")
        deadline = self.read("Enter the task deadline: ")
        category = self.read("Enter the task category: ")
        priority = self._read_checked(
            "Enter priority (0 - Low, 1 - Medium, 2 - High, 3 - Urgent): ",
            parse_priority,
        )
        status = self._read_checked(
            "Enter status (0 - Not Started, 1 - In Progress, 2 - Completed): ",
            parse_status,
        )
        return Task(title, description, deadline, category, priority, status)

    def _report_missing_user(self, name: str) -> None:
        try:
            self.manager.find_user(name)
        except UserNotFoundError:
            self.write("User not found\n")

    def register(self) -> None:
        name, password = self._read_credentials()
        self.manager.register_user(name, password)

    def login(self) -> None:
        name, password = self._read_credentials()
        try:
            self.user = self.manager.login(name, password)
        except AuthenticationError:
            self._report_missing_user(name)
            self.write("Invalid user or password\n")
            self.user = None
        else:
            self.write("User logged in successfully\n")

    def logout(self) -> None:
        name, password = self._read_credentials()
        try:
            self.manager.logout(name, password)
        except AuthenticationError:
            self._report_missing_user(name)
            self.write("Invalid username or password.\n")
        else:
            self.write("You logged out successfully\n")
        self.user = None

    def add_task(self, user: User) -> None:
        task = self._read_task()
        task.uid = user.user_id
        user.add_task(task)

    def edit_task(self, user: User) -> None:
        title = self.read("Enter the title of the task: ")
        updated = self._read_task()
        try:
            user.edit_task(title, updated)
        except TaskNotFoundError:
            self.write(_TASK_NOT_FOUND)

    def delete_task(self, user: User) -> None:
        title = self.read("Enter the title of the task: ")
        try:
            user.delete_task(title)
        except TaskNotFoundError:
            self.write(_TASK_NOT_FOUND)

    def display_task(self, user: User) -> None:
        title = self.read("Enter the title of the task: ")
        try:
            task = user.find_task(title)
        except TaskNotFoundError:
            self.write(_TASK_NOT_FOUND)
        else:
            self.write(f"{task}\n")

    def display_all(self) -> None:
        self.write(self.manager.all_tasks_report())

    def loop(self) -> int:
        self.write("Welcome to the Task Management System!\n")
        user_actions = {
            "4": self.add_task,
            "5": self.edit_task,
            "6": self.delete_task,
            "7": self.display_task,
        }
        plain_actions = {
            "1": self.register,
            "2": self.login,
            "3": self.logout,
            "8": self.display_all,
        }
        while True:
            choice = self.read(MENU)
            if choice == "9":
                self.write("Task Managment System closed\n")
                return 0
            if choice in plain_actions:
                plain_actions[choice]()
            elif choice in user_actions:
                if self.user is None:
                    self.write(_NOT_LOGGED_IN)
                else:
                    user_actions[choice](self.user)
            else:
                self.write("Invalid option\n")


def run(input_stream: TextIO, output_stream: TextIO) -> int:
    """Run the menu on the given streams until the user exits or input ends."""
    session = _Session(input_stream, output_stream)
    try:
        return session.loop()
    except _EndOfInput:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive task manager on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="taskdesk", description="Interactive multi-user task manager."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())