"""Registry of users with login and logout by name and password."""

from __future__ import annotations

from collections.abc import Iterator

from taskdesk.user import User


class UserNotFoundError(LookupError):
    """Raised when no registered user has the requested name."""


class AuthenticationError(Exception):
    """Raised when a name and password do not identify a registered user."""


class TaskManager:
    """Holds every registered user in the order they registered."""

    def __init__(self) -> None:
        self.users: list[User] = []

    def register_user(self, name: str, password: str) -> User:
        """Create a new user and add it to the registry."""
        user = User(name, password)
        self.users.append(user)
        return user

    def find_user(self, name: str) -> User:
        """Return the first registered user called *name*."""
        for user in self.users:
            if user.name == name:
                return user
        raise UserNotFoundError(f"User not found: {name}")

    def _authenticate(self, name: str, password: str) -> User:
        try:
            user = self.find_user(name)
        except UserNotFoundError as exc:
            raise AuthenticationError("Invalid user or password") from exc
        if not user.check_password(password):
            raise AuthenticationError("Invalid user or password")
        return user

    def login(self, name: str, password: str) -> User:
        """Log the matching user in and return it."""
        user = self._authenticate(name, password)
        user.login()
        return user

    def logout(self, name: str, password: str) -> User:
        """Log the matching user out and return it."""
        user = self._authenticate(name, password)
        user.logout()
        return user

    def all_tasks_report(self) -> str:
        """The tasks of every user, each user's block followed by a blank line."""
        return "".join(f"{user.describe_tasks()}\n" for user in self.users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.users)

    def __len__(self) -> int:
        return len(self.users)