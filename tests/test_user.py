import pytest

from taskdesk.task import Priority, Status, Task
from taskdesk.user import TaskNotFoundError, User

password = "password"


def test_constructor():
    user = User("Davit", password)
    assert user.name == "Davit"
    assert user.check_password(password)


def test_wrong_password_rejected():
    secret = "secret"
    user = User("Davit", password)
    assert not user.check_password(secret)


def test_user_ids_are_sequential():
    first = User("a", password)
    second = User("b", password)
    assert first.user_id.startswith("ID")
    assert int(second.user_id[2:]) == int(first.user_id[2:]) + 1
    assert first != second


def test_add_and_find():
    user = User("Davit", password)
    task = Task("Title", "Desc", "31-06-2025", "Work", Priority.HIGH,
                Status.NOT_STARTED, user.user_id)
    user.add_task(task)
    found = user.find_task("Title")
    assert found.title == "Title"
    assert found is task


def test_find_by_id():
    user = User("Davit", password)
    task = Task("Title", uid=user.user_id)
    user.add_task(task)
    assert user.find_task_by_id(task.task_id) is task
    with pytest.raises(TaskNotFoundError):
        user.find_task_by_id("TID-none")


def test_edit_and_delete():
    user = User("Username", password)
    user.add_task(Task("abc", "def", "ghi", "jkl", Priority.LOW,
                       Status.NOT_STARTED, user.user_id))
    updated = Task("A", "Upd", "11-11-2111", "Upd", Priority.URGENT,
                   Status.IN_PROGRESS, user.user_id)
    user.edit_task("abc", updated)
    found = user.find_task("A")
    assert found.description == "Upd"
    user.delete_task("A")
    with pytest.raises(TaskNotFoundError):
        user.find_task("A")


def test_delete_missing_raises():
    user = User("u", password)
    with pytest.raises(TaskNotFoundError):
        user.delete_task("nothing")


def test_edit_missing_raises():
    user = User("u", password)
    with pytest.raises(TaskNotFoundError):
        user.edit_task("nothing", Task())


def test_delete_removes_only_first_match():
    user = User("u", password)
    first = Task("same")
    second = Task("same")
    user.add_task(first)
    user.add_task(second)
    user.delete_task("same")
    assert user.tasks == [second]


def test_copy_is_deep():
    user1 = User("Davit", password)
    user1.add_task(Task("A", "Test", "31-12-2999", "Test", Priority.HIGH,
                        Status.IN_PROGRESS, user1.user_id))
    user2 = user1.copy()
    assert user2.find_task("A").title == "A"
    user1.find_task("A").title = "newA"
    assert user2.find_task("A").title == "A"
    assert user2 == user1


def test_login_logout_truthiness():
    user = User("u", password)
    assert not user
    user.login()
    assert user
    user.logout()
    assert not user


def test_str():
    user = User("Davit", password, user_id="ID42")
    assert str(user) == "Username: Davit\nUser ID: ID42\nIs logged: 0"
    user.login()
    assert str(user).endswith("Is logged: 1")


def test_describe_tasks():
    user = User("u", password, user_id="ID5")
    user.add_task(Task("T1", task_id="TID100", uid="ID5"))
    user.add_task(Task("T2", task_id="TID101", uid="ID5"))
    report = user.describe_tasks()
    assert report.count("Task ID: ") == 2
    assert report.startswith("Task ID: TID100\nTitle: T1\n")
    assert report.endswith("User ID: ID5\n")


def test_describe_tasks_empty():
    assert User("u", password).describe_tasks() == ""


def test_iteration_preserves_order():
    user = User("u", password)
    tasks = [Task("a"), Task("b"), Task("c")]
    for task in tasks:
        user.add_task(task)
    assert [task.title for task in user] == ["a", "b", "c"]