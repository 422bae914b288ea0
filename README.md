# taskdesk

taskdesk is a small task manager for the terminal that keeps tasks for several users.
Each user registers with a name and a password and then logs in. A logged-in user can
add, edit, delete and display tasks. A task has a title, a description, a deadline, a
category, a priority and a status.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
taskdesk
```

The menu has these options:

```
1. Register
2. Login
3. Logout
4. Add Task
5. Edit Task
6. Delete Task
7. Display Task
8. Display All Tasks
9. Exit
```

Options 4 to 7 work on the user who logged in last. They print
`You are not logged in` if no one is logged in. Option 8 lists the tasks of every
registered user. The menu stops at option 9 or when input runs out.

Input is read one word at a time, so titles, descriptions and other fields are
single words. When you add or edit a task, you are asked for:

- priority: `0` Low, `1` Medium, `2` High, `3` Urgent
- status: `0` Not Started, `1` In Progress, `2` Completed

If a value is out of range or is not a number, you are asked again.

`taskdesk.cli.run(input_stream, output_stream)` runs the same menu on any pair of
text streams.

## Using it as a library

```python
from taskdesk.manager import TaskManager
from taskdesk.task import Task, Priority, Status

manager = TaskManager()
password = "password"
manager.register_user("alice", password)
user = manager.login("alice", password)

task = Task("Report", "Quarterly", "31-12-2025", "Work",
            Priority.HIGH, Status.NOT_STARTED, user.user_id)
user.add_task(task)

task.advance()                 # Not Started -> In Progress
print(user.find_task("Report"))
print(manager.all_tasks_report())
```

- `Task` (in `taskdesk.task`) gets a fresh `task_id` (`TID0`, `TID1`, ...) when it is
  created. `advance()` and `retreat()` move the status one step and return the
  previous status. `update_from(other)` copies the editable fields. `copy()` returns
  an independent task that has the same id. Tasks are ordered by priority with `<`
  and `>`, and are equal when their task ids match.
- `parse_priority(text)` and `parse_status(text)` turn a number string into a
  `Priority` or a `Status`. They raise `ValueError` if the text is not a number or
  the number is out of range.
- `User` (in `taskdesk.user`) has an id such as `ID0`. `find_task`,
  `find_task_by_id`, `edit_task` and `delete_task` raise `TaskNotFoundError` when no
  task matches. A user is truthy while logged in. `copy()` duplicates the user,
  including its tasks.
- `TaskManager` (in `taskdesk.manager`) registers users. `find_user` raises
  `UserNotFoundError`. `login` and `logout` raise `AuthenticationError` when the name
  or the password is wrong.

## Limitations

All data is kept in memory. Users and tasks are not saved anywhere and are lost when
the program exits.

## Running the tests

```
pip install .[test]
pytest
```