"""Task store - the ordered to-do list kept next to the timer.

Invalid input (blank text, unknown ids) never raises: the operation simply
leaves the list as it was.
"""

from __future__ import annotations

from pomotask_cli.models.task import Task, new_task_id


class TaskStore:
    """Ordered, insertion-preserving list of tasks.

    Every mutating method returns the resulting list as a fresh list object.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])
        self._editing_id: str | None = None

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def editing_id(self) -> str | None:
        """ID of the task currently being edited, if any (never persisted)."""
        return self._editing_id

    def get(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, text: str) -> list[Task]:
        """Append a new task. Blank text is rejected."""
        if not text or not text.strip():
            return self.tasks
        self._tasks.append(Task(id=new_task_id(), text=text.strip(), completed=False))
        return self.tasks

    def toggle(self, task_id: str) -> list[Task]:
        """Flip the completed flag of a task."""
        self._tasks = [
            task.model_copy(update={"completed": not task.completed})
            if task.id == task_id
            else task
            for task in self._tasks
        ]
        return self.tasks

    def edit(self, task_id: str, new_text: str) -> list[Task]:
        """Replace a task's text, keeping its id and completed flag."""
        if not new_text or not new_text.strip():
            return self.tasks
        self._tasks = [
            task.model_copy(update={"text": new_text.strip()})
            if task.id == task_id
            else task
            for task in self._tasks
        ]
        return self.tasks

    def delete(self, task_id: str) -> list[Task]:
        """Remove a task."""
        self._tasks = [task for task in self._tasks if task.id != task_id]
        if self._editing_id == task_id:
            self._editing_id = None
        return self.tasks

    def start_editing(self, task_id: str) -> Task | None:
        """Make *task_id* the single edit target, replacing any previous one."""
        task = self.get(task_id)
        if task is not None:
            self._editing_id = task_id
        return task

    def cancel_editing(self) -> None:
        self._editing_id = None

    def submit(self, text: str) -> list[Task]:
        """Submit the input field: edit the target if one is set, else add."""
        if not text or not text.strip():
            return self.tasks
        if self._editing_id is None:
            return self.add(text)

        tasks = self.edit(self._editing_id, text)
        self._editing_id = None
        return tasks

    def resolve_id(self, id_or_suffix: str) -> str:
        """
        Resolve a task ID or suffix to a full task ID.

        Raises:
            ValueError: If no task matches or the suffix is ambiguous
        """
        if self.get(id_or_suffix) is not None:
            return id_or_suffix

        matches = [task.id for task in self._tasks if task.id.endswith(id_or_suffix)]
        if not id_or_suffix or not matches:
            raise ValueError(f"No task found matching '{id_or_suffix}'")
        if len(matches) > 1:
            raise ValueError(
                f"Multiple tasks match '{id_or_suffix}': {', '.join(matches)}"
            )
        return matches[0]
