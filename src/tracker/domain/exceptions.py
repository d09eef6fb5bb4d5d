class TaskNotFoundError(Exception):
    """Raised when a task identifier does not exist in the task store."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id '{task_id}' was not found.")
        self.task_id = task_id


class TaskValidationError(Exception):
    """Raised when a task violates one or more field constraints."""

    def __init__(self, errors: dict[str, str]) -> None:
        fields = ", ".join(sorted(errors))
        super().__init__(f"Task failed validation on: {fields}.")
        self.errors = dict(errors)


class SourceUnavailableError(Exception):
    """Raised inside the remote task source when a read cannot be completed."""
