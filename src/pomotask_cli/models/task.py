"""Task data models."""

import uuid

from pydantic import BaseModel, Field, field_validator


def new_task_id() -> str:
    """Generate a fresh, never-reused task identifier."""
    return uuid.uuid4().hex


class Task(BaseModel):
    """A to-do item that lives next to the timer."""

    id: str = Field(min_length=1)
    text: str
    completed: bool = False

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Task text cannot be empty")
        return value
