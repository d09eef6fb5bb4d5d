from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.tracker.domain.models.category import Category
from src.tracker.domain.models.priority import Priority


class Task(BaseModel):
    # Remote task services may hand out numeric ids.
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: str | None = Field(default=None, description="Store-assigned task identifier.")
    title: str | None = Field(default=None, description="Short summary of the task.")
    description: str | None = Field(default=None, description="Optional long description.")
    priority: Priority = Field(default=Priority.MEDIUM, description="Urgency level.")
    category: Category = Field(default=Category.OTHER, description="Organizational category.")
    due_date: date | None = Field(default=None, description="Calendar due date, no time component.")
    tags: set[str] = Field(default_factory=set, description="Free-form lowercase labels.")
    assigned_to: str | None = Field(default=None, description="Person the task is assigned to.")
    user_id: str | None = Field(default=None, description="Owning user identifier.")
    completed: bool = Field(default=False, description="Whether the task is done.")
    created_at: datetime | None = Field(default=None, description="Set by the store on creation.")
    updated_at: datetime | None = Field(default=None, description="Set by the store on mutation.")

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_default(cls, value: object) -> object:
        return set() if value is None else value


class TaskUpdate(BaseModel):
    """Sparse set of changes applied onto a stored task.

    ``None`` means "not specified". ``completed`` has no such state and is
    always applied.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    priority: Priority | None = None
    category: Category | None = None
    due_date: date | None = None
    tags: set[str] | None = None
    assigned_to: str | None = None
    completed: bool = False
