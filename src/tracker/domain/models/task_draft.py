from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

Title = Annotated[
    str,
    StringConstraints(min_length=3, max_length=255, pattern=r"^[\p{L}\p{N}\s.,!?\-:()]+$"),
]
Description = Annotated[str, StringConstraints(max_length=1000)]
UserId = Annotated[
    str, StringConstraints(min_length=3, max_length=50, pattern=r"^[a-zA-Z0-9_-]+$")
]
AssignedTo = Annotated[str, StringConstraints(max_length=50, pattern=r"^[a-zA-Z0-9_-]*$")]
Tag = Annotated[str, StringConstraints(pattern=r"^[a-z0-9-]{2,20}$")]


class TaskDraft(BaseModel):
    """Write-side view of a task carrying the field constraints.

    Remote reads use the unconstrained ``Task``; only records about to be
    stored are checked against this model.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Title = Field(description="3-255 letters, digits, whitespace or .,!?-:()")
    description: Description | None = Field(default=None, description="At most 1000 characters.")
    user_id: UserId = Field(description="3-50 characters of [a-zA-Z0-9_-].")
    tags: set[Tag] = Field(default_factory=set, max_length=10, description="At most 10 tags.")
    assigned_to: AssignedTo | None = Field(default=None, description="At most 50 of [a-zA-Z0-9_-].")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required.")
        return value
