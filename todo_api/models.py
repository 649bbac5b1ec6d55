from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    due_date: datetime = Field(alias="dueDate")
    is_completed: bool = Field(alias="isCompleted")

    @field_validator("due_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # naive timestamps are treated as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
