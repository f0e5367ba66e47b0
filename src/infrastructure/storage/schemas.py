"""Pydantic schemas for the persisted task format."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter

from domain.entities.task import Task


class TaskRecord(BaseModel):
    """One stored task, in the ``todo.tasks.v1`` wire format."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Buy milk",
                "description": "2%, 1 gallon",
                "completed": False,
                "createdAt": 1760000000000,
                "updatedAt": 1760000000000,
            }
        },
    )

    id: StrictStr
    name: StrictStr
    description: StrictStr
    completed: StrictBool = False
    created_at: StrictInt = Field(..., alias="createdAt")
    updated_at: StrictInt = Field(..., alias="updatedAt")

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            name=task.name,
            description=task.description,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            name=self.name,
            description=self.description,
            completed=self.completed,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


TaskRecordList = TypeAdapter(list[TaskRecord])
