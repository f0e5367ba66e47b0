"""Input validation required before ADD and UPDATE transitions."""

from typing import Annotated

from pydantic import BaseModel, StringConstraints, ValidationError

from core.exceptions import TaskValidationError

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

FIELD_MESSAGES = {
    "name": "Task name is required",
    "description": "Description is required",
}


class TaskDraft(BaseModel):
    """Trimmed, non-empty task text ready for the engine."""

    name: RequiredText
    description: RequiredText


def validate_task_input(name: object, description: object) -> TaskDraft:
    """Validate and trim task text.

    Raises:
        TaskValidationError: listing every field that is missing, blank or
            not a string.
    """
    try:
        return TaskDraft.model_validate({"name": name, "description": description})
    except ValidationError as exc:
        errors = []
        for error in exc.errors():
            field = ".".join(str(x) for x in error["loc"])
            errors.append(
                {
                    "field": field,
                    "message": FIELD_MESSAGES.get(field, error["msg"]),
                    "type": error["type"],
                }
            )
        raise TaskValidationError(errors) from exc
