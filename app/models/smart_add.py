"""Smart-Add request, parse result and response models."""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from app.models.goal import GoalDraft
from app.models.project import ProjectDraft, TaskDraft


class WarningKind(str, Enum):
    """Kinds of input the parser skipped or defaulted."""

    UNRECOGNIZED_BLOCK = "unrecognized_block"
    MISSING_COLON = "missing_colon"
    UNKNOWN_FIELD = "unknown_field"
    INVALID_NUMBER = "invalid_number"


class ParseWarning(BaseModel):
    """A lenient-parsing anomaly. Never fails the request."""

    kind: WarningKind
    text: str


class ParseResult(BaseModel):
    """Output of the pure Smart-Add parser."""

    items: list[Union[ProjectDraft, GoalDraft]] = Field(default_factory=list)  # input order
    warnings: list[ParseWarning] = Field(default_factory=list)

    @property
    def projects(self) -> list[ProjectDraft]:
        return [item for item in self.items if isinstance(item, ProjectDraft)]

    @property
    def goals(self) -> list[GoalDraft]:
        return [item for item in self.items if isinstance(item, GoalDraft)]

    @property
    def tasks(self) -> list[TaskDraft]:
        """All tasks, in project order."""
        return [task for project in self.projects for task in project.tasks]

    @property
    def is_empty(self) -> bool:
        return not self.projects and not self.goals


class SmartAddRequest(BaseModel):
    """Smart-Add request body."""

    text: Optional[str] = None


class CreatedItems(BaseModel):
    """Items persisted by a Smart-Add batch."""

    projects: list[ProjectDraft] = Field(default_factory=list)
    goals: list[GoalDraft] = Field(default_factory=list)
    tasks: list[TaskDraft] = Field(default_factory=list)

    @property
    def summary(self) -> str:
        """Human-readable count summary."""
        return (
            f"{len(self.projects)} projects, {len(self.goals)} goals, "
            f"and {len(self.tasks)} tasks added."
        )


class SmartAddResponse(BaseModel):
    """Smart-Add success response."""

    message: str
    created_items: CreatedItems = Field(alias="createdItems")

    model_config = {"populate_by_name": True}


class SmartAddPreview(BaseModel):
    """Smart-Add preview response - parsed drafts without persistence."""

    projects: list[ProjectDraft]
    goals: list[GoalDraft]
    warnings: list[ParseWarning]
