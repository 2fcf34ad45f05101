"""Project and task model definitions."""
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


def new_id() -> str:
    """Generate a fresh draft identity."""
    return str(uuid4())


class TaskDraft(BaseModel):
    """Task parsed from a Smart-Add block, owned by a project."""

    id: str = Field(default_factory=new_id)
    project_id: Optional[str] = None
    title: str
    description: str = ""
    status: str = "todo"
    priority: str = "medium"
    due_date: Optional[str] = None  # raw string, not validated


class ProjectDraft(BaseModel):
    """Project parsed from a Smart-Add block or created via quick-add."""

    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    month_id: Optional[int] = None
    type: str = "uncategorized"
    tech_stack: str = ""
    status: str = "not_started"
    github_url: str = ""
    deployment_url: str = ""
    documentation_status: str = "not_started"
    progress_percentage: int = 0
    tasks: list[TaskDraft] = Field(default_factory=list)

    def add_task(self, task: TaskDraft) -> TaskDraft:
        """Attach a task to this project, taking ownership of it."""
        task.project_id = self.id
        self.tasks.append(task)
        return task


class QuickAddRequest(BaseModel):
    """Quick-add request body."""

    title: Optional[str] = None
