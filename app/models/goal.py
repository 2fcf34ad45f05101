"""Goal model definitions."""
from typing import Optional

from pydantic import BaseModel, Field

from app.models.project import new_id


class GoalDraft(BaseModel):
    """Goal parsed from a Smart-Add block."""

    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    type: str = "learning"
    target_value: float = 1
    current_value: float = 0
    target_date: Optional[str] = None  # raw string, not validated
    status: str = "active"
