"""Project service - quick-add and project reads."""
import logging
from typing import Optional

from app.config import settings
from app.models.project import ProjectDraft, TaskDraft
from app.services.store import MongoStore


logger = logging.getLogger(__name__)

QUICK_ADD_DESCRIPTION = "Added via quick-add."

# First match wins
TYPE_KEYWORDS = [
    (("classif",), "classification"),
    (("regress", "predict"), "regression"),
    (("vision", "image", "cnn"), "computer_vision"),
    (("nlp", "text", "bert"), "nlp"),
    (("recommend",), "recommender"),
    (("portfolio", "deploy"), "portfolio"),
    (("integra",), "integration"),
]


def infer_project_type(title: str) -> str:
    """
    Infer a project type from keywords in its title.

    Examples:
        >>> infer_project_type("Image Classifier")
        'classification'
        >>> infer_project_type("House price prediction")
        'regression'
        >>> infer_project_type("Misc")
        'uncategorized'
    """
    title_lower = title.lower()
    for keywords, project_type in TYPE_KEYWORDS:
        if any(keyword in title_lower for keyword in keywords):
            return project_type
    return "uncategorized"


class ProjectService:
    """Service for handling project operations."""

    def __init__(self, store: MongoStore):
        """Initialize service with a storage collaborator."""
        self.store = store

    async def quick_add(self, title: str) -> ProjectDraft:
        """
        Create a project from a title alone, with inferred defaults.

        Args:
            title: Project title

        Returns:
            Created project

        Raises:
            ValueError: If title is empty
        """
        title = title.strip()
        if not title:
            raise ValueError("Project title is required")

        project = ProjectDraft(
            title=title,
            description=QUICK_ADD_DESCRIPTION,
            type=infer_project_type(title),
            month_id=settings.quick_add_default_month,
        )
        await self.store.insert_project(project)
        logger.info("Quick-added project %s (%s)", project.id, project.type)
        return project

    async def list_projects(self, month_id: Optional[int] = None) -> list[ProjectDraft]:
        """List projects, optionally filtered by month."""
        return await self.store.list_projects(month_id=month_id)

    async def list_tasks(self, project_id: str) -> list[TaskDraft]:
        """
        List tasks for a project.

        Raises:
            ValueError: If project not found
        """
        await self.store.get_project(project_id)
        return await self.store.list_tasks(project_id)
