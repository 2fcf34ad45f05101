"""Project router - quick-add and read endpoints for projects and tasks."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from app.database import get_store
from app.models.project import ProjectDraft, QuickAddRequest, TaskDraft
from app.services.project_service import ProjectService


router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=list[ProjectDraft])
async def list_projects(
    month: Optional[int] = Query(None, description="Filter by month number"),
    store=Depends(get_store),
):
    """
    List projects.

    Args:
        month: Optional month filter
        store: Storage collaborator

    Returns:
        List of projects
    """
    service = ProjectService(store)
    return await service.list_projects(month_id=month)


@router.post("/quick-add", response_model=ProjectDraft, status_code=status.HTTP_201_CREATED)
async def quick_add_project(
    payload: Optional[QuickAddRequest] = None,
    store=Depends(get_store),
):
    """
    Create a project from a title, inferring its type from keywords.

    Args:
        payload: Quick-add body with the project title
        store: Storage collaborator

    Returns:
        Created project, or 400 when the title is missing
    """
    if payload is None or not payload.title or not payload.title.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Project title is required"},
        )

    service = ProjectService(store)

    try:
        return await service.quick_add(payload.title)
    except ValueError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )


@router.get("/{project_id}/tasks", response_model=list[TaskDraft])
async def list_project_tasks(
    project_id: str,
    store=Depends(get_store),
):
    """
    List the tasks of a project.

    Args:
        project_id: Project id
        store: Storage collaborator

    Returns:
        List of tasks

    Raises:
        HTTPException: If project not found (404)
    """
    service = ProjectService(store)

    try:
        return await service.list_tasks(project_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
