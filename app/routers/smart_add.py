"""Smart-Add router - free-text ingestion of projects, tasks and goals."""
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.database import get_store
from app.exceptions import CommitError, PersistenceError
from app.models.smart_add import SmartAddPreview, SmartAddRequest, SmartAddResponse
from app.parsers.smart_add import parse
from app.services.smart_add_service import SmartAddService


router = APIRouter(prefix="/api/smart-add", tags=["smart-add"])

TEXT_REQUIRED = "Text input is required"
NOTHING_TO_ADD = "No valid items found to add."


def _text_required() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": TEXT_REQUIRED},
    )


@router.post(
    "",
    response_model=SmartAddResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"description": "No recognized items"},
        400: {"description": "Missing text"},
        500: {"description": "Batch rolled back"},
    },
)
async def smart_add(
    payload: Optional[SmartAddRequest] = None,
    store=Depends(get_store),
):
    """
    Parse pasted text and add every recognized project, task and goal.

    - All items are written in one transaction; any failure adds nothing
    - Returns 200 with a message when no Project:/Goal: block is found
    """
    if payload is None or not payload.text:
        return _text_required()

    service = SmartAddService(store)

    try:
        created = await service.add_from_text(payload.text)
    except CommitError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to commit transaction.", "details": str(e)},
        )
    except PersistenceError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to add items to database.", "details": str(e)},
        )

    if not (created.projects or created.goals):
        return JSONResponse(status_code=status.HTTP_200_OK, content={"message": NOTHING_TO_ADD})

    return SmartAddResponse(message=created.summary, created_items=created)


@router.post("/preview", response_model=SmartAddPreview)
async def preview_smart_add(payload: Optional[SmartAddRequest] = None):
    """
    Parse pasted text without saving anything.

    Returns the drafts that would be created plus the lines that were skipped.
    """
    if payload is None or not payload.text:
        return _text_required()

    result = parse(payload.text)
    return SmartAddPreview(
        projects=result.projects,
        goals=result.goals,
        warnings=result.warnings,
    )
