"""Goal router - read endpoint for goals."""
from fastapi import APIRouter, Depends

from app.database import get_store
from app.models.goal import GoalDraft


router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("", response_model=list[GoalDraft])
async def list_goals(store=Depends(get_store)):
    """List all goals."""
    return await store.list_goals()
