"""Queue router: per-user draft preference lists."""

from fastapi import APIRouter

from draftroom.api.schemas.draft import QueueResponse, SetQueueRequest, SetQueueResponse
from draftroom.api.services.draft_service import get_engine
from draftroom.draft.errors import DraftError
from .deps import draft_error_to_http

router = APIRouter(prefix="/queue", tags=["queue"])


@router.get("/{user_id}", response_model=QueueResponse)
async def get_queue(user_id: str) -> dict:
    """User's queue, with anything already drafted pruned."""
    return {"user_id": user_id, "queue": get_engine().get_queue(user_id)}


@router.post("/set", response_model=SetQueueResponse)
async def set_queue(request: SetQueueRequest) -> dict:
    """Replace a user's queue; unknown, repeated and drafted ids are dropped."""
    try:
        count = get_engine().set_queue(request.user_id, request.player_ids)
    except DraftError as e:
        raise draft_error_to_http(e)
    return {"ok": True, "user_id": request.user_id, "count": count}
