"""Baby checklist endpoints.

GET    /api/checklist               - Items with progress (seeded on first call)
POST   /api/checklist               - Add a custom item
POST   /api/checklist/{id}/toggle   - Flip completion
DELETE /api/checklist/{id}          - Remove a custom item
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.checklist import ChecklistItemCreate, ChecklistItemResponse, ChecklistResponse
from app.services.checklist_service import ChecklistService

router = APIRouter()


@router.get("", response_model=ChecklistResponse)
async def get_checklist(user: UserSession = Depends(require_auth)) -> ChecklistResponse:
    async with get_session_factory()() as session:
        return await ChecklistService().get_checklist(session, user.user_id)


@router.post("", response_model=ChecklistItemResponse, status_code=201)
async def add_item(
    body: ChecklistItemCreate,
    user: UserSession = Depends(require_auth),
) -> ChecklistItemResponse:
    async with get_session_factory()() as session:
        item = await ChecklistService().add_custom_item(session, user.user_id, body)
        return ChecklistItemResponse.model_validate(item)


@router.post("/{item_id}/toggle", response_model=ChecklistItemResponse)
async def toggle_item(item_id: UUID, user: UserSession = Depends(require_auth)) -> ChecklistItemResponse:
    """Flip completion.

    Raises:
        HTTPException(404): Item not found or not owned by user
        HTTPException(503): Save failed; ``detail.item`` is the restored item
    """
    async with get_session_factory()() as session:
        result = await ChecklistService().toggle_item(session, user.user_id, item_id)

    if not result.success:
        raise HTTPException(
            status_code=503,
            detail={
                "message": "Could not save the change; it has been reverted",
                "item": jsonable_encoder(result.state),
            },
        )
    return ChecklistItemResponse(**result.state)


@router.delete("/{item_id}", status_code=204)
async def remove_item(item_id: UUID, user: UserSession = Depends(require_auth)) -> None:
    async with get_session_factory()() as session:
        await ChecklistService().remove_item(session, user.user_id, item_id)
