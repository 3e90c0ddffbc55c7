"""Knowledge base search."""

from fastapi import APIRouter, Depends, Query

from app.core.auth import UserSession, require_auth
from app.db.base import get_session_factory
from app.schemas.knowledge import KnowledgeResponse
from app.services.knowledge_service import KnowledgeService

router = APIRouter()


@router.get("", response_model=KnowledgeResponse)
async def search_knowledge(
    category: str | None = Query(None, description="Exact category; omit for all"),
    q: str | None = Query(None, description="Case-insensitive text in question or answer"),
    user: UserSession = Depends(require_auth),
) -> KnowledgeResponse:
    async with get_session_factory()() as session:
        return await KnowledgeService().search(session, category=category, query=q)
