"""KnowledgeService: published FAQs with category and text filters."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.faq import Faq
from app.domain.knowledge import filter_faqs, unique_categories
from app.schemas.knowledge import FaqResponse, KnowledgeResponse


class KnowledgeService:
    async def search(
        self,
        session: AsyncSession,
        category: str | None = None,
        query: str | None = None,
    ) -> KnowledgeResponse:
        result = await session.execute(
            select(Faq)
            .where(Faq.is_published.is_(True))
            .order_by(Faq.order_index.asc(), Faq.created_at.asc())
        )
        faqs = list(result.scalars().all())
        matches = filter_faqs(faqs, category=category, query=query)

        return KnowledgeResponse(
            faqs=[FaqResponse.model_validate(f) for f in matches],
            categories=unique_categories(faqs),
            total=len(faqs),
        )
