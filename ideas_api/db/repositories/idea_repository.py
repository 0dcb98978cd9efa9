from datetime import timezone
from typing import List, Optional, TYPE_CHECKING
import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideas_api.db.models.idea import Idea as IdeaModel

if TYPE_CHECKING:
    from ideas_api.domains.ideas.entities import Idea


class IdeaRepository:
    """Repository for ideas"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, idea: "Idea") -> "Idea":
        """Insert a new idea and return it as stored"""
        db_idea = IdeaModel(
            uuid=idea.uuid,
            title=idea.title,
            description=idea.description,
            summary=idea.summary,
            tags=list(idea.tags),
            owner_id=idea.owner_id,
            created_at=idea.created_at,
            updated_at=idea.updated_at
        )

        self.session.add(db_idea)
        await self.session.commit()
        await self.session.refresh(db_idea)
        return self._to_domain(db_idea)

    async def get_by_id(self, idea_id: uuid.UUID) -> Optional["Idea"]:
        """Idea with this id, or None"""
        result = await self.session.execute(
            select(IdeaModel).where(IdeaModel.uuid == idea_id)
        )
        db_idea = result.scalar_one_or_none()
        return self._to_domain(db_idea) if db_idea else None

    async def list(self, limit: Optional[int] = None) -> List["Idea"]:
        """Ideas ordered newest first, optionally capped"""
        query = select(IdeaModel).order_by(IdeaModel.created_at.desc())

        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return [self._to_domain(db_idea) for db_idea in result.scalars().all()]

    async def update(self, idea: "Idea") -> "Idea":
        """Persist editable fields; the owner column is never written"""
        stmt = (
            update(IdeaModel)
            .where(IdeaModel.uuid == idea.uuid)
            .values(
                title=idea.title,
                description=idea.description,
                summary=idea.summary,
                tags=list(idea.tags),
                updated_at=idea.updated_at
            )
        )

        await self.session.execute(stmt)
        await self.session.commit()

        return await self.get_by_id(idea.uuid)

    async def delete(self, idea_id: uuid.UUID) -> bool:
        """Delete an idea; False when no row matched"""
        stmt = delete(IdeaModel).where(IdeaModel.uuid == idea_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_idea: IdeaModel) -> "Idea":
        from ideas_api.domains.ideas.entities import Idea

        return Idea(
            uuid=db_idea.uuid,
            title=db_idea.title,
            description=db_idea.description,
            summary=db_idea.summary,
            owner_id=db_idea.owner_id,
            tags=db_idea.tags or [],
            created_at=_as_utc(db_idea.created_at),
            updated_at=_as_utc(db_idea.updated_at)
        )


def _as_utc(value):
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
