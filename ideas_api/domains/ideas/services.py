import logging
import re
from typing import List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ideas_api.core.errors import AuthorizationError, NotFoundError, ValidationError
from ideas_api.db.repositories.idea_repository import IdeaRepository
from ideas_api.domains.ideas.entities import Idea
from ideas_api.domains.ideas.schemas import IdeaPayload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title, description, and summary are required."
INVALID_ID_MESSAGE = "Invalid idea ID"
NOT_FOUND_MESSAGE = "Idea not found"

# Largest LIMIT every supported driver accepts (signed 64-bit)
MAX_LIST_LIMIT = 2 ** 63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_idea_id(raw_id: str) -> uuid.UUID:
    """Parse an idea id, rejecting malformed values before any store access"""
    try:
        return uuid.UUID(raw_id)
    except (TypeError, ValueError):
        raise ValidationError(INVALID_ID_MESSAGE)


def parse_limit(raw_limit: Optional[str]) -> Optional[int]:
    """Positive integer cap, or None when absent or unusable"""
    if raw_limit is None:
        return None

    # Leading integer prefix: "2.5" -> 2, "5abc" -> 5, "1_0" -> 1
    match = _LEADING_INT.match(raw_limit)
    if not match:
        return None

    digits = match.group(1)
    if len(digits.lstrip("+-").lstrip("0")) > len(str(MAX_LIST_LIMIT)):
        # Too long for int(); only the sign matters
        return None if digits.startswith("-") else MAX_LIST_LIMIT

    limit = int(digits)
    if limit <= 0:
        return None
    return min(limit, MAX_LIST_LIMIT)


class IdeaService:
    """Idea use cases with ownership checks"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.idea_repository = IdeaRepository(session)

    async def list_ideas(self, limit: Optional[int] = None) -> List[Idea]:
        return await self.idea_repository.list(limit)

    async def get_idea(self, idea_id: uuid.UUID) -> Optional[Idea]:
        return await self.idea_repository.get_by_id(idea_id)

    async def create_idea(self, payload: IdeaPayload, owner_id: str) -> Idea:
        if not payload.has_required_fields():
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        idea = Idea.create_idea(
            title=payload.title,
            description=payload.description,
            summary=payload.summary,
            owner_id=owner_id,
            tags=payload.tags
        )
        created = await self.idea_repository.create(idea)
        logger.info(f"Idea {created.uuid} created by user {owner_id}")
        return created

    async def update_idea(self, idea_id: uuid.UUID, payload: IdeaPayload, user_id: str) -> Idea:
        idea = await self.idea_repository.get_by_id(idea_id)

        if not idea:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        if not payload.has_required_fields():
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        if not idea.is_owned_by(user_id):
            logger.warning(f"User {user_id} tried to update idea {idea_id} owned by {idea.owner_id}")
            raise AuthorizationError("Not authorized to update this idea")

        idea.update_content(
            title=payload.title,
            description=payload.description,
            summary=payload.summary,
            tags=payload.tags
        )
        updated = await self.idea_repository.update(idea)
        logger.info(f"Idea {idea_id} updated by user {user_id}")
        return updated

    async def delete_idea(self, idea_id: uuid.UUID, user_id: str) -> None:
        """Delete an idea; ownership is checked before anything is removed"""
        idea = await self.idea_repository.get_by_id(idea_id)

        if not idea:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        if not idea.is_owned_by(user_id):
            logger.warning(f"User {user_id} tried to delete idea {idea_id} owned by {idea.owner_id}")
            raise AuthorizationError("Not authorized to delete this idea")

        if not await self.idea_repository.delete(idea_id):
            # Removed by a concurrent request between load and delete
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info(f"Idea {idea_id} deleted by user {user_id}")
