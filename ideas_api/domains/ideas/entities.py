import uuid
from datetime import datetime, timezone
from typing import List, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Idea:
    """Idea entity owned by a single user"""

    def __init__(
        self,
        uuid: uuid.UUID,
        title: str,
        description: str,
        summary: str,
        owner_id: str,
        tags: Optional[List[str]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.title = title
        self.description = description
        self.summary = summary
        self.tags = list(tags or [])
        self._owner_id = owner_id
        self.created_at = created_at or _utcnow()
        self.updated_at = updated_at or _utcnow()

    @property
    def owner_id(self) -> str:
        return self._owner_id

    def is_owned_by(self, user_id: str) -> bool:
        """Check whether the user created this idea"""
        return self._owner_id == user_id

    def update_content(
        self,
        title: str,
        description: str,
        summary: str,
        tags: List[str]
    ) -> None:
        """Overwrite the editable fields"""
        self.title = title
        self.description = description
        self.summary = summary
        self.tags = list(tags)
        self.updated_at = _utcnow()

    @classmethod
    def create_idea(
        cls,
        title: str,
        description: str,
        summary: str,
        owner_id: str,
        tags: Optional[List[str]] = None
    ) -> "Idea":
        return cls(
            uuid=uuid.uuid4(),
            title=title,
            description=description,
            summary=summary,
            owner_id=owner_id,
            tags=tags
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Idea):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Idea(uuid={self.uuid}, title={self.title}, owner_id={self.owner_id})"
