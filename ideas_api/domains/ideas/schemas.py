from datetime import datetime
from typing import Any, Dict, List, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def normalize_tags(value: Any) -> List[str]:
    """Normalize a comma-separated string or a list into a list of tags"""
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [item for item in value if isinstance(item, str)]
    else:
        return []

    return [item.strip() for item in items if item.strip()]


def form_to_body(form) -> Dict[str, Any]:
    """Flatten form fields; repeated keys and `name[]` keys become lists"""
    body: Dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        if key.endswith("[]"):
            body[key[:-2]] = values
        else:
            body[key] = values if len(values) > 1 else values[0]
    return body


class IdeaPayload(BaseModel):
    """Body of create and update requests"""
    title: Optional[str] = None
    description: Optional[str] = None
    summary: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator('title', 'description', 'summary', mode='before')
    @classmethod
    def validate_text(cls, v):
        # Non-string values count as missing
        if not isinstance(v, str):
            return None
        return v.strip()

    @field_validator('tags', mode='before')
    @classmethod
    def validate_tags(cls, v):
        return normalize_tags(v)

    @classmethod
    def from_body(cls, body: Any) -> "IdeaPayload":
        """Build a payload from a raw JSON body; anything but an object is empty"""
        if not isinstance(body, dict):
            body = {}
        return cls.model_validate(body)

    def has_required_fields(self) -> bool:
        return bool(self.title and self.description and self.summary)


class IdeaResponse(BaseModel):
    """Idea as returned by the API"""
    id: uuid.UUID
    title: str
    description: str
    summary: str
    tags: List[str]
    owner: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_entity(cls, idea) -> "IdeaResponse":
        return cls(
            id=idea.uuid,
            title=idea.title,
            description=idea.description,
            summary=idea.summary,
            tags=idea.tags,
            owner=idea.owner_id,
            created_at=idea.created_at,
            updated_at=idea.updated_at
        )


class MessageResponse(BaseModel):
    message: str
