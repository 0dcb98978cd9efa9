from ideas_api.domains.ideas.entities import Idea
from ideas_api.domains.ideas.schemas import (
    IdeaPayload, IdeaResponse, MessageResponse, normalize_tags
)
from ideas_api.domains.ideas.services import IdeaService, parse_idea_id, parse_limit

__all__ = [
    "Idea",
    "IdeaPayload", "IdeaResponse", "MessageResponse", "normalize_tags",
    "IdeaService", "parse_idea_id", "parse_limit"
]
