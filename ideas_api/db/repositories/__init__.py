from ideas_api.db.repositories.idea_repository import IdeaRepository

__all__ = [
    "IdeaRepository"
]
