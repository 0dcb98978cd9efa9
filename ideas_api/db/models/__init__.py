from ideas_api.db.models.idea import Idea

__all__ = [
    "Idea"
]
