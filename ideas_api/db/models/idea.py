from sqlalchemy import Column, JSON, String, Text

from ideas_api.db.base import BaseModel


class Idea(BaseModel):
    __tablename__ = "ideas"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    summary = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    # Opaque id of the user who created the idea; never changes
    owner_id = Column(String(255), nullable=False, index=True)
