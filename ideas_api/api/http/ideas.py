from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideas_api.core.auth import get_current_user
from ideas_api.core.db import get_db
from ideas_api.core.errors import NotFoundError, server_errors
from ideas_api.domains.ideas.schemas import (
    IdeaPayload, IdeaResponse, MessageResponse, form_to_body
)
from ideas_api.domains.ideas.services import (
    NOT_FOUND_MESSAGE, IdeaService, parse_idea_id, parse_limit
)
from ideas_api.domains.identity.schemas import UserClaim

router = APIRouter(prefix="/api/ideas", tags=["ideas"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_idea_payload(request: Request, body: Any = Body(None)) -> IdeaPayload:
    """Read a create/update body sent as JSON or as an HTML form"""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        body = form_to_body(await request.form())
    return IdeaPayload.from_body(body)


@router.get("", response_model=List[IdeaResponse])
async def list_ideas(
    limit: Optional[str] = Query(None, alias="_limit"),
    db: AsyncSession = Depends(get_db)
):
    """List ideas, newest first"""
    with server_errors("list ideas"):
        ideas = await IdeaService(db).list_ideas(parse_limit(limit))
    return [IdeaResponse.from_entity(idea) for idea in ideas]


@router.get("/{idea_id}", response_model=IdeaResponse)
async def get_idea(
    idea_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Get a single idea"""
    idea_uuid = parse_idea_id(idea_id)

    with server_errors("get idea"):
        idea = await IdeaService(db).get_idea(idea_uuid)

    if not idea:
        raise NotFoundError(NOT_FOUND_MESSAGE)

    return IdeaResponse.from_entity(idea)


@router.post("", response_model=IdeaResponse, status_code=status.HTTP_201_CREATED)
async def create_idea(
    payload: IdeaPayload = Depends(get_idea_payload),
    current_user: UserClaim = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create an idea owned by the caller"""
    with server_errors("create idea"):
        idea = await IdeaService(db).create_idea(payload, current_user.id)

    return IdeaResponse.from_entity(idea)


@router.put("/{idea_id}", response_model=IdeaResponse)
async def update_idea(
    idea_id: str,
    payload: IdeaPayload = Depends(get_idea_payload),
    current_user: UserClaim = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Update an idea; only its owner may do this"""
    idea_uuid = parse_idea_id(idea_id)

    with server_errors("update idea"):
        idea = await IdeaService(db).update_idea(idea_uuid, payload, current_user.id)

    return IdeaResponse.from_entity(idea)


@router.delete("/{idea_id}", response_model=MessageResponse)
async def delete_idea(
    idea_id: str,
    current_user: UserClaim = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Delete an idea; only its owner may do this"""
    idea_uuid = parse_idea_id(idea_id)

    with server_errors("delete idea"):
        await IdeaService(db).delete_idea(idea_uuid, current_user.id)

    return {"message": "Idea deleted successfully"}
