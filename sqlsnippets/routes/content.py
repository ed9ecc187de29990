"""Snippet endpoints: list, create, update, delete, get one."""

import logging

from fastapi import APIRouter, HTTPException, Response

from sqlsnippets import storage
from sqlsnippets.errors import NotFoundError, PartialMoveError
from sqlsnippets.models import Snippet

from .models import UpdateSnippetBody

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/content")
async def list_content(visibility: str | None = None):
    """List every snippet. Project-shared snippets only exist on the platform."""
    if visibility == "project":
        return {"data": []}
    try:
        return {"data": await storage.list_snippets()}
    except OSError as e:
        logger.error("Error fetching snippets: %s", e)
        raise HTTPException(500, "Failed to fetch snippets")


@router.post("/content")
async def create_content(body: Snippet):
    """Save a snippet at the store root."""
    try:
        return await storage.save_snippet(body)
    except OSError as e:
        logger.error("Error creating snippet: %s", e)
        raise HTTPException(500, "Failed to create snippet")


@router.put("/content")
async def update_content(body: UpdateSnippetBody):
    """Update name, SQL and/or folder of the snippet identified by body.id."""
    try:
        return await storage.update_snippet(body.id, body)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except (PartialMoveError, OSError) as e:
        logger.error("Error updating snippet %s: %s", body.id, e)
        raise HTTPException(500, "Failed to update snippet")


@router.delete("/content", status_code=204)
async def delete_content(id: str | None = None):
    """Delete a snippet. Deleting an unknown id succeeds."""
    if not id:
        raise HTTPException(400, "Snippet ID is required")
    try:
        await storage.delete_snippet(id)
    except OSError as e:
        logger.error("Error deleting snippet %s: %s", id, e)
        raise HTTPException(500, "Failed to delete snippet")
    return Response(status_code=204)


@router.get("/content/item/{id}")
async def get_content_item(id: str):
    """Get a single snippet by id."""
    try:
        return await storage.get_snippet(id)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
