"""Folder endpoints."""

from fastapi import APIRouter, HTTPException

from sqlsnippets import storage
from sqlsnippets.errors import NotFoundError

from .models import CreateFolder

router = APIRouter()


@router.get("/content/folders")
async def list_root():
    """Top-level folders plus the snippets stored directly under the root."""
    folders, contents = await storage.list_folder_contents(None)
    return {"data": {"folders": folders, "contents": contents}}


@router.post("/content/folders")
async def create_folder(body: CreateFolder):
    """Create a folder directory under the store root."""
    return await storage.create_folder(body.name, body.parent_id)


@router.delete("/content/folders")
async def delete_folder(id: str | None = None):
    """Delete a folder and everything in it."""
    if not id:
        raise HTTPException(400, "Folder ID is required")
    try:
        await storage.delete_folder(id)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    return {}


@router.get("/content/folders/{id}")
async def get_folder_contents(id: str):
    """Sub-folders and snippets of one folder."""
    folders, contents = await storage.list_folder_contents(id)
    return {"data": {"folders": folders, "contents": contents}}


@router.patch("/content/folders/{id}")
async def update_folder(id: str):
    """No-op: renaming folders is only supported by the hosted platform."""
    return {}
