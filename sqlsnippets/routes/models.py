"""Pydantic request models for API endpoints."""

from pydantic import BaseModel

from sqlsnippets.models import SnippetUpdate


class UpdateSnippetBody(SnippetUpdate):
    id: str


class CreateFolder(BaseModel):
    name: str
    parent_id: str | None = None
