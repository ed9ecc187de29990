"""Snippet and folder models.

Only a snippet's name, SQL body and location are persisted. Everything else
is rebuilt with defaults by build_snippet() on every read, so edits to
description, favorite, visibility, owner or timestamps do not survive a
round trip.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field

from sqlsnippets.identity import derive_id

SNIPPET_SUFFIX = ".sql"

Visibility = Literal["user", "project", "org", "public"]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Owner(BaseModel):
    id: int
    username: str


def _default_owner() -> Owner:
    return Owner(id=1, username="johndoe")


class SnippetContent(BaseModel):
    sql: str
    favorite: bool = False
    content_id: str
    schema_version: Literal["1.0"]


class Snippet(BaseModel):
    """A named SQL text stored as `<name>.sql` under the store root."""

    id: str
    inserted_at: str = Field(default_factory=_now)
    updated_at: str = Field(default_factory=_now)
    type: Literal["sql"]
    name: str
    description: str = ""
    favorite: bool = False
    content: SnippetContent
    visibility: Visibility
    project_id: int = 1
    folder_id: str | None = None  # None means the store root
    owner_id: int = 1
    owner: Owner = Field(default_factory=_default_owner)
    updated_by: Owner = Field(default_factory=_default_owner)


class Folder(BaseModel):
    """A directory directly under the store root."""

    id: str
    name: str
    owner_id: int = 1
    parent_id: str | None = None  # never populated by directory traversal
    project_id: int = 1


class ContentUpdate(BaseModel):
    sql: str | None = None


class SnippetUpdate(BaseModel):
    """Partial snippet update.

    An omitted folder_id keeps the current folder; an explicit None moves
    the snippet to the store root.
    """

    name: str | None = None
    content: ContentUpdate | None = None
    folder_id: str | None = None

    @property
    def moves_folder(self) -> bool:
        return "folder_id" in self.model_fields_set


def snippet_filename(name: str) -> str:
    """Append the suffix unless present: "q1" → "q1.sql"."""
    if name.endswith(SNIPPET_SUFFIX):
        return name
    return f"{name}{SNIPPET_SUFFIX}"


def build_snippet(filename: str, content: str, folder_id: str | None) -> Snippet:
    """Build a snippet from its file name and SQL body.

    Accepts the name with or without the `.sql` suffix; the id is always
    derived from the file name so listing and saving agree.
    """
    filename = snippet_filename(filename)
    return Snippet(
        id=derive_id(filename),
        type="sql",
        name=filename.removesuffix(SNIPPET_SUFFIX),
        content=SnippetContent(
            sql=content,
            content_id=str(uuid.uuid4()),
            schema_version="1.0",
        ),
        visibility="user",
        folder_id=folder_id,
    )


def build_folder(name: str, parent_id: str | None = None) -> Folder:
    return Folder(id=derive_id(name), name=name, parent_id=parent_id)
