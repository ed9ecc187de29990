"""Snippet CRUD, including move/rename on update."""

import logging
from pathlib import Path
from typing import Any

import aiofiles.os

from sqlsnippets.errors import NotFoundError, PartialMoveError
from sqlsnippets.identity import derive_id
from sqlsnippets.models import (
    SNIPPET_SUFFIX,
    Snippet,
    SnippetUpdate,
    build_snippet,
    snippet_filename,
)

from .core import decode_sql, encode_sql, ensure_root, read_text, scan_dir, write_text
from .folders import folder_path

logger = logging.getLogger(__name__)


async def _walk(directory: Path, folder_name: str | None) -> list[tuple[Path, Snippet]]:
    """Collect (path, snippet) pairs below directory, depth first.

    Every snippet is tagged with its immediate parent directory only, so a
    file two levels down belongs to the inner folder, not the top one.
    """
    found: list[tuple[Path, Snippet]] = []
    for entry in await scan_dir(directory):
        path = directory / entry.name
        if entry.is_dir:
            found.extend(await _walk(path, entry.name))
        elif entry.is_file and entry.name.endswith(SNIPPET_SUFFIX):
            content = decode_sql(await read_text(path))
            folder_id = derive_id(folder_name) if folder_name else None
            found.append((path, build_snippet(entry.name, content, folder_id)))
    return found


async def _locate(snippet_id: str) -> tuple[Path, Snippet] | None:
    root = await ensure_root()
    for path, snippet in await _walk(root, None):
        if snippet.id == snippet_id:
            return path, snippet
    return None


async def list_snippets() -> list[Snippet]:
    """Every snippet under the root, recursively, in sorted traversal order."""
    root = await ensure_root()
    return [snippet for _, snippet in await _walk(root, None)]


async def get_snippet(snippet_id: str) -> Snippet:
    located = await _locate(snippet_id)
    if located is None:
        raise NotFoundError("snippet", snippet_id)
    return located[1]


async def save_snippet(snippet: Snippet) -> Snippet:
    """Write <root>/<name>.sql and return the rebuilt snippet.

    The file always lands at the root; the caller's folder_id is only echoed
    back. The returned id is derived from the name, not taken from the input.
    """
    root = await ensure_root()
    content = snippet.content.sql or ""
    await write_text(root / snippet_filename(snippet.name), encode_sql(content))
    return build_snippet(snippet.name, content, snippet.folder_id)


async def delete_snippet(snippet_id: str) -> None:
    """Remove a snippet's file wherever it lives.

    Idempotent: an unknown id or a file that is already gone is not an error.
    """
    located = await _locate(snippet_id)
    if located is None:
        return
    path, _ = located
    try:
        await aiofiles.os.remove(path)
    except FileNotFoundError:
        return
    logger.debug("removed %s", path)


async def update_snippet(
    snippet_id: str, updates: SnippetUpdate | dict[str, Any]
) -> Snippet:
    """Rewrite, rename and/or move a snippet.

    The new file is written before the old one is removed. If removal fails
    the new copy stays and PartialMoveError is raised. A rename changes the
    snippet's id.
    """
    if not isinstance(updates, SnippetUpdate):
        updates = SnippetUpdate.model_validate(updates)

    located = await _locate(snippet_id)
    if located is None:
        raise NotFoundError("snippet", snippet_id)
    old_path, current = located

    name = updates.name if updates.name is not None else current.name
    content = current.content.sql
    if updates.content is not None and updates.content.sql is not None:
        content = updates.content.sql
    folder_id = updates.folder_id if updates.moves_folder else current.folder_id

    # Raises NotFoundError before anything is written.
    new_path = await folder_path(folder_id) / snippet_filename(name)

    await write_text(new_path, encode_sql(content))

    if new_path != old_path:
        try:
            await aiofiles.os.remove(old_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("moved %s to %s but the old copy remains: %s", old_path, new_path, e)
            raise PartialMoveError(new_path, old_path) from e
        else:
            logger.debug("moved %s to %s", old_path, new_path)

    return build_snippet(name, content, folder_id)
