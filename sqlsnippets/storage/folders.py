"""Folder CRUD. A folder is a directory directly under the store root."""

import asyncio
import logging
import shutil
from pathlib import Path

import aiofiles.os

from sqlsnippets.errors import NotFoundError
from sqlsnippets.models import Folder, Snippet, build_folder

from .core import ensure_root, scan_dir

logger = logging.getLogger(__name__)


async def list_folders() -> list[Folder]:
    """Immediate subdirectories of the root, sorted by name. Does not recurse."""
    root = await ensure_root()
    return [build_folder(entry.name) for entry in await scan_dir(root) if entry.is_dir]


async def find_folder(folder_id: str) -> Folder | None:
    for folder in await list_folders():
        if folder.id == folder_id:
            return folder
    return None


async def get_folder(folder_id: str) -> Folder:
    folder = await find_folder(folder_id)
    if folder is None:
        raise NotFoundError("folder", folder_id)
    return folder


async def folder_path(folder_id: str | None) -> Path:
    """Directory a snippet with this folder id lives in.

    None is the root. Raises NotFoundError for an id with no directory.
    """
    root = await ensure_root()
    if folder_id is None:
        return root
    folder = await get_folder(folder_id)
    return root / folder.name


async def create_folder(name: str, parent_id: str | None = None) -> Folder:
    """mkdir -p <root>/<name>. parent_id is echoed back, not persisted."""
    root = await ensure_root()
    path = root / name
    await aiofiles.os.makedirs(path, exist_ok=True)
    logger.debug("created folder %s", path)
    return build_folder(name, parent_id=parent_id)


async def delete_folder(folder_id: str) -> None:
    """Remove a folder and everything beneath it.

    Strict: an unknown id, or a directory that disappears before removal,
    raises NotFoundError. Compare delete_snippet(), which is idempotent.
    """
    root = await ensure_root()
    folder = await get_folder(folder_id)
    path = root / folder.name
    try:
        await asyncio.to_thread(shutil.rmtree, path)
    except FileNotFoundError as e:
        raise NotFoundError("folder", folder_id) from e
    logger.debug("removed folder %s", path)


async def list_folder_contents(
    folder_id: str | None,
) -> tuple[list[Folder], list[Snippet]]:
    """Children of a folder: sub-folders by parent_id and snippets by folder_id.

    folder_id=None lists the root: every top-level folder and the snippets
    stored directly under the root.
    """
    from .snippets import list_snippets

    folders = [f for f in await list_folders() if f.parent_id == folder_id]
    snippets = [s for s in await list_snippets() if s.folder_id == folder_id]
    return folders, snippets
