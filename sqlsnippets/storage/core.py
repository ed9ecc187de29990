"""Storage initialization and path helpers."""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import NamedTuple

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)

_snippets_dir: Path | None = None


def init_storage(snippets_dir: Path) -> None:
    """Point the store at a root directory. Created lazily by ensure_root()."""
    global _snippets_dir
    _snippets_dir = Path(snippets_dir)


def snippets_dir() -> Path:
    assert _snippets_dir is not None, "Call init_storage() before using storage"
    return _snippets_dir


async def ensure_root() -> Path:
    """Create the store root (and parents) if it does not exist yet."""
    root = snippets_dir()
    if not await aiofiles.os.path.isdir(root):
        logger.debug("creating snippets root %s", root)
        await aiofiles.os.makedirs(root, exist_ok=True)
    return root


class DirEntry(NamedTuple):
    name: str
    is_dir: bool
    is_file: bool


def _scan(directory: Path) -> list[DirEntry]:
    with os.scandir(directory) as it:
        entries = [
            DirEntry(e.name, e.is_dir(follow_symlinks=False), e.is_file(follow_symlinks=False))
            for e in it
        ]
    return sorted(entries, key=lambda e: e.name)


async def scan_dir(directory: Path) -> list[DirEntry]:
    """Entries of one directory sorted by name, read off the event loop.

    Symlinks count as neither directory nor file, so traversal never follows
    them.
    """
    return await asyncio.to_thread(_scan, directory)


def encode_sql(sql: str) -> str:
    """SQL bodies are stored as pretty-printed JSON strings."""
    return json.dumps(sql, indent=2)


def decode_sql(raw: str) -> str:
    """Inverse of encode_sql(). Bodies that are not a JSON string are kept verbatim."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    if not isinstance(value, str):
        return raw
    return value


async def read_text(path: Path) -> str:
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        return await f.read()


async def write_text(path: Path, text: str) -> None:
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(text)
    logger.debug("wrote %s (%d chars)", path, len(text))
