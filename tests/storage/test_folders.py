"""Tests for folder list, create, delete and contents."""

import json
import os
from unittest.mock import patch

import pytest

from sqlsnippets import storage
from sqlsnippets.errors import NotFoundError
from sqlsnippets.identity import derive_id


def write_raw(relative: str, sql: str) -> None:
    path = storage.snippets_dir() / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(sql))


# ── Create ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_folder_makes_directory():
    folder = await storage.create_folder("New Folder")
    assert folder.name == "New Folder"
    assert folder.id == derive_id("New Folder")
    assert folder.owner_id == 1
    assert folder.parent_id is None
    assert (storage.snippets_dir() / "New Folder").is_dir()


@pytest.mark.asyncio
async def test_create_folder_special_characters():
    folder = await storage.create_folder("Folder with spaces & symbols!")
    assert folder.name == "Folder with spaces & symbols!"
    assert (storage.snippets_dir() / "Folder with spaces & symbols!").is_dir()


@pytest.mark.asyncio
async def test_create_folder_existing_is_ok():
    await storage.create_folder("Reports")
    again = await storage.create_folder("Reports")
    assert again.id == derive_id("Reports")


@pytest.mark.asyncio
async def test_create_folder_echoes_parent_id():
    folder = await storage.create_folder("Sub", parent_id="parent")
    assert folder.parent_id == "parent"


@pytest.mark.asyncio
async def test_create_folder_intermediate_segments():
    """Nested directories are created but only the top level is listed."""
    await storage.create_folder("a/b")
    assert (storage.snippets_dir() / "a" / "b").is_dir()
    assert [f.name for f in await storage.list_folders()] == ["a"]


@pytest.mark.asyncio
async def test_create_folder_propagates_mkdir_errors():
    await storage.ensure_root()
    with patch("aiofiles.os.makedirs", side_effect=PermissionError("Permission denied")):
        with pytest.raises(PermissionError):
            await storage.create_folder("New Folder")


# ── List / get ───────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_folders_only_directories_sorted():
    await storage.create_folder("folder2")
    await storage.create_folder("folder1")
    write_raw("snippet.sql", "SELECT 1;")
    folders = await storage.list_folders()
    assert [f.name for f in folders] == ["folder1", "folder2"]


@pytest.mark.asyncio
async def test_list_folders_skips_symlinked_dirs():
    await storage.create_folder("Reports")
    os.symlink("Reports", storage.snippets_dir() / "Alias")
    assert [f.name for f in await storage.list_folders()] == ["Reports"]


@pytest.mark.asyncio
async def test_list_folders_empty():
    write_raw("snippet.sql", "SELECT 1;")
    assert await storage.list_folders() == []


@pytest.mark.asyncio
async def test_get_folder():
    await storage.create_folder("Reports")
    assert (await storage.get_folder(derive_id("Reports"))).name == "Reports"
    with pytest.raises(NotFoundError, match="Folder with id nope not found"):
        await storage.get_folder("nope")


# ── Delete ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_folder_removes_tree():
    await storage.create_folder("Delete Me")
    await storage.create_folder("Keep Me")
    write_raw("Delete Me/a.sql", "SELECT 1;")
    write_raw("Delete Me/Inner/b.sql", "SELECT 2;")

    await storage.delete_folder(derive_id("Delete Me"))

    assert not (storage.snippets_dir() / "Delete Me").exists()
    assert [f.name for f in await storage.list_folders()] == ["Keep Me"]
    assert await storage.list_snippets() == []


@pytest.mark.asyncio
async def test_delete_folder_unknown_id():
    with pytest.raises(NotFoundError, match="Folder with id non-existent-id not found"):
        await storage.delete_folder("non-existent-id")


@pytest.mark.asyncio
async def test_delete_folder_twice_reports_not_found():
    """Unlike snippets, a second folder delete is an error."""
    folder = await storage.create_folder("Reports")
    await storage.delete_folder(folder.id)
    with pytest.raises(NotFoundError):
        await storage.delete_folder(folder.id)


@pytest.mark.asyncio
async def test_delete_folder_vanished_during_delete():
    folder = await storage.create_folder("Reports")
    with patch("sqlsnippets.storage.folders.shutil.rmtree", side_effect=FileNotFoundError()):
        with pytest.raises(NotFoundError):
            await storage.delete_folder(folder.id)


@pytest.mark.asyncio
async def test_delete_folder_propagates_other_errors():
    folder = await storage.create_folder("Reports")
    with patch("sqlsnippets.storage.folders.shutil.rmtree", side_effect=PermissionError("denied")):
        with pytest.raises(PermissionError):
            await storage.delete_folder(folder.id)


# ── Contents ─────────────────────────────────────────────


@pytest.mark.asyncio
async def test_root_contents():
    await storage.create_folder("Reports")
    write_raw("top.sql", "SELECT 0;")
    write_raw("Reports/q1.sql", "SELECT 1;")
    folders, snippets = await storage.list_folder_contents(None)
    assert [f.name for f in folders] == ["Reports"]
    assert [s.name for s in snippets] == ["top"]


@pytest.mark.asyncio
async def test_folder_contents():
    await storage.create_folder("Reports")
    write_raw("top.sql", "SELECT 0;")
    write_raw("Reports/q1.sql", "SELECT 1;")
    folders, snippets = await storage.list_folder_contents(derive_id("Reports"))
    assert folders == []
    assert [s.name for s in snippets] == ["q1"]
