"""Error kinds raised by the snippet store."""

from pathlib import Path


class SnippetStoreError(Exception):
    """Base class for store errors."""


class NotFoundError(SnippetStoreError):
    """A snippet or folder id has no matching file or directory."""

    def __init__(self, kind: str, id: str) -> None:
        self.kind = kind
        self.id = id
        super().__init__(f"{kind.capitalize()} with id {id} not found")


class PartialMoveError(SnippetStoreError):
    """A move wrote the new file but could not remove the old one.

    Both copies remain on disk; callers can reconcile using the two paths.
    """

    def __init__(self, written_path: Path, stale_path: Path) -> None:
        self.written_path = written_path
        self.stale_path = stale_path
        super().__init__(
            f"Wrote {written_path} but could not remove {stale_path}"
        )
