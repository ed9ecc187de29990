"""Filesystem-backed snippet store. The directory listing is the index.

Data layout:
  <root>/
    <snippet-name>.sql       SQL text stored as a JSON-quoted string
    <folder-name>/           A directory is a folder
      <snippet-name>.sql
      <nested-folder>/...    Traversed, but not listed as a folder

Identity: snippet ids are derived from the file name ("q1.sql"), folder ids
from the directory name. Renaming a snippet or folder changes its id.

Deletes: delete_snippet() is idempotent; delete_folder() raises NotFoundError
when the folder is missing.

Moves: update_snippet() writes the new file, then removes the old one. There
is no rollback; a failed removal raises PartialMoveError with both copies left
on disk.
"""

# Re-export all public symbols so `from sqlsnippets import storage` works.

from .core import (  # noqa: F401
    ensure_root,
    init_storage,
    snippets_dir,
)

from .snippets import (  # noqa: F401
    delete_snippet,
    get_snippet,
    list_snippets,
    save_snippet,
    update_snippet,
)

from .folders import (  # noqa: F401
    create_folder,
    delete_folder,
    get_folder,
    list_folder_contents,
    list_folders,
)
