"""FastAPI endpoints under /api.

Endpoint groups: content (snippets) and content/folders. Handlers are thin:
they call sqlsnippets.storage and map NotFoundError to 404 and I/O failures
to 500.
"""

from fastapi import APIRouter

from .content import router as content_router
from .folders import router as folders_router

router = APIRouter()
router.include_router(folders_router)
router.include_router(content_router)
