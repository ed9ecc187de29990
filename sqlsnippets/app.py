import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from sqlsnippets import storage
from sqlsnippets.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_SNIPPETS_DIR = Path(__file__).parent.parent / "snippets"


def create_app(snippets_dir: Path | None = None) -> FastAPI:
    resolved = snippets_dir or Path(os.getenv("SNIPPETS_DIR", str(DEFAULT_SNIPPETS_DIR)))
    storage.init_storage(resolved)

    app = FastAPI(title="SQL Snippets")
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (uses SNIPPETS_DIR env var or default)
app = create_app()
