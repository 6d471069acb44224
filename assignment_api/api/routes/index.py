"""Index Page — GET / serves the single-page HTML form.

Invariants:
    - Page read from package data once and cached
    - Only GET / is served here; every API path lives under /api
"""

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["index"])

_INDEX_PATH = Path(__file__).resolve().parents[2] / "static" / "index.html"


@lru_cache
def _load_index() -> str:
    return _INDEX_PATH.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index():
    return HTMLResponse(_load_index())
