"""Entry Page — serves the HTML form page at GET /."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

VIEWS_DIR = Path(__file__).resolve().parents[2] / "views"
PUBLIC_DIR = Path(__file__).resolve().parents[2] / "public"

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def index():
    return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")
