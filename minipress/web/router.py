"""Web routes for Jinja2 templates and favicon files."""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.convertors import Convertor, register_url_convertor

from minipress.auth import get_optional_user
from minipress.constants import FAVICON_FILENAME_PATTERN
from minipress.models.schemas import UserIdentity
from minipress.web.context import get_base_context

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"
FAVICON_DIR = STATIC_DIR / "favicon"


class FaviconConvertor(Convertor):
    """Path segment matching only the favicon file names."""

    regex = f"(?:{FAVICON_FILENAME_PATTERN})"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


# Must be registered before the route below compiles its path
register_url_convertor("favicon", FaviconConvertor())

web_router = APIRouter()
favicon_router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@web_router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    user: Annotated[UserIdentity | None, Depends(get_optional_user)],
) -> HTMLResponse:
    """Render the home page with the current login state."""
    context = get_base_context(request, user)
    return templates.TemplateResponse(request, "index.html", context)


@favicon_router.get("/{filename:favicon}", include_in_schema=False)
async def favicon(filename: str) -> FileResponse:
    """Serve the favicon files browsers request from the site root."""
    path = FAVICON_DIR / filename
    if not path.is_file():
        logger.debug(f"Favicon file missing: {path}")
        raise HTTPException(status_code=404, detail="Not found")

    return FileResponse(path, filename=filename, content_disposition_type="inline")
