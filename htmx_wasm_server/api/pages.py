"""Entry-point HTML documents."""
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from ..core.config import Settings
from ..services.static_site import serve_page
from .deps import get_app_settings

router = APIRouter(tags=["pages"])


@router.get("/", response_class=FileResponse, include_in_schema=False)
async def index(settings: Settings = Depends(get_app_settings)) -> FileResponse:
    return serve_page(settings.serving_root, settings.INDEX_FILE)


@router.get("/play", response_class=FileResponse, include_in_schema=False)
async def play(settings: Settings = Depends(get_app_settings)) -> FileResponse:
    return serve_page(settings.serving_root, settings.PLAY_FILE)
