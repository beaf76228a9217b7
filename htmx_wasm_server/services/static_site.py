"""Static file hosting for the demo page and its compiled WASM artifacts."""
from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Union

from fastapi import HTTPException, status
from fastapi.responses import FileResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

logger = logging.getLogger(__name__)

# Browsers refuse to stream-compile WASM served with any other type.
mimetypes.add_type("application/wasm", ".wasm")
mimetypes.add_type("application/javascript", ".js")


class StaticSite(StaticFiles):
    """Serves files under the serving root, optionally falling back to the entry page."""

    def __init__(
        self,
        directory: Union[str, Path],
        index_file: str = "index.html",
        spa_fallback: bool = False,
    ) -> None:
        super().__init__(directory=directory, html=False, check_dir=False)
        self.index_file = index_file
        self.spa_fallback = spa_fallback

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if (
                self.spa_fallback
                and exc.status_code == status.HTTP_404_NOT_FOUND
                and scope["method"] in ("GET", "HEAD")
                and path != self.index_file
            ):
                logger.debug("Static path %s not found, serving %s", path, self.index_file)
                return await super().get_response(self.index_file, scope)
            raise


def serve_page(root: Path, filename: str) -> FileResponse:
    """Return ``filename`` from ``root`` or raise the standard 404."""

    page = root / filename
    if not page.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(page)
