"""
HTTP layer: a single GET /render endpoint that returns the board as a PNG.

The handler is a plain (sync) function, so FastAPI runs it in its thread pool. Requests share nothing
but the read-only asset store, which is loaded before the app is handed to the server.
"""

import logging
import sys
from typing import Annotated, Optional

import uvicorn
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import PlainTextResponse, Response

from src.api.models import RenderRequest
from src.core.config import Settings, get_settings
from src.core.exceptions import AssetLoadError, InvalidNotationError
from src.render.assets import AssetStore
from src.services.render_service import BoardRenderService

logger = logging.getLogger(__name__)

INVALID_FEN_MESSAGE = "Invalid FEN"


def create_app(
    settings: Optional[Settings] = None, assets: Optional[AssetStore] = None
) -> FastAPI:
    """Build the application. Piece images are loaded right here (if not supplied), never lazily per request."""
    if settings is None:
        settings = get_settings()
    if assets is None:
        assets = AssetStore.from_directory(settings.asset_dir)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.render_service = BoardRenderService(assets)

    app.add_exception_handler(InvalidNotationError, invalid_notation_handler)
    app.add_api_route(
        "/render",
        render,
        methods=["GET"],
        response_class=Response,
        responses={
            200: {"content": {"image/png": {}}},
            400: {"content": {"text/plain": {}}},
        },
    )
    return app


def get_render_service(request: Request) -> BoardRenderService:
    return request.app.state.render_service


def render(
    service: Annotated[BoardRenderService, Depends(get_render_service)],
    board: Annotated[Optional[list[str]], Query()] = None,
) -> Response:
    """Render the piece placement given in the `board` query parameter. If it is repeated, the first one counts."""
    rendered = service.render(RenderRequest(board=board[0] if board else ""))
    return Response(
        content=rendered.png,
        media_type="image/png",
        headers={"X-Processing-Time": rendered.processing_time},
    )


async def invalid_notation_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """The client only learns that the board was rejected, not why."""
    logger.debug("Rejected board notation: %s", exc)
    return PlainTextResponse(INVALID_FEN_MESSAGE, status_code=400)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)

    try:
        app = create_app(settings)
    except AssetLoadError as exc:
        logger.critical("Refusing to start without the full piece set: %s", exc)
        sys.exit(1)

    host, port = settings.bind_address
    logger.info("Listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
