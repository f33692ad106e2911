"""Orchestration of a render request: from notation string to PNG bytes."""

import logging
import time

from src.api.models import RenderRequest
from src.chess.fen import parse_position
from src.core.models import RenderedBoard
from src.render.assets import AssetStore
from src.render.renderer import encode_png, render_board

logger = logging.getLogger(__name__)

NANOSECONDS_PER_SECOND = 1_000_000_000


class BoardRenderService:
    """Orchestration of layers for rendering a board."""

    def __init__(self, assets: AssetStore) -> None:
        self.assets = assets

    def render(self, request: RenderRequest) -> RenderedBoard:
        """
        Parse the notation, draw it and encode it.

        Raises InvalidNotationError before anything gets drawn if the notation is rejected.
        """
        start = time.perf_counter()

        board = parse_position(request.board)
        image = render_board(board, self.assets)

        processing_time = format_duration(time.perf_counter() - start)
        png = encode_png(image)

        logger.info("Rendered board in %s", processing_time)
        return RenderedBoard(png=png, processing_time=processing_time)


def format_duration(seconds: float) -> str:
    """
    Short human readable duration in the style of Go's time.Duration: '850ns', '12.5us', '1.234ms',
    '2.5s', '1m30s', '1h0m0s'. Microseconds are written 'us' so the value stays ASCII (it goes into a header).
    """
    nanoseconds = round(seconds * 1e9)
    if nanoseconds < 1_000:
        return f"{nanoseconds}ns"

    for unit, scale in (("us", 1e3), ("ms", 1e6)):
        value = round(nanoseconds / scale, 3)
        if value < 1_000:
            return f"{_trim(value)}{unit}"

    if nanoseconds < 60 * NANOSECONDS_PER_SECOND:
        return f"{_trim(nanoseconds / NANOSECONDS_PER_SECOND)}s"

    minutes, remainder = divmod(nanoseconds, 60 * NANOSECONDS_PER_SECOND)
    hours, minutes = divmod(minutes, 60)
    text = f"{minutes}m{_trim(remainder / NANOSECONDS_PER_SECOND)}s"
    return f"{hours}h{text}" if hours else text


def _trim(value: float) -> str:
    """At most 3 decimals, without trailing zeros"""
    return f"{value:.3f}".rstrip("0").rstrip(".") or "0"
