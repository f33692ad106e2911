"""Unit tests for src/services/render_service.py"""

import logging
from io import BytesIO
from unittest.mock import patch

import pytest
from PIL import Image

from src.api.models import RenderRequest
from src.chess.fen import STARTING_POSITION
from src.core.exceptions import InvalidNotationError
from src.core.models import RenderedBoard
from src.render.assets import AssetStore
from src.services.render_service import BoardRenderService, format_duration


@pytest.fixture
def service(asset_store: AssetStore) -> BoardRenderService:
    return BoardRenderService(asset_store)


def test_render_returns_png(service: BoardRenderService) -> None:
    rendered = service.render(RenderRequest(board=STARTING_POSITION))

    assert isinstance(rendered, RenderedBoard)
    with Image.open(BytesIO(rendered.png)) as image:
        assert image.size == (512, 512)
    assert rendered.processing_time.endswith("s")


def test_same_board_gives_same_bytes(service: BoardRenderService) -> None:
    request = RenderRequest(board="8/8/8/4k3/8/8/8/4K3")
    assert service.render(request).png == service.render(request).png


@pytest.mark.parametrize("board", ["", "8/8/8/8/8/8/8", "9/8/8/8/8/8/8/8"])
def test_invalid_board_is_never_rendered(service: BoardRenderService, board: str) -> None:
    with patch("src.services.render_service.render_board") as mock_render:
        with pytest.raises(InvalidNotationError):
            service.render(RenderRequest(board=board))
    mock_render.assert_not_called()


def test_processing_time_is_logged(
    service: BoardRenderService, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="src.services.render_service"):
        rendered = service.render(RenderRequest(board=STARTING_POSITION))
    assert f"Rendered board in {rendered.processing_time}" in caplog.text


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0ns"),
        (850e-9, "850ns"),
        (12.5e-6, "12.5us"),
        (0.001234, "1.234ms"),
        (0.0015, "1.5ms"),
        (0.002, "2ms"),
        (2.5, "2.5s"),
        (59, "59s"),
        (61, "1m1s"),
        (90, "1m30s"),
        (90.25, "1m30.25s"),
        (3600, "1h0m0s"),
        (3723, "1h2m3s"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected


@pytest.mark.parametrize("seconds", [850e-9, 850e-6, 0.5, 2.5, 90, 3723])
def test_format_duration_is_ascii(seconds: float) -> None:
    """The value ends up in a response header"""
    assert format_duration(seconds).isascii()
