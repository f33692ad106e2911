"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from src.api.app import create_app
from src.chess.pieces import OCCUPIED_KINDS, PieceKind
from src.core.config import Settings
from src.render.assets import TILE_SIZE, AssetStore

# Pieces are drawn as an opaque block in the middle of an otherwise transparent tile
MARKER_BOX = (16, 16, 48, 48)


def marker_color(piece: PieceKind) -> tuple[int, int, int, int]:
    """A color unique to each piece kind, so tests can tell which image ended up where."""
    index = OCCUPIED_KINDS.index(piece)
    return (10 + 15 * index, 200 - 15 * index, 90, 255)


@pytest.fixture
def make_piece_image() -> Callable[[PieceKind], Image.Image]:
    def _make(piece: PieceKind) -> Image.Image:
        image = Image.new("RGBA", (TILE_SIZE, TILE_SIZE), (0, 0, 0, 0))
        image.paste(marker_color(piece), MARKER_BOX)
        return image

    return _make


@pytest.fixture
def piece_images(
    make_piece_image: Callable[[PieceKind], Image.Image],
) -> dict[PieceKind, Image.Image]:
    return {kind: make_piece_image(kind) for kind in OCCUPIED_KINDS}


@pytest.fixture
def asset_store(piece_images: dict[PieceKind, Image.Image]) -> AssetStore:
    return AssetStore(piece_images)


@pytest.fixture
def client(asset_store: AssetStore) -> TestClient:
    """Test client for an app running on the synthetic piece images (no files involved)."""
    app = create_app(Settings(), asset_store)
    return TestClient(app)
