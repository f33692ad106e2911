"""
The asset store: one square image per piece, decoded once at startup and only read afterwards.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Self

from PIL import Image

from src.chess.pieces import OCCUPIED_KINDS, PieceKind
from src.core.exceptions import AssetLoadError

logger = logging.getLogger(__name__)

DEFAULT_ASSET_DIR = Path(__file__).parent / "static"
TILE_SIZE = 64


def asset_filename(piece: PieceKind) -> str:
    """ex. PieceKind.WHITE_PAWN -> 'pawn_white.png'"""
    if piece is PieceKind.EMPTY:
        raise ValueError("An empty square has no image")
    return f"{piece.piece_type}_{piece.color}.png"


@dataclass(frozen=True)
class AssetStore:
    images: Mapping[PieceKind, Image.Image]

    def __post_init__(self) -> None:
        missing = [kind.name for kind in OCCUPIED_KINDS if kind not in self.images]
        if missing:
            raise AssetLoadError(f"No image for: {', '.join(missing)}")

        for kind, image in self.images.items():
            if image.mode != "RGBA" or image.size != (TILE_SIZE, TILE_SIZE):
                width, height = image.size
                raise AssetLoadError(
                    f"Image for {kind.name} must be {TILE_SIZE}x{TILE_SIZE} RGBA, got {width}x{height} {image.mode}"
                )

        # nobody gets to swap images once requests are being served
        object.__setattr__(self, "images", MappingProxyType(dict(self.images)))

    @classmethod
    def from_directory(cls, directory: Path = DEFAULT_ASSET_DIR) -> Self:
        """Eagerly decode all piece images in the directory."""
        images = {
            kind: load_image(directory / asset_filename(kind)) for kind in OCCUPIED_KINDS
        }
        logger.info("Loaded %d piece images from %s", len(images), directory)
        return cls(images)

    def image_for(self, piece: PieceKind) -> Image.Image:
        return self.images[piece]


def load_image(path: Path) -> Image.Image:
    """Decode a single image into RGBA. convert() forces the pixel data to be read now rather than lazily."""
    try:
        with Image.open(path) as image:
            return image.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise AssetLoadError(f"Cannot load piece image {path}: {exc}") from exc
