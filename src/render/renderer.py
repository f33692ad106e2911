"""Paint a board into a bitmap."""

from io import BytesIO

from PIL import Image

from src.chess.board import Board
from src.chess.pieces import PieceKind
from src.chess.square import BOARD_DIMENSIONS, Square
from src.render.assets import TILE_SIZE, AssetStore

CANVAS_SIZE = (BOARD_DIMENSIONS[1] * TILE_SIZE, BOARD_DIMENSIONS[0] * TILE_SIZE)
LIGHT_SQUARE = (0xFF, 0xFF, 0xFF, 0xFF)
DARK_SQUARE = (0x4F, 0x4F, 0x4F, 0xFF)


def tile_box(square: Square) -> tuple[int, int, int, int]:
    """Pixel region (left, upper, right, lower) covered by a square"""
    left = square.column * TILE_SIZE
    upper = square.row * TILE_SIZE
    return (left, upper, left + TILE_SIZE, upper + TILE_SIZE)


def render_board(board: Board, assets: AssetStore) -> Image.Image:
    """
    Draw the board as a 512x512 RGBA image.

    The canvas starts out white; dark squares get filled in, then each piece is alpha-composited
    on top of its square so transparent pixels let the square color show through.
    """
    canvas = Image.new("RGBA", CANVAS_SIZE, LIGHT_SQUARE)

    for square in board.squares():
        box = tile_box(square)
        if square.is_dark():
            canvas.paste(DARK_SQUARE, box)

        piece = board.piece(square)
        if piece is PieceKind.EMPTY:
            continue

        canvas.alpha_composite(assets.image_for(piece), dest=box[:2])

    return canvas


def encode_png(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
