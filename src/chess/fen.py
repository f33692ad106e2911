"""
Reading the piece placement field of a FEN string.

FEN, or Forsyth-Edwards Notation, describes a board one rank at a time, from the 8th rank down to the 1st:

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR

* ranks are separated by a "/"
* letters are pieces: capital letters for white, small letters for black (p, n, b, r, q, k)
* a digit 1-8 stands for that many empty squares in a row

Only the placement field is accepted here (no active color, castling rights, etc.).
"""

import re

from src.chess.board import Board, Row
from src.chess.pieces import SYMBOL_TO_PIECE, PieceKind
from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidNotationError

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# Coarse shape: 8 rows of 1-8 characters. Does NOT check that a row adds up to 8 squares ("88" matches).
FEN_PATTERN = re.compile(r"^([rnbqkpRNBQKP1-8]{1,8}/){7}[rnbqkpRNBQKP1-8]{1,8}$")


def is_valid_position(position: str) -> bool:
    """Check if given string is a piece placement that fills the whole board."""
    try:
        parse_position(position)
    except InvalidNotationError:
        return False
    return True


def parse_position(position: str) -> Board:
    """
    Construct a board from the piece placement field of a FEN string.

    Two passes: a cheap structural match against FEN_PATTERN, then every row is expanded and
    must cover exactly 8 squares. Any failure raises InvalidNotationError, no partial board is returned.
    """
    if not FEN_PATTERN.fullmatch(position):
        raise InvalidNotationError(
            f"Cannot interpret supplied string as piece placement: {position!r}"
        )

    rows = [expand_row(row_fen) for row_fen in position.split("/")]
    for index, row in enumerate(rows):
        if len(row) != BOARD_DIMENSIONS[1]:
            raise InvalidNotationError(
                f"Row {index} of {position!r} covers {len(row)} squares instead of {BOARD_DIMENSIONS[1]}"
            )
    return Board.from_rows(rows)


def expand_row(row_fen: str) -> Row:
    """Turn one row of FEN into squares, left to right. Length is not checked here."""
    squares: list[PieceKind] = []
    for character in row_fen:
        if character in SYMBOL_TO_PIECE:
            squares.append(SYMBOL_TO_PIECE[character])
        elif character in "12345678":
            # A number denotes the amount of empty squares after each other
            squares.extend([PieceKind.EMPTY] * int(character))
        else:
            raise InvalidNotationError(f"Unexpected character in FEN row: {character!r}")
    return tuple(squares)
