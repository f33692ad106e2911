"""The board: an immutable 8x8 grid of whatever occupies each square"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from src.chess.pieces import PieceKind
from src.chess.square import BOARD_DIMENSIONS, Square

Row = tuple[PieceKind, ...]


@dataclass(frozen=True)
class Board:
    rows: tuple[Row, ...]

    def __post_init__(self) -> None:
        num_rows, num_columns = BOARD_DIMENSIONS
        if len(self.rows) != num_rows:
            raise ValueError(f"Board needs {num_rows} rows, got {len(self.rows)}")
        for index, row in enumerate(self.rows):
            if len(row) != num_columns:
                raise ValueError(
                    f"Row {index} needs {num_columns} squares, got {len(row)}"
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[PieceKind]]) -> Self:
        """Freeze any nested iterable into a board (rows are given top to bottom)"""
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def empty(cls) -> Self:
        num_rows, num_columns = BOARD_DIMENSIONS
        return cls.from_rows([[PieceKind.EMPTY] * num_columns] * num_rows)

    def piece(self, square: Square) -> PieceKind:
        return self.rows[square.row][square.column]

    def row(self, index: int) -> Row:
        return self.rows[index]

    def squares(self) -> Iterator[Square]:
        """All squares in row-major order, starting top-left"""
        num_rows, num_columns = BOARD_DIMENSIONS
        for row in range(num_rows):
            for column in range(num_columns):
                yield Square(row, column)

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string. Top row (8th rank) comes first."""
        return "/".join(self._row_to_fen(row) for row in self.rows)

    def _row_to_fen(self, row: Row) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is not PieceKind.EMPTY:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)
