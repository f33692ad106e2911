"""Requests models"""

from pydantic import BaseModel


class RenderRequest(BaseModel):
    # Piece placement field of a FEN string. Left unvalidated here: the domain layer decides what is a valid board.
    board: str = ""
