"""Exceptions raised by the domain and render layers. The API layer decides how they reach the client."""


class BoardRenderError(Exception):
    """Base class for everything this service raises on purpose."""


class InvalidNotationError(BoardRenderError):
    """The supplied string cannot be read as a piece placement (FEN board field)."""


class AssetLoadError(BoardRenderError):
    """A piece image could not be loaded. Fatal at startup: never serve without the full piece set."""
