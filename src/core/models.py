"""
Boundary layer data model(s).

The Service hands these back to the API layer, which only has to turn them into an HTTP response.
(Keeps Pillow images and timing details out of the router)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedBoard:
    """Transport-safe result of rendering one board position."""

    png: bytes
    processing_time: str
