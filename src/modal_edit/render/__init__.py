"""Frame painting against an abstract display surface."""

from .painter import FramePainter, clip_to_width, scroll_top
from .surface import Rect, Surface

__all__ = ["FramePainter", "Rect", "Surface", "clip_to_width", "scroll_top"]
