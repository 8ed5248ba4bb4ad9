"""Textual host: key translation, cell canvas, and the app entry point."""

from .canvas import CellCanvas
from .controller import TextualEditorAdapter, TextualUIHooks, translate_key

__all__ = ["CellCanvas", "TextualEditorAdapter", "TextualUIHooks", "translate_key"]
