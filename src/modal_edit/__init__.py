"""Modal text-editing engine with a two-mode command language."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "editor",
    "modes",
    "keymaps",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"
