"""Built-in Normal and Insert command tables."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from modal_edit.actions import core, edit, motion
from modal_edit.modes.base_mode import ESCAPE

from .models import ActionRef, Binding, Trigger
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = tuple(
    ActionRef(action_id, handler, description)
    for action_id, handler, description in (
        ("motion.left", motion.move_left, "Move one character left"),
        ("motion.right", motion.move_right, "Move one character right"),
        ("motion.up", motion.move_up, "Move one line up"),
        ("motion.down", motion.move_down, "Move one line down"),
        ("motion.line_start", motion.move_line_start, "Go to the line start"),
        ("motion.line_end", motion.move_line_end, "Go to the last character"),
        ("motion.document_top", motion.move_document_top, "Go to the first line"),
        (
            "motion.document_bottom",
            motion.move_document_bottom,
            "Go to the last line",
        ),
        ("edit.delete_char", edit.delete_char, "Delete the character under the cursor"),
        ("edit.delete_line", edit.delete_line, "Delete the current line"),
        ("edit.save", edit.save_buffer, "Write the buffer to its backing file"),
        ("core.enter_insert", core.enter_insert_mode, "Insert before the cursor"),
        ("core.insert_line_start", core.insert_at_line_start, "Insert at line start"),
        ("core.append", core.append_after_cursor, "Append after the cursor"),
        ("core.append_line_end", core.append_at_line_end, "Append at line end"),
        ("core.open_below", core.open_line_below, "Open a line below"),
        ("core.open_above", core.open_line_above, "Open a line above"),
        ("core.exit_to_normal", core.exit_to_normal_mode, "Return to normal mode"),
        ("core.noop", core.noop_action, "Do nothing"),
    )
)

NORMAL_COMMANDS: dict[str, str] = {
    "h": "motion.left",
    "l": "motion.right",
    "j": "motion.down",
    "k": "motion.up",
    "0": "motion.line_start",
    "_": "motion.line_start",
    "$": "motion.line_end",
    "g": "motion.document_top",
    "G": "motion.document_bottom",
    "x": "edit.delete_char",
    "d": "edit.delete_line",
    "w": "edit.save",
    "i": "core.enter_insert",
    "I": "core.insert_line_start",
    "a": "core.append",
    "A": "core.append_line_end",
    "o": "core.open_below",
    "O": "core.open_above",
}


def _default(mode: str, trigger: Trigger, action_id: str) -> Binding:
    return Binding(
        id=f"{mode}.{trigger.kind}.{trigger.value}",
        mode=mode,
        trigger=trigger,
        action_id=action_id,
        origin="default",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    *(
        _default("normal", Trigger.text(text), action_id)
        for text, action_id in NORMAL_COMMANDS.items()
    ),
    # Normal has nothing to cancel, but Escape is still consumed there.
    _default("normal", Trigger.key(ESCAPE), "core.noop"),
    _default("insert", Trigger.key(ESCAPE), "core.exit_to_normal"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings, then ``extra_bindings``.

    ``include_bindings`` / ``exclude_bindings`` filter the built-in bindings by
    id (e.g. ``"normal.text.w"``); extras are always registered.
    """

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    include: Optional[set[str]] = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id not in exclude:
            registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "ESCAPE",
    "NORMAL_COMMANDS",
    "load_default_keymaps",
]
