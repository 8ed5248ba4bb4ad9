"""Text edits and persistence triggered from the command tables."""

from __future__ import annotations

from modal_edit.buffer import BufferFileError
from modal_edit.modes.base_mode import ModeContext, ModeResult
from modal_edit.runtime import telemetry


def delete_char(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.delete_char_at_cursor()
    return ModeResult(consumed=True, status="edit")


def delete_line(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.delete_current_line()
    return ModeResult(consumed=True, status="edit")


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Splice ``text`` at the cursor and step past it."""

    context.buffer.insert_text(text)
    context.buffer.move_right_by(len(text))
    return ModeResult(consumed=True, status="insert")


def save_buffer(context: ModeContext, match) -> ModeResult:
    """Write the buffer; failures are returned, never raised."""

    del match
    buffer = context.buffer
    try:
        buffer.save()
    except BufferFileError as exc:
        telemetry.record_event(
            "buffer.save_failed",
            level="error",
            data={"path": exc.path, "reason": str(exc)},
        )
        context.bus.emit("buffer.save_failed", exc)
        return ModeResult(
            consumed=True,
            status="save_failed",
            message=f"save failed: {exc}",
            error=exc,
        )

    context.bus.emit("buffer.saved", buffer.source_path)
    return ModeResult(
        consumed=True,
        status="saved",
        message=f"written {buffer.source_path} ({buffer.line_count} lines)",
    )


__all__ = ["delete_char", "delete_line", "insert_text", "save_buffer"]
