"""Turns a (mode, token) pair into the action bound to it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

from modal_edit.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry

Table = Dict[str, "ResolutionMatch"]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Single-token lookup over per-mode tables built from a registry.

    A mode's table is rebuilt lazily the first time it is consulted after the
    registry's ``revision`` moves.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._tables: Dict[str, Tuple[int, Table]] = {}

    def resolve(self, mode: str, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            metadata={"mode": mode, "token": token},
        ) as handle:
            match = self._table(mode).get(token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult("miss")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult("match", match)

    def _table(self, mode: str) -> Table:
        revision = self._registry.revision
        built = self._tables.get(mode)
        if built is not None and built[0] == revision:
            return built[1]
        table: Table = {}
        for binding in self._registry.iter_bindings(mode):
            action = self._registry.get_action(binding.action_id)
            table[binding.token] = ResolutionMatch(binding, action)
        self._tables[mode] = (revision, table)
        return table


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
