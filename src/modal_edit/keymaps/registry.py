"""Registry of actions and the per-mode bindings that reach them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from modal_edit.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(frozen=True, slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Two bindings claim the same trigger in one mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"binding '{binding.id}' conflicts with '{existing.id}' "
            f"on {binding.token!r} in {binding.mode} mode"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns actions and bindings; ``revision`` changes whenever bindings do."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._tables: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    @property
    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        if action_id not in self._actions:
            raise KeyError(f"action '{action_id}' is not registered")
        return self._actions[action_id]

    def get_binding(self, binding_id: str) -> Binding:
        if binding_id not in self._bindings:
            raise KeyError(f"binding '{binding_id}' is not registered")
        return self._bindings[binding_id]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Add ``binding``; with ``replace`` it evicts whatever it collides with."""

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                raise KeyError(
                    f"binding '{binding.id}' references unknown action "
                    f"'{binding.action_id}'"
                )
            existing = self.lookup(binding.mode, binding.token)
            if existing is not None and existing.id != binding.id:
                if not replace:
                    raise KeymapConflictError(binding, existing)
                handle.add_metadata("evicted", existing.id)
                self._drop(existing)
            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"binding id '{binding.id}' already registered")
                self._drop(self._bindings[binding.id])

            self._bindings[binding.id] = binding
            self._tables.setdefault(binding.mode, {})[binding.token] = binding.id
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is not None:
            self._drop(binding)
            self._revision += 1
        return binding

    def lookup(self, mode: str, token: str) -> Optional[Binding]:
        binding_id = self._tables.get(mode, {}).get(token)
        return None if binding_id is None else self._bindings[binding_id]

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            return iter(list(self._bindings.values()))
        table = self._tables.get(mode, {})
        return (self._bindings[binding_id] for binding_id in list(table.values()))

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._tables)),
        )

    def _drop(self, binding: Binding) -> None:
        del self._bindings[binding.id]
        table = self._tables[binding.mode]
        if table.get(binding.token) == binding.id:
            del table[binding.token]
        if not table:
            del self._tables[binding.mode]


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
