from __future__ import annotations

from modal_edit.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    Trigger,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    mode: str = "normal",
    trigger: Trigger = Trigger.text("x"),
    action_id: str = "core.test",
) -> Binding:
    return Binding(id=binding_id, mode=mode, trigger=trigger, action_id=action_id)


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_token() -> None:
    binding = make_binding("normal.x")
    resolver = KeymapResolver(build_registry([binding]))

    result = resolver.resolve("normal", "text:x")

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "core.test"


def test_resolver_is_scoped_to_mode() -> None:
    resolver = KeymapResolver(build_registry([make_binding("normal.x")]))

    assert resolver.resolve("insert", "text:x").status == "miss"


def test_resolver_misses_multi_character_token() -> None:
    resolver = KeymapResolver(build_registry([make_binding("normal.x")]))

    assert resolver.resolve("normal", "text:xx").status == "miss"


def test_resolver_cache_refreshes_on_revision() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    miss = resolver.resolve("normal", "text:x")
    assert miss.status == "miss"

    new_binding = make_binding("normal.x", action_id="core.x")
    registry.register_action(make_action("core.x"))
    registry.register_binding(new_binding)

    match = resolver.resolve("normal", "text:x")
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == new_binding.id
