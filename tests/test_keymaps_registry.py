import pytest

from modal_edit.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    Trigger,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    trigger: Trigger | None = None,
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        trigger=trigger or Trigger.text("z"),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    action = make_action()
    registry.register_action(action)
    binding = make_binding(binding_id="normal.z")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    binding = make_binding(binding_id="normal.z")
    registry.register_binding(binding)

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.z.duplicate"))


def test_same_trigger_in_other_mode_does_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.z"))
    registry.register_binding(make_binding(binding_id="insert.z", mode="insert"))

    assert registry.stats().modes == ("insert", "normal")


def test_text_and_key_triggers_are_distinct() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(
        make_binding(binding_id="text", trigger=Trigger.text("Escape"))
    )
    registry.register_binding(
        make_binding(binding_id="key", trigger=Trigger.key("Escape"))
    )

    assert registry.lookup("normal", "text:Escape").id == "text"
    assert registry.lookup("normal", "key:Escape").id == "key"


def test_register_binding_unknown_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.z"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="other")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.lookup("normal", "text:z") is None


def test_trigger_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        Trigger("mouse", "left")  # type: ignore[arg-type]


def test_load_default_keymaps_covers_both_modes() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().modes == ("insert", "normal")
    assert registry.get_binding("normal.text.i").action_id == "core.enter_insert"
    assert registry.get_binding("insert.key.Escape").action_id == "core.exit_to_normal"
    assert registry.lookup("normal", "text:q") is None


def test_load_default_keymaps_include_filters() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, include_bindings=("normal.text.i",))

    assert registry.stats().binding_count == 1
    assert registry.get_binding("normal.text.i").action_id == "core.enter_insert"


def test_load_default_keymaps_extra_binding_replaces_default() -> None:
    registry = KeymapRegistry()
    custom = Binding(
        id="normal.text.e",
        mode="normal",
        trigger=Trigger.text("i"),
        action_id="core.append",
    )

    load_default_keymaps(registry, replace=True, extra_bindings=(custom,))

    assert registry.lookup("normal", "text:i") == custom
