from __future__ import annotations

import pytest

from modal_engine.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)
from modal_engine.keymaps.defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda context, match: None)


def make_binding(
    *keys: str, mode: str = "normal", action_id: str = "core.test"
) -> Binding:
    return Binding.for_keys(mode, keys or ("g", "g"), action_id)


def make_registry(*action_ids: str) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in action_ids or ("core.test",):
        registry.register_action(make_action(action_id))
    return registry


def test_keystroke_normalizes_modifiers() -> None:
    stroke = KeyStroke("x", ("Shift", "CTRL", "ctrl", " "))

    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+x"


@pytest.mark.parametrize(
    ("token", "key", "modifiers"),
    [
        ("x", "x", ()),
        ("+", "+", ()),
        ("ctrl+x", "x", ("ctrl",)),
        ("shift+ctrl+ENTER", "ENTER", ("ctrl", "shift")),
        ("ctrl++", "+", ("ctrl",)),
    ],
)
def test_keystroke_parse(token: str, key: str, modifiers: tuple[str, ...]) -> None:
    stroke = KeyStroke.parse(token)

    assert (stroke.key, stroke.modifiers) == (key, modifiers)


def test_empty_key_and_sequence_rejected() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")
    with pytest.raises(ValueError):
        KeySequence.from_strings()


def test_binding_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        make_binding("x", mode="replace")


def test_binding_for_keys_builds_id() -> None:
    binding = make_binding("g", "g")

    assert binding.id == "normal.core.test.gg"
    assert binding.key_signature == "g g"


def test_register_binding_success() -> None:
    registry = make_registry()
    binding = make_binding()

    registry.register_binding(binding)

    assert len(registry) == 1
    assert binding.id in registry
    assert list(registry.bindings_for("normal")) == [binding]
    assert registry.lookup("normal", "g g") == binding


def test_register_binding_bumps_revision() -> None:
    registry = make_registry()
    before = registry.revision

    registry.register_binding(make_binding())

    assert registry.revision == before + 1


def test_same_keys_in_one_mode_conflict() -> None:
    registry = make_registry("core.test", "core.other")
    first = registry.register_binding(make_binding())

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(action_id="core.other"))

    assert excinfo.value.existing == first


def test_same_keys_in_different_modes_do_not_conflict() -> None:
    registry = make_registry()

    registry.register_binding(make_binding())
    registry.register_binding(make_binding(mode="visual"))

    assert len(registry) == 2
    assert registry.modes() == ("normal", "visual")


def test_register_binding_unknown_action_rejected() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding())


def test_duplicate_action_rejected_unless_replaced() -> None:
    registry = make_registry()

    with pytest.raises(ValueError):
        registry.register_action(make_action())
    registry.register_action(make_action(), replace=True)

    assert registry.action_ids() == ("core.test",)


def test_replace_evicts_owner_of_key_sequence() -> None:
    registry = make_registry("core.test", "core.other")
    registry.register_binding(make_binding("x"))

    newer = registry.register_binding(make_binding("x", action_id="core.other"), replace=True)

    assert list(registry) == [newer]
    assert registry.lookup("normal", "x") == newer


def test_replace_by_id_moves_binding_to_new_keys() -> None:
    registry = make_registry()
    old = Binding("custom", "normal", KeySequence.from_strings("x"), "core.test")
    new = Binding("custom", "normal", KeySequence.from_strings("y"), "core.test")
    registry.register_binding(old)

    registry.register_binding(new, replace=True)

    assert registry.lookup("normal", "x") is None
    assert registry.lookup("normal", "y") == new


def test_unregister_binding() -> None:
    registry = make_registry()
    binding = registry.register_binding(make_binding())

    removed = registry.unregister_binding(binding.id)

    assert removed == binding
    assert len(registry) == 0
    assert registry.modes() == ()
    assert registry.unregister_binding(binding.id) is None


def test_load_default_keymaps_registers_everything() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    assert len(registry.action_ids()) == len(DEFAULT_ACTIONS)
    assert len(registry) == len(DEFAULT_BINDINGS)
    assert registry.modes() == ("command", "insert", "normal", "visual")


def test_default_bindings_cover_normal_mode_keys() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    keys = {binding.key_signature for binding in registry.bindings_for("normal")}

    assert keys == set("qiv:hjkleb0gdoOA")


def test_load_default_keymaps_skip() -> None:
    registry = load_default_keymaps(KeymapRegistry(), skip=("normal.core.halt.q",))

    assert "normal.core.halt.q" not in registry
    assert registry.lookup("normal", "q") is None
    assert len(registry) == len(DEFAULT_BINDINGS) - 1


def test_load_default_keymaps_override_rebinds_keys() -> None:
    custom = Binding.for_keys("normal", ("i",), "core.halt")

    registry = load_default_keymaps(KeymapRegistry(), overrides=(custom,))

    assert registry.lookup("normal", "i") == custom
    assert "normal.core.enter_insert.i" not in registry
