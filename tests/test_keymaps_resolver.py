from __future__ import annotations

from modal_engine.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    load_default_keymaps,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda context, match: None)


def make_binding(
    *keys: str, mode: str = "normal", action_id: str = "core.test"
) -> Binding:
    return Binding.for_keys(mode, keys or ("g", "g"), action_id)


def make_resolver(*bindings: Binding) -> KeymapResolver:
    registry = KeymapRegistry()
    for action_id in sorted({binding.action_id for binding in bindings}):
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return KeymapResolver(registry)


def test_resolver_matches_exact_sequence() -> None:
    binding = make_binding("g", "g")
    resolver = make_resolver(binding)

    result = resolver.resolve("normal", ("g", "g"))

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding == binding
    assert result.consumed == 2


def test_resolver_reports_pending_for_prefix() -> None:
    resolver = make_resolver(make_binding("g", "g"), make_binding("g", "u"))

    result = resolver.resolve("normal", ("g",))

    assert result.status == "pending"
    assert result.next_expected == ("g", "u")


def test_resolver_is_scoped_by_mode() -> None:
    resolver = make_resolver(make_binding("g", "g"))

    assert resolver.resolve("insert", ("g", "g")).status == "miss"


def test_resolver_reports_miss_for_unknown_tokens() -> None:
    resolver = make_resolver(make_binding("g", "g"))

    result = resolver.resolve("normal", ("g", "x"))

    assert result.status == "miss"
    assert result.consumed == 1


def test_empty_token_list_is_a_miss() -> None:
    resolver = make_resolver(make_binding("x"))

    assert resolver.resolve("normal", ()).status == "miss"


def test_shorter_binding_wins_over_longer_prefix() -> None:
    resolver = make_resolver(
        make_binding("g", action_id="core.short"),
        make_binding("g", "g", action_id="core.long"),
    )

    result = resolver.resolve("normal", ("g",))

    assert result.status == "match"
    assert result.match is not None
    assert result.match.action.id == "core.short"


def test_resolver_sees_bindings_added_later() -> None:
    registry = KeymapRegistry()
    resolver = KeymapResolver(registry)
    assert resolver.resolve("normal", ("x",)).status == "miss"

    registry.register_action(make_action("core.x"))
    registry.register_binding(make_binding("x", action_id="core.x"))

    assert resolver.resolve("normal", ("x",)).status == "match"


def test_resolver_forgets_removed_bindings() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action("core.test"))
    binding = registry.register_binding(make_binding("x"))
    resolver = KeymapResolver(registry)
    assert resolver.resolve("normal", ("x",)).status == "match"

    registry.unregister_binding(binding.id)

    assert resolver.resolve("normal", ("x",)).status == "miss"


def test_modifier_tokens_resolve() -> None:
    resolver = make_resolver(make_binding("ctrl+s", action_id="core.save"))

    result = resolver.resolve("normal", ("ctrl+s",))

    assert result.match is not None
    assert result.match.action.id == "core.save"


def test_default_keymaps_resolve_escape_in_insert_mode() -> None:
    resolver = KeymapResolver(load_default_keymaps(KeymapRegistry()))

    result = resolver.resolve("insert", ("ESC",))

    assert result.match is not None
    assert result.match.action.id == "core.exit_to_normal"
