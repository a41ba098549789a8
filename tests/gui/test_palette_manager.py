"""PaletteManager: catalog, activation, hot reload and change broadcast."""

import pytest

from palettekit.gui.theme import (
    DEFAULT_PALETTE_NAME,
    PALETTES,
    Color,
    FieldId,
    OverridePalette,
    PaletteManager,
    ResolvedPalette,
)

ORANGE = Color(255, 140, 0)


class TestConstruction:
    def test_builtins_registered_in_order(self, manager):
        assert manager.names == list(PALETTES)
        assert manager.names[0] == DEFAULT_PALETTE_NAME

    def test_starts_on_default_palette(self, manager):
        assert manager.active_name == DEFAULT_PALETTE_NAME
        assert manager.current_table == manager.default_table == ResolvedPalette.defaults()

    def test_bare_manager_has_empty_catalog(self, bare_manager):
        assert bare_manager.names == []
        assert bare_manager.active_name == ""

    def test_custom_defaults(self):
        defaults = ResolvedPalette.defaults().replace({"accent": "#808080"})
        m = PaletteManager(defaults=defaults, register_builtins=False)
        assert m.default_table.accent == Color(128, 128, 128)
        assert m.current_table == defaults


class TestRegistration:
    def test_new_names_append_in_registration_order(self, bare_manager):
        bare_manager.register_palette("Zeta", OverridePalette())
        bare_manager.register_palette("Alpha", OverridePalette())
        bare_manager.register_palette("Mid", OverridePalette())

        assert bare_manager.names == ["Zeta", "Alpha", "Mid"]

    def test_replacing_keeps_position(self, bare_manager, ember):
        bare_manager.register_palette("A", OverridePalette())
        bare_manager.register_palette("B", OverridePalette())
        bare_manager.register_palette("A", ember)

        assert bare_manager.names == ["A", "B"]
        assert bare_manager.get_overrides("A") == ember

    def test_registering_inactive_palette_does_not_broadcast(self, manager, recorder_factory, ember):
        rec = recorder_factory()
        manager.add_listener(rec)

        manager.register_palette("Ember", ember)

        assert rec.calls == 0
        assert manager.current_table == manager.default_table

    def test_reregistering_active_palette_applies_it(self, manager, recorder_factory, ember):
        manager.register_palette("Ember", ember)
        manager.set_active("Ember")
        rec = recorder_factory()
        manager.add_listener(rec)

        manager.register_palette("Ember", OverridePalette({"accent": "#00ff00"}))

        assert rec.calls == 1
        assert manager.current_table.accent == Color(0, 255, 0)

    def test_reregistering_active_palette_with_same_values_is_silent(self, manager, recorder_factory, ember):
        manager.register_palette("Ember", ember)
        manager.set_active("Ember")
        rec = recorder_factory()
        manager.add_listener(rec)

        manager.register_palette("Ember", OverridePalette({"accent": ORANGE}))

        assert rec.calls == 0


class TestActivation:
    def test_ember_scenario(self, manager, ember):
        manager.register_palette("Ember", ember)

        assert manager.set_active("Ember") is True

        table = manager.current_table
        assert manager.active_name == "Ember"
        assert table.accent == ORANGE
        assert table.board_light == manager.default_table.board_light
        assert table.board_dark == manager.default_table.board_dark

    def test_set_active_twice_broadcasts_once(self, manager, recorder_factory, ember):
        manager.register_palette("Ember", ember)
        rec = recorder_factory()
        manager.add_listener(rec)

        manager.set_active("Ember")
        manager.set_active("Ember")

        assert rec.calls == 1

    def test_unknown_name_is_noop(self, manager, recorder_factory, ember):
        manager.register_palette("Ember", ember)
        manager.set_active("Ember")
        before_table = manager.current_table
        rec = recorder_factory()
        manager.add_listener(rec)

        assert manager.set_active("does-not-exist") is False

        assert manager.current_table == before_table
        assert manager.active_name == "Ember"
        assert rec.calls == 0

    def test_activating_equal_palette_switches_name_without_broadcast(self, manager, recorder_factory):
        manager.register_palette("Plain", OverridePalette())
        rec = recorder_factory()
        manager.add_listener(rec)

        manager.set_active("Plain")

        assert manager.active_name == "Plain"
        assert rec.calls == 0

    @pytest.mark.parametrize("name", list(PALETTES))
    def test_every_builtin_palette_activates(self, manager, name):
        assert manager.set_active(name)
        for field_id, color in PALETTES[name].items():
            assert manager.current_table[field_id] == color


class TestLoadOverrides:
    def test_applies_without_changing_active_name(self, manager, recorder_factory, ember):
        rec = recorder_factory()
        manager.add_listener(rec)

        assert manager.load_overrides(ember) is True

        assert manager.current_table.accent == ORANGE
        assert manager.active_name == DEFAULT_PALETTE_NAME
        assert rec.calls == 1

    def test_identical_table_is_noop(self, manager, recorder_factory):
        rec = recorder_factory()
        manager.add_listener(rec)

        assert manager.load_overrides(OverridePalette()) is False
        assert rec.calls == 0

    def test_explicit_default_values_compare_equal(self, manager, recorder_factory):
        rec = recorder_factory()
        manager.add_listener(rec)

        manager.load_overrides(OverridePalette({FieldId.ACCENT: manager.default_table.accent}))

        assert rec.calls == 0


class TestListeners:
    def test_remove_listener_stops_notifications(self, manager, recorder_factory, ember):
        rec = recorder_factory()
        listener_id = manager.add_listener(rec)
        manager.remove_listener(listener_id)

        manager.load_overrides(ember)

        assert rec.calls == 0
        assert manager.listener_count == 0

    def test_listener_sees_new_table(self, manager, ember):
        seen = []
        manager.add_listener(lambda: seen.append(manager.current_table.accent))

        manager.load_overrides(ember)

        assert seen == [ORANGE]

    def test_self_removal_during_broadcast(self, manager, recorder_factory, ember):
        first = recorder_factory("first")
        last = recorder_factory("last")
        ids = {}
        removed_calls = []

        def remove_self():
            removed_calls.append(1)
            manager.remove_listener(ids["self"])

        manager.add_listener(first)
        ids["self"] = manager.add_listener(remove_self)
        manager.add_listener(last)

        manager.load_overrides(ember)

        assert first.calls == 1
        assert last.calls == 1
        assert removed_calls == [1]

        manager.load_overrides(OverridePalette())

        assert first.calls == 2
        assert last.calls == 2
        assert removed_calls == [1]

    def test_failing_listener_keeps_name_and_table_in_step(self, manager, recorder_factory, ember):
        manager.register_palette("Ember", ember)

        def broken():
            raise RuntimeError("listener exploded")

        manager.add_listener(broken)
        later = recorder_factory("later")
        manager.add_listener(later)

        with pytest.raises(RuntimeError):
            manager.set_active("Ember")

        assert manager.active_name == "Ember"
        assert manager.current_table.accent == ORANGE
        assert later.calls == 1
