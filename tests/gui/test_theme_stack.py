import pytest

from palettekit.core.settings import set_setting
from palettekit.gui.theme import DEFAULT_PALETTE_NAME, PALETTES
from palettekit.gui.theme_stack import create_theme_stack


@pytest.fixture
def make_stack(qapp):
    stacks = []

    def _make(*args, **kwargs):
        kwargs.setdefault("asset_dirs", [])
        stack = create_theme_stack(*args, **kwargs)
        stacks.append(stack)
        return stack

    yield _make
    for stack in stacks:
        stack.close()


def test_defaults_to_default_palette(make_stack):
    stack = make_stack()

    assert stack.manager.active_name == DEFAULT_PALETTE_NAME
    assert stack.cache.colors == stack.manager.current_table
    assert stack.resources.rebuild_count == 1


def test_explicit_palette(make_stack):
    stack = make_stack("Amethyst")

    assert stack.manager.active_name == "Amethyst"
    assert stack.cache.colors == stack.manager.current_table
    assert stack.ui.theme.accent == stack.cache.colors.accent
    assert stack.resources.rebuild_count == 2


def test_palette_from_settings(make_stack):
    set_setting("palette", "Soft Pink")

    stack = make_stack()

    assert stack.manager.active_name == "Soft Pink"


def test_unknown_saved_palette_falls_back(make_stack):
    set_setting("palette", "Nonexistent")

    stack = make_stack()

    assert stack.manager.active_name == DEFAULT_PALETTE_NAME


def test_layers_are_wired_together(make_stack):
    stack = make_stack()
    received = []
    stack.ui.theme_changed.connect(received.append)

    stack.manager.set_active("Kintsugi Jade")

    assert stack.cache.colors == stack.manager.current_table
    assert stack.resources.rebuild_count == 2
    assert len(received) == 1


def test_close_detaches_every_layer(make_stack):
    stack = make_stack()
    stack.close()

    assert stack.manager.listener_count == 0
    assert stack.cache.listener_count == 0


@pytest.mark.parametrize("name", list(PALETTES))
def test_every_builtin_palette_builds_resources(make_stack, name):
    stack = make_stack(name)
    for resource in stack.resources.names():
        assert not stack.resources.get(resource).isNull()


@pytest.mark.parametrize("bad_value", [["Amethyst"], 3, {"name": "Amethyst"}])
def test_non_string_palette_setting_falls_back(make_stack, bad_value):
    set_setting("palette", bad_value)

    stack = make_stack()

    assert stack.manager.active_name == DEFAULT_PALETTE_NAME
