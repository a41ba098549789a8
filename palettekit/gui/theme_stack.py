"""Production wiring: one PaletteManager, PaletteCache, ResourceTable and UiThemeCache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from palettekit.core.settings import get_setting
from palettekit.gui.resource_table import ResourceTable
from palettekit.gui.theme import DEFAULT_PALETTE_NAME, PaletteCache, PaletteManager
from palettekit.gui.theme.ui_theme import UiThemeCache
from palettekit.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ThemeStack:
    """The shared theme state, created once at start-up and passed to consumers."""

    manager: PaletteManager
    cache: PaletteCache
    resources: ResourceTable
    ui: UiThemeCache

    def close(self) -> None:
        """Detach every layer from the one above it."""
        self.ui.close()
        self.resources.close()
        self.cache.close()


def create_theme_stack(palette_name: Optional[str] = None, **resource_kwargs) -> ThemeStack:
    """Build the stack and activate a palette.

    The palette defaults to the "palette" setting, then to the Default palette.
    Extra keyword arguments go to ResourceTable.
    """
    manager = PaletteManager()
    cache = PaletteCache(manager)
    resources = ResourceTable(cache, **resource_kwargs)
    ui = UiThemeCache(cache)

    name = palette_name or get_setting("palette", DEFAULT_PALETTE_NAME)
    if not isinstance(name, str):
        logger.warning(f"Ignoring invalid palette setting: {name!r}")
        name = DEFAULT_PALETTE_NAME
    if not manager.set_active(name):
        logger.warning(f"Falling back to palette: {DEFAULT_PALETTE_NAME}")
        manager.set_active(DEFAULT_PALETTE_NAME)

    return ThemeStack(manager=manager, cache=cache, resources=resources, ui=ui)
