"""Palette registry: named palettes, the active one, and its resolved colours."""

from __future__ import annotations

from typing import Dict, List, Optional

from palettekit.core.listeners import Listener, ListenerId, ListenerSet
from palettekit.logging import get_logger

from .schema import OverridePalette, ResolvedPalette, resolve

logger = get_logger(__name__)


class PaletteManager:
    """
    Owns the palette catalog and the currently resolved colour table.

    Create one per application and hand it to whatever needs it; tests build
    their own isolated instances.

    Listeners are plain callables invoked synchronously after the resolved
    table changes. A listener may remove itself (or others) while being
    notified, but must not call register_palette/set_active/load_overrides
    on the same manager from inside the callback.
    """

    def __init__(
        self,
        defaults: Optional[ResolvedPalette] = None,
        register_builtins: bool = True,
    ):
        self._default = defaults if defaults is not None else ResolvedPalette.defaults()
        self._current = self._default
        self._palettes: Dict[str, OverridePalette] = {}
        self._order: List[str] = []
        self._active = ""
        self._listeners = ListenerSet()

        if register_builtins:
            from . import DEFAULT_PALETTE_NAME, PALETTES

            for name, overrides in PALETTES.items():
                self.register_palette(name, overrides)
            self._active = DEFAULT_PALETTE_NAME

    # ── Catalog ───────────────────────────────────────────────────────────────

    def register_palette(self, name: str, overrides: OverridePalette) -> None:
        """Insert or replace a named palette.

        New names are appended to the display order. Re-registering the
        active palette applies it immediately (live edit / hot reload).
        """
        existed = name in self._palettes
        self._palettes[name] = overrides
        if not existed:
            self._order.append(name)
        logger.debug(f"{'Replaced' if existed else 'Registered'} palette: {name}")

        if name == self._active:
            self.load_overrides(overrides)

    def set_active(self, name: str) -> bool:
        """Activate a registered palette.

        Returns False and leaves everything unchanged if no palette with that
        name is registered.
        """
        overrides = self._palettes.get(name)
        if overrides is None:
            logger.warning(f"Unknown palette: {name}")
            return False

        # Set before broadcasting: listener errors propagate out of load_overrides
        self._active = name
        logger.debug(f"Active palette: {name}")
        self.load_overrides(overrides)
        return True

    def load_overrides(self, overrides: OverridePalette) -> bool:
        """Resolve overrides against the defaults and apply them.

        Does not change active_name. Returns True if the resolved table
        changed (and listeners were notified).
        """
        resolved = resolve(overrides, self._default)
        if resolved == self._current:
            return False

        self._current = resolved
        notified = self._listeners.notify()
        logger.debug(f"Palette table changed, notified {notified} listeners")
        return True

    def has_palette(self, name: str) -> bool:
        return name in self._palettes

    def get_overrides(self, name: str) -> Optional[OverridePalette]:
        return self._palettes.get(name)

    # ── Read-only state ───────────────────────────────────────────────────────

    @property
    def current_table(self) -> ResolvedPalette:
        return self._current

    @property
    def default_table(self) -> ResolvedPalette:
        return self._default

    @property
    def names(self) -> List[str]:
        """Registered palette names in registration order."""
        return list(self._order)

    @property
    def active_name(self) -> str:
        return self._active

    # ── Listeners ─────────────────────────────────────────────────────────────

    def add_listener(self, callback: Listener) -> ListenerId:
        return self._listeners.add(callback)

    def remove_listener(self, listener_id: ListenerId) -> None:
        self._listeners.remove(listener_id)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
