"""Deduplicating snapshot of a PaletteManager's resolved table."""

from __future__ import annotations

from typing import Optional

from palettekit.core.listeners import Listener, ListenerId, ListenerSet
from palettekit.logging import get_logger

from .color import Color
from .schema import FIELD_OFFSETS, FieldKey, ResolvedPalette, to_field_id, read_color_at
from .palette_manager import PaletteManager

logger = get_logger(__name__)


class PaletteCache:
    """
    The single "did the effective colours change" point for consumers.

    The manager may notify more often than the colours actually change (for
    example when the active palette is re-registered with identical values).
    The cache compares every field against its snapshot and only notifies
    its own listeners on a real difference.
    """

    def __init__(self, manager: PaletteManager):
        self._manager = manager
        self._colors = manager.current_table
        self._packed = self._colors.to_bytes()
        self._listeners = ListenerSet()
        self._manager_listener: Optional[ListenerId] = manager.add_listener(self._on_manager_changed)

    def _on_manager_changed(self) -> None:
        if self.refresh_from_manager():
            self._listeners.notify()

    def refresh_from_manager(self) -> bool:
        """Pull the manager's table. Returns True if the snapshot changed."""
        fresh = self._manager.current_table
        if fresh == self._colors:
            return False

        logger.debug(f"Palette snapshot changed in {len(fresh.diff(self._colors))} fields")
        self._colors = fresh
        self._packed = fresh.to_bytes()
        return True

    @property
    def colors(self) -> ResolvedPalette:
        return self._colors

    def color(self, field_id: FieldKey) -> Color:
        """O(1) lookup through the packed snapshot and the offset table."""
        return read_color_at(self._packed, FIELD_OFFSETS[to_field_id(field_id)])

    def add_listener(self, callback: Listener) -> ListenerId:
        return self._listeners.add(callback)

    def remove_listener(self, listener_id: ListenerId) -> None:
        self._listeners.remove(listener_id)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def close(self) -> None:
        """Stop following the manager. Safe to call more than once."""
        if self._manager_listener is not None:
            self._manager.remove_listener(self._manager_listener)
            self._manager_listener = None
