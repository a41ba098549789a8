"""Semantic UI roles derived from the resolved palette, and a Qt stylesheet built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from palettekit.logging import get_logger

from .color import Color
from .palette_cache import PaletteCache
from .schema import ResolvedPalette

logger = get_logger(__name__)

ON_COLOR_LUMA_THRESHOLD = 0.55


@dataclass(frozen=True)
class UiTheme:
    """Colours for generic widgets (panels, buttons, inputs, toasts)."""

    bg_top: Color
    bg_bottom: Color
    panel: Color
    panel_border: Color
    button: Color
    button_hover: Color
    button_active: Color
    accent: Color
    text: Color
    subtle: Color
    input_bg: Color
    input_border: Color
    valid: Color
    invalid: Color
    toast_bg: Color
    on_button: Color
    on_accent: Color


def pick_on(background: Color, light: Color, dark: Color) -> Color:
    """Readable foreground for a background: light text on dark, dark text on light."""
    return light if background.luma < ON_COLOR_LUMA_THRESHOLD else dark


def build_ui_theme(p: ResolvedPalette) -> UiTheme:
    return UiTheme(
        bg_top=p.bg_top,
        bg_bottom=p.bg_bottom,
        panel=p.panel_trans,
        panel_border=p.panel_border_alt,
        button=p.button,
        button_hover=p.button_active,
        button_active=p.button_active,
        accent=p.accent,
        text=p.text,
        subtle=p.muted_text,
        input_bg=p.input_bg,
        input_border=p.input_border,
        valid=p.valid,
        invalid=p.invalid,
        toast_bg=p.panel_alpha220,
        on_button=p.text,
        on_accent=pick_on(p.accent, p.light_text, p.dark_text),
    )


def _rgba(c: Color) -> str:
    return f"rgba({c.r}, {c.g}, {c.b}, {c.a})"


def build_stylesheet(t: UiTheme) -> str:
    return f"""
QWidget {{
    background-color: {_rgba(t.bg_top)};
    color: {_rgba(t.text)};
}}

QFrame#panel {{
    background-color: {_rgba(t.panel)};
    border: 1px solid {_rgba(t.panel_border)};
    border-radius: 6px;
}}

QPushButton {{
    background-color: {_rgba(t.button)};
    color: {_rgba(t.on_button)};
    border: 1px solid {_rgba(t.panel_border)};
    border-radius: 4px;
    padding: 6px 12px;
}}

QPushButton:hover {{
    background-color: {_rgba(t.button_hover)};
}}

QPushButton:pressed {{
    background-color: {_rgba(t.button_active)};
}}

QPushButton#accent {{
    background-color: {_rgba(t.accent)};
    color: {_rgba(t.on_accent)};
}}

QLabel#subtle {{
    color: {_rgba(t.subtle)};
}}

QLineEdit {{
    background-color: {_rgba(t.input_bg)};
    border: 1px solid {_rgba(t.input_border)};
    border-radius: 4px;
    padding: 4px 8px;
}}

QLineEdit[valid="true"] {{
    border-color: {_rgba(t.valid)};
}}

QLineEdit[valid="false"] {{
    border-color: {_rgba(t.invalid)};
}}

QToolTip {{
    background-color: {_rgba(t.toast_bg)};
    color: {_rgba(t.text)};
}}
"""


class UiThemeCache(QObject):
    """Keeps a UiTheme in sync with a PaletteCache and emits theme_changed on rebuild."""

    theme_changed = pyqtSignal(object)

    def __init__(self, cache: PaletteCache, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._cache = cache
        self._theme = build_ui_theme(cache.colors)
        self._listener_id: Optional[int] = cache.add_listener(self._rebuild)

    def _rebuild(self) -> None:
        self._theme = build_ui_theme(self._cache.colors)
        logger.debug("UI theme rebuilt")
        self.theme_changed.emit(self._theme)

    @property
    def theme(self) -> UiTheme:
        return self._theme

    @property
    def stylesheet(self) -> str:
        return build_stylesheet(self._theme)

    def close(self) -> None:
        if self._listener_id is not None:
            self._cache.remove_listener(self._listener_id)
            self._listener_id = None
