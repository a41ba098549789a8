"""
Palette schema: the colour fields, their stable ids, and the sparse/dense records.

_FIELD_TABLE is the single source of truth. FieldId, FIELD_NAMES,
FIELD_DEFAULTS, PALETTE_DTYPE and FIELD_OFFSETS are all generated from it,
so the representations can't drift apart.

Field ordinals may be persisted or referenced externally. Keep the order
stable and append new fields at the end; reordering silently corrupts any
stored override set.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import numpy as np

from palettekit.core.errors import PaletteLayoutError
from palettekit.logging import get_logger

from .color import COLOR_STRIDE, Color

logger = get_logger(__name__)


_FIELD_TABLE: Tuple[Tuple[str, Color], ...] = (
    ("eval_white", Color(255, 252, 250)),
    ("eval_black", Color(30, 28, 32)),
    ("board_light", Color(248, 240, 242)),
    ("board_dark", Color(88, 52, 64)),
    ("select_highlight", Color(200, 120, 135, 170)),
    ("premove_highlight", Color(165, 88, 110, 160)),
    ("warning_highlight", Color(200, 80, 95, 190)),
    ("rclick_highlight", Color(145, 47, 64, 170)),
    ("hover_outline", Color(255, 235, 240, 110)),
    ("marker", Color(145, 47, 64, 65)),
    ("panel", Color(24, 25, 30, 230)),
    ("header", Color(64, 67, 78)),
    ("sidebar_bg", Color(18, 19, 24)),
    ("list_bg", Color(20, 22, 28)),
    ("row_even", Color(24, 26, 32)),
    ("row_odd", Color(22, 24, 30)),
    ("hover_bg", Color(38, 40, 48)),
    ("text", Color(255, 252, 250)),
    ("muted_text", Color(200, 192, 200)),
    ("accent", Color(145, 47, 64)),
    ("accent_hover", Color(170, 66, 83)),
    ("accent_outline", Color(145, 47, 64, 90)),
    ("slot_base", Color(38, 36, 44)),
    ("dark_text", Color(16, 14, 18)),
    ("light_text", Color(255, 250, 248)),
    ("light_bg", Color(228, 220, 228)),
    ("dark_bg", Color(14, 12, 16)),
    ("clock_accent", Color(252, 245, 245)),
    ("tooltip_bg", Color(12, 10, 14, 230)),
    ("disc", Color(34, 36, 42, 150)),
    ("disc_hover", Color(40, 42, 50, 180)),
    ("border", Color(170, 150, 160, 60)),
    ("border_light", Color(170, 150, 160, 50)),
    ("border_bevel", Color(170, 150, 160, 40)),
    ("board_outline", Color(64, 67, 78, 120)),
    ("shadow_light", Color(0, 0, 0, 60)),
    ("shadow_medium", Color(0, 0, 0, 90)),
    ("shadow_strong", Color(0, 0, 0, 140)),
    ("shadow_bar", Color(0, 0, 0, 70)),
    ("move_highlight", Color(145, 47, 64, 48)),
    ("overlay_dim", Color(0, 0, 0, 100)),
    ("overlay", Color(0, 0, 0, 120)),
    ("gold", Color(212, 175, 55)),
    ("white_dim", Color(255, 255, 255, 70)),
    ("white_faint", Color(255, 255, 255, 30)),
    ("score_text_dark", Color(14, 12, 16)),
    ("score_text_light", Color(250, 246, 244)),
    ("low_time", Color(220, 70, 70)),
    ("bg_top", Color(12, 10, 12)),
    ("bg_bottom", Color(8, 7, 5)),
    ("panel_trans", Color(24, 25, 30, 150)),
    ("panel_border_alt", Color(200, 192, 200, 50)),
    ("button", Color(40, 42, 50)),
    ("button_active", Color(70, 72, 84)),
    ("time_off", Color(112, 38, 50)),
    ("input_border", Color(170, 150, 160)),
    ("input_bg", Color(28, 30, 38)),
    ("valid", Color(122, 205, 164)),
    ("invalid", Color(145, 47, 64)),
    ("logo_bg", Color(145, 47, 64, 70)),
    ("top_hilight", Color(255, 255, 255, 18)),
    ("bottom_shadow", Color(0, 0, 0, 40)),
    ("panel_alpha220", Color(24, 25, 30, 220)),
)

FieldId = IntEnum(
    "FieldId",
    [(name.upper(), ordinal) for ordinal, (name, _) in enumerate(_FIELD_TABLE)],
    module=__name__,
)
FieldId.__doc__ = "Stable, append-only identity of one themeable colour attribute."

FIELD_COUNT = len(_FIELD_TABLE)
FIELD_NAMES: Tuple[str, ...] = tuple(name for name, _ in _FIELD_TABLE)
FIELD_DEFAULTS: Tuple[Color, ...] = tuple(default for _, default in _FIELD_TABLE)

_NAME_TO_ID: Dict[str, FieldId] = {name: FieldId(i) for i, name in enumerate(FIELD_NAMES)}

# Packed layout of a resolved palette: one (r, g, b, a) uint8 block per field.
PALETTE_DTYPE = np.dtype([(name, np.uint8, (COLOR_STRIDE,)) for name in FIELD_NAMES])

# FieldId -> byte offset into ResolvedPalette.to_bytes()
FIELD_OFFSETS: Tuple[int, ...] = tuple(PALETTE_DTYPE.fields[name][1] for name in FIELD_NAMES)


def _check_layout() -> None:
    if len(_NAME_TO_ID) != FIELD_COUNT:
        raise PaletteLayoutError("Duplicate field names in the palette field table")
    if PALETTE_DTYPE.itemsize != FIELD_COUNT * COLOR_STRIDE:
        raise PaletteLayoutError(
            f"Packed palette is {PALETTE_DTYPE.itemsize} bytes, "
            f"expected {FIELD_COUNT * COLOR_STRIDE}"
        )
    for field_id in FieldId:
        if FIELD_OFFSETS[field_id] != field_id * COLOR_STRIDE:
            raise PaletteLayoutError(
                f"Field {FIELD_NAMES[field_id]} sits at byte {FIELD_OFFSETS[field_id]}, "
                f"expected {field_id * COLOR_STRIDE}"
            )


_check_layout()


FieldKey = Union[FieldId, int, str]


def field_id_from_name(name: str) -> Optional[FieldId]:
    """Map a field name token to its FieldId, or None when the name is unknown."""
    return _NAME_TO_ID.get(name)


def field_name(field_id: int) -> str:
    return FIELD_NAMES[FieldId(field_id)]


def field_default(field_id: int) -> Color:
    return FIELD_DEFAULTS[FieldId(field_id)]


def field_offset(field_id: int) -> int:
    return FIELD_OFFSETS[FieldId(field_id)]


def read_color_at(buffer: Union[bytes, bytearray, memoryview], offset: int) -> Color:
    """Read the colour stored at a byte offset of a packed palette."""
    return Color.from_bytes(bytes(buffer[offset:offset + COLOR_STRIDE]))


def to_field_id(key: FieldKey) -> FieldId:
    if isinstance(key, str):
        field_id = field_id_from_name(key)
        if field_id is None:
            raise KeyError(key)
        return field_id
    return FieldId(key)


def _to_color(value: Union[Color, str]) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    raise ValueError(f"Expected Color or hex string, got {value!r}")


class ResolvedPalette:
    """
    Dense palette: exactly one concrete Color per FieldId, in ordinal order.

    Instances are immutable values. Equality is field-wise, so two palettes
    built independently compare equal when every colour matches.
    """

    __slots__ = ("_colors",)

    def __init__(self, colors: Iterable[Color]):
        values = tuple(colors)
        if len(values) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} colors, got {len(values)}")
        for value in values:
            if not isinstance(value, Color):
                raise ValueError(f"Expected Color, got {value!r}")
        object.__setattr__(self, "_colors", values)

    def __setattr__(self, name, value):
        raise AttributeError("ResolvedPalette is immutable")

    @classmethod
    def defaults(cls) -> "ResolvedPalette":
        return cls(FIELD_DEFAULTS)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "ResolvedPalette":
        if len(data) != PALETTE_DTYPE.itemsize:
            raise ValueError(f"Expected {PALETTE_DTYPE.itemsize} bytes, got {len(data)}")
        return cls(read_color_at(data, offset) for offset in FIELD_OFFSETS)

    def __getitem__(self, key: FieldKey) -> Color:
        return self._colors[to_field_id(key)]

    def __getattr__(self, name: str) -> Color:
        field_id = _NAME_TO_ID.get(name)
        if field_id is None:
            raise AttributeError(name)
        return self._colors[field_id]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __len__(self) -> int:
        return FIELD_COUNT

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResolvedPalette):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"ResolvedPalette(accent={self.accent.hex()}, board_light={self.board_light.hex()}, ...)"

    def __reduce__(self):
        return (ResolvedPalette, (self._colors,))

    def items(self) -> Iterator[Tuple[FieldId, Color]]:
        return zip(FieldId, self._colors)

    def replace(self, changes: Mapping[FieldKey, Union[Color, str]]) -> "ResolvedPalette":
        """Return a copy with some fields replaced."""
        colors = list(self._colors)
        for key, value in changes.items():
            colors[to_field_id(key)] = _to_color(value)
        return ResolvedPalette(colors)

    def diff(self, other: "ResolvedPalette") -> List[FieldId]:
        """FieldIds whose colours differ between the two palettes."""
        return [field_id for field_id, a, b in zip(FieldId, self._colors, other._colors) if a != b]

    def to_array(self) -> np.ndarray:
        """(FIELD_COUNT, 4) uint8 array, one RGBA row per field."""
        return np.array([(c.r, c.g, c.b, c.a) for c in self._colors], dtype=np.uint8)

    def to_bytes(self) -> bytes:
        """Packed form laid out as PALETTE_DTYPE."""
        return self.to_array().tobytes()

    def to_dict(self) -> Dict[str, str]:
        return {name: color.hex() for name, color in zip(FIELD_NAMES, self._colors)}


class OverridePalette:
    """
    Sparse palette: an optional Color per FieldId. Absent fields inherit.

    Immutable once built; re-registering a theme means building a new one.
    """

    __slots__ = ("_overrides",)

    def __init__(self, overrides: Optional[Mapping[FieldKey, Union[Color, str]]] = None):
        resolved: Dict[FieldId, Color] = {}
        for key, value in (overrides or {}).items():
            resolved[to_field_id(key)] = _to_color(value)
        ordered = dict(sorted(resolved.items()))
        object.__setattr__(self, "_overrides", MappingProxyType(ordered))

    def __setattr__(self, name, value):
        raise AttributeError("OverridePalette is immutable")

    @classmethod
    def from_mapping(cls, mapping: Mapping[FieldKey, Union[Color, str]]) -> "OverridePalette":
        """Build from field names or ids; unknown field names are skipped."""
        known: Dict[FieldKey, Union[Color, str]] = {}
        for key, value in mapping.items():
            if isinstance(key, str) and field_id_from_name(key) is None:
                logger.debug(f"Ignoring unknown palette field: {key}")
                continue
            known[key] = value
        return cls(known)

    def get(self, field_id: FieldKey) -> Optional[Color]:
        return self._overrides.get(to_field_id(field_id))

    def __contains__(self, field_id: FieldKey) -> bool:
        try:
            return to_field_id(field_id) in self._overrides
        except (KeyError, ValueError):
            return False

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)

    def items(self):
        return self._overrides.items()

    def __eq__(self, other) -> bool:
        if not isinstance(other, OverridePalette):
            return NotImplemented
        return dict(self._overrides) == dict(other._overrides)

    def __hash__(self) -> int:
        return hash(tuple(self._overrides.items()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{FIELD_NAMES[k]}={v.hex()}" for k, v in self._overrides.items())
        return f"OverridePalette({fields})"

    def __reduce__(self):
        return (OverridePalette, (dict(self._overrides),))

    def to_dict(self) -> Dict[str, str]:
        return {FIELD_NAMES[k]: v.hex() for k, v in self._overrides.items()}


def resolve(overrides: OverridePalette, defaults: ResolvedPalette) -> ResolvedPalette:
    """Merge a sparse palette onto a dense one: override if present, else default."""
    merged = []
    for field_id, default in zip(FieldId, defaults):
        override = overrides.get(field_id)
        merged.append(default if override is None else override)
    return ResolvedPalette(merged)
