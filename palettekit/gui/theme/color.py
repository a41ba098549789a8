"""Immutable RGBA colour value used throughout the palette model."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

COLOR_STRIDE = 4  # bytes per packed colour (r, g, b, a)


@dataclass(frozen=True)
class Color:
    """8-bit RGBA colour. Alpha defaults to opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {self!r}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse '#RRGGBB' or '#RRGGBBAA'."""
        value = text.strip().lstrip('#')
        if len(value) not in (6, 8):
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            channels = [int(value[i:i + 2], 16) for i in range(0, len(value), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        return cls(*channels)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Color":
        if len(data) != COLOR_STRIDE:
            raise ValueError(f"Expected {COLOR_STRIDE} bytes, got {len(data)}")
        return cls(data[0], data[1], data[2], data[3])

    @classmethod
    def from_qcolor(cls, color: QColor) -> "Color":
        return cls(color.red(), color.green(), color.blue(), color.alpha())

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b, self.a))

    def to_qcolor(self) -> QColor:
        return QColor(self.r, self.g, self.b, self.a)

    def hex(self, with_alpha: bool = True) -> str:
        """'#rrggbbaa' (or '#rrggbb' when with_alpha is False)."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if with_alpha:
            text += f"{self.a:02x}"
        return text

    def with_alpha(self, alpha: int) -> "Color":
        return Color(self.r, self.g, self.b, alpha)

    @property
    def luma(self) -> float:
        """Relative luminance in [0, 1] (Rec. 709 weights, alpha ignored)."""
        return (0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b) / 255.0


TRANSPARENT = Color(0, 0, 0, 0)
