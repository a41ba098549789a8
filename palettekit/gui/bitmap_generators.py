"""
Procedural bitmap generators for palette-derived resources.

Every generator is a pure function of (size, color) returning a fresh
QImage in Format_RGBA8888. The shaded shapes are evaluated per pixel with
numpy, sampling at pixel centres.
"""

from typing import Callable, Dict, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PyQt6.QtCore import QRect
from PyQt6.QtGui import QImage, QPainter

from palettekit.gui.theme.color import Color

Size = Tuple[int, int]
BitmapGenerator = Callable[[Size, Color], QImage]

FloatArray = npt.NDArray[np.float32]
UInt8Array = npt.NDArray[np.uint8]


def _smoothstep(edge0: float, edge1: float, x: FloatArray) -> FloatArray:
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return (t * t * (3.0 - 2.0 * t)).astype(np.float32)


def _pixel_centres(width: int, height: int) -> Tuple[FloatArray, FloatArray]:
    """Pixel-centre coordinates relative to the image centre, in pixels."""
    xs = np.arange(width, dtype=np.float32) + 0.5 - width / 2.0
    ys = np.arange(height, dtype=np.float32) + 0.5 - height / 2.0
    return np.meshgrid(xs, ys)


def _rounded_rect_distance(
    px: FloatArray, py: FloatArray, half_w: float, half_h: float, radius: float
) -> FloatArray:
    """Signed distance to a rounded rectangle centred at the origin."""
    qx = np.abs(px) - (half_w - radius)
    qy = np.abs(py) - (half_h - radius)
    outside = np.hypot(np.maximum(qx, 0.0), np.maximum(qy, 0.0))
    return (outside - radius).astype(np.float32)


def _compose(color: Color, rgb_scale: FloatArray, alpha: FloatArray, add: Optional[FloatArray] = None) -> UInt8Array:
    """Shade a flat colour per pixel and pack it as an (h, w, 4) uint8 array."""
    base = np.array([color.r, color.g, color.b], dtype=np.float32) / 255.0
    rgb = base[None, None, :] * rgb_scale[..., None]
    if add is not None:
        rgb = rgb + add[..., None]
    out = np.empty(alpha.shape + (4,), dtype=np.uint8)
    out[..., :3] = np.round(np.clip(rgb, 0.0, 1.0) * 255.0).astype(np.uint8)
    out[..., 3] = np.round(np.clip(alpha * (color.a / 255.0), 0.0, 1.0) * 255.0).astype(np.uint8)
    return out


def array_to_image(arr: UInt8Array) -> QImage:
    """Copy an (h, w, 4) RGBA uint8 array into a QImage that owns its pixels."""
    arr = np.ascontiguousarray(arr, dtype=np.uint8)
    height, width = arr.shape[:2]
    image = QImage(arr.tobytes(), width, height, width * 4, QImage.Format.Format_RGBA8888)
    return image.copy()


def image_to_array(image: QImage) -> UInt8Array:
    """(h, w, 4) RGBA uint8 copy of a QImage's pixels."""
    image = image.convertToFormat(QImage.Format.Format_RGBA8888)
    width, height = image.width(), image.height()
    ptr = image.constBits()
    raw = np.frombuffer(ptr.asstring(image.sizeInBytes()), dtype=np.uint8)
    rows = raw.reshape(height, image.bytesPerLine())[:, :width * 4]
    return rows.reshape(height, width, 4).copy()


def make_solid(size: Size, color: Color) -> QImage:
    """Flat fill."""
    width, height = size
    image = QImage(width, height, QImage.Format.Format_RGBA8888)
    image.fill(color.to_qcolor())
    return image


def make_dot_marker(size: Size, color: Color) -> QImage:
    """Soft filled disc with a slightly boosted core and a small highlight."""
    width, height = size
    px, py = _pixel_centres(width, height)
    extent = float(min(width, height))
    d = np.hypot(px, py) / extent
    radius = 0.35
    softness = 3.0 / extent

    coverage = (1.0 - _smoothstep(radius - softness, radius + softness, d)) ** 1.2
    core = 1.0 + 0.08 * (1.0 - _smoothstep(0.0, radius * 0.9, d))
    highlight = (1.0 - _smoothstep(0.0, radius * 0.5, d)) ** 3 * 0.18

    return array_to_image(_compose(color, core, coverage, add=highlight))


def make_ring_marker(size: Size, color: Color) -> QImage:
    """Anti-aliased ring, shaded a little darker on its inner edge."""
    width, height = size
    px, py = _pixel_centres(width, height)
    extent = float(min(width, height))
    d = np.hypot(px, py) / extent
    centre_r = 0.45
    half_thickness = 0.11 * 0.5
    softness = 3.0 / extent

    ring = _smoothstep(half_thickness, half_thickness - softness, np.abs(d - centre_r))
    inner = _smoothstep(0.0, half_thickness, centre_r - d)
    shade = 1.0 + (0.92 - 1.0) * inner

    return array_to_image(_compose(color, shade, ring))


def make_outlined_square(size: Size, color: Color) -> QImage:
    """Transparent square with a solid border band along each edge."""
    width, height = size
    thickness = max(1, min(width, height) // 16)
    image = QImage(width, height, QImage.Format.Format_RGBA8888)
    image.fill(Color(0, 0, 0, 0).to_qcolor())

    painter = QPainter(image)
    qcolor = color.to_qcolor()
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
    painter.fillRect(QRect(0, 0, width, thickness), qcolor)
    painter.fillRect(QRect(0, height - thickness, width, thickness), qcolor)
    painter.fillRect(QRect(0, 0, thickness, height), qcolor)
    painter.fillRect(QRect(width - thickness, 0, thickness, height), qcolor)
    painter.end()
    return image


def make_rounded_panel(size: Size, color: Color, radius: float = 6.0, softness: float = 1.0) -> QImage:
    """Rounded rectangle filling the whole image, with a faint inner shade."""
    width, height = size
    px, py = _pixel_centres(width, height)
    dist = _rounded_rect_distance(px, py, width / 2.0, height / 2.0, radius)

    coverage = 1.0 - _smoothstep(-softness, softness, dist)
    shade = 1.0 + (0.98 - 1.0) * _smoothstep(-radius * 0.6, 0.0, dist)

    return array_to_image(_compose(color, shade, coverage))


def make_drop_shadow(
    size: Size,
    color: Color,
    rect_size: Optional[Size] = None,
    radius: float = 6.0,
    blur: float = 12.0,
    offset_y: float = 4.0,
) -> QImage:
    """Blurred rounded-rectangle shadow, shifted down by offset_y pixels."""
    width, height = size
    rect_w, rect_h = rect_size if rect_size is not None else size
    px, py = _pixel_centres(width, height)
    dist = _rounded_rect_distance(px, py - offset_y, rect_w / 2.0, rect_h / 2.0, radius)

    coverage = np.clip((1.0 - _smoothstep(0.0, blur, dist)) ** 1.1, 0.0, 1.0)

    return array_to_image(_compose(color, np.ones_like(coverage), coverage))


DEFAULT_GENERATORS: Dict[str, BitmapGenerator] = {
    "solid": make_solid,
    "dot": make_dot_marker,
    "ring": make_ring_marker,
    "outlined_square": make_outlined_square,
    "rounded_panel": make_rounded_panel,
    "drop_shadow": make_drop_shadow,
}
