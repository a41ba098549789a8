"""Palette-derived bitmap resources, plus lazily loaded static image assets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from PyQt6.QtGui import QImage

from palettekit.core.errors import ResourceLoadError
from palettekit.core.settings import get_setting
from palettekit.gui.bitmap_generators import DEFAULT_GENERATORS, BitmapGenerator, Size
from palettekit.gui.theme.color import TRANSPARENT, Color
from palettekit.gui.theme.palette_cache import PaletteCache
from palettekit.gui.theme.schema import FieldId
from palettekit.logging import get_logger

logger = get_logger(__name__)

AssetLoader = Callable[[str], QImage]

SQUARE_PX_SIZE = 100


def percent_round(value: int, pct: int) -> int:
    """round(value * pct / 100) in integer arithmetic."""
    return (value * pct + 50) // 100


ATTACK_DOT_PX_SIZE = percent_round(SQUARE_PX_SIZE, 45)
CAPTURE_CIRCLE_PX_SIZE = percent_round(SQUARE_PX_SIZE, 102)
HOVER_PX_SIZE = SQUARE_PX_SIZE

DEFAULT_ASSET_DIRS = ("assets/icons", "assets/textures")

# Resource names
WHITE = "white"
BLACK = "black"
EVAL_WHITE = "evalwhite"
EVAL_BLACK = "evalblack"
SELECT_HL = "selectHighlight"
PREMOVE_HL = "premoveHighlight"
WARNING_HL = "warningHighlight"
RCLICK_HL = "rightClickHighlight"
ATTACK_HL = "attackHighlight"
CAPTURE_HL = "captureHighlight"
HOVER_HL = "hoverHighlight"
PROMOTION = "promotion"
PROMOTION_SHADOW = "promotionShadow"
TRANSPARENT_TEX = "transparent"


@dataclass(frozen=True)
class ResourceSpec:
    """How to build one derived resource: generator kind, colour source, pixel size."""

    name: str
    kind: str
    source: Union[FieldId, Color]
    size: Size = (1, 1)


DEFAULT_RESOURCE_SPECS: tuple = (
    ResourceSpec(EVAL_WHITE, "solid", FieldId.EVAL_WHITE),
    ResourceSpec(EVAL_BLACK, "solid", FieldId.EVAL_BLACK),
    ResourceSpec(WHITE, "solid", FieldId.BOARD_LIGHT),
    ResourceSpec(BLACK, "solid", FieldId.BOARD_DARK),
    ResourceSpec(SELECT_HL, "solid", FieldId.SELECT_HIGHLIGHT),
    ResourceSpec(PREMOVE_HL, "solid", FieldId.PREMOVE_HIGHLIGHT),
    ResourceSpec(WARNING_HL, "solid", FieldId.WARNING_HIGHLIGHT),
    ResourceSpec(RCLICK_HL, "solid", FieldId.RCLICK_HIGHLIGHT),
    ResourceSpec(ATTACK_HL, "dot", FieldId.MARKER, (ATTACK_DOT_PX_SIZE, ATTACK_DOT_PX_SIZE)),
    ResourceSpec(HOVER_HL, "outlined_square", FieldId.HOVER_OUTLINE, (HOVER_PX_SIZE, HOVER_PX_SIZE)),
    ResourceSpec(CAPTURE_HL, "ring", FieldId.MARKER, (CAPTURE_CIRCLE_PX_SIZE, CAPTURE_CIRCLE_PX_SIZE)),
    ResourceSpec(PROMOTION, "rounded_panel", FieldId.PANEL_ALPHA220, (SQUARE_PX_SIZE, 4 * SQUARE_PX_SIZE)),
    ResourceSpec(
        PROMOTION_SHADOW, "drop_shadow", FieldId.SHADOW_STRONG,
        (percent_round(SQUARE_PX_SIZE, 110), 4 * SQUARE_PX_SIZE),
    ),
    ResourceSpec(TRANSPARENT_TEX, "solid", TRANSPARENT),
)


def load_image_file(path: str) -> QImage:
    """Default asset loader: decode an image file with Qt."""
    return QImage(path)


def default_asset_dirs() -> List[str]:
    """Asset search path: user-configured directories first, then the built-in ones."""
    extra = get_setting("asset_dirs", [])
    if not isinstance(extra, list):
        extra = []
    return [str(d) for d in extra] + list(DEFAULT_ASSET_DIRS)


class ResourceTable:
    """
    Name-keyed bitmap resources whose pixels depend on the current palette.

    Every notification from the PaletteCache triggers a full rebuild of all
    derived resources. Static file assets live in a separate namespace: they
    are loaded on first request and kept forever.
    """

    def __init__(
        self,
        cache: PaletteCache,
        generators: Optional[Mapping[str, BitmapGenerator]] = None,
        specs: Optional[Sequence[ResourceSpec]] = None,
        asset_loader: AssetLoader = load_image_file,
        asset_dirs: Optional[Sequence[Union[str, Path]]] = None,
    ):
        self._cache = cache
        self._generators: Dict[str, BitmapGenerator] = dict(DEFAULT_GENERATORS)
        if generators:
            self._generators.update(generators)
        self._specs = tuple(specs if specs is not None else DEFAULT_RESOURCE_SPECS)
        for spec in self._specs:
            if spec.kind not in self._generators:
                raise ValueError(f"No generator for resource kind '{spec.kind}' ({spec.name})")

        self._asset_loader = asset_loader
        self._asset_dirs = [Path(d) for d in (asset_dirs if asset_dirs is not None else default_asset_dirs())]

        self._textures: Dict[str, QImage] = {}
        self._assets: Dict[str, QImage] = {}
        self._rebuild_count = 0
        self._stale = False

        self.rebuild()
        self._cache_listener: Optional[int] = cache.add_listener(self.rebuild)

    # ── Derived resources ─────────────────────────────────────────────────────

    def rebuild(self) -> None:
        """Regenerate every derived resource from the cached palette.

        The new set replaces the old one only after all of it built, so a
        failing generator leaves the previous resources in place. The table
        is then marked stale and get() retries the pass.
        """
        self._stale = True
        textures: Dict[str, QImage] = {}
        for spec in self._specs:
            color = spec.source if isinstance(spec.source, Color) else self._cache.color(spec.source)
            textures[spec.name] = self._generators[spec.kind](spec.size, color)

        self._textures = textures
        self._stale = False
        self._rebuild_count += 1
        logger.debug(f"Rebuilt {len(textures)} palette resources (pass {self._rebuild_count})")

    def get(self, name: str) -> QImage:
        """Pre-built palette resource by name."""
        if self._stale:
            self._retry_rebuild()
        try:
            return self._textures[name]
        except KeyError:
            raise KeyError(f"Unknown palette resource: {name}") from None

    def _retry_rebuild(self) -> None:
        try:
            self.rebuild()
        except Exception as e:
            logger.warning(f"Palette resources are stale, rebuild failed again: {e}")

    def __contains__(self, name: str) -> bool:
        return name in self._textures

    def names(self) -> List[str]:
        return [spec.name for spec in self._specs]

    @property
    def rebuild_count(self) -> int:
        return self._rebuild_count

    @property
    def stale(self) -> bool:
        """True while the last rebuild pass failed."""
        return self._stale

    # ── Static assets ─────────────────────────────────────────────────────────

    def get_asset(self, filename: str) -> QImage:
        """Image asset by file name, searched across the asset directories.

        Raises:
            ResourceLoadError: if the file can't be found or decoded
        """
        cached = self._assets.get(filename)
        if cached is not None:
            return cached

        last_path: Optional[str] = None
        reason = "not found"
        for path in self._candidate_paths(filename):
            if not path.is_file():
                continue
            last_path = str(path)
            try:
                image = self._asset_loader(last_path)
            except (OSError, ValueError) as e:
                reason = str(e) or "unreadable"
                continue
            if image is None or image.isNull():
                reason = "could not decode image"
                continue

            self._assets[filename] = image
            logger.debug(f"Loaded asset {filename} from {last_path}")
            return image

        logger.warning(f"Failed to load asset {filename}: {reason}")
        raise ResourceLoadError(filename, last_path, reason)

    def _candidate_paths(self, filename: str) -> List[Path]:
        path = Path(filename)
        if path.is_absolute():
            return [path]
        return [directory / path for directory in self._asset_dirs]

    @property
    def asset_count(self) -> int:
        return len(self._assets)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def close(self) -> None:
        """Stop following palette changes. Safe to call more than once."""
        if self._cache_listener is not None:
            self._cache.remove_listener(self._cache_listener)
            self._cache_listener = None
