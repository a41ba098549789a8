"""Exception types raised by palettekit."""

from typing import Optional


class PaletteKitError(Exception):
    """Base class for palettekit errors."""
    pass


class ResourceLoadError(PaletteKitError):
    """Raised when a named bitmap asset cannot be located or decoded."""

    def __init__(self, name: str, path: Optional[str] = None, reason: str = ""):
        self.name = name
        self.path = path
        self.reason = reason
        message = f"Error when loading asset: {name}"
        if path:
            message += f" ({path})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PaletteLayoutError(PaletteKitError):
    """Raised at import when the packed palette layout disagrees with the field table."""
    pass
