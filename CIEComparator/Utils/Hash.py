import hashlib

from .CustomTypes import ZoomWindow


def stable_hash(obj) -> int:
    """SHA-256 of the object's repr, stable across processes unlike hash()."""
    return int(hashlib.sha256(repr(obj).encode('utf-8')).hexdigest(), 16)


def raster_key(window: ZoomWindow, width: int, height: int) -> int:
    """Key identifying one background raster: the zoom window plus pixel dimensions."""
    return stable_hash((window.as_tuple(), int(width), int(height)))
