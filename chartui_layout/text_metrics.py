from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

from PIL import ImageFont

from chartui_layout.geometry import Size


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"
SANS_FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "helvetica",
    "arial",
    "liberationsans",
    "sfns",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path.home() / ".fonts",
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def text_size(text: str, *, font_family: str = DEFAULT_FONT_FAMILY, font_size_px: float = 12.0) -> Size:
    """Pixel extent of a single line of label text."""
    font = load_font(font_family, font_size_px)
    if not text:
        _, top, _, bottom = font.getbbox("Ag")
        return Size(0.0, float(max(1, bottom - top)))
    left, top, right, bottom = font.getbbox(text)
    return Size(float(max(0, right - left)), float(max(1, bottom - top)))


@lru_cache(maxsize=32)
def load_font(font_family: str, font_size_px: float) -> Font:
    size = max(1, int(round(font_size_px)))
    path = _find_font_file(font_family)
    if path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(path), size=size)
    except OSError:
        LOGGER.debug("could not load font %s; using the default bitmap font", path)
        return ImageFont.load_default()


@lru_cache(maxsize=8)
def _find_font_file(font_family: str) -> Path | None:
    wanted = font_family.strip().lower().replace(" ", "") or DEFAULT_FONT_FAMILY.lower().replace(" ", "")
    candidates = sorted(
        path
        for base in FONT_DIRS
        if base.exists()
        for pattern in ("*.ttf", "*.otf", "*.ttc")
        for path in base.rglob(pattern)
    )
    for pattern in (wanted,) + SANS_FONT_FALLBACK_PATTERNS:
        for path in candidates:
            if path.stem.lower().replace(" ", "").replace("-", "") == pattern:
                return path
        for path in candidates:
            if pattern in path.name.lower().replace(" ", ""):
                return path
    return None
