"""Procedural stand-ins for the GUI's texture and sprite PNGs.

The real artwork is third-party pixel art that is not redistributed with
the source. So that a fresh checkout can still be launched, the helpers here
paint simple replacements with Pillow: flat textures with a faint grid for
terrain and a lettered badge on a transparent background for each entity.
Existing files are never overwritten.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Tuple

from PIL import Image, ImageDraw

from hobbitworld.art.assets import ENTITY_FILES, ENTITY_FOLDER, TEXTURE_FILES, TEXTURE_FOLDER

Colour = Tuple[int, int, int]

_TEXTURE_COLOURS: Mapping[str, Colour] = {
    "dirt": (134, 96, 67),
    "grass": (106, 168, 79),
    "darkgrass": (39, 94, 52),
    "water": (62, 120, 196),
}

# Badge colour and label for each entity sprite.
_ENTITY_BADGES: Mapping[str, Tuple[Colour, str]] = {
    "axe": ((150, 150, 160), "A"),
    "sword": ((200, 200, 215), "S"),
    "tree": ((34, 110, 40), "T"),
    "wood": ((120, 80, 40), "W"),
    "suit": ((170, 170, 190), "C"),
    "ring": ((240, 200, 40), "O"),
    "treasure": ((230, 170, 20), "$"),
    "goblin": ((90, 140, 60), "G"),
    "dorko": ((130, 40, 120), "D"),
    "biblo": ((200, 60, 50), "@"),
    "unknown": ((250, 220, 0), "?"),
}

_GRID_OUTLINE_COLOUR = (0, 0, 0, 40)
_BADGE_OUTLINE_COLOUR = (30, 30, 30, 255)
_LABEL_COLOUR = (20, 20, 20, 255)


def _paint_texture(colour: Colour, *, size: int) -> Image.Image:
    image = Image.new("RGBA", (size, size), colour + (255,))
    draw = ImageDraw.Draw(image, "RGBA")
    step = max(1, size // 4)
    for offset in range(0, size + 1, step):
        draw.line((offset, 0, offset, size), fill=_GRID_OUTLINE_COLOUR, width=1)
        draw.line((0, offset, size, offset), fill=_GRID_OUTLINE_COLOUR, width=1)
    return image


def _paint_badge(colour: Colour, label: str, *, size: int) -> Image.Image:
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image, "RGBA")
    margin = max(1, size // 10)
    draw.ellipse(
        (margin, margin, size - margin, size - margin),
        fill=colour + (255,),
        outline=_BADGE_OUTLINE_COLOUR,
        width=max(1, size // 32),
    )
    left, top, right, bottom = draw.textbbox((0, 0), label)
    draw.text(
        ((size - (right - left)) / 2, (size - (bottom - top)) / 2),
        label,
        fill=_LABEL_COLOUR,
    )
    return image


def ensure_placeholder_assets(resource_root: Path, *, size: int = 64) -> List[Path]:
    """Write a placeholder for every missing resource under ``resource_root``.

    Returns the paths that were created.
    """

    created: List[Path] = []

    texture_dir = resource_root / TEXTURE_FOLDER
    texture_dir.mkdir(parents=True, exist_ok=True)
    for name, filename in TEXTURE_FILES.items():
        path = texture_dir / filename
        if path.exists():
            continue
        _paint_texture(_TEXTURE_COLOURS[name], size=size).save(path, format="PNG")
        created.append(path)

    entity_dir = resource_root / ENTITY_FOLDER
    entity_dir.mkdir(parents=True, exist_ok=True)
    for name, filename in ENTITY_FILES.items():
        path = entity_dir / filename
        if path.exists():
            continue
        colour, label = _ENTITY_BADGES[name]
        _paint_badge(colour, label, size=size).save(path, format="PNG")
        created.append(path)

    return created


__all__ = ["ensure_placeholder_assets"]
