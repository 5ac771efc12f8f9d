"""Terrain textures and entity sprites, loaded once and looked up by symbol."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional

from PIL import Image

from hobbitworld.logging_utils import log_error

TextureName = str

TEXTURE_FOLDER = "textures"
ENTITY_FOLDER = "entities"

TEXTURE_FILES: Mapping[TextureName, str] = {
    "dirt": "dirt.png",
    "grass": "grass.png",
    "darkgrass": "darkgrass.png",
    "water": "water.png",
}

ENTITY_FILES: Mapping[str, str] = {
    "axe": "axe.png",
    "sword": "sword.png",
    "tree": "tree.png",
    "wood": "logs.png",
    "suit": "suit.png",
    "ring": "ring.png",
    "treasure": "treasure.png",
    "goblin": "goblin.png",
    "dorko": "dorko.png",
    "biblo": "biblo.png",
    "unknown": "unknown.png",
}

# Location symbol -> texture. The Shire is dirt, Bag End and Middle Earth are
# grass, Mirkwood is dark grass and the river is water.
TERRAIN_SYMBOLS: Mapping[str, TextureName] = {
    "S": "dirt",
    "b": "grass",
    ".": "grass",
    "F": "darkgrass",
    "R": "water",
}
DEFAULT_TEXTURE: TextureName = "dirt"

ENTITY_SYMBOLS: Mapping[str, str] = {
    "†": "axe",
    "s": "sword",
    "T": "tree",
    "w": "wood",
    "c": "suit",
    "o": "ring",
    "$": "treasure",
    "g": "goblin",
    "d": "dorko",
    "@": "biblo",
}
UNKNOWN_ENTITY = "unknown"


def load_rgba(path: Path) -> Optional[Image.Image]:
    """Read ``path`` fully into memory as RGBA, or ``None`` after logging why not."""

    try:
        with Image.open(path) as image:
            return image.convert("RGBA")
    except OSError as exc:
        log_error(f"Unable to load image {path}: {exc}")
        return None


class AssetStore:
    """Eagerly loaded bitmaps for every terrain and entity the GUI knows.

    A file that cannot be read is reported once and leaves ``None`` in its
    slot; callers draw nothing (a transparent rectangle) for ``None``.
    """

    def __init__(self, resource_root: Path) -> None:
        self.resource_root = Path(resource_root)
        self.missing: List[Path] = []
        self._textures: Dict[TextureName, Optional[Image.Image]] = self._load_folder(
            TEXTURE_FOLDER, TEXTURE_FILES
        )
        self._entities: Dict[str, Optional[Image.Image]] = self._load_folder(
            ENTITY_FOLDER, ENTITY_FILES
        )

    def _load_folder(
        self, folder: str, files: Mapping[str, str]
    ) -> Dict[str, Optional[Image.Image]]:
        loaded: Dict[str, Optional[Image.Image]] = {}
        for name, filename in files.items():
            path = self.resource_root / folder / filename
            image = load_rgba(path)
            if image is None:
                self.missing.append(path)
            loaded[name] = image
        return loaded

    def texture(self, name: TextureName) -> Optional[Image.Image]:
        return self._textures.get(name)

    def sprite(self, name: str) -> Optional[Image.Image]:
        return self._entities.get(name)

    def terrain_for(self, symbol: str) -> Optional[Image.Image]:
        return self._textures[TERRAIN_SYMBOLS.get(symbol, DEFAULT_TEXTURE)]

    def entity_for(self, symbol: str) -> Optional[Image.Image]:
        return self._entities[ENTITY_SYMBOLS.get(symbol, UNKNOWN_ENTITY)]


__all__ = [
    "AssetStore",
    "DEFAULT_TEXTURE",
    "ENTITY_FILES",
    "ENTITY_FOLDER",
    "ENTITY_SYMBOLS",
    "TERRAIN_SYMBOLS",
    "TEXTURE_FILES",
    "TEXTURE_FOLDER",
    "UNKNOWN_ENTITY",
    "load_rgba",
]
