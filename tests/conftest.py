from pathlib import Path

import pytest

from hobbitworld.art.assets import AssetStore
from hobbitworld.art.placeholder_art import ensure_placeholder_assets


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    root = tmp_path / "hobbitGUIResources"
    ensure_placeholder_assets(root, size=16)
    return root


@pytest.fixture
def assets(resource_root: Path) -> AssetStore:
    return AssetStore(resource_root)


@pytest.fixture
def tk_root():
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"no display available: {exc}")
    root.withdraw()
    yield root
    root.destroy()
