"""Convenience launcher for the Hobbit World GUI.

The script performs a very small bootstrap step so that curious players can
double-click (or run ``python run_hobbit.py``) and immediately play the demo
world: it installs Pillow on demand, paints placeholder artwork for any
texture or sprite that is not on disk, and then opens the window.
"""

from __future__ import annotations

import importlib.util
import subprocess
import sys
from pathlib import Path


REQUIRED_PACKAGES = {
    "Pillow": "PIL",
}


def ensure_dependencies() -> None:
    missing = []
    for package, module_name in REQUIRED_PACKAGES.items():
        if importlib.util.find_spec(module_name) is None:
            missing.append(package)

    if not missing:
        return

    print("Installing dependencies:", ", ".join(missing))
    subprocess.check_call([sys.executable, "-m", "pip", "install", *missing])


def ensure_artwork(resource_root: Path) -> None:
    """Paint stand-in PNGs for any missing texture or sprite."""

    from hobbitworld.art.placeholder_art import ensure_placeholder_assets

    created = ensure_placeholder_assets(resource_root)
    if created:
        print(f"[assets] painted {len(created)} placeholder image(s) under {resource_root}")


def main() -> None:
    ensure_dependencies()
    from hobbit_gui import RendererSettings, load_optional_config
    from hobbit_gui import main as run_gui

    settings = RendererSettings.from_config(load_optional_config())
    ensure_artwork(settings.resource_root)
    run_gui()


if __name__ == "__main__":
    main()
