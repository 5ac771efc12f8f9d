"""Tkinter front end for the Star Wars / Hobbit world simulation.

The window shows the world map on the left and a control column on the
right: the messages of the current tick, a 3x3 pad of move commands and a
list of every other command. The simulation runs on a worker thread and
talks to the window only through :class:`HobbitGridRenderer`; all widget
work is queued onto the Tk main loop.
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

import tkinter as tk
from tkinter import ttk

try:
    from PIL import ImageTk
except ModuleNotFoundError as exc:  # pragma: no cover - handled in run_hobbit.py
    raise SystemExit(
        "Pillow is required to run the Hobbit World GUI. Install dependencies "
        "or launch the app using run_hobbit.py so that they are installed "
        "automatically."
    ) from exc

from hobbitworld.art.assets import AssetStore
from hobbitworld.art.compositor import TILE_SIZE, ComposedTile
from hobbitworld.demo.world import DemoSimulation, build_demo_world
from hobbitworld.logging_utils import log_info, log_warning
from hobbitworld.render.commands import PAD_COLUMNS, PAD_ROWS, CommandLayout, pad_position
from hobbitworld.render.dispatch import UiDispatcher
from hobbitworld.render.interfaces import EntityManager, Grid, GridRenderer
from hobbitworld.render.renderer import HobbitGridRenderer, Publish
from hobbitworld.render.sizing import RECOMMENDED_CONTROLS_WIDTH, WindowPlan, plan_window


# ---------------------------------------------------------------------------
# Configuration helpers
# ---------------------------------------------------------------------------


ROOT_DIR = Path(__file__).resolve().parent
ASSET_ROOT = ROOT_DIR / "Assets" / "hobbitGUIResources"

WINDOW_TITLE = "Star Wars World"
BUTTON_HEIGHT = 50
MESSAGE_FONT_FAMILY = "Courier"
MESSAGE_FONT_SIZE = 18
POLL_INTERVAL_MS = 50


def load_optional_config(config_path: Optional[Path] = None) -> Dict[str, object]:
    """Load optional GUI overrides from ``config.json`` if present."""

    config_path = config_path or ROOT_DIR / "config.json"
    if not config_path.exists():
        return {}
    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        log_warning(f"Ignoring malformed {config_path.name}: {exc}")
        return {}
    if not isinstance(config, dict):
        log_warning(f"Ignoring {config_path.name}: expected a JSON object, got {type(config).__name__}")
        return {}
    return config


def _int_setting(config: Mapping[str, object], key: str, default: int) -> int:
    value = config.get(key, default)
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        log_warning(f"Ignoring config value {key}={value!r}; using {default}")
        return default


@dataclass(frozen=True)
class RendererSettings:
    tile_size: int = TILE_SIZE
    controls_width: int = RECOMMENDED_CONTROLS_WIDTH
    button_height: int = BUTTON_HEIGHT
    message_font_size: int = MESSAGE_FONT_SIZE
    poll_interval_ms: int = POLL_INTERVAL_MS
    resource_root: Path = ASSET_ROOT

    @classmethod
    def from_config(cls, config: Mapping[str, object]) -> "RendererSettings":
        resource_root = Path(str(config.get("resource_root", ASSET_ROOT)))
        if not resource_root.is_absolute():
            resource_root = ROOT_DIR / resource_root
        return cls(
            tile_size=_int_setting(config, "tile_size", TILE_SIZE),
            controls_width=_int_setting(config, "controls_width", RECOMMENDED_CONTROLS_WIDTH),
            button_height=_int_setting(config, "button_height", BUTTON_HEIGHT),
            message_font_size=_int_setting(config, "message_font_size", MESSAGE_FONT_SIZE),
            poll_interval_ms=_int_setting(config, "poll_interval_ms", POLL_INTERVAL_MS),
            resource_root=resource_root,
        )


# ---------------------------------------------------------------------------
# Generic widgets
# ---------------------------------------------------------------------------


class AutoScrollbar(ttk.Scrollbar):
    """Scrollbar that removes itself from the grid while everything fits."""

    def set(self, first: str, last: str) -> None:  # type: ignore[override]
        if float(first) <= 0.0 and float(last) >= 1.0:
            self.grid_remove()
        else:
            self.grid()
        super().set(first, last)


class ScrollableFrame(ttk.Frame):
    """A frame whose ``body`` scrolls in both directions when it overflows.

    The body is stretched to at least the visible area so that content
    packed into it can fill or centre itself.
    """

    def __init__(self, master: tk.Widget, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.canvas = tk.Canvas(self, highlightthickness=0, borderwidth=0)
        self.vbar = AutoScrollbar(self, orient=tk.VERTICAL, command=self.canvas.yview)
        self.hbar = AutoScrollbar(self, orient=tk.HORIZONTAL, command=self.canvas.xview)
        self.canvas.configure(yscrollcommand=self.vbar.set, xscrollcommand=self.hbar.set)

        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.hbar.grid(row=1, column=0, sticky="ew")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.body = ttk.Frame(self.canvas)
        self._window = self.canvas.create_window((0, 0), window=self.body, anchor="nw")
        self.body.bind("<Configure>", lambda _event: self._fit_body())
        self.canvas.bind("<Configure>", lambda _event: self._fit_body())

    def _fit_body(self) -> None:
        width = max(self.canvas.winfo_width(), self.body.winfo_reqwidth())
        height = max(self.canvas.winfo_height(), self.body.winfo_reqheight())
        self.canvas.itemconfigure(self._window, width=width, height=height)
        self.canvas.configure(scrollregion=(0, 0, width, height))

    def clear(self) -> None:
        for child in self.body.winfo_children():
            child.destroy()


class Tooltip:
    """Small undecorated window showing a line of help text near the pointer."""

    def __init__(self, master: tk.Misc) -> None:
        self.master = master
        self._window: Optional[tk.Toplevel] = None
        self.text: Optional[str] = None

    def show(self, text: str, x_root: int, y_root: int) -> None:
        if self._window is not None and self.text == text:
            self._window.wm_geometry(f"+{x_root + 14}+{y_root + 14}")
            return
        self.hide()
        window = tk.Toplevel(self.master)
        window.wm_overrideredirect(True)
        window.wm_geometry(f"+{x_root + 14}+{y_root + 14}")
        tk.Label(
            window,
            text=text,
            background="#ffffe0",
            relief=tk.SOLID,
            borderwidth=1,
            padx=4,
            pady=2,
        ).pack()
        self._window = window
        self.text = text

    def hide(self) -> None:
        if self._window is not None:
            self._window.destroy()
        self._window = None
        self.text = None


# ---------------------------------------------------------------------------
# Renderer views
# ---------------------------------------------------------------------------


class MapView(ttk.Frame):
    """The world grid, one composed image per cell, scrollable as needed."""

    def __init__(self, master: tk.Widget, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.canvas = tk.Canvas(self, highlightthickness=0, background="#1e1e1e")
        self.vbar = AutoScrollbar(self, orient=tk.VERTICAL, command=self.canvas.yview)
        self.hbar = AutoScrollbar(self, orient=tk.HORIZONTAL, command=self.canvas.xview)
        self.canvas.configure(yscrollcommand=self.vbar.set, xscrollcommand=self.hbar.set)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.hbar.grid(row=1, column=0, sticky="ew")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.tooltip = Tooltip(self)
        self._tile_refs: List[ImageTk.PhotoImage] = []
        self._tooltips: Dict[int, str] = {}

        self.canvas.tag_bind("tile", "<Motion>", self._on_tile_motion)
        self.canvas.tag_bind("tile", "<Leave>", lambda _event: self.tooltip.hide())

    def show(self, width: int, height: int, tiles: List[ComposedTile]) -> None:
        # Build every photo first so the old map is swapped out in one step.
        photos = [(tile, ImageTk.PhotoImage(tile.image)) for tile in tiles]
        tile_size = tiles[0].image.width if tiles else 0

        self.tooltip.hide()
        self.canvas.delete("tile")
        self._tooltips.clear()
        refs: List[ImageTk.PhotoImage] = []
        for tile, photo in photos:
            item = self.canvas.create_image(
                tile.column * tile_size,
                tile.row * tile_size,
                image=photo,
                anchor=tk.NW,
                tags=("tile",),
            )
            self._tooltips[item] = tile.tooltip
            refs.append(photo)
        self._tile_refs = refs
        self.canvas.configure(scrollregion=(0, 0, width * tile_size, height * tile_size))

    def tooltip_at(self, item: int) -> Optional[str]:
        return self._tooltips.get(item)

    def _on_tile_motion(self, event: tk.Event) -> None:
        current = self.canvas.find_withtag("current")
        text = self.tooltip_at(current[0]) if current else None
        if text:
            self.tooltip.show(text, event.x_root, event.y_root)
        else:
            self.tooltip.hide()


class MessagePane(ScrollableFrame):
    def __init__(self, master: tk.Widget, *, font_size: int = MESSAGE_FONT_SIZE, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.label = ttk.Label(
            self.body,
            text="",
            font=(MESSAGE_FONT_FAMILY, font_size, "bold"),
            anchor=tk.CENTER,
            justify=tk.CENTER,
        )
        self.label.pack(fill=tk.BOTH, expand=True)

    def show(self, text: str) -> None:
        self.label.configure(text=text.rstrip("\n"))

    @property
    def text(self) -> str:
        return str(self.label.cget("text"))


class CommandPanel:
    """Buttons for the active actor's commands.

    Moves go on a 3x3 pad whose cells follow the compass; every other command
    is a full-width button of fixed height in a vertical stack.
    """

    def __init__(self, pad: ttk.Frame, stack: ttk.Frame, *, button_height: int = BUTTON_HEIGHT) -> None:
        self.pad = pad
        self.stack = stack
        self.button_height = button_height
        self.buttons: Dict[int, ttk.Button] = {}
        self.pad_cells: List[tk.Widget] = []
        for row in range(PAD_ROWS):
            self.pad.rowconfigure(row, weight=1, uniform="pad")
        for column in range(PAD_COLUMNS):
            self.pad.columnconfigure(column, weight=1, uniform="pad")

    def populate(self, layout: CommandLayout[Any], publish: Publish) -> None:
        for parent in (self.pad, self.stack):
            for child in parent.winfo_children():
                child.destroy()
        self.buttons.clear()
        self.pad_cells = []

        for slot, token in enumerate(layout.pad):
            row, column = pad_position(slot)
            if token is None:
                cell: tk.Widget = ttk.Label(self.pad, text="")
            else:
                cell = self._button(self.pad, layout, token, publish)
            cell.grid(row=row, column=column, sticky="nsew", padx=2, pady=2)
            self.pad_cells.append(cell)

        for token in layout.others:
            holder = ttk.Frame(self.stack, height=self.button_height)
            holder.pack_propagate(False)
            holder.pack(fill=tk.X)
            self._button(holder, layout, token, publish).pack(fill=tk.BOTH, expand=True)

    def _button(
        self, parent: tk.Widget, layout: CommandLayout[Any], token: int, publish: Publish
    ) -> ttk.Button:
        button = ttk.Button(
            parent,
            text=layout.resolve(token).description,
            command=lambda token=token: publish(token),
        )
        self.buttons[token] = button
        return button


# ---------------------------------------------------------------------------
# Application window
# ---------------------------------------------------------------------------


class HobbitApp(tk.Tk):
    """Main window and owner of the one renderer attached to it."""

    def __init__(
        self,
        grid: Grid,
        entity_manager: EntityManager,
        *,
        settings: Optional[RendererSettings] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or RendererSettings.from_config(load_optional_config())
        self.title(WINDOW_TITLE)
        self.resizable(True, True)

        self.plan = plan_window(
            self.winfo_screenwidth(),
            self.winfo_screenheight(),
            self.settings.tile_size * grid.width,
            self.settings.tile_size * grid.height,
            self.settings.controls_width,
        )
        self._apply_plan(self.plan)

        self.map_view = MapView(self, width=self.plan.map_width)
        self.map_view.grid(row=0, column=0, sticky="nsew")
        self.map_view.grid_propagate(False)

        controls = ttk.Frame(self, width=self.plan.controls_width)
        controls.grid(row=0, column=1, sticky="nsew")
        controls.grid_propagate(False)

        self.message_pane = MessagePane(controls, font_size=self.settings.message_font_size)
        self.move_area = ScrollableFrame(controls)
        self.other_area = ScrollableFrame(controls)
        for row, area in enumerate((self.message_pane, self.move_area, self.other_area)):
            area.grid(row=row, column=0, sticky="nsew")
            controls.rowconfigure(row, weight=1, uniform="controls")
        controls.columnconfigure(0, weight=1)

        self.command_panel = CommandPanel(
            self.move_area.body,
            self.other_area.body,
            button_height=self.settings.button_height,
        )

        self.columnconfigure(0, weight=self.plan.map_width)
        self.columnconfigure(1, weight=self.plan.controls_width)
        self.rowconfigure(0, weight=1)

        self.assets = AssetStore(self.settings.resource_root)
        self.dispatcher = UiDispatcher(self, self.settings.poll_interval_ms)
        self.renderer = HobbitGridRenderer(
            grid,
            entity_manager,
            self,
            self.dispatcher,
            self.assets,
            tile_size=self.settings.tile_size,
        )
        self.dispatcher.start()
        self.protocol("WM_DELETE_WINDOW", self.close)

    def close(self) -> None:
        """Stop feeding the window and destroy it."""

        self.dispatcher.stop()
        if self.dispatcher.pending:
            log_info(f"Closing with {self.dispatcher.pending} UI update(s) still queued")
        self.destroy()

    def _apply_plan(self, plan: WindowPlan) -> None:
        if not plan.maximized:
            self.geometry(f"{plan.window_width}x{plan.window_height}+0+0")
            return
        try:
            self.state("zoomed")
        except tk.TclError:
            try:
                self.attributes("-zoomed", True)
            except tk.TclError:
                self.geometry(f"{plan.window_width}x{plan.window_height}+0+0")

    # RenderView -----------------------------------------------------------

    def show_map(self, width: int, height: int, tiles: List[ComposedTile]) -> None:
        self.map_view.show(width, height, tiles)

    def show_messages(self, text: str) -> None:
        self.message_pane.show(text)

    def show_commands(self, layout: CommandLayout[Any], publish: Publish) -> None:
        self.command_panel.populate(layout, publish)

    # ----------------------------------------------------------------------

    def run(self, simulation: Callable[[GridRenderer], None]) -> None:
        """Run ``simulation`` on a worker thread until the window closes."""

        worker = threading.Thread(
            target=simulation,
            args=(self.renderer,),
            name="simulation",
            daemon=True,
        )
        worker.start()
        self.mainloop()


def main() -> None:
    grid, manager, biblo = build_demo_world()
    app = HobbitApp(grid, manager)
    if app.assets.missing:
        log_warning(f"{len(app.assets.missing)} image(s) missing under {app.settings.resource_root}")
    log_info(f"Window plan: {app.plan}")
    simulation = DemoSimulation(grid, manager, biblo)
    app.run(simulation.run)


if __name__ == "__main__":
    main()
