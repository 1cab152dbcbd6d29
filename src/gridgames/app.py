"""Entry point for the grid games: Conway's Game of Life and Othello.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
from pathlib import Path

from arcade import Window, run, set_background_color
from gridgames.cli import board_size, configure_logging, parse_args
from gridgames.world import create_world
from gridgames.constants import (
    LIFE_FPS,
    OTHELLO_FPS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from gridgames.events.bus import EventBus, EVENT_MOUSE_MOVE, EVENT_MOUSE_PRESS, EVENT_TICK
from gridgames.components.game_state import GameMode
from gridgames.rendering.palette import BACKGROUND
from gridgames.systems.input import InputSystem
from gridgames.systems.life_system import LifeSystem
from gridgames.systems.othello_system import OthelloSystem
from gridgames.systems.render import RenderSystem
from gridgames.systems.snapshot import SnapshotSystem
from gridgames.ui.controls import spawn_life_controls, spawn_othello_controls

logger = logging.getLogger(__name__)


class GridGamesWindow(Window):
    def __init__(self, mode: GameMode, size: int, save_dir: Path, load_path: Path | None = None):
        title = "Game of Life" if mode == GameMode.LIFE else "Othello"
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, title)
        self.set_update_rate(1 / (LIFE_FPS if mode == GameMode.LIFE else OTHELLO_FPS))
        self.event_bus = EventBus()
        self.world = create_world(mode)

        # Board systems
        if mode == GameMode.LIFE:
            self.board_system = LifeSystem(self.world, self.event_bus, size)
            spawn_life_controls(self.world)
        else:
            self.board_system = OthelloSystem(self.world, self.event_bus, size)
            spawn_othello_controls(self.world)
        self.snapshot_system = SnapshotSystem(
            self.world,
            self.event_bus,
            self.board_system.load_snapshot,
            save_dir=save_dir,
        )

        # Interface systems
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color(BACKGROUND)

        if load_path is not None:
            self.snapshot_system.load(load_path)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    mode = GameMode(args.game)
    size = board_size(args)
    logger.info("Starting %s on a %dx%d board", mode.value, size, size)
    GridGamesWindow(mode, size, args.save_dir, args.load)
    run()


if __name__ == "__main__":
    main()
