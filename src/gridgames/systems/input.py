from gridgames.components.control_button import ControlButton
from gridgames.events.bus import (
    EventBus,
    EVENT_CONTROL_ACTIVATED,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_TILE_HOVER,
)
from gridgames.systems.grid_ops import find_board_grid
from gridgames.ui.layout import cell_at_point, compute_board_geometry, control_at_point

# arcade.MOUSE_BUTTON_LEFT; kept literal so tests do not need arcade.
MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Resolves mouse positions to control buttons or board cells."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.hovered_cell = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        geometry = self._geometry()
        if geometry is None:
            return
        control = control_at_point(self._buttons(), geometry, x, y)
        if control is not None:
            self.event_bus.emit(EVENT_CONTROL_ACTIVATED, action=control.action)
            return
        cell = cell_at_point(geometry, x, y)
        if cell is not None:
            col, row = cell
            self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        geometry = self._geometry()
        if geometry is None:
            return
        hit = control_at_point(self._buttons(), geometry, x, y)
        for button in self._buttons():
            button.hovered = button is hit
        cell = None if hit is not None else cell_at_point(geometry, x, y)
        if cell != self.hovered_cell:
            self.hovered_cell = cell
            col, row = cell if cell is not None else (None, None)
            self.event_bus.emit(EVENT_TILE_HOVER, row=row, col=col)

    def _geometry(self):
        grid = find_board_grid(self.world)
        if grid is None:
            return None
        return compute_board_geometry(self.window.width, self.window.height, grid.rows, grid.cols)

    def _buttons(self) -> list[ControlButton]:
        return [button for _, button in self.world.get_component(ControlButton)]
