from esper import World

from gridgames.components.control_button import ControlButton
from gridgames.components.game_state import GameMode
from gridgames.components.life_state import LifeState
from gridgames.components.othello_state import OthelloState
from gridgames.constants import CONTROL_GAP
from gridgames.events.bus import EventBus, EVENT_TILE_HOVER
from gridgames.rendering.board_renderer import BoardRenderer
from gridgames.rendering import palette
from gridgames.rendering.panel_text import life_panel, othello_banner
from gridgames.systems.grid_ops import current_mode, find_board_grid, get_board_component
from gridgames.ui.layout import compute_board_geometry, control_rect

BOARD_MARGIN = 12
PANEL_LINE_HEIGHT = 28


class RenderSystem:
    """Reads the board after the engines have run and draws it with arcade."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.hovered = None
        self._life_renderer = BoardRenderer(palette.LIFE_STYLES, round_cells=False)
        self._othello_renderer = BoardRenderer(palette.DISC_STYLES, round_cells=True)
        self.event_bus.subscribe(EVENT_TILE_HOVER, self.on_tile_hover)

    def on_tile_hover(self, sender, **kwargs):
        col = kwargs.get('col')
        row = kwargs.get('row')
        self.hovered = (col, row) if col is not None and row is not None else None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        grid = find_board_grid(self.world)
        if grid is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, grid.rows, grid.cols)
        arcade.draw_lbwh_rectangle_filled(
            geometry.left - BOARD_MARGIN,
            geometry.bottom - BOARD_MARGIN,
            geometry.width + 2 * BOARD_MARGIN,
            geometry.height + 2 * BOARD_MARGIN,
            palette.BOARD,
        )
        arcade.draw_lbwh_rectangle_outline(
            geometry.left - BOARD_MARGIN,
            geometry.bottom - BOARD_MARGIN,
            geometry.width + 2 * BOARD_MARGIN,
            geometry.height + 2 * BOARD_MARGIN,
            palette.BORDER,
            4,
        )
        if current_mode(self.world) == GameMode.OTHELLO:
            _, state = get_board_component(self.world, OthelloState)
            highlighted = state.highlighted if state.highlights_visible else frozenset()
            self._othello_renderer.render(arcade, grid, geometry, highlighted=highlighted, hovered=self.hovered)
            lines = othello_banner(state)
        else:
            _, life = get_board_component(self.world, LifeState)
            self._life_renderer.render(arcade, grid, geometry)
            lines = life_panel(life)
        self._render_panel_text(arcade, geometry, lines)
        self._render_controls(arcade, geometry)

    def _render_panel_text(self, arcade, geometry, lines):
        x = geometry.right + CONTROL_GAP
        y = geometry.top - PANEL_LINE_HEIGHT
        if current_mode(self.world) == GameMode.LIFE:
            # Life controls fill the top of the column; its text sits mid-board.
            y = geometry.bottom + geometry.height / 2
        for line in lines:
            arcade.draw_text(line, x, y, palette.TEXT, 20, bold=True)
            y -= PANEL_LINE_HEIGHT

    def _render_controls(self, arcade, geometry):
        for _, button in self.world.get_component(ControlButton):
            left, bottom, width, height = control_rect(button, geometry)
            alpha = palette.BUTTON_HOVER_ALPHA if button.hovered else 255
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, (*palette.BOARD, alpha))
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, palette.BORDER, 2)
            arcade.draw_text(
                button.label,
                left + width / 2,
                bottom + height / 2,
                palette.TEXT,
                18,
                anchor_x="center",
                anchor_y="center",
            )
