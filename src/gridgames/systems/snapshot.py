"""Board snapshots: a JSON array of integer rows, row-major and rectangular.

The pure helpers validate and (de)serialize; ``SnapshotSystem`` handles the
SAVE and LOAD controls against a save directory and hands validated rows to
the loader callback supplied by the board's owner.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Callable, List

from esper import World

from gridgames.components.control_button import ControlAction
from gridgames.components.grid import Grid
from gridgames.constants import SNAPSHOT_PREFIX, SNAPSHOT_SUFFIX
from gridgames.events.bus import (
    EVENT_CONTROL_ACTIVATED,
    EVENT_SNAPSHOT_LOADED,
    EVENT_SNAPSHOT_REJECTED,
    EVENT_SNAPSHOT_SAVED,
    EventBus,
)
from gridgames.systems.grid_ops import get_board_grid

logger = logging.getLogger(__name__)

Rows = List[List[int]]
SnapshotLoader = Callable[[Rows], bool]

_SNAPSHOT_NAME = re.compile(rf"^{re.escape(SNAPSHOT_PREFIX)}(\d+){re.escape(SNAPSHOT_SUFFIX)}$")


class SnapshotError(ValueError):
    """Raised when a snapshot payload is not a rectangular array of integers."""


def validate_snapshot(data: Any) -> Rows:
    """Return a copy of ``data`` if it is a non-empty rectangular 2D integer array."""
    if not isinstance(data, list):
        raise SnapshotError("snapshot is not an array")
    if not data:
        raise SnapshotError("snapshot has no rows")
    rows: Rows = []
    width: int | None = None
    for index, line in enumerate(data):
        if not isinstance(line, list):
            raise SnapshotError(f"row {index} is not an array")
        if width is None:
            width = len(line)
            if width == 0:
                raise SnapshotError("snapshot rows are empty")
        elif len(line) != width:
            raise SnapshotError(f"row {index} has {len(line)} cells, expected {width}")
        for value in line:
            # bool is an int subclass; JSON true/false is not a cell code.
            if isinstance(value, bool) or not isinstance(value, int):
                raise SnapshotError(f"row {index} holds a non-integer cell: {value!r}")
        rows.append(list(line))
    return rows


def parse_snapshot(text: str) -> Rows:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"snapshot is not valid JSON: {exc}") from exc
    return validate_snapshot(data)


def serialize_grid(grid: Grid) -> Rows:
    return grid.copy_cells()


def encode_snapshot(grid: Grid) -> str:
    return json.dumps(serialize_grid(grid))


def snapshot_name(index: int) -> str:
    return f"{SNAPSHOT_PREFIX}{index}{SNAPSHOT_SUFFIX}"


def snapshot_index(path: Path) -> int | None:
    match = _SNAPSHOT_NAME.match(path.name)
    return int(match.group(1)) if match else None


def latest_snapshot(directory: Path) -> Path | None:
    """Highest-numbered snapshot file in ``directory``, if any."""
    if not directory.is_dir():
        return None
    best: tuple[int, Path] | None = None
    for candidate in directory.iterdir():
        index = snapshot_index(candidate)
        if index is None or not candidate.is_file():
            continue
        if best is None or index > best[0]:
            best = (index, candidate)
    return best[1] if best else None


class SnapshotSystem:
    """Saves the board to numbered files and loads snapshots back through ``loader``."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        loader: SnapshotLoader,
        *,
        save_dir: Path,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._loader = loader
        self._save_dir = Path(save_dir)
        self._next_index = 1
        self.event_bus.subscribe(EVENT_CONTROL_ACTIVATED, self.on_control_activated)

    @property
    def save_dir(self) -> Path:
        return self._save_dir

    def on_control_activated(self, sender, **payload) -> None:
        action = payload.get("action")
        if action == ControlAction.SAVE:
            self.save()
        elif action == ControlAction.LOAD:
            self.load()

    def save(self) -> Path:
        """Write the current board to the next free ``file_<n>.json``."""
        grid = get_board_grid(self.world)
        self._save_dir.mkdir(parents=True, exist_ok=True)
        path = self._save_dir / snapshot_name(self._next_index)
        while path.exists():
            self._next_index += 1
            path = self._save_dir / snapshot_name(self._next_index)
        self._next_index += 1
        path.write_text(encode_snapshot(grid), encoding="utf-8")
        logger.info("Saved %dx%d board to %s", grid.cols, grid.rows, path)
        self.event_bus.emit(EVENT_SNAPSHOT_SAVED, path=path)
        return path

    def load(self, path: Path | None = None) -> bool:
        """Load ``path`` (or the latest saved snapshot). The board is untouched on failure."""
        target = Path(path) if path is not None else latest_snapshot(self._save_dir)
        if target is None:
            self._reject(None, f"no snapshot found in {self._save_dir}")
            return False
        try:
            text = target.read_text(encoding="utf-8")
        except OSError as exc:
            self._reject(target, f"could not read snapshot: {exc}")
            return False
        try:
            rows = parse_snapshot(text)
        except SnapshotError as exc:
            self._reject(target, str(exc))
            return False
        if not self._loader(rows):
            self.event_bus.emit(EVENT_SNAPSHOT_REJECTED, path=target, reason="board refused snapshot")
            return False
        logger.info("Loaded snapshot %s (%dx%d)", target, len(rows[0]), len(rows))
        self.event_bus.emit(EVENT_SNAPSHOT_LOADED, path=target, rows=len(rows), cols=len(rows[0]))
        return True

    def _reject(self, path: Path | None, reason: str) -> None:
        logger.warning("Snapshot %s rejected: %s", path if path is not None else "<none>", reason)
        self.event_bus.emit(EVENT_SNAPSHOT_REJECTED, path=path, reason=reason)
