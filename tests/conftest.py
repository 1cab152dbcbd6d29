import sys
from pathlib import Path

import pytest

# Tests import the package straight from the source tree.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gridgames.events.bus import EventBus  # noqa: E402


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def save_dir(tmp_path):
    return tmp_path / "snapshots"
