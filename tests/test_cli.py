import logging
from pathlib import Path

import pytest

from gridgames.cli import board_size, configure_logging, parse_args


def test_defaults_pick_board_size_per_game():
    life = parse_args(["life"])
    othello = parse_args(["othello"])
    assert life.size is None and life.load is None
    assert life.save_dir == Path.cwd() / "snapshots"
    assert life.log_level == "WARNING"
    assert board_size(life) == 10
    assert board_size(othello) == 8


def test_size_and_save_dir_flags(tmp_path):
    args = parse_args(["othello", "--size", "6", "--save-dir", str(tmp_path), "--load", "file_3.json"])
    assert args.game == "othello"
    assert board_size(args) == 6
    assert args.save_dir == tmp_path
    assert args.load == Path("file_3.json")


def test_unknown_game_is_refused():
    with pytest.raises(SystemExit):
        parse_args(["chess"])


def test_configure_logging_accepts_lowercase_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: seen.update(kwargs))
    configure_logging("debug")
    assert seen["level"] == logging.DEBUG
    configure_logging("nonsense")
    assert seen["level"] == logging.WARNING
