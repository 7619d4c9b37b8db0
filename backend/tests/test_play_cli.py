"""
Tests for the headless runner in cli/play.py.

These run the real tick loop for a handful of ticks (about a second).
"""

import json
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli import play
from domain.constants import PAUSED, GAME_OVER


def test_run_game_stops_at_max_ticks():
    """The runner pauses the game once the tick limit is reached."""
    result = play.run_game(seed=1, max_ticks=3, quiet=True)

    assert result["status"] == PAUSED
    assert result["ticks"] >= 3
    assert result["death_reason"] is None
    assert result["length"] == 3 + result["score"]


def test_run_game_prints_the_board(capsys):
    play.run_game(seed=2, max_ticks=1)
    out = capsys.readouterr().out

    assert "Tick 1" in out
    assert "H" in out


def test_main_prints_a_json_summary(monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv", ["play.py", "--seed", "4", "--max-ticks", "2", "--quiet"]
    )
    play.main()
    out = capsys.readouterr().out

    summary = json.loads(out.split("Game Summary:")[1])
    assert summary["status"] in (PAUSED, GAME_OVER)
    assert summary["level"] == 1
