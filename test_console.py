"""
Tests for the console UI and entry point.
Run with pytest, or directly: python test_console.py
"""

import sys

import pytest

from logic.board import Mark, Position
from logic.config import GameConfig
from logic.game_state import GameState
from ui import ConsoleUI, parse_position
import main as entry


def scripted(lines):
    """Build an input function that replays lines, then hits end of input."""
    remaining = list(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read.prompts = prompts
    return read


def run_ui(lines, first=Mark.X):
    out = []
    ui = ConsoleUI(
        GameState.new_game(initial_turn=first),
        input_fn=scripted(lines),
        output=out.append,
    )
    winner = ui.run()
    return ui, winner, out


# ==================== PARSING ====================

@pytest.mark.parametrize("text,expected", [
    ("1,1", Position(1, 1)),
    ("3,2", Position(3, 2)),
    (" 2 , 3 \n", Position(2, 3)),
])
def test_parse_position_valid(text, expected):
    assert parse_position(text) == expected


@pytest.mark.parametrize("text", [
    "", "1", "1,2,3", "a,b", "1,", ",1", "1.5,2", "0,1", "-1,2", "4,1", "1,4",
    "+1,2", "２,１", "1,²",
])
def test_parse_position_invalid(text):
    assert parse_position(text) is None


# ==================== CONSOLE LOOP ====================

def test_console_shows_board_and_turn():
    ui, winner, out = run_ui([])

    assert winner is None
    assert out[0] == "| | | |\n| | | |\n| | | |"
    assert out[1] == "Current turn: X"
    assert ui.input_fn.prompts == [GameConfig.PROMPT]


def test_console_plays_to_a_win():
    ui, winner, out = run_ui(["1,1", "1,2", "2,1", "2,2", "3,1"])

    assert winner == Mark.X
    assert GameConfig.WINNER_MESSAGE.format(mark="X") in out
    assert out.count("|X|X|X|\n|O|O| |\n| | | |") == 1


def test_console_reports_invalid_input():
    ui, _, out = run_ui(["hello", "9,9"])

    assert out.count(GameConfig.INVALID_INPUT_MESSAGE) == 2
    assert len(ui.game_state.board) == 0
    assert ui.game_state.current_turn == Mark.X


def test_console_reports_occupied():
    ui, _, out = run_ui(["1,1", "1,1"])

    assert GameConfig.OCCUPIED_MESSAGE in out
    assert ui.game_state.current_turn == Mark.O


def test_console_reports_game_over():
    _, winner, out = run_ui(["1,1", "1,2", "2,1", "2,2", "3,1", "3,3"])

    assert winner == Mark.X
    assert GameConfig.GAME_OVER_MESSAGE in out


def test_console_reports_draw():
    _, winner, out = run_ui([
        "1,1", "2,1", "3,1", "2,2", "1,2", "3,2", "2,3", "1,3", "3,3",
    ])

    assert winner is None
    assert GameConfig.DRAW_MESSAGE in out
    assert out.count("|X|O|X|\n|X|O|O|\n|O|X|X|") == 1


def test_console_quit_command():
    ui, _, out = run_ui(["q", "1,1"])

    assert len(ui.game_state.board) == 0
    assert not ui.is_running


# ==================== ENTRY POINT ====================

def test_main_runs_until_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted(["2,2"]))

    assert entry.main([]) == 0

    captured = capsys.readouterr().out
    assert "TicTacToe" in captured
    assert "Goodbye!" in captured


def test_main_handles_ctrl_c(monkeypatch, capsys):
    def interrupt(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupt)

    assert entry.main([]) == 0
    assert "Game interrupted by user." in capsys.readouterr().out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
