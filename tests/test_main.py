"""Tests for the terminal game loop."""

import pytest

import main
from src.utils import DatasetError

MESSI = {"name": "Lionel Messi", "country": "Argentina", "position": "Forward",
         "club": "Inter Miami", "aliases": ["Leo"]}


@pytest.fixture
def play(monkeypatch, capsys):
    def _play(*answers, players=(MESSI,)):
        replies = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(replies)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr(main, "load_players", lambda: list(players))
        monkeypatch.setattr("builtins.input", fake_input)
        code = main.play_game()
        return code, capsys.readouterr().out
    return _play


class TestPlayGame:
    def test_hint_then_correct(self, play):
        code, out = play("?", "", "Lioenl Messi")
        assert code == 0
        assert "Country: Argentina" in out
        assert "Initials: L.M." in out
        assert "Correct! Lionel Messi (+2)" in out
        assert "Score: 2 / Max 3" in out
        assert "Players: 1/1 | Final streak: 1" in out

    def test_wrong_then_skip(self, play):
        code, out = play("Cristiano Ronaldo", "skip")
        assert code == 0
        assert "Not quite" in out
        assert "It was: Lionel Messi" in out
        assert "Score: 0 / Max 3" in out
        assert "Players: 1/1 | Final streak: 0" in out

    def test_quit(self, play):
        code, out = play("quit")
        assert code == 0
        assert "Score: 0 / Max 3" in out
        assert "Players: 0/1" in out

    def test_end_of_input_quits(self, play):
        code, out = play("?")
        assert code == 0
        assert "Initials: L.M." in out
        assert "Score: 0 / Max 3" in out
        assert "Players: 0/1 | Final streak: 0" in out

    def test_dataset_error(self, monkeypatch, capsys):
        def broken():
            raise DatasetError("players.json is not valid JSON")

        monkeypatch.setattr(main, "load_players", broken)
        assert main.play_game() == 1
        assert "not valid JSON" in capsys.readouterr().out
