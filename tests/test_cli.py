"""Tests for the command-line interface."""

import json

import pytest
from sudoku_game.cli import main, play_loop
from sudoku_game.game import GameSession, GameStatus

from conftest import TEST_PUZZLE, TEST_SOLUTION


def scripted(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


class TestGenerateCommand:

    def test_writes_json(self, tmp_path, capsys):
        output = tmp_path / "puzzles.json"
        main(["generate", "--count", "2", "--difficulty", "medium",
              "--seed", "1", "--output", str(output)])

        records = json.loads(output.read_text())
        assert len(records) == 2
        assert all(r["clues"] == 41 for r in records)
        assert [r["index"] for r in records] == [1, 2]
        assert "Total puzzles generated: 2" in capsys.readouterr().out

    def test_all_difficulties_and_save_dir(self, tmp_path):
        main(["generate", "-n", "1", "-d", "all", "-s", "3", "--save-dir", str(tmp_path)])
        for name in ("easy", "medium", "hard"):
            assert (tmp_path / name / f"puzzle_{name}_1.txt").exists()

    def test_difficulty_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUDOKU_DIFFICULTY", "hard")
        output = tmp_path / "out.json"
        main(["generate", "-n", "1", "-o", str(output)])
        assert json.loads(output.read_text())[0]["clues"] == 31

    def test_save_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUDOKU_OUTPUT_DIR", str(tmp_path / "env_out"))
        main(["generate", "-n", "1", "-d", "medium", "-s", "4"])
        assert (tmp_path / "env_out" / "medium" / "puzzle_medium_1.txt").exists()

    def test_save_dir_flag_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUDOKU_OUTPUT_DIR", str(tmp_path / "env_out"))
        main(["generate", "-n", "1", "-d", "easy", "--save-dir", str(tmp_path / "flag_out")])
        assert (tmp_path / "flag_out" / "easy" / "puzzle_easy_1.txt").exists()
        assert not (tmp_path / "env_out").exists()


class TestBenchmarkCommand:

    def test_output_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SUDOKU_OUTPUT_DIR", str(tmp_path / "bench"))
        main(["benchmark", "-n", "1", "-d", "easy", "--no-charts"])
        assert (tmp_path / "bench" / "benchmark_results.json").exists()


class TestCheckCommand:

    def test_matching_solution(self, capsys):
        main(["check", "--puzzle", TEST_PUZZLE, "--solution", TEST_SOLUTION])
        assert "Matches solution: yes" in capsys.readouterr().out

    def test_mismatch_exits(self):
        bad = "4" + TEST_PUZZLE[1:]
        with pytest.raises(SystemExit) as exc:
            main(["check", "--puzzle", bad, "--solution", TEST_SOLUTION])
        assert exc.value.code == 1

    def test_bad_string_reports_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["check", "--puzzle", "12345"])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_unicode_digit_reports_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["check", "--puzzle", "\u00b2" + TEST_PUZZLE[1:]])
        assert exc.value.code == 1
        assert "Invalid character" in capsys.readouterr().out


class TestPlayLoop:

    def test_win_by_typing_answers(self, known_game, capsys):
        session = GameSession(known_game)
        moves = [
            f"{r + 1} {c + 1} {known_game.solution.get(r, c)}"
            for r, c in known_game.puzzle.get_empty_cells()
        ]
        assert play_loop(session, read=scripted(moves)) is GameStatus.WON
        assert "Congratulations" in capsys.readouterr().out

    def test_commands(self, known_game, capsys):
        session = GameSession(known_game)
        status = play_loop(session, read=scripted([
            "1 3 7",      # wrong
            "undo",
            "hint 1 3",
            "1 1 5",      # given cell
            "erase 1 3",
            "bogus",
            "quit",
        ]))

        out = capsys.readouterr().out
        assert status is GameStatus.PLAYING
        assert "Wrong digit" in out
        assert "That cell is part of the puzzle" in out
        assert session.error_count == 1
        assert session.board.is_empty(0, 2)

    def test_solve_reveals(self, known_game):
        session = GameSession(known_game)
        assert play_loop(session, read=scripted(["solve"])) is GameStatus.REVEALED

    def test_lose(self, known_game, capsys):
        session = GameSession(known_game, max_errors=2)
        assert play_loop(session, read=scripted(["1 3 7", "1 3 8"])) is GameStatus.LOST
        assert "Game over" in capsys.readouterr().out


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
