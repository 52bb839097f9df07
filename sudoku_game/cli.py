"""Command-line interface for the Sudoku game engine."""

import argparse
import json
import logging
import os
import sys
from typing import Callable, List

from .config import GameConfig
from .core.board import SudokuBoard
from .core.validator import puzzle_matches_solution
from .errors import SudokuError
from .game import GameSession, GameStatus, MoveResult
from .generator import SudokuGenerator, Difficulty

DIFFICULTY_CHOICES = ["easy", "medium", "hard", "all"]

PLAY_HELP = """Commands (rows and columns are 1-9):
  r c v      write digit v at row r, column c
  erase r c  clear a cell
  hint r c   fill a cell with its answer
  undo       undo the last change
  solve      reveal the solution
  quit       leave the game"""


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator & Player",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  sudoku-game generate --count 5 --difficulty medium

  # Check a filled grid against its puzzle
  sudoku-game check --puzzle "5300700..." --solution "5346789..."

  # Play a hard puzzle in the terminal
  sudoku-game play --difficulty hard
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES, default=None,
        help="Difficulty level (default: easy, or SUDOKU_DIFFICULTY)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--save-dir", type=str, default=None,
        help="Also save puzzles as text files under this directory (default: SUDOKU_OUTPUT_DIR)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    check_parser = subparsers.add_parser("check", help="Validate a Sudoku grid")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Grid string (81 chars, 0 or . for empty cells)"
    )
    check_parser.add_argument(
        "--solution", type=str, default=None,
        help="Solution string the puzzle clues must agree with"
    )

    play_parser = subparsers.add_parser("play", help="Play a puzzle in the terminal")
    play_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES[:-1], default=None,
        help="Difficulty level (default: easy, or SUDOKU_DIFFICULTY)"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--count", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES, default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for results (default: SUDOKU_OUTPUT_DIR, else results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = GameConfig()
        if args.command == "generate":
            cmd_generate(args, config)
        elif args.command == "check":
            cmd_check(args)
        elif args.command == "play":
            cmd_play(args, config)
        elif args.command == "benchmark":
            cmd_benchmark(args, config)
    except SudokuError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _difficulties(name: str) -> List[Difficulty]:
    if name == "all":
        return list(Difficulty)
    return [Difficulty.parse(name)]


def cmd_generate(args, config: GameConfig):
    """Handle the generate command."""
    seed = args.seed if args.seed is not None else config.seed
    generator = SudokuGenerator(seed=seed)

    save_dir = args.save_dir or config.output_dir
    all_puzzles = []

    for difficulty in _difficulties(args.difficulty or config.difficulty):
        print(f"\nGenerating {args.count} {difficulty.value} puzzles...")
        puzzles = generator.generate_batch(args.count, difficulty)

        for i, generated in enumerate(puzzles, 1):
            record = generated.to_dict()
            record["index"] = i
            all_puzzles.append(record)

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({generated.clues} clues) ---")
            print(generated.puzzle)

        if save_dir:
            diff_dir = os.path.join(save_dir, difficulty.value)
            SudokuGenerator.save_to_folder(puzzles, diff_dir, prefix=f"puzzle_{difficulty.value}")

    if save_dir:
        print(f"\nPuzzles also saved individually in the '{save_dir}/' directory")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_check(args):
    """Handle the check command."""
    board = SudokuBoard.from_string(args.puzzle)

    print("Grid:")
    print(board)
    print()

    valid = board.is_valid()
    print(f"Valid:    {'yes' if valid else 'no'}")
    print(f"Complete: {'yes' if board.is_complete() else 'no'} ({board.count_filled()} filled)")

    if args.solution:
        solution = SudokuBoard.from_string(args.solution)
        matches = solution.is_solved() and puzzle_matches_solution(board, solution)
        print(f"Matches solution: {'yes' if matches else 'no'}")
        if not matches:
            sys.exit(1)
    elif not valid:
        sys.exit(1)


def _parse_cell(parts: List[str]):
    row, col = (int(p) - 1 for p in parts)
    return row, col


def play_loop(session: GameSession, read: Callable[[str], str] = input) -> GameStatus:
    """
    Drive a session from text commands until the game ends or the player quits.

    Returns:
        The session status when the loop stops.
    """
    print(PLAY_HELP)

    while not session.is_over:
        print()
        print(session.board)
        print(f"Errors: {session.error_count}/{session.max_errors}   "
              f"Time: {session.format_elapsed()}   "
              f"Available: {' '.join(str(d) for d in session.available_digits())}")

        try:
            line = read("> ").strip().lower()
        except EOFError:
            break
        parts = line.split()
        if not parts:
            continue

        try:
            if parts[0] == "quit":
                break
            elif parts[0] == "undo":
                if not session.undo():
                    print("Nothing to undo")
            elif parts[0] == "solve":
                session.reveal()
            elif parts[0] == "erase" and len(parts) == 3:
                if session.select(*_parse_cell(parts[1:])):
                    session.erase()
                else:
                    print("That cell is part of the puzzle")
            elif parts[0] == "hint" and len(parts) == 3:
                if not session.select(*_parse_cell(parts[1:])):
                    print("That cell is part of the puzzle")
                elif session.hint() is None:
                    print("That cell is already filled")
            elif len(parts) == 3:
                row, col, value = (int(p) for p in parts)
                if not session.select(row - 1, col - 1):
                    print("That cell is part of the puzzle")
                elif session.enter(value) is MoveResult.WRONG:
                    print("Wrong digit")
            else:
                print(PLAY_HELP)
        except ValueError as e:
            print(f"Invalid input: {e}")
        except SudokuError as e:
            print(f"Error: {e}")

    print()
    print(session.board)
    if session.status is GameStatus.WON:
        print(f"Congratulations, puzzle solved in {session.format_elapsed()}!")
    elif session.status is GameStatus.LOST:
        print("Game over, too many errors.")
    return session.status


def cmd_play(args, config: GameConfig):
    """Handle the play command."""
    seed = args.seed if args.seed is not None else config.seed
    generated = SudokuGenerator(seed=seed).generate(args.difficulty or config.difficulty)
    session = GameSession(generated, max_errors=config.max_errors)
    play_loop(session)


def cmd_benchmark(args, config: GameConfig):
    """Handle the benchmark command."""
    # Plotting stack is only needed here
    from .benchmark import GenerationBenchmark, Visualizer

    difficulties = _difficulties(args.difficulty)
    output_dir = args.output or config.output_dir or "results"

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles per difficulty: {args.count}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Output directory: {output_dir}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        puzzles_per_difficulty=args.count,
        difficulties=difficulties,
        seed=args.seed
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Difficulty:")
    print("-" * 50)
    for diff, stats in summary["results_by_difficulty"].items():
        print(f"\n{diff}:")
        print(f"  Clues: {stats['clues']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f} (max {stats['max_backtracks']})")
        print(f"  Avg Wasted Draws: {stats['avg_wasted_draws']:.1f}")

    benchmark.save_results(output_dir)
    print(f"\nResults and puzzles saved to {output_dir}")

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, output_dir)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {output_dir}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
