"""Benchmarking framework for puzzle generation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..generator import SudokuGenerator, Difficulty, GeneratedPuzzle

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Measurements from generating a single puzzle."""
    puzzle_id: int
    difficulty: str
    clues: int
    time_seconds: float
    placements: int
    backtracks: int
    wasted_draws: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "clues": self.clues,
            "time_seconds": self.time_seconds,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "wasted_draws": self.wasted_draws,
        }


class GenerationBenchmark:
    """
    Generates puzzles at each difficulty and collects the search counters.
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of puzzles to generate per difficulty.
            difficulties: List of difficulties to test (default: all).
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.seed = seed
        self.puzzles: Dict[str, List[GeneratedPuzzle]] = {}
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the benchmark.

        Returns:
            List of BenchmarkResult objects.
        """
        generator = SudokuGenerator(seed=self.seed)
        self.puzzles = {}
        self.results = []

        total = len(self.difficulties) * self.puzzles_per_difficulty
        pbar = tqdm(total=total, desc="Benchmarking", disable=not show_progress)

        for difficulty in self.difficulties:
            batch = []
            for puzzle_id in range(self.puzzles_per_difficulty):
                generated = generator.generate(difficulty)
                batch.append(generated)
                self.results.append(BenchmarkResult(
                    puzzle_id=puzzle_id,
                    difficulty=difficulty.value,
                    clues=generated.clues,
                    time_seconds=generated.stats.time_seconds,
                    placements=generated.stats.placements,
                    backtracks=generated.stats.backtracks,
                    wasted_draws=generated.stats.wasted_draws,
                ))
                pbar.update(1)
            self.puzzles[difficulty.value] = batch

        pbar.close()
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics grouped by difficulty."""
        summary = {
            "total_puzzles": len(self.results),
            "difficulties": [d.value for d in self.difficulties],
            "results_by_difficulty": {}
        }

        for difficulty in self.difficulties:
            diff_results = [r for r in self.results if r.difficulty == difficulty.value]
            if not diff_results:
                continue
            times = [r.time_seconds for r in diff_results]
            backtracks = [r.backtracks for r in diff_results]
            wasted = [r.wasted_draws for r in diff_results]

            summary["results_by_difficulty"][difficulty.value] = {
                "count": len(diff_results),
                "clues": diff_results[0].clues,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_backtracks": sum(backtracks) / len(backtracks),
                "max_backtracks": max(backtracks),
                "avg_wasted_draws": sum(wasted) / len(wasted),
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for difficulty, puzzles in self.puzzles.items():
            diff_dir = os.path.join(puzzles_dir, difficulty)
            SudokuGenerator.save_to_folder(puzzles, diff_dir, prefix=f"puzzle_{difficulty}")

        logger.info("Results and puzzles saved to %s", output_dir)
