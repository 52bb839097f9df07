"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult
from ..generator import Difficulty


class Visualizer:
    """
    Chart generator for puzzle generation benchmarks.

    Compares generation time, backtracking effort and carving waste
    across difficulty levels.
    """

    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _difficulties(self) -> List[str]:
        present = {r.difficulty for r in self.results}
        return [d.value for d in Difficulty if d.value in present]

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_difficulty(),
            self.plot_backtrack_distribution(),
            self.plot_wasted_draws(),
        ]

    def plot_time_by_difficulty(self) -> str:
        """Create bar chart of average generation time per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.difficulty == diff])
            for diff in difficulties
        ]
        colors = [self.COLORS.get(diff, "#95a5a6") for diff in difficulties]

        bars = ax.bar([d.capitalize() for d in difficulties], avg_times,
                      color=colors, edgecolor='black', linewidth=0.5)

        for bar, avg in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{avg:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time by Difficulty', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_by_difficulty.png")

    def plot_backtrack_distribution(self) -> str:
        """Create box plot of backtracks needed to fill the solution grid."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        sns.boxplot(
            x=[r.difficulty for r in self.results],
            y=[r.backtracks for r in self.results],
            order=difficulties,
            hue=[r.difficulty for r in self.results],
            hue_order=difficulties,
            palette=self.COLORS,
            legend=False,
            ax=ax,
        )

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Backtracks', fontsize=12)
        ax.set_title('Backtracking Effort per Solution Grid', fontsize=14, fontweight='bold')

        return self._save("backtrack_distribution.png")

    def plot_wasted_draws(self) -> str:
        """Create bar chart of random draws that hit an already empty cell."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        avg_wasted = [
            np.mean([r.wasted_draws for r in self.results if r.difficulty == diff])
            for diff in difficulties
        ]
        colors = [self.COLORS.get(diff, "#95a5a6") for diff in difficulties]

        ax.bar([d.capitalize() for d in difficulties], avg_wasted,
               color=colors, edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Wasted Draws', fontsize=12)
        ax.set_title('Carving Draws on Already Empty Cells', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("wasted_draws.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Benchmark Summary\n",
            "| Difficulty | Clues | Avg Time | Avg Backtracks | Avg Wasted Draws |",
            "|------------|-------|----------|----------------|------------------|"
        ]

        for diff in self._difficulties():
            diff_results = [r for r in self.results if r.difficulty == diff]
            avg_time = np.mean([r.time_seconds for r in diff_results])
            avg_backtracks = np.mean([r.backtracks for r in diff_results])
            avg_wasted = np.mean([r.wasted_draws for r in diff_results])

            lines.append(
                f"| {diff.capitalize()} | {diff_results[0].clues} | {avg_time:.4f}s "
                f"| {int(avg_backtracks):,} | {avg_wasted:.1f} |"
            )

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write("\n".join(lines))

        return path
