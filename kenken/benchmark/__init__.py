"""Benchmark module for comparing KenKen solvers."""

from .benchmark import Benchmark, BenchmarkResult, load_puzzles

__all__ = ["Benchmark", "BenchmarkResult", "load_puzzles"]
