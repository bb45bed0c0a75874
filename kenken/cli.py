"""Command-line interface for the KenKen solver."""

import argparse
import logging
import os
import sys

from .core.cage import Puzzle
from .core.validator import validate_puzzle
from .solvers import BacktrackingSolver, StackSolver
from .benchmark import Benchmark, load_puzzles
from .examples import load_example, load_examples


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="KenKen Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle stored as JSON
  kenken solve puzzle.json

  # Solve with both search drivers and show statistics
  kenken solve puzzle.json --algorithm all --verbose

  # Check cage coverage before solving
  kenken check puzzle.json

  # Write the bundled example puzzles to a folder
  kenken examples --output puzzles/

  # Benchmark every puzzle in a directory
  kenken benchmark puzzles/ --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a KenKen puzzle")
    solve_parser.add_argument("puzzle", help="Puzzle JSON file")
    solve_parser.add_argument(
        "--algorithm", "-a",
        choices=["recursive", "stack", "all"],
        default="recursive",
        help="Search driver to use (default: recursive)"
    )
    solve_parser.add_argument(
        "--validate", action="store_true",
        help="Refuse to solve puzzles whose cages are malformed"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate a puzzle's cages")
    check_parser.add_argument("puzzle", help="Puzzle JSON file")

    # Examples command
    ex_parser = subparsers.add_parser("examples", help="Show or save bundled example puzzles")
    ex_parser.add_argument(
        "--size", "-s", type=int, default=None,
        help="Grid size of the example (default: all)"
    )
    ex_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Directory to write NxN.json files into (default: print JSON)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run solver benchmarks")
    bench_parser.add_argument("directory", help="Directory of puzzle JSON files")
    bench_parser.add_argument(
        "--timeout", "-t", type=float, default=60.0,
        help="Seconds allowed per puzzle per solver (default: 60)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for results (default: print only)"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )
    bench_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable informational logging"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "check":
        return cmd_check(args)
    elif args.command == "benchmark":
        return cmd_benchmark(args)
    elif args.command == "examples":
        return cmd_examples(args)
    return 1


def _load(path):
    try:
        return Puzzle.load(path)
    except (OSError, ValueError) as e:
        print(f"Error reading puzzle: {e}")
        return None


def cmd_solve(args):
    """Handle the solve command."""
    puzzle = _load(args.puzzle)
    if puzzle is None:
        return 1

    print(f"Puzzle: {puzzle.size}x{puzzle.size}, {len(puzzle.cages)} cages")

    if args.validate:
        problems = validate_puzzle(puzzle)
        if problems:
            print("Puzzle is malformed:")
            for problem in problems:
                print(f"  - {problem}")
            return 1

    solver_map = {
        "recursive": ("Recursive", BacktrackingSolver()),
        "stack": ("Stack", StackSolver()),
    }
    if args.algorithm == "all":
        solvers = dict(solver_map.values())
    else:
        name, solver = solver_map[args.algorithm]
        solvers = {name: solver}

    all_solved = True
    for name, solver in solvers.items():
        print(f"Solving with {name}...")
        solution, stats = solver.solve(puzzle)

        if stats.solved:
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
            if args.verbose:
                print(f"  Iterations: {stats.iterations:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
                print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            print(solution)
        else:
            all_solved = False
            print("✗ No solution")
            if args.verbose:
                print(f"  Time: {stats.time_seconds:.4f}s")
                print(f"  Iterations: {stats.iterations:,}")
                if "error" in stats.extra:
                    print(f"  Error: {stats.extra['error']}")
        print()

    return 0 if all_solved else 1


def cmd_check(args):
    """Handle the check command."""
    puzzle = _load(args.puzzle)
    if puzzle is None:
        return 1

    problems = validate_puzzle(puzzle)
    if not problems:
        print(f"OK: {puzzle.size}x{puzzle.size} puzzle, {len(puzzle.cages)} cages")
        return 0

    print(f"Found {len(problems)} problem(s):")
    for problem in problems:
        print(f"  - {problem}")
    return 1


def cmd_benchmark(args):
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.directory)
    except (OSError, ValueError) as e:
        print(f"Error loading puzzles: {e}")
        return 1

    if not puzzles:
        print(f"No puzzle files found in {args.directory}")
        return 1

    benchmark = Benchmark(puzzles, timeout_seconds=args.timeout)

    print("=" * 60)
    print("KENKEN SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print("=" * 60)

    benchmark.run(show_progress=not args.no_progress)
    summary = benchmark.get_summary()

    print("\nBy Algorithm:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Solved: {stats['solved_rate']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    if args.output:
        benchmark.save_results(args.output)
        print(f"\nResults saved to {args.output}/")

    return 0


def cmd_examples(args):
    """Handle the examples command."""
    if args.size is None:
        examples = load_examples()
    else:
        try:
            examples = {f"{args.size}x{args.size}": load_example(args.size)}
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    if not args.output:
        for name, puzzle in examples.items():
            print(f"--- {name} ({len(puzzle.cages)} cages) ---")
            print(puzzle.to_json())
        return 0

    os.makedirs(args.output, exist_ok=True)
    for name, puzzle in examples.items():
        path = os.path.join(args.output, f"{name}.json")
        puzzle.save(path)
        print(f"Saved {name} example to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
