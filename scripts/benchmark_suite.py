import sys
import os
import time
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_forge.algo import registry


def benchmark_algo(algo_id: str, width: int, height: int, seed: int = 42):
    generator = registry.create(algo_id, width, height, seed=seed)

    start = time.time()
    grid = generator.run_all()
    duration = time.time() - start

    return duration, generator.step_count, grid.is_perfect()


def main():
    parser = argparse.ArgumentParser(description="Time every registered algorithm headless")
    parser.add_argument("--size", type=int, default=50, help="Grid side length")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    cells = args.size * args.size
    print(f"\n--- Benchmarking {args.size}x{args.size} ({cells:,} cells) ---")
    print(f"\n{'ALGORITHM':<24} | {'TIME (s)':<10} | {'STEPS':<10} | {'CELLS/S':<12} | PERFECT")
    print("-" * 76)

    for algo_id in registry.ALGORITHMS:
        duration, step_count, perfect = benchmark_algo(algo_id, args.size, args.size, args.seed)
        name = registry.describe(algo_id).display_name
        speed = cells / duration if duration > 0 else float("inf")
        print(f"{name:<24} | {duration:<10.4f} | {step_count:<10} | {speed:<12,.0f} | {perfect}")


if __name__ == "__main__":
    main()
