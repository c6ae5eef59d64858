import argparse
import sys
import os
import logging
import random

# Ensure project root is in path so we can import 'maze_forge' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_forge.algo import registry
from maze_forge.core.config import GenerationConfig
from maze_forge.core.errors import GenerationCancelled, MazeError

logger = logging.getLogger("maze_forge")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Forge: step-by-step perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--algo", type=str, default="recursive-backtracker",
                            choices=sorted(registry.list_algorithms()) + ["random"],
                            help="Generation Algorithm ('random' picks one)")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width (cells)")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height (cells)")
    gen_parser.add_argument("--cell-size", type=int, default=20, help="Cell size in pixels (visual only)")
    gen_parser.add_argument("--delay", type=float, default=0.01, help="Seconds to pause after each step (visual only)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--eller-merge", type=float, default=0.5, help="Eller's horizontal merge probability")
    gen_parser.add_argument("--eller-down", type=float, default=0.3, help="Eller's vertical carve probability")
    gen_parser.add_argument("--sidewinder-close", type=float, default=0.5, help="Sidewinder run close probability")

    # List Command
    subparsers.add_parser("list", help="List available algorithms")
    return parser


def list_algorithms():
    print(f"{'ID':<22} | {'NAME':<24} | {'COMPLEXITY':<10}")
    print("-" * 62)
    for algo_id in registry.ALGORITHMS:
        info = registry.describe(algo_id)
        print(f"{algo_id:<22} | {info.display_name:<24} | {info.complexity_class:<10}")


def generate(args) -> int:
    if args.algo == "random":
        # A seeded run must also pick the same algorithm every time
        picker = random.Random(args.seed) if args.seed is not None else None
        algo_id = registry.pick_random(picker)
        logger.info(f"Randomly picked algorithm: {algo_id}")
    else:
        algo_id = args.algo
    config = GenerationConfig(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        delay=args.delay if (args.visual or args.record) else 0.0,
        seed=args.seed,
        eller_merge_probability=args.eller_merge,
        eller_down_probability=args.eller_down,
        sidewinder_close_probability=args.sidewinder_close,
    ).validate()

    generator = registry.create(algo_id, config.width, config.height, cell_size=config.cell_size,
                                seed=config.seed, config=config)
    logger.info(f"Generating {config.width}x{config.height} maze with {generator.name}...")

    renderer = None
    observer = None
    if args.visual or args.record:
        from maze_forge.viz.recorder import VideoRecorder
        from maze_forge.viz.renderer import Renderer
        recorder = VideoRecorder.for_run(algo_id, config.width, config.height) if args.record else None
        renderer = Renderer(config.width, config.height, cell_size=config.cell_size, title=generator.name,
                            recorder=recorder, on_close=generator.request_cancel)
        renderer.init_window()
        observer = renderer.observe
    else:
        logger.info("Headless generation...")

    try:
        grid = generator.generate(observer=observer, delay=config.delay)
        logger.info(f"Done in {generator.step_count} steps. Perfect maze: {grid.is_perfect()}")
        if renderer:
            renderer.draw_frame(grid.snapshot(), "done")
            if not args.record:
                renderer.wait_for_close()
    except GenerationCancelled as e:
        logger.info(str(e))
    finally:
        if renderer:
            renderer.close()
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    try:
        if args.command == "list":
            list_algorithms()
        elif args.command == "generate":
            return generate(args)
    except MazeError as e:
        logger.error(str(e))
        return 2
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
