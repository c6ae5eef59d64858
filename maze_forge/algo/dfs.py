from typing import Iterator, List, Tuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.steps import Step


class RecursiveBacktracker(Generator):
    key = "recursive-backtracker"
    name = "Recursive Backtracker"
    complexity = "O(n)"
    description = (
        "Uses depth-first search with backtracking to carve paths. Starts at a cell, randomly "
        "moves to unvisited neighbors while keeping track of its path. When stuck, backtracks "
        "until finding a cell with unvisited neighbors."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        rng = self.rng

        # Start at (0,0)
        start_x, start_y = 0, 0
        grid.set_visited(start_x, start_y)
        grid.set_highlight(start_x, start_y)
        yield steps.visit((start_x, start_y))

        # Stack of (x, y); the top is the highlighted "current" cell
        stack: List[Tuple[int, int]] = [(start_x, start_y)]

        while stack:
            cx, cy = stack[-1]

            neighbors = [(nx, ny, dir_bit) for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                         if not grid.is_visited(nx, ny)]

            if neighbors:
                nx, ny, dir_bit = rng.choice(neighbors)

                grid.carve_path(cx, cy, dir_bit)
                grid.set_visited(nx, ny)
                grid.set_highlight(cx, cy, False)
                grid.set_highlight(nx, ny)

                stack.append((nx, ny))
                yield steps.carve((cx, cy), (nx, ny))
            else:
                # Backtrack
                stack.pop()
                grid.set_highlight(cx, cy, False)
                if stack:
                    grid.set_highlight(*stack[-1])
                    yield steps.highlight((cx, cy), stack[-1])
                else:
                    yield steps.highlight((cx, cy))
