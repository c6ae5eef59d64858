from typing import Iterator

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.steps import Step


class AldousBroder(Generator):
    key = "aldous-broder"
    name = "Aldous-Broder Algorithm"
    complexity = "O(n³)"
    description = (
        "Performs a random walk through the grid. When visiting an unvisited cell, carves a "
        "passage from the previous cell. Creates unbiased mazes but can be very inefficient."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        rng = self.rng

        cx = rng.randrange(grid.width)
        cy = rng.randrange(grid.height)
        unvisited = grid.width * grid.height - 1

        grid.set_visited(cx, cy)
        grid.set_highlight(cx, cy)
        yield steps.visit((cx, cy))

        while unvisited > 0:
            nx, ny, dir_bit = rng.choice(list(grid.get_neighbors(cx, cy)))

            grid.set_highlight(cx, cy, False)
            grid.set_highlight(nx, ny)
            if not grid.is_visited(nx, ny):
                grid.carve_path(cx, cy, dir_bit)
                grid.set_visited(nx, ny)
                unvisited -= 1
                yield steps.carve((cx, cy), (nx, ny))
            else:
                yield steps.highlight((cx, cy), (nx, ny))
            cx, cy = nx, ny

        grid.set_highlight(cx, cy, False)
