from typing import Iterator, List, Tuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.grid import Grid
from maze_forge.core.steps import Step


class Sidewinder(Generator):
    key = "sidewinder"
    name = "Sidewinder"
    complexity = "O(n)"
    description = (
        "Processes maze row by row. For each cell, randomly decides to either connect east or "
        "carve a passage north from a random cell in the current run. Creates a distinctive "
        "pattern with perfect top row."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        rng = self.rng
        p_close = self.config.sidewinder_close_probability

        # Top row is one open corridor
        grid.set_visited(0, 0)
        yield steps.visit((0, 0))
        for x in range(grid.width - 1):
            grid.carve_path(x, 0, Grid.EAST)
            grid.set_visited(x + 1, 0)
            self._mark(((x, 0), (x + 1, 0)))
            yield steps.carve((x, 0), (x + 1, 0))
            self._mark(((x, 0), (x + 1, 0)), False)

        for y in range(1, grid.height):
            run: List[Tuple[int, int]] = []
            for x in range(grid.width):
                run.append((x, y))
                grid.set_visited(x, y)
                grid.set_highlight(x, y)
                yield steps.visit((x, y))

                at_east_edge = x == grid.width - 1
                if at_east_edge or rng.random() < p_close:
                    # Close the run with one passage north
                    rx, ry = rng.choice(run)
                    grid.carve_path(rx, ry, Grid.NORTH)
                    grid.set_highlight(rx, ry - 1)
                    yield steps.carve((rx, ry), (rx, ry - 1))
                    grid.set_highlight(rx, ry - 1, False)
                    self._mark(run, False)
                    run = []
                else:
                    grid.carve_path(x, y, Grid.EAST)
                    yield steps.carve((x, y), (x + 1, y))
