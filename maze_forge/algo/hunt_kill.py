from typing import Iterator, Optional, Tuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.steps import Step


class HuntAndKill(Generator):
    key = "hunt-and-kill"
    name = "Hunt and Kill"
    complexity = "O(n²)"
    description = (
        'Random walk until stuck, then systematically "hunts" for an unvisited cell adjacent '
        "to the visited path. When found, connects it and resumes random walk. Creates a mix "
        "of straight passages and twisty sections."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        rng = self.rng

        current: Optional[Tuple[int, int]] = (0, 0)
        grid.set_visited(0, 0)
        grid.set_highlight(0, 0)
        yield steps.visit((0, 0))

        while current is not None:
            cx, cy = current
            unvisited = [(nx, ny, dir_bit) for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                         if not grid.is_visited(nx, ny)]

            if unvisited:
                # Kill: keep walking
                nx, ny, dir_bit = rng.choice(unvisited)
                grid.carve_path(cx, cy, dir_bit)
                grid.set_visited(nx, ny)
                grid.set_highlight(cx, cy, False)
                grid.set_highlight(nx, ny)
                current = (nx, ny)
                yield steps.carve((cx, cy), (nx, ny))
                continue

            grid.set_highlight(cx, cy, False)
            current = yield from self._hunt()

    def _hunt(self):
        """
        Row-major scan for the first unvisited cell that touches the maze.
        Connects it to a random visited neighbor and returns it, or None when finished.
        """
        grid = self.grid
        for y in range(grid.height):
            row = [(x, y) for x in range(grid.width)]
            self._mark(row)
            yield steps.highlight(*row)
            self._mark(row, False)

            for x in range(grid.width):
                if grid.is_visited(x, y):
                    continue
                visited = [(nx, ny, dir_bit) for nx, ny, dir_bit in grid.get_neighbors(x, y)
                           if grid.is_visited(nx, ny)]
                if not visited:
                    continue

                nx, ny, dir_bit = self.rng.choice(visited)
                grid.carve_path(x, y, dir_bit)
                grid.set_visited(x, y)
                grid.set_highlight(x, y)
                yield steps.carve((x, y), (nx, ny))
                return (x, y)

        return None
