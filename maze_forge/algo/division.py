from typing import Iterator, List, NamedTuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.grid import Grid
from maze_forge.core.steps import Step


class Chamber(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class RecursiveDivision(Generator):
    key = "recursive-division"
    name = "Recursive Division"
    complexity = "O(n log n)"
    description = (
        "Recursively divides the maze into chambers, adding passages through the dividing "
        "walls. Creates mazes with long straight passages and a more geometric pattern."
    )

    open_interior = True

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        for y in range(grid.height):
            for x in range(grid.width):
                grid.set_visited(x, y)
        yield steps.visit(*[(x, y) for y in range(grid.height) for x in range(grid.width)])

        # Pending chambers, processed depth-first in the same order as recursion would
        pending: List[Chamber] = [Chamber(0, 0, grid.width, grid.height)]
        while pending:
            chamber = pending.pop()
            if chamber.width < 2 or chamber.height < 2:
                # A one-cell-wide corridor is already a tree
                continue
            first, second = yield from self._divide(chamber)
            pending.append(second)
            pending.append(first)

    def _divide(self, chamber: Chamber):
        """Walls off one line across the chamber's longer axis, leaving a single gap."""
        rng = self.rng
        x, y, width, height = chamber

        if height > width:
            # Horizontal wall below row wall_y
            wall_y = y + rng.randrange(height - 1)
            gap_x = x + rng.randrange(width)
            for cx in range(x, x + width):
                if cx != gap_x:
                    yield from self._build((cx, wall_y), Grid.SOUTH)
            top = wall_y - y + 1
            return Chamber(x, y, width, top), Chamber(x, wall_y + 1, width, height - top)

        # Vertical wall east of column wall_x
        wall_x = x + rng.randrange(width - 1)
        gap_y = y + rng.randrange(height)
        for cy in range(y, y + height):
            if cy != gap_y:
                yield from self._build((wall_x, cy), Grid.EAST)
        left = wall_x - x + 1
        return Chamber(x, y, left, height), Chamber(wall_x + 1, y, width - left, height)

    def _build(self, cell, dir_bit: int):
        other = self.grid.neighbor(cell[0], cell[1], dir_bit)
        self.grid.add_wall(cell[0], cell[1], dir_bit)
        self._mark((cell, other))
        yield steps.wall(cell, other)
        self._mark((cell, other), False)
