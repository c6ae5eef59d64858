from typing import Dict, Iterator, List, Optional

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.grid import Grid
from maze_forge.core.steps import Step


class EllersAlgorithm(Generator):
    """
    Row-at-a-time generation. Only the set ids of the current row (and the
    row being prepared below it) are kept, so memory is O(width) no matter
    how many rows are produced.
    """
    key = "eller"
    name = "Eller's Algorithm"
    complexity = "O(n)"
    description = (
        "Generates maze one row at a time using disjoint sets. Each row is partially connected "
        "horizontally, then vertically to the next row. Perfect for infinite mazes as it only "
        "needs to store one row in memory."
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.next_set_id = 0

    def _new_set(self) -> int:
        set_id = self.next_set_id
        self.next_set_id += 1
        return set_id

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        self.next_set_id = 0

        # Set id per column; None means the cell has not been claimed from above
        row: List[Optional[int]] = [None] * grid.width

        for y in range(grid.height):
            for x in range(grid.width):
                if row[x] is None:
                    row[x] = self._new_set()
                grid.set_visited(x, y)
            yield steps.visit(*[(x, y) for x in range(grid.width)])

            last_row = y == grid.height - 1
            yield from self._join_row(row, y, forced=last_row)
            if last_row:
                break

            row = yield from self._connect_down(row, y)

    def _join_row(self, row: List[int], y: int, forced: bool) -> Iterator[Step]:
        grid = self.grid
        p_merge = self.config.eller_merge_probability

        for x in range(grid.width - 1):
            if row[x] == row[x + 1]:
                yield steps.skip((x, y), (x + 1, y))
                continue
            if not forced and self.rng.random() >= p_merge:
                yield steps.skip((x, y), (x + 1, y))
                continue

            # Relabel the right-hand set into the left-hand one
            absorbed = row[x + 1]
            for i in range(grid.width):
                if row[i] == absorbed:
                    row[i] = row[x]

            grid.carve_path(x, y, Grid.EAST)
            self._mark(((x, y), (x + 1, y)))
            yield steps.carve((x, y), (x + 1, y))
            self._mark(((x, y), (x + 1, y)), False)

    def _connect_down(self, row: List[int], y: int):
        """
        Carves vertical passages into row y+1 and returns its partial set ids.
        Every set in row y keeps at least one passage down.
        """
        grid = self.grid
        p_down = self.config.eller_down_probability

        # Row-set table for the active row: set id -> columns, leftmost first
        members: Dict[int, List[int]] = {}
        for x, set_id in enumerate(row):
            members.setdefault(set_id, []).append(x)

        below: List[Optional[int]] = [None] * grid.width
        for x in range(grid.width):
            if self.rng.random() < p_down:
                yield from self._carve_down(x, y, row[x], below)

        for set_id, columns in members.items():
            if set_id not in below:
                yield from self._carve_down(columns[0], y, set_id, below)

        return below

    def _carve_down(self, x: int, y: int, set_id: int, below: List[Optional[int]]):
        self.grid.carve_path(x, y, Grid.SOUTH)
        below[x] = set_id
        self._mark(((x, y), (x, y + 1)))
        yield steps.carve((x, y), (x, y + 1))
        self._mark(((x, y), (x, y + 1)), False)
