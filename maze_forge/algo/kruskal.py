from typing import Iterator, List, Tuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.disjoint_set import DisjointSet
from maze_forge.core.grid import Grid
from maze_forge.core.steps import Step

# (x, y, direction) with direction EAST or SOUTH, so each interior wall appears once
Edge = Tuple[int, int, int]


class KruskalsAlgorithm(Generator):
    key = "kruskal"
    name = "Kruskal's Algorithm"
    complexity = "O(n log n)"
    description = (
        "Treats cells as disjoint sets, randomly removes walls between cells in different "
        "sets and merges their sets. Continues until all cells are in the same set. Creates "
        "unbiased mazes with a more organic feel."
    )

    def interior_edges(self) -> List[Edge]:
        edges = []
        for y in range(self.grid.height):
            for x in range(self.grid.width):
                if x < self.grid.width - 1:
                    edges.append((x, y, Grid.EAST))
                if y < self.grid.height - 1:
                    edges.append((x, y, Grid.SOUTH))
        return edges

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        sets = DisjointSet(grid.width * grid.height)

        edges = self.interior_edges()
        self.rng.shuffle(edges)

        # Once every cell shares one set the remaining walls would all be rejected
        while edges and sets.components > 1:
            x, y, dir_bit = edges.pop()
            nx, ny = x + Grid.DX[dir_bit], y + Grid.DY[dir_bit]

            if not sets.union(grid.get_index(x, y), grid.get_index(nx, ny)):
                yield steps.skip((x, y), (nx, ny))
                continue

            grid.carve_path(x, y, dir_bit)
            grid.set_visited(x, y)
            grid.set_visited(nx, ny)
            self._mark(((x, y), (nx, ny)))
            yield steps.carve((x, y), (nx, ny))
            self._mark(((x, y), (nx, ny)), False)

        # A single-cell grid has no walls to consider
        if grid.width * grid.height == 1:
            grid.set_visited(0, 0)
            yield steps.visit((0, 0))
