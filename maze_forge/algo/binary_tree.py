from typing import Iterator

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.grid import Grid
from maze_forge.core.steps import Step


class BinaryTree(Generator):
    key = "binary-tree"
    name = "Binary Tree"
    complexity = "O(n)"
    description = (
        "For each cell, randomly decides to carve a passage either north or east. Simple but "
        "creates a strong diagonal bias and perfect passages along north and east edges. All "
        "dead ends point southwest."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid

        for y in range(grid.height):
            for x in range(grid.width):
                grid.set_visited(x, y)
                grid.set_highlight(x, y)

                candidates = []
                if y > 0:
                    candidates.append(Grid.NORTH)
                if x < grid.width - 1:
                    candidates.append(Grid.EAST)

                if not candidates:
                    # Top-right corner
                    yield steps.visit((x, y))
                else:
                    dir_bit = candidates[0] if len(candidates) == 1 else self.rng.choice(candidates)
                    grid.carve_path(x, y, dir_bit)
                    yield steps.carve((x, y), grid.neighbor(x, y, dir_bit))

                grid.set_highlight(x, y, False)
