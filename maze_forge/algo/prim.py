from typing import Iterator, List, Set, Tuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.steps import Step


class PrimsAlgorithm(Generator):
    key = "prims"
    name = "Prim's Algorithm"
    complexity = "O(n log n)"
    description = (
        "Builds maze like a growing tree. Starts with a cell and keeps a frontier of the "
        "unvisited cells next to the maze. Randomly picks a frontier cell, connects it to one "
        "of its visited neighbors and adds its own unvisited neighbors to the frontier."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        rng = self.rng

        start_x = rng.randrange(grid.width)
        start_y = rng.randrange(grid.height)
        grid.set_visited(start_x, start_y)
        yield steps.visit((start_x, start_y))

        # Frontier: set for O(1) membership, list for O(1) random pick
        frontier_set: Set[Tuple[int, int]] = set()
        frontier_list: List[Tuple[int, int]] = []

        def extend_frontier(cx, cy):
            for nx, ny, _ in grid.get_neighbors(cx, cy):
                if not grid.is_visited(nx, ny) and (nx, ny) not in frontier_set:
                    frontier_set.add((nx, ny))
                    frontier_list.append((nx, ny))
                    grid.set_highlight(nx, ny)

        extend_frontier(start_x, start_y)

        while frontier_list:
            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier_list))
            cx, cy = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.remove((cx, cy))

            # Every frontier cell touches the visited region by construction
            visited_neighbors = [(nx, ny, dir_bit) for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                                 if grid.is_visited(nx, ny)]
            nx, ny, dir_bit = rng.choice(visited_neighbors)

            grid.carve_path(cx, cy, dir_bit)
            grid.set_visited(cx, cy)
            grid.set_highlight(cx, cy, False)
            extend_frontier(cx, cy)

            yield steps.carve((cx, cy), (nx, ny))
