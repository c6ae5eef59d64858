from typing import Dict, Iterator, List, Tuple

from maze_forge.algo.base import Generator
from maze_forge.core import steps
from maze_forge.core.steps import Step


class WilsonsAlgorithm(Generator):
    key = "wilson"
    name = "Wilson's Algorithm"
    complexity = "O(n²)"
    description = (
        "Performs loop-erased random walks to build the maze. Starts from random cells, walks "
        "randomly until hitting visited cells, then erases loops from the path. Creates "
        "perfectly uniform random mazes without bias."
    )

    def carve(self) -> Iterator[Step]:
        grid = self.grid
        rng = self.rng

        # Seed the tree with the first cell
        grid.set_visited(0, 0)
        yield steps.visit((0, 0))

        while True:
            unvisited = [(x, y) for y in range(grid.height) for x in range(grid.width)
                         if not grid.is_visited(x, y)]
            if not unvisited:
                break

            start = rng.choice(unvisited)
            path: List[Tuple[int, int]] = [start]
            # Cell -> position in path, for O(1) loop detection
            index: Dict[Tuple[int, int], int] = {start: 0}
            grid.set_highlight(*start)
            yield steps.highlight(start)

            current = start
            while not grid.is_visited(*current):
                nx, ny, _ = rng.choice(list(grid.get_neighbors(*current)))
                nxt = (nx, ny)

                if nxt in index:
                    # Loop erasure: cut the path back to the first visit of nxt
                    cut = index[nxt]
                    erased = path[cut + 1:]
                    for cell in erased:
                        del index[cell]
                    del path[cut + 1:]
                    self._mark(erased, False)
                    yield steps.highlight(nxt, *erased)
                else:
                    index[nxt] = len(path)
                    path.append(nxt)
                    grid.set_highlight(nx, ny)
                    yield steps.highlight(nxt)
                current = nxt

            # The walk hit the tree: carve the whole loop-erased path into it
            for a, b in zip(path, path[1:]):
                grid.remove_wall_between(a, b)
                grid.set_visited(*a)
                grid.set_highlight(a[0], a[1], False)
                yield steps.carve(a, b)
            grid.set_highlight(*path[-1], False)
