from typing import NamedTuple, Tuple

# Step actions
VISIT = "visit"          # cell(s) marked visited
CARVE = "carve"          # wall pair removed between two cells
WALL = "wall"            # wall pair added between two cells
HIGHLIGHT = "highlight"  # only the transient highlight changed
SKIP = "skip"            # candidate examined and rejected, grid untouched


class Step(NamedTuple):
    """
    One atomic change a generator made to its grid.
    'pause' tells the scheduler whether to sleep after observing it.
    """
    action: str
    cells: Tuple[Tuple[int, int], ...] = ()
    pause: bool = True


def visit(*cells, pause: bool = True) -> Step:
    return Step(VISIT, cells, pause)


def carve(a, b, pause: bool = True) -> Step:
    return Step(CARVE, (a, b), pause)


def wall(a, b, pause: bool = True) -> Step:
    return Step(WALL, (a, b), pause)


def highlight(*cells, pause: bool = True) -> Step:
    return Step(HIGHLIGHT, cells, pause)


def skip(*cells) -> Step:
    return Step(SKIP, cells, False)
