from array import array
from collections import deque
from typing import Iterator, NamedTuple, Optional, Tuple

from maze_forge.core.errors import InvalidDimensions

Coord = Tuple[int, int]


class CellState(NamedTuple):
    x: int
    y: int
    north: bool
    east: bool
    south: bool
    west: bool
    visited: bool
    highlighted: bool


class Grid:
    # Bitmask Constants
    NORTH = 0b00000001
    EAST  = 0b00000010
    SOUTH = 0b00000100
    WEST  = 0b00001000

    # Flags
    VISITED   = 0b00010000
    HIGHLIGHT = 0b00100000 # Transient, only meaningful to observers

    # All walls present by default (N|E|S|W) = 15
    ALL_WALLS = NORTH | EAST | SOUTH | WEST

    # Direction Helpers
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    NAMES = {NORTH: "north", EAST: "east", SOUTH: "south", WEST: "west"}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    def reset(self, open_interior: bool = False):
        """
        Reinitializes every cell to unvisited.
        With open_interior only the outer boundary keeps its walls.
        """
        if not open_interior:
            self.cells = array('B', [self.ALL_WALLS] * (self.width * self.height))
            return

        cells = array('B', [0] * (self.width * self.height))
        for y in range(self.height):
            for x in range(self.width):
                val = 0
                if y == 0: val |= self.NORTH
                if x == self.width - 1: val |= self.EAST
                if y == self.height - 1: val |= self.SOUTH
                if x == 0: val |= self.WEST
                cells[y * self.width + x] = val
        self.cells = cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def neighbor(self, x: int, y: int, dir_bit: int) -> Optional[Coord]:
        nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
        if self.in_bounds(nx, ny):
            return (nx, ny)
        return None

    def direction_between(self, a: Coord, b: Coord) -> int:
        """Direction bit pointing from a to b. Raises ValueError unless 4-adjacent."""
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        for dir_bit in self.DIRECTIONS:
            if self.DX[dir_bit] == dx and self.DY[dir_bit] == dy:
                return dir_bit
        raise ValueError(f"Cells {a} and {b} are not adjacent")

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between current cell (x,y) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        idx1 = self.get_index(x1, y1)
        x2, y2 = x1 + self.DX[dir_bit], y1 + self.DY[dir_bit]
        if not self.in_bounds(x2, y2):
            raise IndexError(f"Cannot carve {self.NAMES[dir_bit]} from ({x1}, {y1}): outside the grid")

        idx2 = y2 * self.width + x2
        self.cells[idx1] &= ~dir_bit
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def remove_wall_between(self, a: Coord, b: Coord):
        self.get_index(*b)
        self.carve_path(a[0], a[1], self.direction_between(a, b))

    def add_wall(self, x: int, y: int, dir_bit: int):
        idx = self.get_index(x, y)
        self.cells[idx] |= dir_bit

        # Handle neighbor (strict consistency)
        nx, ny = x + self.DX[dir_bit], y + self.DY[dir_bit]
        if self.in_bounds(nx, ny):
            self.cells[ny * self.width + nx] |= self.OPPOSITE[dir_bit]

    def add_wall_between(self, a: Coord, b: Coord):
        self.get_index(*b)
        self.add_wall(a[0], a[1], self.direction_between(a, b))

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def set_visited(self, x: int, y: int, visited: bool = True):
        idx = self.get_index(x, y)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def set_highlight(self, x: int, y: int, on: bool = True):
        idx = self.get_index(x, y)
        if on:
            self.cells[idx] |= self.HIGHLIGHT
        else:
            self.cells[idx] &= ~self.HIGHLIGHT

    def is_highlighted(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.HIGHLIGHT) != 0

    def clear_highlights(self):
        mask = ~self.HIGHLIGHT & 0xFF
        for i in range(len(self.cells)):
            self.cells[i] &= mask

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors
        in N, E, S, W order. Does NOT check walls.
        """
        if y > 0:
            yield (x, y - 1, self.NORTH)
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)
        if x > 0:
            yield (x - 1, y, self.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Coord]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if not (val & dir_bit):
                yield (nx, ny)

    def edge_count(self) -> int:
        # Count each passage once via its east/south side
        count = 0
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if x < self.width - 1 and not (val & self.EAST):
                    count += 1
                if y < self.height - 1 and not (val & self.SOUTH):
                    count += 1
        return count

    def is_symmetric(self) -> bool:
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if x < self.width - 1:
                    other = self.cells[y * self.width + x + 1]
                    if bool(val & self.EAST) != bool(other & self.WEST):
                        return False
                if y < self.height - 1:
                    other = self.cells[(y + 1) * self.width + x]
                    if bool(val & self.SOUTH) != bool(other & self.NORTH):
                        return False
        return True

    def is_perfect(self) -> bool:
        """True when the passages form a spanning tree of the grid."""
        total = self.width * self.height
        if self.edge_count() != total - 1:
            return False
        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            cx, cy = queue.popleft()
            for nxt in self.get_open_neighbors(cx, cy):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen) == total

    def snapshot(self) -> "GridSnapshot":
        return GridSnapshot(self.width, self.height, self.cells.tobytes())


class GridSnapshot:
    """Read-only copy of a grid's cell flags, handed to observers."""

    __slots__ = ('width', 'height', 'data')

    def __init__(self, width: int, height: int, data: bytes):
        self.width = width
        self.height = height
        self.data = data

    def cell(self, x: int, y: int) -> CellState:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        val = self.data[y * self.width + x]
        return CellState(
            x, y,
            bool(val & Grid.NORTH),
            bool(val & Grid.EAST),
            bool(val & Grid.SOUTH),
            bool(val & Grid.WEST),
            bool(val & Grid.VISITED),
            bool(val & Grid.HIGHLIGHT),
        )

    def cells(self) -> Iterator[CellState]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.cell(x, y)

    def walls(self) -> bytes:
        """Wall bits only, suitable for comparing layouts."""
        return bytes(v & Grid.ALL_WALLS for v in self.data)
