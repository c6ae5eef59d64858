from array import array


class DisjointSet:
    """
    Union-find over the integers 0..size-1 with path compression and union by rank.
    Cells map to elements through Grid.get_index (y * width + x).
    """

    __slots__ = ('parent', 'rank', 'components')

    def __init__(self, size: int):
        self.parent = array('l', range(size))
        self.rank = array('B', [0] * size)
        self.components = size

    def __len__(self):
        return len(self.parent)

    def find(self, element: int) -> int:
        root = element
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression: point every node on the way directly at the root
        while self.parent[element] != root:
            self.parent[element], element = root, self.parent[element]

        return root

    def union(self, a: int, b: int) -> bool:
        """Merges the sets of a and b. Returns False if they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1

        self.components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
