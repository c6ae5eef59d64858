class MazeError(Exception):
    """Base class for every error raised by the generation engine."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width, height):
        super().__init__(f"Grid dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class UnknownAlgorithm(MazeError, KeyError):
    def __init__(self, algorithm_id):
        super().__init__(algorithm_id)
        self.algorithm_id = algorithm_id

    def __str__(self):
        return f"Unknown maze algorithm: {self.algorithm_id!r}"


class GenerationCancelled(MazeError):
    """
    Raised at a step boundary once cancellation was requested.
    The grid is left wall-symmetric but usually incomplete; reset before reuse.
    """
    def __init__(self, steps: int = 0):
        super().__init__(f"Generation cancelled after {steps} steps")
        self.steps = steps
