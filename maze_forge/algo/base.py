import random
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterator, Optional

from maze_forge.core.config import GenerationConfig
from maze_forge.core.grid import Grid
from maze_forge.core.scheduler import Observer, Scheduler
from maze_forge.core.steps import Step


class Generator(ABC):
    key = ""
    name = ""
    complexity = ""
    description = ""

    # Recursive Division starts from an open interior instead of a walled one
    open_interior = False

    def __init__(self, grid: Grid, seed: int = None, rng: Optional[random.Random] = None,
                 config: Optional[GenerationConfig] = None):
        self.grid = grid
        self.seed = seed
        # Anything with the random.Random interface can be injected
        self.rng = rng if rng is not None else random.Random(seed)
        if config is None:
            config = GenerationConfig(grid.width, grid.height, seed=seed)
        elif (config.width, config.height) != (grid.width, grid.height):
            # The grid is authoritative for dimensions
            config = replace(config, width=grid.width, height=grid.height)
        self.config = config
        self.step_count = 0
        self._cancel = threading.Event()

    @abstractmethod
    def carve(self) -> Iterator[Step]:
        """
        Mutates self.grid into a perfect maze, yielding one Step per change.
        The grid has already been reset when this is called.
        """

    def run(self) -> Iterator[Step]:
        self.grid.reset(open_interior=self.open_interior)
        self.step_count = 0
        for step in self.carve():
            self.step_count += 1
            yield step
        self.grid.clear_highlights()

    def run_all(self):
        """Helper to run the generator to completion, headless."""
        for _ in self.run():
            pass
        return self.grid

    def generate(self, observer: Optional[Observer] = None, delay: float = 0.0, sleep=time.sleep) -> Grid:
        """Runs under a Scheduler. Raises GenerationCancelled if request_cancel() was called."""
        scheduler = Scheduler(self, observer=observer, delay=delay, cancel_event=self._cancel, sleep=sleep)
        return scheduler.run()

    def request_cancel(self):
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def reset(self):
        """Clears a previous cancellation and restores the starting grid layout."""
        self._cancel.clear()
        self.grid.reset(open_interior=self.open_interior)

    # Highlight helpers shared by the strategies

    def _mark(self, cells, on: bool = True):
        for x, y in cells:
            self.grid.set_highlight(x, y, on)

    def _link(self, a, b):
        """Carves between two adjacent cells and highlights both."""
        self.grid.remove_wall_between(a, b)
        self._mark((a, b))
