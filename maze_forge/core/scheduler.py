import logging
import threading
import time
from typing import Callable, Optional

from maze_forge.core.errors import GenerationCancelled
from maze_forge.core.grid import Grid, GridSnapshot
from maze_forge.core.steps import Step

logger = logging.getLogger(__name__)

Observer = Callable[[Step, GridSnapshot], None]


class Scheduler:
    """
    Drives a generator's step iterator one step at a time.

    After every step the observer (if any) receives the step and a snapshot
    of the grid, the scheduler sleeps for 'delay' seconds when the step asks
    for a pause, and then checks the cancellation flag. Cancellation is only
    honoured at these boundaries, so the grid is never left with a half
    applied wall pair.
    """

    def __init__(self, generator, observer: Optional[Observer] = None, delay: float = 0.0,
                 cancel_event: Optional[threading.Event] = None, sleep=time.sleep):
        if delay < 0:
            raise ValueError(f"Step delay must be non-negative, got {delay}")
        self.generator = generator
        self.observer = observer
        self.delay = delay
        self.sleep = sleep
        self._cancel = cancel_event if cancel_event is not None else threading.Event()
        self.steps = 0

    @property
    def grid(self) -> Grid:
        return self.generator.grid

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def request_cancel(self):
        self._cancel.set()

    def run(self) -> Grid:
        name = type(self.generator).__name__
        if self._cancel.is_set():
            logger.info(f"{name} cancelled before start")
            raise GenerationCancelled(0)

        logger.debug(f"{name}: generating {self.grid.width}x{self.grid.height} (delay={self.delay}s)")
        step_iter = self.generator.run()
        try:
            for step in step_iter:
                self.steps += 1
                if self.observer is not None:
                    self.observer(step, self.grid.snapshot())
                if step.pause and self.delay > 0:
                    self.sleep(self.delay)
                if self._cancel.is_set():
                    logger.info(f"{name} cancelled after {self.steps} steps")
                    raise GenerationCancelled(self.steps)
        finally:
            step_iter.close()

        logger.debug(f"{name}: done in {self.steps} steps")
        return self.grid
