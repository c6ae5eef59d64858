import unittest
import sys
import os
import threading
from array import array

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_forge.core.grid import Grid, GridSnapshot
from maze_forge.core.scheduler import Scheduler
from maze_forge.core.errors import GenerationCancelled
from maze_forge.core.steps import Step
from maze_forge.algo import registry


class FakeClock:
    def __init__(self):
        self.calls = []

    def sleep(self, seconds):
        self.calls.append(seconds)


def symmetric(snapshot: GridSnapshot) -> bool:
    grid = Grid(snapshot.width, snapshot.height)
    grid.cells = array('B', snapshot.data)
    return grid.is_symmetric()


class TestScheduler(unittest.TestCase):
    def test_headless_run_completes(self):
        gen = registry.create("prims", 10, 10, seed=1)
        grid = Scheduler(gen).run()
        self.assertIs(grid, gen.grid)
        self.assertTrue(grid.is_perfect())

    def test_observer_sees_every_step(self):
        gen = registry.create("recursive-backtracker", 6, 6, seed=3)
        seen = []

        def observer(step, snapshot):
            self.assertIsInstance(step, Step)
            self.assertIsInstance(snapshot, GridSnapshot)
            self.assertTrue(symmetric(snapshot))
            seen.append(step)

        scheduler = Scheduler(gen, observer=observer)
        scheduler.run()
        self.assertEqual(len(seen), scheduler.steps)
        self.assertEqual(len(seen), gen.step_count)
        self.assertGreater(len(seen), 0)

    def test_delay_only_after_pausing_steps(self):
        gen = registry.create("kruskal", 5, 5, seed=8)
        clock = FakeClock()
        pauses = []
        scheduler = Scheduler(gen, observer=lambda step, snap: pauses.append(step.pause),
                              delay=0.25, sleep=clock.sleep)
        scheduler.run()
        self.assertEqual(len(clock.calls), sum(pauses))
        self.assertTrue(all(s == 0.25 for s in clock.calls))
        # Kruskal reports rejected walls without pausing
        self.assertLess(len(clock.calls), scheduler.steps)

    def test_zero_delay_never_sleeps(self):
        clock = FakeClock()
        Scheduler(registry.create("wilson", 4, 4, seed=1), sleep=clock.sleep).run()
        self.assertEqual(clock.calls, [])

    def test_negative_delay_rejected(self):
        with self.assertRaises(ValueError):
            Scheduler(registry.create("wilson", 4, 4), delay=-0.1)

    def test_cancel_from_observer_at_every_step_index(self):
        for algo_id in registry.ALGORITHMS:
            total = len(list(registry.create(algo_id, 5, 4, seed=21).run()))
            for k in range(1, total + 1, max(1, total // 7)):
                with self.subTest(algo=algo_id, k=k):
                    gen = registry.create(algo_id, 5, 4, seed=21)
                    count = [0]

                    def observer(step, snapshot):
                        count[0] += 1
                        if count[0] == k:
                            gen.request_cancel()

                    with self.assertRaises(GenerationCancelled) as ctx:
                        gen.generate(observer=observer)
                    self.assertEqual(ctx.exception.steps, k)
                    self.assertTrue(gen.grid.is_symmetric())

    def test_cancel_before_start(self):
        gen = registry.create("eller", 6, 6, seed=2)
        gen.request_cancel()
        observed = []
        with self.assertRaises(GenerationCancelled) as ctx:
            gen.generate(observer=lambda step, snap: observed.append(step))
        self.assertEqual(ctx.exception.steps, 0)
        self.assertEqual(observed, [])

    def test_cancel_is_terminal_until_reset(self):
        gen = registry.create("hunt-and-kill", 6, 6, seed=4)
        gen.request_cancel()
        with self.assertRaises(GenerationCancelled):
            gen.generate()
        with self.assertRaises(GenerationCancelled):
            gen.generate()
        self.assertTrue(gen.cancelled)

        gen.reset()
        self.assertFalse(gen.cancelled)
        self.assertTrue(gen.generate().is_perfect())

    def test_cancel_from_another_thread(self):
        gen = registry.create("aldous-broder", 8, 8, seed=6)
        started = threading.Event()

        def slow_sleep(seconds):
            started.set()
            # Let the canceller thread run before the next boundary
            cancel_done.wait(1.0)

        cancel_done = threading.Event()

        def canceller():
            started.wait(1.0)
            gen.request_cancel()
            cancel_done.set()

        t = threading.Thread(target=canceller)
        t.start()
        with self.assertRaises(GenerationCancelled):
            gen.generate(delay=0.001, sleep=slow_sleep)
        t.join()
        self.assertTrue(gen.grid.is_symmetric())

    def test_scheduler_request_cancel(self):
        gen = registry.create("sidewinder", 4, 4, seed=1)
        scheduler = Scheduler(gen)
        scheduler.request_cancel()
        self.assertTrue(scheduler.cancelled)
        with self.assertRaises(GenerationCancelled):
            scheduler.run()

if __name__ == '__main__':
    unittest.main()
