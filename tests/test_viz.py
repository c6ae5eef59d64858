import unittest
import sys
import os
import tempfile
from datetime import datetime

# Headless SDL so the renderer can draw without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_forge.algo import registry
from maze_forge.core.errors import GenerationCancelled
from maze_forge.viz.theme import Theme, DEFAULT_THEME, hex_to_rgb

class TestTheme(unittest.TestCase):
    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#E2E8F0"), (226, 232, 240))
        self.assertEqual(hex_to_rgb("93c5fd"), (147, 197, 253))
        with self.assertRaises(ValueError):
            hex_to_rgb("#FFF")

    def test_default_theme_matches_hex(self):
        self.assertEqual(Theme.from_hex(), DEFAULT_THEME)

class TestVideoRecorder(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_for_run_names_file_after_run(self):
        from maze_forge.viz.recorder import VideoRecorder

        directory = os.path.join(self.tmp.name, "recordings")
        recorder = VideoRecorder.for_run("prims", 12, 8, directory=directory, now=datetime(2024, 1, 2, 3, 4, 5))
        self.assertTrue(os.path.isdir(directory))
        self.assertEqual(recorder.output_file, os.path.join(directory, "gen_prims_12x8_20240102_030405.mp4"))
        self.assertFalse(recorder.recording)
        self.assertEqual(recorder.stop(), 0)

    def test_writes_frames(self):
        import pygame
        from maze_forge.viz.recorder import VideoRecorder

        path = os.path.join(self.tmp.name, "frames.mp4")
        recorder = VideoRecorder(path, fps=10)
        surface = pygame.Surface((64, 48))
        for color in ((255, 0, 0), (0, 0, 255)):
            surface.fill(color)
            recorder.capture_frame(surface)
        self.assertTrue(recorder.recording)
        self.assertEqual(recorder.frame_size, (64, 48))

        # A frame of another size is scaled to the video size
        recorder.capture_frame(pygame.Surface((32, 24)))

        self.assertEqual(recorder.stop(), 3)
        self.assertFalse(recorder.recording)
        self.assertGreater(os.path.getsize(path), 0)

class TestRenderer(unittest.TestCase):
    def setUp(self):
        try:
            import pygame
            pygame.init()
            pygame.display.set_mode((10, 10))
            pygame.quit()
        except Exception as e:
            self.skipTest(f"pygame display unavailable: {e}")

    def test_draws_every_step(self):
        import pygame
        from maze_forge.viz.recorder import VideoRecorder
        from maze_forge.viz.renderer import Renderer

        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        gen = registry.create("binary-tree", 4, 3, seed=1)
        recorder = VideoRecorder.for_run("binary-tree", 4, 3, directory=tmp.name)
        renderer = Renderer(4, 3, cell_size=10, title=gen.name, recorder=recorder, on_close=gen.request_cancel)
        try:
            grid = gen.generate(observer=renderer.observe)
            self.assertEqual(renderer.step_count, gen.step_count)
            self.assertEqual(renderer.surface.get_size(), (renderer.screen_width, renderer.screen_height))

            renderer.draw_frame(grid.snapshot(), "done")
            # Top-left wall pixel uses the wall colour
            px = renderer.padding
            py = renderer.padding + Renderer.HUD_HEIGHT
            self.assertEqual(tuple(renderer.surface.get_at((px + 5, py))[:3]), DEFAULT_THEME.walls)
        finally:
            renderer.close()
        # One frame per step plus the final one
        self.assertEqual(recorder.frame_count, gen.step_count + 1)
        self.assertFalse(recorder.recording)
        self.assertTrue(os.path.exists(recorder.output_file))

    def test_closing_window_cancels(self):
        import pygame
        from maze_forge.viz.renderer import Renderer

        gen = registry.create("prims", 5, 5, seed=1)
        renderer = Renderer(5, 5, cell_size=8, on_close=gen.request_cancel)
        renderer.init_window()

        def observer(step, snapshot):
            pygame.event.post(pygame.event.Event(pygame.QUIT))
            renderer.observe(step, snapshot)

        try:
            with self.assertRaises(GenerationCancelled) as ctx:
                gen.generate(observer=observer)
            self.assertEqual(ctx.exception.steps, 1)
            self.assertFalse(renderer.running)
            self.assertTrue(gen.grid.is_symmetric())
        finally:
            renderer.close()

if __name__ == '__main__':
    unittest.main()
