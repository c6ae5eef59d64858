import logging

import pygame

from maze_forge.core.grid import GridSnapshot
from maze_forge.core.steps import Step
from maze_forge.viz.recorder import VideoRecorder
from maze_forge.viz.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


class Renderer:
    """
    Draws grid snapshots handed out by a Scheduler.

    Pass 'observe' as the scheduler observer. Closing the window calls
    'on_close', which should request cancellation of the running generator.
    Every drawn frame also goes to 'recorder' when one is given.
    """

    HUD_HEIGHT = 28

    def __init__(self, grid_width: int, grid_height: int, cell_size: int = 20,
                 theme: Theme = DEFAULT_THEME, title: str = "", recorder: VideoRecorder = None, on_close=None):
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.cell_size = cell_size
        self.theme = theme
        self.title = title
        self.on_close = on_close
        self.padding = theme.wall_width

        self.screen_width = grid_width * cell_size + self.padding * 2
        self.screen_height = grid_height * cell_size + self.padding * 2 + self.HUD_HEIGHT

        self.recorder = recorder
        self.running = True
        self.surface = None
        self.font = None
        self.clock = None
        self.step_count = 0

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Forge - {self.title} {self.grid_width}x{self.grid_height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                if self.running:
                    logger.info("Window closed, cancelling generation")
                self.running = False
                if self.on_close:
                    self.on_close()

    def observe(self, step: Step, snapshot: GridSnapshot):
        """Scheduler observer: draw one frame per step."""
        self.step_count += 1
        if self.surface is None:
            self.init_window()
        self.handle_input()
        if not self.running:
            return
        self.draw_frame(snapshot, step.action)

    def draw_frame(self, snapshot: GridSnapshot, status: str):
        if self.surface is None:
            self.init_window()
        self.draw_grid(snapshot)
        self.draw_hud(status)
        pygame.display.flip()
        if self.recorder:
            self.recorder.capture_frame(self.surface)

    def draw_grid(self, snapshot: GridSnapshot):
        theme = self.theme
        size = self.cell_size
        line = theme.wall_width
        origin_x = self.padding
        origin_y = self.padding + self.HUD_HEIGHT
        self.surface.fill(theme.background)

        # 1. Cell backgrounds
        for cell in snapshot.cells():
            px = origin_x + cell.x * size
            py = origin_y + cell.y * size
            if cell.highlighted:
                pygame.draw.rect(self.surface, theme.current_cell, (px, py, size, size))
            elif cell.visited:
                pygame.draw.rect(self.surface, theme.visited_cell, (px, py, size, size))

        # 2. Walls, drawn after fills so they stay on top
        for cell in snapshot.cells():
            px = origin_x + cell.x * size
            py = origin_y + cell.y * size
            if cell.north:
                pygame.draw.line(self.surface, theme.walls, (px, py), (px + size, py), line)
            if cell.east:
                pygame.draw.line(self.surface, theme.walls, (px + size, py), (px + size, py + size), line)
            if cell.south:
                pygame.draw.line(self.surface, theme.walls, (px, py + size), (px + size, py + size), line)
            if cell.west:
                pygame.draw.line(self.surface, theme.walls, (px, py), (px, py + size), line)

    def draw_hud(self, status: str):
        text = f"{self.title}  step {self.step_count}  {status}"
        label = self.font.render(text, True, self.theme.hud_text)
        self.surface.blit(label, (self.padding, 4))

    def wait_for_close(self):
        """Keeps the finished maze on screen until the window is closed."""
        if self.surface is None:
            return
        while self.running:
            self.handle_input()
            self.clock.tick(30)

    def close(self):
        if self.recorder:
            self.recorder.stop()
        pygame.quit()
