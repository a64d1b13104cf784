"""
terminal.py: A pygame window that behaves like an 80x50 character console.

The game only talks to the console surface (cls_bg / set / print /
print_color / draw_sprite, plus frame_time_ms, key and quitting), so the
state machine never touches pygame directly.
"""

import logging
from typing import Dict, Optional, Tuple

import pygame

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, FPS, WINDOW_TITLE, WINDOW_BG, WHITE
from .data_models import Key
from .errors import TerminalError, SpriteSheetError
from .sprites import SpriteSheet

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

KEY_MAP: Dict[int, Key] = {
    pygame.K_p: Key.P,
    pygame.K_q: Key.Q,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class Terminal:
    def __init__(self, title: str = WINDOW_TITLE, cell_size: int = CELL_SIZE, fps: int = FPS,
                 sprite_sheet_path: Optional[str] = None):
        self.cell_size = cell_size
        self.fps = fps
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((SCREEN_WIDTH * cell_size, SCREEN_HEIGHT * cell_size))
            pygame.display.set_caption(title)
            self.font = pygame.font.Font(None, cell_size + cell_size // 3)
        except pygame.error as e:
            pygame.quit()
            raise TerminalError(f"Could not open the game window: {e}") from e

        self.clock = pygame.time.Clock()
        self._sprite_sheet: Optional[SpriteSheet] = None
        if sprite_sheet_path:
            try:
                self._sprite_sheet = SpriteSheet.from_file(sprite_sheet_path, cell_size)
            except SpriteSheetError:
                pygame.quit()
                raise
        self._glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._bg: Color = WINDOW_BG

        # Per-frame context read by the game
        self.frame_time_ms = 0.0
        self.key: Optional[Key] = None
        self.quitting = False
        logger.debug("Opened %dx%d console, %dpx cells", SCREEN_WIDTH, SCREEN_HEIGHT, cell_size)

    @property
    def sprite_sheet(self) -> SpriteSheet:
        if self._sprite_sheet is None:
            self._sprite_sheet = SpriteSheet.procedural(self.cell_size)
        return self._sprite_sheet

    # ----------------- Input / timing -----------------

    def poll(self):
        """Keeps only the first recognised key pressed this frame."""
        self.key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quitting = True
            elif event.type == pygame.KEYDOWN and self.key is None:
                self.key = KEY_MAP.get(event.key)

    def begin_frame(self):
        self.frame_time_ms = float(self.clock.tick(self.fps))
        self.poll()

    def present(self):
        pygame.display.flip()

    def close(self):
        pygame.quit()

    # ----------------- Drawing -----------------

    def _cell(self, x, y) -> pygame.Rect:
        return pygame.Rect(int(x * self.cell_size), int(y * self.cell_size), self.cell_size, self.cell_size)

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surface = self._glyphs.get((glyph, fg))
        if surface is None:
            surface = self.font.render(glyph, True, fg)
            self._glyphs[(glyph, fg)] = surface
        return surface

    def cls_bg(self, color: Color):
        self._bg = color
        self.screen.fill(color)

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return
        cell = self._cell(x, y)
        self.screen.fill(bg, cell)
        surface = self._glyph(glyph, fg)
        self.screen.blit(surface, surface.get_rect(center=cell.center))

    def print_color(self, x: int, y: int, fg: Color, bg: Color, text: str):
        for i, glyph in enumerate(text):
            self.set(x + i, y, fg, bg, glyph)

    def print(self, x: int, y: int, text: str):
        self.print_color(x, y, WHITE, self._bg, text)

    def draw_sprite(self, x: int, y: int, name: str):
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return
        self.screen.blit(self.sprite_sheet[name], self._cell(x, y))


def main_loop(terminal: Terminal, state) -> None:
    """Runs `state.tick` once per frame until the game or the window asks to quit."""
    try:
        while not terminal.quitting:
            terminal.begin_frame()
            if terminal.quitting:
                break
            state.tick(terminal)
            terminal.present()
    finally:
        terminal.close()
        logger.info("Window closed")
