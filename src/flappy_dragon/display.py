"""
display.py: The display/input contract the game consumes, and its pygame
character-grid implementation.
"""

from typing import Dict, List, Optional, Protocol, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_WIDTH_PX, CELL_HEIGHT_PX,
    BLACK, WHITE
)
from .data_models import Key

Color = Tuple[int, int, int]
Cell = Tuple[str, Color, Color]  # (glyph, fg, bg)

KEY_BINDINGS: Dict[int, Key] = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
}


class DisplayContext(Protocol):
    """Everything GameState.tick reads from or draws to during one frame."""

    frame_time_ms: float        # Elapsed since the previous tick
    key: Optional[Key]          # Key pressed this frame, if any
    quitting: bool              # Set by the game to request shutdown

    def cls(self) -> None: ...

    def cls_bg(self, color: Color) -> None: ...

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None: ...

    def print_centered(self, y: int, text: str) -> None: ...

    def print(self, x: int, y: int, text: str) -> None: ...


class CellGrid:
    """
    A fixed-size buffer of character cells. Writes outside the grid are
    clipped silently, so callers can draw walls that have scrolled off-screen.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.background: Color = BLACK
        self.cells: List[List[Cell]] = []
        self.cls()

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color):
        self.background = color
        self.cells = [
            [(" ", WHITE, color) for _ in range(self.width)]
            for _ in range(self.height)
        ]

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[y][x] = (glyph, fg, bg)

    def print(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.set(x + offset, y, WHITE, self.background, char)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)


class TerminalContext(CellGrid):
    """
    pygame window that behaves like an 80x50 terminal.
    Must be constructed after pygame.init().
    """

    def __init__(self, title: str, fps: int):
        super().__init__()
        self.fps = fps
        self.frame_time_ms: float = 0.0
        self.key: Optional[Key] = None
        self.quitting = False

        self.surface = pygame.display.set_mode(
            (self.width * CELL_WIDTH_PX, self.height * CELL_HEIGHT_PX))
        pygame.display.set_caption(title)
        self.font = pygame.font.SysFont("monospace", CELL_HEIGHT_PX)
        self.clock = pygame.time.Clock()
        self._glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def poll(self):
        """Drains pygame events and times the frame. Call once per frame."""
        self.frame_time_ms = float(self.clock.tick(self.fps))
        self.key = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quitting = True
            elif event.type == pygame.KEYDOWN:
                # Last mapped key of the frame wins
                mapped = KEY_BINDINGS.get(event.key)
                if mapped is not None:
                    self.key = mapped

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        cache_key = (glyph, fg)
        surface = self._glyph_cache.get(cache_key)
        if surface is None:
            surface = self.font.render(glyph, True, fg)
            self._glyph_cache[cache_key] = surface
        return surface

    def present(self):
        """Draws the cell buffer to the window."""
        for row, line in enumerate(self.cells):
            for col, (glyph, fg, bg) in enumerate(line):
                rect = (col * CELL_WIDTH_PX, row * CELL_HEIGHT_PX,
                        CELL_WIDTH_PX, CELL_HEIGHT_PX)
                self.surface.fill(bg, rect)
                if glyph != " ":
                    self.surface.blit(self._glyph(glyph, fg), rect[:2])

        pygame.display.flip()
