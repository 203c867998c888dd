"""Pygame GUI frontend — drag pieces with the mouse.

Press on a piece, drag it along its axis and release to commit.  The piece
stops at the furthest free cell even if the mouse goes further.
"""

from __future__ import annotations

import pygame

from backend.engine.levelset import LevelSet
from frontend.common.view import BoardLayout, Colour, draw_level, status_line

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_BASE = (0, 0, 0)
COL_GRID = (40, 40, 40)
COL_BORDER = (0, 0, 0)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (108, 112, 134)
COL_GREEN = (166, 227, 161)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
LAYOUT = BoardLayout()
WIN_W = WIN_H = LAYOUT.window
BLOCK_GAP = 2


# ---------------------------------------------------------------------------
# Canvas adapter
# ---------------------------------------------------------------------------
class _SurfaceCanvas:
    """Draws board-unit rectangles as rounded, outlined pygame rects."""

    def __init__(self, surf: pygame.Surface, layout: BoardLayout) -> None:
        self._surf = surf
        self._layout = layout

    def fill(self, x: float, y: float, w: float, h: float, colour: Colour) -> None:
        sx, sy = self._layout.to_screen(x, y)
        rect = pygame.Rect(
            sx + BLOCK_GAP,
            sy + BLOCK_GAP,
            round(w * self._layout.tile) - 2 * BLOCK_GAP,
            round(h * self._layout.tile) - 2 * BLOCK_GAP,
        )
        pygame.draw.rect(self._surf, colour, rect, border_radius=6)
        pygame.draw.rect(self._surf, COL_BORDER, rect, width=2, border_radius=6)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, levels: LevelSet) -> None:
        self._levels = levels
        self._status_msg = ""

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Unblock Me!")
        self._clock = pygame.time.Clock()
        self._canvas = _SurfaceCanvas(self._surf, LAYOUT)

        self._f_title = pygame.font.SysFont("Helvetica", 20, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._levels.current()
        m, board = LAYOUT.margin, LAYOUT.board_px

        for i in range(9):
            off = m + i * LAYOUT.tile
            pygame.draw.line(self._surf, COL_GRID, (m, off), (m + board, off))
            pygame.draw.line(self._surf, COL_GRID, (off, m), (off, m + board))

        draw_level(game, self._canvas)

        header = status_line(self._levels.index, len(self._levels), game)
        lbl = self._f_title.render(header, True, COL_TEXT)
        self._surf.blit(lbl, ((WIN_W - lbl.get_width()) // 2, (m - lbl.get_height()) // 2))

        if self._status_msg:
            footer = self._f_small.render(self._status_msg, True, COL_GREEN)
        else:
            footer = self._f_small.render(
                "Drag pieces     U  undo     R  reset     N/P  next/prev     Esc  quit",
                True,
                COL_SUBTEXT,
            )
        self._surf.blit(
            footer,
            ((WIN_W - footer.get_width()) // 2, m + board + (m - footer.get_height()) // 2),
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        game = self._levels.current()
        if ev.type == pygame.MOUSEMOTION:
            game.point(*LAYOUT.to_board(*ev.pos))
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if game.begin_drag(*LAYOUT.to_board(*ev.pos)):
                self._status_msg = ""
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            game.commit()
            self._check_win()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_u, pygame.K_BACKSPACE):
                game.undo()
            elif ev.key == pygame.K_r:
                game.reset()
            elif ev.key == pygame.K_n:
                self._levels.next()
                self._status_msg = ""
            elif ev.key == pygame.K_p:
                self._levels.previous()
                self._status_msg = ""
            elif ev.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
        return True

    def _check_win(self) -> None:
        solved = self._levels.index + 1
        if self._levels.advance_if_solved():
            self._status_msg = f"★  Level {solved} solved!  ★"

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(levels: LevelSet) -> None:
    """Launch the Pygame GUI on the current level."""
    app = PygameApp(levels)
    app.run_loop()
