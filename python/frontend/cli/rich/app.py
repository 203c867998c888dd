"""Rich terminal frontend — keyboard-driven drags.

A cursor stands in for the mouse: move it with the arrow keys, press
space to pick up the piece under it, move again to drag, and press space
once more to drop.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.levelset import LevelSet
from backend.models.grid import BOARD_HEIGHT, BOARD_WIDTH
from frontend.cli.input_handler import get_key
from frontend.common.view import Colour, draw_level, status_line

console = Console()

_MOVES = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


# -- board rendering ----------------------------------------------------------


class _CellCanvas:
    """Collects one colour per board cell."""

    def __init__(self) -> None:
        self.cells: list[list[Colour | None]] = [
            [None] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)
        ]

    def fill(self, x: float, y: float, w: float, h: float, colour: Colour) -> None:
        for cy in range(int(y), int(y + h)):
            for cx in range(int(x), int(x + w)):
                self.cells[cy][cx] = colour


def _render_board(session: TerminalSession) -> Table:
    """Return a Rich Table with one two-character swatch per cell."""
    canvas = _CellCanvas()
    draw_level(session.levels.current(), canvas)

    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(BOARD_WIDTH):
        table.add_column(width=2)

    cursor_x, cursor_y = session.cursor
    for y, row in enumerate(canvas.cells):
        cells: list[Text] = []
        for x, colour in enumerate(row):
            glyph = "[]" if (x, y) == (cursor_x, cursor_y) else "  "
            if colour is None:
                cells.append(Text(glyph if glyph.strip() else "· ", style="dim"))
            else:
                r, g, b = colour
                cells.append(Text(glyph, style=f"bold black on rgb({r},{g},{b})"))
        table.add_row(*cells)
    return table


# -- session ------------------------------------------------------------------


class TerminalSession:
    """Maps keyboard actions onto the level set."""

    def __init__(self, levels: LevelSet) -> None:
        self.levels = levels
        self.cursor: tuple[int, int] = (0, 0)
        self.status = ""

    def _pointer(self) -> tuple[float, float]:
        # Aim at the middle of the cursor cell.
        return self.cursor[0] + 0.5, self.cursor[1] + 0.5

    def handle(self, action: str) -> bool:
        """Apply one action; returns False when the player quits."""
        game = self.levels.current()
        self.status = ""

        if action in _MOVES:
            dx, dy = _MOVES[action]
            x = min(max(self.cursor[0] + dx, 0), BOARD_WIDTH - 1)
            y = min(max(self.cursor[1] + dy, 0), BOARD_HEIGHT - 1)
            self.cursor = (x, y)
            game.point(*self._pointer())
        elif action == "grab":
            if game.dragging:
                game.commit()
                solved = self.levels.index + 1
                if self.levels.advance_if_solved():
                    self.status = f"[bold green]★ Level {solved} solved! ★[/bold green]"
            elif not game.begin_drag(*self._pointer()):
                self.status = "[yellow]Nothing to pick up here.[/yellow]"
        elif action == "undo":
            if not game.undo():
                self.status = "[yellow]Nothing to undo.[/yellow]"
        elif action == "reset":
            game.reset()
        elif action == "next":
            self.levels.next()
        elif action == "previous":
            self.levels.previous()
        elif action == "quit":
            return False
        return True


# -- screen -------------------------------------------------------------------


def _draw(session: TerminalSession) -> None:
    console.clear()
    game = session.levels.current()

    stats = Text(
        status_line(session.levels.index, len(session.levels), game),
        style="bold yellow",
    )

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  grab/drop   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("N/P", style="bold cyan")
    controls.append("  level   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [Align.center(_render_board(session)), Align.center(stats)]
    if session.status:
        parts.append(Align.center(Text.from_markup(session.status)))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Unblock Me![/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- public entry point -------------------------------------------------------


def run(levels: LevelSet) -> None:
    """Launch the Rich terminal frontend on the current level."""
    session = TerminalSession(levels)
    while True:
        _draw(session)
        if not session.handle(get_key()):
            break
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
