#!/usr/bin/env python3
"""Unblock Me! — a sliding-block puzzle.

Usage::

    python main.py                     # interactive menu
    python main.py -f pygame           # Pygame GUI
    python main.py -f rich -l 3        # Rich terminal, start on level 3
    python main.py -d levels/ --strict # reject unknown glyphs
    python main.py --dump              # print the level set and exit
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # unblock/
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.levelcodec import (  # noqa: E402
    LevelFormatError,
    encode,
    format_grid,
    format_occupancy,
)
from backend.engine.levelset import LevelSet  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load(path: Path, strict: bool) -> LevelSet:
    try:
        return LevelSet.load(path, strict=strict)
    except (OSError, LevelFormatError) as exc:
        typer.echo(f"Error loading levels from {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _print_levels(levels: LevelSet) -> None:
    """Print each level's glyphs beside its piece IDs."""
    for i in range(len(levels)):
        levels.select(i)
        level = levels.current().level
        glyphs = format_grid(encode(level)).splitlines()
        pieces = format_occupancy(level).splitlines()
        print(f"# Level {i + 1}")
        for left, right in zip(glyphs, pieces):
            print(f"{left}    {right}")
        print()


def _launch(frontend: Frontend, levels: LevelSet) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(levels)


def _menu_loop(levels: LevelSet) -> None:
    while True:
        print()
        print("  ====================================")
        print("         U N B L O C K   M E !        ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Play  (PyQt GUI)")
        print("  4.  List levels")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2", "3"):
            _launch(
                {"1": Frontend.rich, "2": Frontend.pygame, "3": Frontend.pyqt}[choice],
                levels,
            )
        elif choice == "4":
            current = levels.index
            _print_levels(levels)
            levels.select(current)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    data: Path = typer.Option(
        DATA_DIR, "-d", "--dir",
        help="Level file, or directory containing levels.dat.",
    ),
    level: int = typer.Option(
        1, "-l", "--level",
        min=1,
        help="Level to start on (1-based).",
    ),
    strict: bool = typer.Option(
        False, "--strict",
        help="Reject unknown glyphs instead of reading them as floor.",
    ),
    dump: bool = typer.Option(
        False, "--dump",
        help="Print every level and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Unblock Me! sliding-block puzzle."""
    configure_logging(verbose)
    levels = _load(data, strict)

    if dump:
        _print_levels(levels)
        return

    levels.select(level - 1)

    if frontend is None:
        _menu_loop(levels)
        return

    _launch(frontend, levels)


if __name__ == "__main__":
    app()
