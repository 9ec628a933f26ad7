"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (ring size,
   hit radius, ...) scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the word list) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DICTIONARY_PATH (str): Word list used by the validity check.
    DEFAULT_LETTERS (str): Root letters of a fresh game.
"""
import os
import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: config.py is in src/rootwords/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DICTIONARY_PATH: str = os.environ.get(
    "ROOTWORDS_DICTIONARY",
    os.path.join(ASSETS_PATH, "dictionary.txt"),
)

# Game
DEFAULT_LETTERS: str = "S,T,A,R,L,I,N,G"
COMMIT_GLYPH: str = "↵"
SUBSET_MIN_WORD_LENGTH: int = 4

# Ring geometry (logical pixels, square canvas)
RING_CANVAS_SIZE: float = 300.0
RING_CENTER: tuple[float, float] = (150.0, 150.0)
RING_RADIUS: float = 120.0
SLOT_HIT_RADIUS: float = 25.0

# Tree rendering
TREE_CELL_WIDTH: float = 1.0
TREE_ROW_HEIGHT: float = 1.0
