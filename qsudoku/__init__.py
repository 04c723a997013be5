"""
qsudoku

Generalized Sudoku solver (4x4, 9x9, 16x16, ...) using bitmask candidate
propagation and a fewest-candidates-first backtracking search.
"""

from __future__ import annotations

import logging
from typing import Optional

from .checks import is_solution, validate_board
from .grid import Grid
from .models import Board, ShapeError, SolveStats, SudokuSpec, spec_for
from .state import SearchState

logging.getLogger(__name__).addHandler(logging.NullHandler())


def solve_sudoku(board: Board) -> Optional[Board]:
    """
    Returns a NEW solved board or None if unsolvable.
    Raises ShapeError / ValueError for malformed input.
    """
    # Copy board so we don't mutate caller data
    grid = Grid([list(row) for row in board])
    return grid.values if grid.solve() else None


__version__ = "1.0.0"
__all__ = [
    'Board',
    'Grid',
    'SearchState',
    'ShapeError',
    'SolveStats',
    'SudokuSpec',
    'is_solution',
    'solve_sudoku',
    'spec_for',
    'validate_board',
]
