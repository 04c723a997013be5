from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .models import Board, ShapeError, SolveStats, SudokuSpec, entry_error, spec_for
from .state import SearchState

log = logging.getLogger(__name__)


class Grid:
    """
    N x N Sudoku grid (N a perfect square), 0 = unknown.

    `values` is the caller's matrix. It is only written to once, after a
    successful `solve()`; on failure it keeps the puzzle as given.
    """

    def __init__(self, values: Board):
        n = len(values)
        if n == 0 or any(len(row) != n for row in values):
            raise ShapeError("Board must be square (N x N).")
        self.spec: SudokuSpec = spec_for(n)

        for r, row in enumerate(values):
            # rows are written in place once solved
            if not isinstance(row, list):
                raise ValueError(f"Row {r+1} must be a list, got {type(row).__name__}.")
            for c, v in enumerate(row):
                msg = entry_error(r, c, v, n)
                if msg:
                    raise ValueError(msg)

        self.values = values
        self.givens: Tuple[Tuple[int, ...], ...] = tuple(tuple(row) for row in values)
        self.last_stats: Optional[SolveStats] = None

    @property
    def side(self) -> int:
        return self.spec.side

    @property
    def seg_dim(self) -> int:
        return self.spec.seg_dim

    @property
    def cells(self) -> Board:
        return self.values

    def solve(self) -> bool:
        """
        Collapse every cell, forking on the cell with the fewest candidates
        whenever no single-candidate cell is left.

        Returns whether the grid was solved.
        """
        spec = self.spec
        dim = spec.side
        n_fields = spec.cells
        flag = spec.flag
        stats = SolveStats()
        self.last_stats = stats

        stack: List[SearchState] = []  # backtrace stack
        state = SearchState.from_values(self.values, spec)
        log.debug("Solving %dx%d grid, %d cell(s) collapsed from clues", dim, dim, state.collapsed_count)

        lc_boundary = 1  # current lower collapse boundary [1..N]
        pos = 0          # current field [0..N*N-1]

        while state.collapsed_count < n_fields:
            y, x = divmod(pos, dim)
            pos += 1
            # a zero mask lost its collapsed value to a peer and counts as open
            if not state.is_collapsed(x, y):
                mask = state.candidates[y][x] & ~flag
                bits = mask.bit_count()  # number of possibilities

                # collapse the cells with the fewest possibilities first
                if bits <= lc_boundary:
                    if bits == 0:
                        if not stack:
                            log.debug("No solution: dead end at (%d,%d) with empty stack", y + 1, x + 1)
                            return False
                        state = stack.pop()
                        stats.backtracks += 1
                        log.debug("Backtrack at (%d,%d), stack depth %d", y + 1, x + 1, len(stack))
                    elif bits == 1:
                        state.collapse(x, y, mask)
                        stats.collapses += 1
                    else:
                        stack.append(state)
                        state = state.collapse1(x, y)
                        log.debug("Fork at (%d,%d) on value %d, stack depth %d",
                                  y + 1, x + 1, state.candidates[y][x].bit_length(), len(stack))
                        stats.forks += 1
                        stats.max_depth = max(stats.max_depth, len(stack))
                    lc_boundary = 1
                    pos = 0

            if pos >= n_fields:
                # nothing was eligible at this boundary
                lc_boundary += 1
                stats.boundary_raises += 1
                pos = 0

        self._extract(state)
        log.debug("Solved %dx%d grid: %s", dim, dim, stats)
        return True

    def _extract(self, state: SearchState) -> None:
        for y, line in enumerate(state.candidates):
            row = self.values[y]
            for x, mask in enumerate(line):
                row[x] = mask.bit_length()  # single bit k => value k+1
