from __future__ import annotations

from typing import List, Sequence

from .models import SudokuSpec


class SearchState:
    """
    One point in the search tree: a candidate bitmask per cell plus the
    number of collapsed cells.

    Mask layout for a cell:
      - bit k (0 <= k < N): value k+1 is still possible
      - bit N: collapse flag, set while the cell is unresolved
    A collapsed cell holds exactly one value bit and no flag.

    `is_collapsed` drives the search scan; `options` is for inspection.
    """

    __slots__ = ("spec", "candidates", "collapsed_count")

    def __init__(self, spec: SudokuSpec, candidates: List[List[int]], collapsed_count: int = 0):
        self.spec = spec
        self.candidates = candidates
        self.collapsed_count = collapsed_count

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]], spec: SudokuSpec) -> "SearchState":
        """Fresh state with every clue already collapsed into its peers."""
        n = spec.side
        state = cls(spec, [[spec.all_mask] * n for _ in range(n)])
        for row, line in enumerate(values):
            for col, v in enumerate(line):
                if v != 0:
                    state.collapse(col, row, 1 << (v - 1))
        return state

    def is_collapsed(self, col: int, row: int) -> bool:
        mask = self.candidates[row][col]
        return mask != 0 and not mask & self.spec.flag

    def options(self, col: int, row: int) -> List[int]:
        """Values (1..N) still possible for a cell."""
        mask = self.candidates[row][col] & ~self.spec.flag
        out: List[int] = []
        while mask:
            lsb = mask & -mask
            out.append(lsb.bit_length())
            mask ^= lsb
        return out

    def collapse(self, col: int, row: int, value: int) -> None:
        """
        Fix (col, row) to the single value bit `value` and remove it from
        every peer. No contradiction check: a peer left without candidates
        is found later by the search loop.
        """
        seg = self.spec.seg_dim
        grid = self.candidates
        clear = ~value

        # segment
        base_x = (col // seg) * seg
        base_y = (row // seg) * seg
        for y in range(base_y, base_y + seg):
            line = grid[y]
            for x in range(base_x, base_x + seg):
                if line[x] == value:
                    self.collapsed_count -= 1
                line[x] &= clear

        # row
        line = grid[row]
        for x in range(len(line)):
            if line[x] == value:
                self.collapsed_count -= 1
            line[x] &= clear

        # column
        for line in grid:
            if line[col] == value:
                self.collapsed_count -= 1
            line[col] &= clear

        grid[row][col] = value
        self.collapsed_count += 1

    def collapse1(self, col: int, row: int) -> "SearchState":
        """
        Fork at (col, row) on its lowest candidate.

        The returned state has that candidate collapsed; this state keeps
        the remaining candidates for when the fork turns out to be a dead end.
        """
        fork = SearchState(self.spec, [line[:] for line in self.candidates], self.collapsed_count)

        mask = self.candidates[row][col]
        lsb = mask & -mask
        self.candidates[row][col] = mask & ~lsb

        fork.collapse(col, row, lsb)
        return fork
