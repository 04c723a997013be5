from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .models import ShapeError, entry_error, spec_for
from .state import SearchState


def validate_board(board: Sequence[Sequence[int]]) -> Tuple[bool, str]:
    """
    Checks:
      - board is N x N with N a perfect square
      - values in 0..N
      - no clue repeats a value already ruled out by an earlier peer clue

    Clues are collapsed one by one into a SearchState, so a conflict shows
    up as a clue whose value bit is already cleared from its own cell.
    Grid.solve() never calls this; a contradictory puzzle just fails to solve.
    """
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        return False, "Board must be square (N x N)."

    try:
        spec = spec_for(n)
    except ShapeError as e:
        return False, str(e)

    state = SearchState(spec, [[spec.all_mask] * n for _ in range(n)])
    for r, row in enumerate(board):
        for c, v in enumerate(row):
            msg = entry_error(r, c, v, n)
            if msg:
                return False, msg
            if v == 0:
                continue
            bit = 1 << (v - 1)
            if not state.candidates[r][c] & bit:
                return False, f"Conflict: value {v} at cell ({r+1},{c+1}) is already used by a peer."
            state.collapse(c, r, bit)

    return True, "OK"


def is_solution(board: Sequence[Sequence[int]], givens: Optional[Sequence[Sequence[int]]] = None) -> bool:
    """True if `board` is completely and validly filled, keeping every non-zero given."""
    ok, _ = validate_board(board)
    if not ok or any(0 in row for row in board):
        return False
    if givens is None:
        return True
    if len(givens) != len(board):
        return False
    return all(
        g == 0 or g == v
        for grow, brow in zip(givens, board)
        for g, v in zip(grow, brow)
    )
