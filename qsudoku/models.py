from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
import math

Board = List[List[int]]  # 0 = empty, values 1..N


class ShapeError(ValueError):
    """Raised when a grid is not N x N with N a perfect square."""


@dataclass(frozen=True)
class SudokuSpec:
    side: int       # board size: N x N (e.g., 9)
    seg_dim: int    # segment size: seg_dim x seg_dim (e.g., 3)
    cells: int      # N * N
    flag: int       # bit N set while a cell is not collapsed
    all_mask: int   # bits 0..N-1 (values 1..N) plus the flag


def spec_for(n: int) -> SudokuSpec:
    """Validate N and build basic constants."""
    if n <= 0:
        raise ShapeError("Board must be square (N x N) and non-empty.")
    seg_dim = math.isqrt(n)
    if seg_dim * seg_dim != n:
        raise ShapeError(f"Invalid size: {n}. Only perfect squares are supported (4, 9, 16, ...).")
    flag = 1 << n
    # bits 0..N set => (1<<(N+1)) - 1
    return SudokuSpec(side=n, seg_dim=seg_dim, cells=n * n, flag=flag, all_mask=(flag << 1) - 1)


@dataclass
class SolveStats:
    collapses: int = 0        # single-candidate collapses during the scan
    forks: int = 0
    backtracks: int = 0
    boundary_raises: int = 0  # full passes with nothing eligible
    max_depth: int = 0        # deepest backtrack stack


def entry_error(r: int, c: int, v: object, n: int) -> Optional[str]:
    """Message for a cell entry that is not an int in 0..N, else None."""
    if not isinstance(v, int) or isinstance(v, bool):
        return f"Invalid value at ({r+1},{c+1}): {v!r} (not an integer)."
    if v < 0 or v > n:
        return f"Invalid value at ({r+1},{c+1}): {v} (allowed: 0..{n})."
    return None
