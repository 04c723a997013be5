from typing import List

import pytest


def board_from_string(s: str) -> List[List[int]]:
    n = int(len(s) ** 0.5)
    return [[int(ch) for ch in s[r * n:(r + 1) * n]] for r in range(n)]


# 17 clues, unique solution
MINIMAL_17 = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"
MINIMAL_17_SOLUTION = "693784512487512936125963874932651487568247391741398625319475268856129743274836159"


@pytest.fixture
def small_puzzle():
    return [[1, 2, 0, 0], [0, 3, 0, 0], [0, 0, 1, 0], [3, 0, 0, 0]]


@pytest.fixture
def minimal_puzzle():
    return board_from_string(MINIMAL_17)


@pytest.fixture
def minimal_solution():
    return board_from_string(MINIMAL_17_SOLUTION)
