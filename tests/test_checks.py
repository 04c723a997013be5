from qsudoku import is_solution, validate_board

SOLVED_4 = [[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 1]]


def test_validate_accepts_partial_board(small_puzzle):
    assert validate_board(small_puzzle) == (True, "OK")


def test_validate_reports_problems():
    ok, msg = validate_board([[1, 2, 3], [0, 0, 0], [0, 0, 0]])
    assert not ok and "perfect squares" in msg

    ok, msg = validate_board([[1, 2], [0]])
    assert not ok and "square" in msg

    ok, msg = validate_board([[5, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
    assert not ok and "allowed: 0..4" in msg

    ok, msg = validate_board([[1, 0, 0, 0], [0, 1, 0, 0], [0] * 4, [0] * 4])
    assert not ok and "Conflict" in msg


def test_is_solution():
    assert is_solution(SOLVED_4)
    assert is_solution(SOLVED_4, givens=[[1, 0, 0, 0], [0] * 4, [0] * 4, [0, 0, 0, 1]])
    assert not is_solution(SOLVED_4, givens=[[2, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
    assert not is_solution([[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 0]])
    assert not is_solution([[1, 2, 3, 4], [2, 1, 4, 3], [3, 4, 1, 2], [4, 3, 2, 1]])


def test_validate_finds_conflict_through_peer_collapse():
    # same column, far apart in raster order
    board = [[0, 0, 3, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 3, 0]]
    ok, msg = validate_board(board)
    assert not ok
    assert msg == "Conflict: value 3 at cell (4,3) is already used by a peer."


def test_validate_leaves_board_untouched(small_puzzle):
    before = [row[:] for row in small_puzzle]
    validate_board(small_puzzle)
    assert small_puzzle == before
