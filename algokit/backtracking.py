"""Backtracking searches: sudoku, permutations, n-queens and subsets."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = "123456789"
_EMPTY = "."


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the empty cells of a 9x9 board in place.

    Cells hold ``"1"``..``"9"`` or ``"."``. Returns whether a solution was
    found; if not, the board is left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9 by 9")
    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empty: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                empty.append((r, c))
            elif len(cell) == 1 and cell in _DIGITS:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[r // 3 * 3 + c // 3].add(cell)
            else:
                raise ValueError(f"invalid cell {cell!r} at ({r}, {c})")

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        r, c = empty[index]
        box = r // 3 * 3 + c // 3
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[box]:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[box].add(digit)
            if fill(index + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[box].discard(digit)
            board[r][c] = _EMPTY
        return False

    return fill(0)


def permute(nums: Sequence[int]) -> list[list[int]]:
    """All orderings of ``nums``, generated by successive swaps."""
    items = list(nums)
    result: list[list[int]] = []

    def arrange(start: int) -> None:
        if start == len(items):
            result.append(items.copy())
            return
        for i in range(start, len(items)):
            items[start], items[i] = items[i], items[start]
            arrange(start + 1)
            items[start], items[i] = items[i], items[start]

    arrange(0)
    return result


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of ``Q`` and ``.``."""
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[list[str]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append([_EMPTY * c + "Q" + _EMPTY * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diag.discard(row - col)
            used_anti.discard(row + col)

    place(0)
    return solutions


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, each new element extending all earlier subsets."""
    result: list[list[int]] = [[]]
    for value in nums:
        result.extend([*subset, value] for subset in list(result))
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct subset of ``nums``, which may hold repeated values."""
    items = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def build(i: int) -> None:
        if i == len(items):
            result.append(chosen.copy())
            return
        chosen.append(items[i])
        build(i + 1)
        chosen.pop()
        j = i + 1
        while j < len(items) and items[j] == items[i]:
            j += 1
        build(j)

    build(0)
    return result