"""Backtracking drills: N queens, rat in a maze and sudoku."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_MOVES = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))
_SIZE = 9
_BOX = 3


def n_queen(n: int) -> list[list[int]]:
    """Return every placement of ``n`` non-attacking queens.

    Each placement lists, row by row, the 1-based column of the queen.
    Placements come in lexicographic order.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[int]] = []
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(placement.copy())
            return
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            placement.append(col + 1)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    place(0)
    return solutions


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return, sorted, every path from the top-left to the bottom-right cell.

    Cells holding 0 are blocked. A path is a string of the moves D, R, U
    and L and never visits a cell twice.
    """
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    found: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(i: int, j: int, path: str) -> None:
        if not (0 <= i < n and 0 <= j < n) or not maze[i][j] or (i, j) in visited:
            return
        if i == n - 1 and j == n - 1:
            found.append(path)
        visited.add((i, j))
        for letter, di, dj in _MOVES:
            walk(i + di, j + dj, path + letter)
        visited.discard((i, j))

    walk(0, 0, "")
    return sorted(found)


def _empty_cells(grid: list[list[int]]) -> Iterator[tuple[int, int]]:
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == 0:
                yield i, j


def _is_safe(grid: list[list[int]], i: int, j: int, value: int) -> bool:
    if value in grid[i] or any(row[j] == value for row in grid):
        return False
    top, left = (i // _BOX) * _BOX, (j // _BOX) * _BOX
    return all(
        grid[r][c] != value
        for r in range(top, top + _BOX)
        for c in range(left, left + _BOX)
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the empty (0) cells of a 9x9 sudoku.

    Returns the solved grid as a new list of rows, or None if no value
    fits somewhere. The input is left untouched.
    """
    board = [list(row) for row in grid]
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError("sudoku grid must be 9x9")

    def solve() -> bool:
        cell = next(_empty_cells(board), None)
        if cell is None:
            return True
        i, j = cell
        for value in range(1, _SIZE + 1):
            if _is_safe(board, i, j, value):
                board[i][j] = value
                if solve():
                    return True
                board[i][j] = 0
        return False

    return board if solve() else None