# oracle/core/position.py
from typing import List
from .constants import WIDTH, HEIGHT, MAX_MOVES, PLAYER_A, EMPTY


class InvalidMoveError(ValueError):
    """A move sequence names a column that does not exist or is already full."""

    def __init__(self, message: str, index: int = -1):
        super().__init__(message)
        self.index = index


class PreconditionViolation(AssertionError):
    """A stone was aimed at a full column. Only raised when assertions are on."""


class Position:
    def __init__(self):
        """
        Board uses (row, col) indexing.
        Row 0 is the BOTTOM of the board (first stone of a column lands there).
        Values: 0=Empty, +1=Player A (moves first), -1=Player B
        """
        self.board = [[EMPTY] * WIDTH for _ in range(HEIGHT)]
        self.height = [0] * WIDTH
        self.num_moves = 0
        self.current = PLAYER_A

    @classmethod
    def from_sequence(cls, moves: str) -> 'Position':
        """
        Replays a string of 1-indexed column digits ('1'..'7') from the empty board.
        Example: '4453' -> columns 3, 3, 4, 2 (0-indexed)
        """
        position = cls()
        for index, char in enumerate(moves):
            if not ('1' <= char <= str(WIDTH)):
                raise InvalidMoveError(
                    f"Invalid move {char!r} at offset {index}: expected a column digit 1-{WIDTH}",
                    index,
                )
            col = int(char) - 1
            if not position.can_play(col):
                raise InvalidMoveError(
                    f"Invalid move {char!r} at offset {index}: column {col + 1} is full",
                    index,
                )
            position.play(col)
        return position

    def clone(self) -> 'Position':
        other = Position.__new__(Position)
        other.board = [row[:] for row in self.board]
        other.height = self.height[:]
        other.num_moves = self.num_moves
        other.current = self.current
        return other

    def mirrored(self) -> 'Position':
        """Returns the left-right mirror image (column c becomes WIDTH-1-c)."""
        other = self.clone()
        for row in other.board:
            row.reverse()
        other.height.reverse()
        return other

    def can_play(self, col: int) -> bool:
        return self.height[col] < HEIGHT

    def play(self, col: int):
        """
        Drops the current player's stone into `col` and passes the turn.
        Caller must check can_play(col) first.
        """
        if __debug__ and not self.can_play(col):
            raise PreconditionViolation(f"play({col}) on a full column")
        self.board[self.height[col]][col] = self.current
        self.height[col] += 1
        self.num_moves += 1
        self.current = -self.current

    def is_full(self) -> bool:
        return self.num_moves == MAX_MOVES

    # --- Win Detection ---

    def is_winning_move(self, col: int) -> bool:
        """
        True if dropping the current player's stone into `col` completes four.
        Must be asked BEFORE play(col): the landing row is height[col] and the
        mover is `current`.
        """
        if __debug__ and not self.can_play(col):
            raise PreconditionViolation(f"is_winning_move({col}) on a full column")
        return (
            self._check_vertical(col)
            or self._check_horizontal(col)
            or self._check_diagonals(col)
        )

    def _count(self, row: int, col: int, d_row: int, d_col: int) -> int:
        """Counts contiguous stones of the mover starting at (row, col), stepping by (d_row, d_col)."""
        me = self.current
        board = self.board
        count = 0
        while 0 <= row < HEIGHT and 0 <= col < WIDTH and board[row][col] == me:
            count += 1
            row += d_row
            col += d_col
        return count

    def _check_vertical(self, col: int) -> bool:
        row = self.height[col]
        me = self.current
        return (
            row >= 3
            and self.board[row - 1][col] == me
            and self.board[row - 2][col] == me
            and self.board[row - 3][col] == me
        )

    def _check_horizontal(self, col: int) -> bool:
        row = self.height[col]
        return self._count(row, col + 1, 0, 1) + self._count(row, col - 1, 0, -1) >= 3

    def _check_diagonals(self, col: int) -> bool:
        row = self.height[col]
        # Diagonal / (up-right, down-left)
        if self._count(row + 1, col + 1, 1, 1) + self._count(row - 1, col - 1, -1, -1) >= 3:
            return True
        # Diagonal \ (down-right, up-left)
        return self._count(row - 1, col + 1, -1, 1) + self._count(row + 1, col - 1, 1, -1) >= 3

    # --- Formatting ---

    def to_matrix(self) -> List[List[int]]:
        """
        Converts to the app 2D matrix (Row 0=Top, 0=Empty, 1=Player A, 2=Player B).
        """
        symbols = {EMPTY: 0, PLAYER_A: 1, -PLAYER_A: 2}
        return [[symbols[cell] for cell in row] for row in reversed(self.board)]

    def __str__(self) -> str:
        symbols = {0: ".", 1: "X", 2: "O"}
        header = " " + " ".join(str(c + 1) for c in range(WIDTH))
        rows = ["|" + "|".join(symbols[cell] for cell in row) + "|" for row in self.to_matrix()]
        return header + "\n" + "\n".join(rows)

    def __repr__(self) -> str:
        return f"Position(num_moves={self.num_moves}, height={self.height})"
