import logging
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_SIZE = 3  # fixed 3x3 grid


class Mark(Enum):
    """
    what sits in a cell; also names whose turn it is
    """
    EMPTY = "empty"
    PLAYER_A = "player_a"   # maru, drawn as O
    PLAYER_B = "player_b"   # batsu, drawn as X

    def opponent(self):
        # only meaningful for the two player marks
        if self is Mark.PLAYER_A:
            return Mark.PLAYER_B
        if self is Mark.PLAYER_B:
            return Mark.PLAYER_A
        raise ValueError("empty mark has no opponent")


class Outcome(Enum):
    ONGOING = "ongoing"
    PLAYER_A_WINS = "player_a_wins"
    PLAYER_B_WINS = "player_b_wins"
    DRAW = "draw"


class InvalidCoordinate(ValueError):
    """
    raised for a row/column outside the board
    """
    def __init__(self, row, column):
        super().__init__(f"invalid cell ({row!r}, {column!r}), "
                         f"must be 0-{BOARD_SIZE - 1}")
        self.row = row
        self.column = column


def _check_coordinates(row, column):
    for v in (row, column):
        # bool is an int subclass, reject it too
        if isinstance(v, bool) or not isinstance(v, int) \
           or not 0 <= v < BOARD_SIZE:
            raise InvalidCoordinate(row, column)


# -----------------------------------------------------------------------------
# LINE PREDICATES
# each takes a board snapshot and returns the completing mark or Mark.EMPTY
# -----------------------------------------------------------------------------

def _line_winner(cells):
    first = cells[0]
    if first is Mark.EMPTY:
        return Mark.EMPTY
    if all(c is first for c in cells[1:]):
        return first
    return Mark.EMPTY


def row_winner(board, row):
    return _line_winner([board[row][j] for j in range(BOARD_SIZE)])


def column_winner(board, column):
    return _line_winner([board[i][column] for i in range(BOARD_SIZE)])


def main_diagonal_winner(board):
    # top-left -> bottom-right
    return _line_winner([board[k][k] for k in range(BOARD_SIZE)])


def anti_diagonal_winner(board):
    # bottom-left -> top-right
    n = BOARD_SIZE
    return _line_winner([board[n - 1 - k][k] for k in range(n)])


class GameEngine:
    """
    maru-batsu rules and state for a single game

    one instance per game; build a new one instead of resetting
    """
    def __init__(self):
        self._cells = [[Mark.EMPTY for _ in range(BOARD_SIZE)]
                       for _ in range(BOARD_SIZE)]
        self._current_player = Mark.PLAYER_A   # maru moves first
        self._outcome = Outcome.ONGOING
        self._remaining_cells = BOARD_SIZE * BOARD_SIZE

    def attempt_move(self, row, column):
        """
        place the current player's mark at (row, column)
        returns False, touching nothing, if the cell is taken or the game is over
        """
        _check_coordinates(row, column)
        if self._outcome is not Outcome.ONGOING \
           or self._cells[row][column] is not Mark.EMPTY:
            logger.debug("rejected move at (%d, %d)", row, column)
            return False

        mark = self._current_player
        self._cells[row][column] = mark
        self._remaining_cells -= 1
        self._current_player = mark.opponent()
        logger.debug("%s played (%d, %d), %d cells left",
                     mark.name, row, column, self._remaining_cells)

        self._evaluate(row, column)
        return True

    def _evaluate(self, row, column):
        # winner is whoever just moved, i.e. the mark on the played cell
        board = self.board()
        winner = row_winner(board, row)
        if winner is Mark.EMPTY:
            winner = column_winner(board, column)
        if winner is Mark.EMPTY:
            winner = main_diagonal_winner(board)
        if winner is Mark.EMPTY:
            winner = anti_diagonal_winner(board)

        if winner is Mark.PLAYER_A:
            self._outcome = Outcome.PLAYER_A_WINS
        elif winner is Mark.PLAYER_B:
            self._outcome = Outcome.PLAYER_B_WINS
        elif self._remaining_cells == 0:
            self._outcome = Outcome.DRAW

        if self._outcome is not Outcome.ONGOING:
            logger.debug("game over: %s", self._outcome.name)

    def get_cell(self, row, column):
        _check_coordinates(row, column)
        return self._cells[row][column]

    def get_current_player(self):
        # last value is kept once the game is over
        return self._current_player

    def get_outcome(self):
        return self._outcome

    @property
    def remaining_cells(self):
        return self._remaining_cells

    @property
    def is_over(self):
        return self._outcome is not Outcome.ONGOING

    def board(self):
        """
        read-only snapshot as a tuple of row tuples
        """
        return tuple(tuple(r) for r in self._cells)
