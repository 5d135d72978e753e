import logging

from .game_logic import GameEngine, Mark, Outcome

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLYPHS + MESSAGES
# -----------------------------------------------------------------------------

MARU_GLYPH = "O"
BATSU_GLYPH = "X"

TURN_MESSAGE = "{}'s turn"
WIN_MESSAGE = "{} win!"
DRAW_MESSAGE = "Draw :("


def glyph_for(mark):
    # text drawn in a cell for each mark
    if mark is Mark.PLAYER_A:
        return MARU_GLYPH
    if mark is Mark.PLAYER_B:
        return BATSU_GLYPH
    if mark is Mark.EMPTY:
        return ""
    raise ValueError(f"unknown mark: {mark!r}")


def status_message(engine):
    """
    status line text for the engine's current state
    """
    outcome = engine.get_outcome()
    if outcome is Outcome.ONGOING:
        return TURN_MESSAGE.format(glyph_for(engine.get_current_player()))
    if outcome is Outcome.PLAYER_A_WINS:
        return WIN_MESSAGE.format(MARU_GLYPH)
    if outcome is Outcome.PLAYER_B_WINS:
        return WIN_MESSAGE.format(BATSU_GLYPH)
    if outcome is Outcome.DRAW:
        return DRAW_MESSAGE
    raise ValueError(f"unknown outcome: {outcome!r}")


class BoardView:
    """
    what the presenter needs from a ui toolkit
    """
    def render_cell(self, row, column, mark):
        raise NotImplementedError

    def show_message(self, text):
        raise NotImplementedError

    def clear(self):
        # wipe all nine cells
        raise NotImplementedError


class GamePresenter:
    """
    turns cell taps into engine moves and engine state into view updates
    """
    def __init__(self, view):
        self.view = view
        self.engine = None
        self.start()

    def start(self):
        # fresh engine + fresh view, never reuse the old engine
        self.engine = GameEngine()
        self.view.clear()
        self.view.show_message(status_message(self.engine))
        logger.info("new game started")

    def new_game(self):
        self.start()

    def on_cell_tapped(self, row, column):
        """
        returns True if the tap became a move
        """
        if not self.engine.attempt_move(row, column):
            return False  # occupied or finished, ignore

        self.view.render_cell(row, column, self.engine.get_cell(row, column))
        self.view.show_message(status_message(self.engine))
        if self.engine.is_over:
            logger.info("game finished: %s", self.engine.get_outcome().name)
        return True

    def board(self):
        return self.engine.board()
