"""
Tests for GamePresenter and the glyph/message mapping.

A recording view stands in for the Qt window.
"""

import logging

import pytest

from marubatsu.game_logic import GameEngine, InvalidCoordinate, Mark, Outcome
from marubatsu.presenter import (
    BoardView,
    GamePresenter,
    glyph_for,
    status_message,
)


class RecordingView(BoardView):
    """Keeps every call so tests can inspect them."""

    def __init__(self):
        self.cells = {}
        self.messages = []
        self.clears = 0

    def render_cell(self, row, column, mark):
        self.cells[(row, column)] = mark

    def show_message(self, text):
        self.messages.append(text)

    def clear(self):
        self.cells = {}
        self.clears += 1


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def presenter(view):
    return GamePresenter(view)


class TestGlyphs:

    def test_glyph_for_each_mark(self):
        assert glyph_for(Mark.PLAYER_A) == "O"
        assert glyph_for(Mark.PLAYER_B) == "X"
        assert glyph_for(Mark.EMPTY) == ""

    def test_glyph_for_rejects_other_values(self):
        with pytest.raises(ValueError):
            glyph_for("O")


class TestStatusMessage:

    def test_opening_message(self):
        assert status_message(GameEngine()) == "O's turn"

    def test_turn_message_after_move(self):
        engine = GameEngine()
        engine.attempt_move(1, 1)
        assert status_message(engine) == "X's turn"

    def test_maru_win_message(self):
        engine = GameEngine()
        for move in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            engine.attempt_move(*move)
        assert engine.get_outcome() is Outcome.PLAYER_A_WINS
        assert status_message(engine) == "O win!"

    def test_batsu_win_message(self):
        engine = GameEngine()
        for move in [(0, 0), (0, 2), (1, 0), (1, 2), (2, 1), (2, 2)]:
            engine.attempt_move(*move)
        assert status_message(engine) == "X win!"

    def test_draw_message(self):
        engine = GameEngine()
        for move in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                     (1, 2), (2, 1), (2, 0), (2, 2)]:
            engine.attempt_move(*move)
        assert status_message(engine) == "Draw :("


class TestGamePresenter:

    def test_start_clears_view_and_shows_first_turn(self, presenter, view):
        assert view.clears == 1
        assert view.messages == ["O's turn"]
        assert presenter.engine.remaining_cells == 9

    def test_tap_renders_mark_and_message(self, presenter, view):
        assert presenter.on_cell_tapped(0, 0) is True
        assert view.cells == {(0, 0): Mark.PLAYER_A}
        assert view.messages[-1] == "X's turn"

        assert presenter.on_cell_tapped(2, 1) is True
        assert view.cells[(2, 1)] is Mark.PLAYER_B
        assert view.messages[-1] == "O's turn"

    def test_rejected_tap_renders_nothing(self, presenter, view):
        presenter.on_cell_tapped(0, 0)
        messages = list(view.messages)

        assert presenter.on_cell_tapped(0, 0) is False
        assert view.cells == {(0, 0): Mark.PLAYER_A}
        assert view.messages == messages

    def test_taps_after_win_are_ignored(self, presenter, view):
        for move in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            presenter.on_cell_tapped(*move)
        assert view.messages[-1] == "O win!"

        assert presenter.on_cell_tapped(2, 2) is False
        assert (2, 2) not in view.cells
        assert view.messages[-1] == "O win!"

    def test_invalid_coordinate_propagates(self, presenter, view):
        with pytest.raises(InvalidCoordinate):
            presenter.on_cell_tapped(3, 3)
        assert view.cells == {}

    def test_new_game_uses_fresh_engine(self, presenter, view):
        presenter.on_cell_tapped(1, 1)
        old_engine = presenter.engine

        presenter.new_game()
        assert presenter.engine is not old_engine
        assert view.cells == {}
        assert view.clears == 2
        assert view.messages[-1] == "O's turn"
        # the old game is left as it was
        assert old_engine.get_cell(1, 1) is Mark.PLAYER_A

    def test_board_mirrors_engine(self, presenter):
        presenter.on_cell_tapped(0, 2)
        assert presenter.board() == presenter.engine.board()

    def test_logs_game_finish(self, presenter, caplog):
        caplog.set_level(logging.INFO, logger="marubatsu.presenter")
        for move in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            presenter.on_cell_tapped(*move)
        assert "PLAYER_A_WINS" in caplog.text


class TestBoardViewPort:

    def test_base_methods_are_abstract(self):
        port = BoardView()
        with pytest.raises(NotImplementedError):
            port.render_cell(0, 0, Mark.PLAYER_A)
        with pytest.raises(NotImplementedError):
            port.show_message("hi")
        with pytest.raises(NotImplementedError):
            port.clear()
