"""Tests unitarios de GameEngine: jugadas, historial, ramas y reinicio."""

import json

import pytest

from src.core.engine import GameEngine
from src.core.errors import InvalidHistoryIndexError, InvalidSquareError
from src.persistence import MemoryPersistenceProvider

_ = None


def _play(engine, *squares):
    for square in squares:
        assert engine.select_square(square) is True


def test_new_engine_starts_at_empty_board(engine, store):
    assert engine.history == [[None] * 9]
    assert engine.current_index == 0
    assert engine.status == "Next player: X"
    assert json.loads(store.get("squares")) == [[None] * 9]
    assert json.loads(store.get("historyIndex")) == 0


def test_first_move_scenario(engine):
    assert engine.select_square(0) is True
    assert engine.squares == ["X", _, _, _, _, _, _, _, _]
    assert engine.next_value == "O"
    assert engine.status == "Next player: O"


def test_each_move_appends_one_snapshot(engine):
    for n, square in enumerate([4, 0, 8, 2], start=1):
        engine.select_square(square)
        assert len(engine.history) == n + 1
        assert engine.current_index == len(engine.history) - 1


def test_moves_are_persisted(engine, store):
    _play(engine, 4, 0)
    assert json.loads(store.get("squares"))[-1] == ["O", _, _, _, "X", _, _, _, _]
    assert json.loads(store.get("historyIndex")) == 2


def test_occupied_square_is_noop(engine, store):
    _play(engine, 4)
    before = (engine.history, engine.current_index, store.get("squares"))
    assert engine.select_square(4) is False
    assert (engine.history, engine.current_index, store.get("squares")) == before


def test_moves_after_win_are_noop(engine):
    _play(engine, 0, 3, 1, 4, 2)
    assert engine.winner == "X"
    assert engine.status == "Winner: X"
    assert engine.is_finished
    history = engine.history
    assert engine.select_square(8) is False
    assert engine.history == history


def test_scratch_game(engine):
    _play(engine, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert engine.winner is None
    assert engine.is_finished
    assert engine.status == "Scratch: Cat's game"


def test_jump_to_history_does_not_change_history(engine):
    _play(engine, 0, 4, 8)
    history = engine.history
    engine.jump_to_history(1)
    assert engine.current_index == 1
    assert engine.history == history
    assert engine.squares == ["X", _, _, _, _, _, _, _, _]
    assert engine.status == "Next player: O"


def test_move_from_past_truncates_future(engine):
    _play(engine, 0, 4, 8, 2)
    engine.jump_to_history(1)
    assert engine.select_square(6) is True
    assert len(engine.history) == 3
    assert engine.current_index == 2
    assert engine.history[2] == ["X", _, _, _, _, _, "O", _, _]


def test_jump_allowed_after_win_and_play_from_there(engine):
    _play(engine, 0, 3, 1, 4, 2)
    engine.jump_to_history(4)
    assert engine.winner is None
    assert engine.select_square(8) is True
    assert len(engine.history) == 6


@pytest.mark.parametrize("index", [-1, 1, 5, True, "0"])
def test_jump_out_of_range_raises(engine, index):
    with pytest.raises(InvalidHistoryIndexError):
        engine.jump_to_history(index)
    assert engine.current_index == 0


@pytest.mark.parametrize("square", [-1, 9, None])
def test_select_square_out_of_range_raises(engine, square):
    with pytest.raises(InvalidSquareError):
        engine.select_square(square)
    assert engine.history == [[None] * 9]


def test_restart_from_any_state(engine, store):
    _play(engine, 0, 4, 8)
    engine.jump_to_history(1)
    engine.restart()
    assert engine.history == [[None] * 9]
    assert engine.current_index == 0
    assert json.loads(store.get("squares")) == [[None] * 9]


def test_history_labels_mark_current(engine):
    _play(engine, 0, 4)
    engine.jump_to_history(1)
    assert engine.history_labels() == [
        {"index": 0, "label": "Reset history", "current": False},
        {"index": 1, "label": "History item 2", "current": True},
        {"index": 2, "label": "History item 3", "current": False},
    ]


def test_get_status_contract(engine):
    _play(engine, 0)
    status = engine.get_status()
    assert status["squares"] == ["X", _, _, _, _, _, _, _, _]
    assert status["status"] == "Next player: O"
    assert status["winner"] is None
    assert status["next_player"] == "O"
    assert status["current_index"] == 1
    assert len(status["history"]) == 2
    assert status["finished"] is False


def test_history_copy_does_not_leak(engine):
    history = engine.history
    history[0][0] = "X"
    engine.squares[1] = "O"
    assert engine.history == [[None] * 9]


def test_engine_resumes_from_store(store):
    _play(GameEngine(persistence_provider=store), 0, 4, 8)
    resumed = GameEngine(persistence_provider=store)
    assert len(resumed.history) == 4
    assert resumed.current_index == 3
    assert resumed.next_value == "O"


def test_invalid_persisted_history_is_reset():
    store = MemoryPersistenceProvider({"squares": json.dumps([["X"] * 9]), "historyIndex": "0"})
    engine = GameEngine(persistence_provider=store)
    assert engine.history == [[None] * 9]
    assert json.loads(store.get("squares")) == [[None] * 9]


def test_persisted_history_skipping_a_turn_is_reset():
    history = [[None] * 9, ["O"] + [None] * 8]
    store = MemoryPersistenceProvider({"squares": json.dumps(history)})
    assert GameEngine(persistence_provider=store).history == [[None] * 9]


def test_persisted_index_out_of_range_is_clamped_to_last():
    history = [[None] * 9, ["X"] + [None] * 8]
    store = MemoryPersistenceProvider({"squares": json.dumps(history), "historyIndex": "7"})
    engine = GameEngine(persistence_provider=store)
    assert engine.current_index == 1
    assert json.loads(store.get("historyIndex")) == 1


def test_custom_keys():
    store = MemoryPersistenceProvider()
    engine = GameEngine(persistence_provider=store, history_key="g1:squares", index_key="g1:index")
    engine.select_square(0)
    assert store.keys() == ["g1:index", "g1:squares"]


def test_engine_keeps_playing_when_store_is_down(broken_store):
    engine = GameEngine(persistence_provider=broken_store)
    _play(engine, 0, 4)
    assert engine.current_index == 2
    engine.restart()
    assert engine.history == [[None] * 9]
