import json

from blockdrop.core.factory import SequenceShapeSource
from blockdrop.core.config import Settings
from blockdrop.models.game import GameEngine
from blockdrop.snapshot import take_snapshot


def test_to_dict_is_plain_json():
    engine = GameEngine(Settings(rows=5, cols=4), SequenceShapeSource(["T"]))
    state = engine.new_game()
    data = take_snapshot(engine, state).to_dict()
    assert data["rows"] == 5
    assert data["cols"] == 4
    assert data["game_over"] is False
    assert data["board"][0] == [0, 0, "T", 0]
    assert data["board"][1] == [0, "T", "T", "T"]
    json.dumps(data)


def test_snapshot_is_detached_from_state():
    engine = GameEngine(Settings(), SequenceShapeSource(["O"]))
    state = engine.new_game()
    snap = take_snapshot(engine, state)
    engine.tick(state)
    assert snap.cell(0, 4) == "O"
    assert take_snapshot(engine, state).cell(0, 4) == 0
