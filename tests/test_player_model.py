import pytest
from pydantic import ValidationError

from pyhoops.models import PlayerAggregate, PositionBoard, StatRecord


def _payload(**overrides):
    payload = {
        "id": 101,
        "pts": 20,
        "reb": 5,
        "ast": 10,
        "stl": 2,
        "blk": 0,
        "turnover": 3,
        "player": {"id": 7, "first_name": "Test", "last_name": "Guard", "position": "PG"},
        "team": {"id": 3, "full_name": "Boston Celtics"},
        "game": {"id": 9, "date": "2024-01-05"},
    }
    payload.update(overrides)
    return payload


def test_stat_record_reads_wire_names():
    record = StatRecord.model_validate(_payload())

    assert record.points == 20
    assert record.rebounds == 5
    assert record.assists == 10
    assert record.steals == 2
    assert record.blocks == 0
    assert record.turnovers == 3
    assert record.player.id == 7
    assert record.team_name == "Boston Celtics"


def test_stat_record_is_frozen():
    record = StatRecord.model_validate(_payload())

    with pytest.raises((TypeError, ValidationError)):
        record.points = 99  # type: ignore[misc]


def test_stat_record_null_counters_read_as_zero():
    record = StatRecord.model_validate(_payload(pts=None, reb=None, turnover=None))

    assert record.points == 0.0
    assert record.rebounds == 0.0
    assert record.turnovers == 0.0


def test_stat_record_missing_team_and_position():
    record = StatRecord.model_validate(
        _payload(team=None, player={"id": 8, "first_name": "No", "last_name": "Spot"})
    )

    assert record.team_name is None
    assert record.player.position is None
    assert record.player.has_position is False


def test_whitespace_position_is_not_usable():
    record = StatRecord.model_validate(
        _payload(player={"id": 8, "first_name": "A", "last_name": "B", "position": "   "})
    )

    assert record.player.has_position is False


def test_stat_record_requires_player_id():
    with pytest.raises(ValidationError):
        StatRecord.model_validate(_payload(player={"first_name": "No", "last_name": "Id"}))


def test_player_aggregate_add_game():
    aggregate = PlayerAggregate(player_id=7, name="Test Guard", team="Boston Celtics", position="PG", score=44.0)

    aggregate.add_game(20.4)

    assert aggregate.score == pytest.approx(64.4)
    assert aggregate.games == 2


def test_position_board_fills_missing_slots_in_canonical_order():
    guard = PlayerAggregate(player_id=7, name="Test Guard", team="BOS", position="PG", score=10.0)
    board = PositionBoard({"C": None, "PG": guard})

    assert list(board) == ["PG", "SG", "SF", "PF", "C"]
    assert board["PG"] is guard
    assert board["SG"] is None
    assert board.filled_positions == ("PG",)


def test_position_board_rejects_unknown_positions():
    with pytest.raises(ValueError):
        PositionBoard({"G": None})


def test_position_board_slots_are_read_only():
    board = PositionBoard.empty()

    with pytest.raises(TypeError):
        board.slots["PG"] = None  # type: ignore[index]


def test_stat_record_null_names_read_as_blank():
    record = StatRecord.model_validate(
        _payload(player={"id": 9, "first_name": None, "last_name": "Nene", "position": "C"})
    )

    assert record.player.first_name == ""
    assert record.player.last_name == "Nene"
