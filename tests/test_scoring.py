import pytest

from pyhoops.config import ScoringWeights
from pyhoops.models import PlayerAggregate, StatRecord
from pyhoops.scoring import MISSING_TEAM, aggregate_stats, best_by_position, fantasy_score


def _stat(player_id, position="PG", *, first="First", last="Last", team="Test Team", **counters):
    payload = {
        "pts": counters.get("pts", 0),
        "reb": counters.get("reb", 0),
        "ast": counters.get("ast", 0),
        "stl": counters.get("stl", 0),
        "blk": counters.get("blk", 0),
        "turnover": counters.get("turnover", 0),
        "player": {"id": player_id, "first_name": first, "last_name": last, "position": position},
        "team": {"full_name": team} if team is not None else None,
    }
    return StatRecord.model_validate(payload)


def _aggregate(player_id, position, score, games=1):
    return PlayerAggregate(
        player_id=player_id,
        name=f"Player {player_id}",
        team="TEAM",
        position=position,
        score=score,
        games=games,
    )


def test_fantasy_score_formula():
    record = _stat(7, pts=20, reb=5, ast=10, stl=2, blk=0, turnover=3)

    assert fantasy_score(record) == pytest.approx(44.0)


def test_fantasy_score_custom_weights():
    weights = ScoringWeights(points=1.0, rebounds=1.0, assists=1.0, steals=0.0, blocks=0.0, turnovers=-2.0)
    record = _stat(7, pts=10, reb=3, ast=2, stl=5, blk=5, turnover=1)

    assert fantasy_score(record, weights) == pytest.approx(13.0)


def test_aggregate_two_games_end_to_end():
    records = [
        _stat(7, "PG", first="Test", last="Guard", team="Boston Celtics", pts=20, reb=5, ast=10, stl=2, blk=0, turnover=3),
        _stat(7, "PG", first="Test", last="Guard", team="Boston Celtics", pts=10, reb=2, ast=4, stl=0, blk=1, turnover=1),
    ]

    aggregates = aggregate_stats(records)

    guard = aggregates[7]
    assert guard.name == "Test Guard"
    assert guard.team == "Boston Celtics"
    assert guard.position == "PG"
    assert guard.score == pytest.approx(64.4)
    assert guard.games == 2

    board = best_by_position(aggregates)
    assert board["PG"] is guard
    assert f"{board['PG'].score:.2f}" == "64.40"


def test_aggregate_sums_individual_game_scores():
    records = [
        _stat(1, "C", pts=12, reb=11, blk=3, turnover=2),
        _stat(2, "SF", pts=30),
        _stat(1, "C", pts=8, reb=9, ast=1, stl=1),
        _stat(1, "C", pts=0, turnover=4),
    ]

    aggregates = aggregate_stats(records)

    expected = sum(fantasy_score(record) for record in records if record.player.id == 1)
    assert aggregates[1].score == pytest.approx(expected)
    assert aggregates[1].games == 3
    assert aggregates[2].games == 1


@pytest.mark.parametrize("position", [None, "", "   "])
def test_aggregate_excludes_players_without_position(position):
    records = [
        _stat(5, position, pts=50),
        _stat(5, position, pts=45),
        _stat(6, "SG", pts=10),
    ]

    aggregates = aggregate_stats(records)

    assert 5 not in aggregates
    assert list(aggregates) == [6]


def test_aggregate_keeps_first_seen_identity():
    records = [
        _stat(3, "SF", first="Old", last="Name", team="Old Team", pts=10),
        _stat(3, "PF", first="New", last="Name", team="New Team", pts=10),
    ]

    aggregate = aggregate_stats(records)[3]

    assert aggregate.name == "Old Name"
    assert aggregate.team == "Old Team"
    assert aggregate.position == "SF"
    assert aggregate.games == 2


def test_aggregate_missing_team_uses_placeholder():
    aggregate = aggregate_stats([_stat(4, "C", team=None, pts=2)])[4]

    assert aggregate.team == MISSING_TEAM == "N/A"


def test_aggregate_preserves_first_appearance_order():
    records = [_stat(9, "C"), _stat(2, "PG"), _stat(9, "C"), _stat(4, "SG")]

    assert list(aggregate_stats(records)) == [9, 2, 4]


def test_aggregate_copies_position_verbatim():
    aggregate = aggregate_stats([_stat(8, "SG-SF", pts=40)])[8]

    assert aggregate.position == "SG-SF"


def test_best_by_position_picks_highest_score():
    aggregates = [
        _aggregate(1, "PG", 30.0),
        _aggregate(2, "PG", 45.5),
        _aggregate(3, "PG", 12.0),
        _aggregate(4, "C", 20.0),
    ]

    board = best_by_position(aggregates)

    assert board["PG"].player_id == 2
    assert board["C"].player_id == 4
    assert board["SG"] is None
    assert board["SF"] is None
    assert board["PF"] is None


def test_best_by_position_tie_keeps_first_encountered():
    first = _aggregate(1, "SF", 33.0)
    second = _aggregate(2, "SF", 33.0)

    assert best_by_position([first, second])["SF"] is first
    assert best_by_position([second, first])["SF"] is second


def test_best_by_position_ignores_non_canonical_positions():
    aggregates = {
        1: _aggregate(1, "SG-SF", 99.0),
        2: _aggregate(2, "G", 88.0),
        3: _aggregate(3, "sg", 77.0),
        4: _aggregate(4, "SG", 10.0),
    }

    board = best_by_position(aggregates)

    assert board["SG"].player_id == 4
    assert board["SF"] is None
    assert [player.player_id for _, player in board.items() if player is not None] == [4]


def test_best_by_position_empty_input():
    board = best_by_position({})

    assert list(board) == ["PG", "SG", "SF", "PF", "C"]
    assert board.filled_positions == ()
