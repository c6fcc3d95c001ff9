"""
Unit tests for the roster auto-fill engine
"""
import pytest

from services.roster_engine import (
    POSITIONS, QUARTERS, NoPlayersAvailable, Player, Position, auto_fill,
    find_double_bookings, playing_time_targets
)

GS, GA, WA, C, WD, GD, GK = POSITIONS


def make_player(player_id, name, preferences=(), active=True):
    return Player(id=player_id, display_name=name, position_preferences=tuple(preferences), active=active)


def test_playing_time_targets():
    """ideal = min(4, 28 // n), minimum never below 3"""
    assert playing_time_targets(3) == (4, 4)
    assert playing_time_targets(7) == (4, 4)
    assert playing_time_targets(8) == (3, 3)
    assert playing_time_targets(10) == (2, 3)
    assert playing_time_targets(28) == (1, 3)


def test_no_players_raises():
    with pytest.raises(NoPlayersAvailable):
        auto_fill([])


def test_only_inactive_players_raises():
    players = [make_player(1, "Ava", active=False), make_player(2, "Bea", active=False)]
    with pytest.raises(NoPlayersAvailable):
        auto_fill(players)


def test_inactive_players_are_never_assigned():
    players = [make_player(i, f"Player {i}") for i in range(1, 9)]
    players.append(make_player(99, "Benched", preferences=[GS], active=False))

    result = auto_fill(players)

    assert 99 not in result.assignments.values()
    assert 99 not in result.assignment_counts


def test_each_player_keeps_their_only_preference():
    """Seven players, one preference each, covering the court"""
    players = [make_player(i + 1, f"P{i + 1}", preferences=[position]) for i, position in enumerate(POSITIONS)]

    result = auto_fill(players)

    for quarter in QUARTERS:
        for i, position in enumerate(POSITIONS):
            assert result.player_for(quarter, position) == i + 1
    assert all(count == 4 for count in result.assignment_counts.values())
    assert result.is_complete


def test_three_players_without_preferences():
    """3 players, no preferences: 3 of 7 positions per quarter, all 4 quarters each"""
    players = [make_player(1, "Ava"), make_player(2, "Bea"), make_player(3, "Cat")]

    result = auto_fill(players)

    assert result.ideal_quarters == 4
    assert result.min_quarters == 4
    for quarter in QUARTERS:
        assert result.player_for(quarter, GS) == 1
        assert result.player_for(quarter, GA) == 2
        assert result.player_for(quarter, WA) == 3
        for position in (C, WD, GD, GK):
            assert result.player_for(quarter, position) is None
    assert result.assignment_counts == {1: 4, 2: 4, 3: 4}
    assert len(result.unfilled_slots) == 16
    assert not result.is_complete
    assert find_double_bookings(result.entries()) == []


def test_preference_rank_breaks_ties():
    """Equal need: the player listing the position higher wins it"""
    players = [
        make_player(1, "Xena", preferences=[GA, GS]),
        make_player(2, "Yara", preferences=[GS]),
    ]

    result = auto_fill(players)

    for quarter in QUARTERS:
        assert result.player_for(quarter, GS) == 2
        assert result.player_for(quarter, GA) == 1
    assert len(result.unfilled_slots) == 20


def test_players_below_target_are_prioritised():
    """Three shooters share GS/GA; five specialists hold the other positions"""
    players = [
        make_player(1, "Ava", preferences=[GS, GA]),
        make_player(2, "Bea", preferences=[GS, GA]),
        make_player(3, "Cat", preferences=[GS, GA]),
        make_player(4, "Dee", preferences=[WA]),
        make_player(5, "Eve", preferences=[C]),
        make_player(6, "Fay", preferences=[WD]),
        make_player(7, "Gia", preferences=[GD]),
        make_player(8, "Hal", preferences=[GK]),
    ]

    result = auto_fill(players)

    assert result.min_quarters == 3
    # Cat sat out quarter 1 and so is furthest below target in quarter 2
    assert [result.player_for(q, GS) for q in QUARTERS] == [1, 3, 2, 1]
    assert [result.player_for(q, GA) for q in QUARTERS] == [2, 1, 3, 2]
    assert result.assignment_counts == {1: 3, 2: 3, 3: 2, 4: 4, 5: 4, 6: 4, 7: 4, 8: 4}


def test_example_eight_player_squad():
    """8 players, every slot filled, nobody on 0 or 1 quarter"""
    players = [
        make_player(1, "Ava", preferences=[GS, GA]),
        make_player(2, "Bea", preferences=[GS, GA]),
        make_player(3, "Cat", preferences=[GS, GA]),
        make_player(4, "Dee", preferences=[WA]),
        make_player(5, "Eve", preferences=[C]),
        make_player(6, "Fay", preferences=[WD]),
        make_player(7, "Gia", preferences=[GD]),
        make_player(8, "Hal", preferences=[GK]),
    ]

    result = auto_fill(players)

    assert result.ideal_quarters == 3
    assert result.is_complete
    assert len(result.assignments) == 28
    for count in result.assignment_counts.values():
        assert result.min_quarters - 1 <= count <= 4


def test_player_without_preferences_takes_unwanted_positions():
    players = [make_player(i + 1, f"P{i + 1}", preferences=[position]) for i, position in enumerate(POSITIONS[:-1])]
    players.append(make_player(42, "Flex"))

    result = auto_fill(players)

    for quarter in QUARTERS:
        assert result.player_for(quarter, GK) == 42


def test_fallback_prefers_player_furthest_below_target():
    """Nobody prefers C: the unused player gets it ahead of anyone else"""
    players = [
        make_player(1, "Ava", preferences=[GS]),
        make_player(2, "Bea", preferences=[GA]),
        make_player(3, "Cat", preferences=[WA]),
        make_player(4, "Dee", preferences=[WD]),
        make_player(5, "Eve", preferences=[GD]),
        make_player(6, "Fay", preferences=[GK]),
        make_player(7, "Abe"),
        make_player(8, "Abi"),
    ]

    result = auto_fill(players)

    # Quarter 1: Abe and Abi tie, name decides. Quarter 2: Abi has played less.
    assert result.player_for(1, C) == 7
    assert result.player_for(2, C) == 8


def test_no_double_booking_in_any_quarter():
    players = [
        make_player(i, f"Player {i:02d}", preferences=[POSITIONS[i % 7], POSITIONS[(i + 3) % 7]])
        for i in range(1, 13)
    ]

    result = auto_fill(players)

    assert find_double_bookings(result.entries()) == []
    for quarter in QUARTERS:
        quarter_players = [result.player_for(quarter, p) for p in POSITIONS]
        assert len(quarter_players) == len(set(quarter_players))


def test_same_input_gives_same_assignment():
    players = [
        make_player(i, name, preferences=prefs)
        for i, (name, prefs) in enumerate([
            ("Ava", [GS, GA]), ("Bea", [C]), ("Cat", []), ("Dee", [GK, GD]),
            ("Eve", [WA, C]), ("Fay", [WD]), ("Gia", [GA]), ("Hal", []), ("Ivy", [GS]),
        ], start=1)
    ]

    first = auto_fill(players)
    second = auto_fill(players)
    reversed_input = auto_fill(list(reversed(players)))

    assert first.assignments == second.assignments
    assert first.assignments == reversed_input.assignments
    assert first.assignment_counts == reversed_input.assignment_counts


def test_large_roster_target_is_flagged_unreachable():
    players = [make_player(i, f"Player {i:02d}") for i in range(1, 13)]

    result = auto_fill(players)

    assert result.min_quarters == 3
    assert result.target_feasible is False
    assert result.is_complete
    assert sum(result.assignment_counts.values()) == 28


def test_entries_are_in_quarter_then_court_order():
    players = [make_player(i, f"Player {i}") for i in range(1, 8)]

    entries = auto_fill(players).entries()

    assert [(e.quarter, e.position) for e in entries] == [(q, p) for q in QUARTERS for p in POSITIONS]


def test_position_labels():
    assert Position.GS.label == "Goal Shooter"
    assert Position.C.label == "Centre"
    assert Position("GK") is Position.GK
