"""
Per-game player availability and its effect on the roster
"""
import pytest

from api.crud import roster_crud
from core import exceptions
from services import availability_service, roster_service
from services.roster_engine import Position
from conftest import create_team, create_player, create_game, coach_headers

SQUAD = [
    ("Ava", ["GS", "GA"]),
    ("Bea", ["GS", "GA"]),
    ("Cat", ["GS", "GA"]),
    ("Dee", ["WA"]),
    ("Eve", ["C"]),
    ("Fay", ["WD"]),
    ("Gia", ["GD"]),
    ("Hal", ["GK"]),
]


@pytest.fixture
def squad(db_session):
    team = create_team(db_session)
    players = [create_player(db_session, team, name, prefs) for name, prefs in SQUAD]
    game = create_game(db_session, team)
    return team, players, game


def rostered_ids(db, game_id):
    return {e.player_id for e in roster_crud.get_game_rosters(db, game_id)}


class TestAvailabilityService:

    def test_unset_availability_means_active_players(self, db_session, squad):
        team, players, game = squad
        benched = create_player(db_session, team, "Ivy", active=False)

        availability = availability_service.get_game_availability(db_session, game)

        assert availability["is_set"] is False
        assert set(availability["available_player_ids"]) == {p.id for p in players}
        assert benched.id not in availability["available_player_ids"]
        assert len(availability["players"]) == 9

    def test_auto_fill_skips_unavailable_players(self, db_session, squad):
        _, players, game = squad
        hal = players[7]
        availability_service.set_game_availability(db_session, game, [p.id for p in players[:7]])

        result = roster_service.auto_fill_game_roster(db_session, game)

        assert hal.id not in result.assignment_counts
        assert hal.id not in rostered_ids(db_session, game.id)
        assert result.is_complete

    def test_nobody_available_keeps_existing_roster(self, db_session, squad):
        _, _, game = squad
        roster_service.auto_fill_game_roster(db_session, game)
        before = rostered_ids(db_session, game.id)

        availability = availability_service.set_game_availability(db_session, game, [])

        assert availability["is_set"] is True
        assert availability["available_player_ids"] == []
        with pytest.raises(exceptions.NoPlayersAvailable):
            roster_service.auto_fill_game_roster(db_session, game)
        assert rostered_ids(db_session, game.id) == before

    def test_available_but_inactive_player_is_not_used(self, db_session, squad):
        _, players, game = squad
        availability_service.set_game_availability(db_session, game, [p.id for p in players])
        players[0].active = False
        db_session.commit()

        result = roster_service.auto_fill_game_roster(db_session, game)

        assert players[0].id not in result.assignment_counts

    def test_saving_again_replaces_previous_availability(self, db_session, squad):
        _, players, game = squad
        availability_service.set_game_availability(db_session, game, [players[0].id])

        availability = availability_service.set_game_availability(db_session, game, [players[1].id, players[2].id])

        assert availability["available_player_ids"] == [players[1].id, players[2].id]

    def test_player_from_other_team_is_rejected(self, db_session, squad):
        _, _, game = squad
        outsider = create_player(db_session, create_team(db_session, "Eagles"), "Zoe")

        with pytest.raises(exceptions.PlayerNotOnTeam):
            availability_service.set_game_availability(db_session, game, [outsider.id])

    def test_unknown_player_is_rejected(self, db_session, squad):
        _, _, game = squad

        with pytest.raises(exceptions.PlayerNotFound):
            availability_service.set_game_availability(db_session, game, [999])

    def test_first_single_edit_starts_from_active_squad(self, db_session, squad):
        _, players, game = squad

        availability = availability_service.set_player_availability(db_session, game, players[3].id, False)

        assert availability["is_set"] is True
        assert set(availability["available_player_ids"]) == {p.id for p in players} - {players[3].id}

    def test_single_edit_can_bring_a_player_back(self, db_session, squad):
        _, players, game = squad
        availability_service.set_game_availability(db_session, game, [players[0].id])

        availability = availability_service.set_player_availability(db_session, game, players[1].id, True)

        assert availability["available_player_ids"] == [players[0].id, players[1].id]

    def test_clear_restores_default(self, db_session, squad):
        _, players, game = squad
        availability_service.set_game_availability(db_session, game, [players[0].id])

        removed = availability_service.clear_game_availability(db_session, game)

        assert removed == 8
        assert availability_service.get_game_availability(db_session, game)["is_set"] is False

    def test_manual_slot_needs_an_available_player(self, db_session, squad):
        _, players, game = squad
        availability_service.set_game_availability(db_session, game, [players[0].id])

        with pytest.raises(exceptions.PlayerNotAvailable):
            roster_service.assign_slot(db_session, game, 1, Position.GS, players[1].id)
        roster_service.assign_slot(db_session, game, 1, Position.GS, players[0].id)

    def test_availability_is_per_game(self, db_session, squad):
        team, players, game = squad
        other_game = create_game(db_session, team, opponent="Falcons", date="2026-10-31")
        availability_service.set_game_availability(db_session, game, [players[0].id])

        assert availability_service.get_game_availability(db_session, other_game)["is_set"] is False
        assert len(availability_service.available_players_for_game(db_session, other_game)) == 8


class TestAvailabilityEndpoints:

    def test_get_default_availability(self, client, squad):
        _, players, game = squad

        response = client.get(f"/games/{game.id}/availability")

        assert response.status_code == 200
        body = response.json()
        assert body["is_set"] is False
        assert len(body["available_player_ids"]) == len(players)
        assert {"player_id", "display_name", "is_available"} <= set(body["players"][0])

    def test_put_then_auto_fill(self, client, squad):
        team, players, game = squad
        headers = coach_headers(team.id)
        available = [p.id for p in players if p.display_name != "Eve"]

        saved = client.put(
            f"/games/{game.id}/availability", json={"available_player_ids": available}, headers=headers
        )
        assert saved.status_code == 200
        assert saved.json()["is_set"] is True
        assert sorted(saved.json()["available_player_ids"]) == sorted(available)

        filled = client.post(f"/games/{game.id}/rosters/auto-fill", headers=headers).json()
        assert players[4].id not in {e["player_id"] for e in filled["entries"]}

    def test_empty_availability_blocks_auto_fill(self, client, squad):
        team, _, game = squad
        headers = coach_headers(team.id)
        client.put(f"/games/{game.id}/availability", json={"available_player_ids": []}, headers=headers)

        response = client.post(f"/games/{game.id}/rosters/auto-fill", headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No active players to assign"

    def test_single_player_update(self, client, squad):
        team, players, game = squad

        response = client.put(
            f"/games/{game.id}/availability/{players[2].id}",
            json={"is_available": False},
            headers=coach_headers(team.id)
        )

        assert response.status_code == 200
        assert players[2].id not in response.json()["available_player_ids"]

    def test_unavailable_player_cannot_take_a_slot(self, client, squad):
        team, players, game = squad
        headers = coach_headers(team.id)
        client.put(f"/games/{game.id}/availability/{players[0].id}", json={"is_available": False}, headers=headers)

        response = client.put(
            f"/games/{game.id}/rosters/slot",
            json={"quarter": 1, "position": "GS", "player_id": players[0].id},
            headers=headers
        )

        assert response.status_code == 400
        assert response.json()["type"] == "roster_error"

    def test_clear_availability(self, client, squad):
        team, players, game = squad
        headers = coach_headers(team.id)
        client.put(f"/games/{game.id}/availability", json={"available_player_ids": [players[0].id]}, headers=headers)

        response = client.delete(f"/games/{game.id}/availability", headers=headers)

        assert response.status_code == 200
        assert response.json()["deleted_entries"] == 8
        assert client.get(f"/games/{game.id}/availability").json()["is_set"] is False

    def test_requires_team_access(self, client, squad):
        team, players, game = squad
        payload = {"available_player_ids": [players[0].id]}

        assert client.put(f"/games/{game.id}/availability", json=payload).status_code == 401
        assert client.put(
            f"/games/{game.id}/availability", json=payload, headers=coach_headers(team.id + 1)
        ).status_code == 403

    def test_duplicate_ids_are_rejected(self, client, squad):
        team, players, game = squad
        response = client.put(
            f"/games/{game.id}/availability",
            json={"available_player_ids": [players[0].id, players[0].id]},
            headers=coach_headers(team.id)
        )
        assert response.status_code == 422

    def test_unknown_player_is_404(self, client, squad):
        team, _, game = squad
        response = client.put(
            f"/games/{game.id}/availability", json={"available_player_ids": [999]}, headers=coach_headers(team.id)
        )
        assert response.status_code == 404

    def test_unknown_game_is_404(self, client):
        assert client.get("/games/999/availability").status_code == 404

    def test_deleting_game_removes_availability(self, client, squad):
        team, players, game = squad
        headers = coach_headers(team.id)
        client.put(f"/games/{game.id}/availability", json={"available_player_ids": [players[0].id]}, headers=headers)

        assert client.delete(f"/games/{game.id}", headers=headers).status_code == 200
        assert client.get(f"/games/{game.id}/availability").status_code == 404
