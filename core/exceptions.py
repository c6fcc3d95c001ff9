from fastapi import HTTPException, status


class RosterException(HTTPException):
    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class TeamNotFound(RosterException):
    def __init__(self):
        super().__init__("Team not found", status.HTTP_404_NOT_FOUND)


class PlayerNotFound(RosterException):
    def __init__(self):
        super().__init__("Player not found", status.HTTP_404_NOT_FOUND)


class GameNotFound(RosterException):
    def __init__(self):
        super().__init__("Game not found", status.HTTP_404_NOT_FOUND)


class RosterEntryNotFound(RosterException):
    def __init__(self, quarter: int, position: str):
        super().__init__(
            f"No player assigned to {position} in quarter {quarter}",
            status.HTTP_404_NOT_FOUND
        )


class NoPlayersAvailable(RosterException):
    def __init__(self):
        super().__init__("No active players to assign")


class PlayerAlreadyInQuarter(RosterException):
    def __init__(self, player_id: int, quarter: int, position: str):
        super().__init__(
            f"Player {player_id} already plays {position} in quarter {quarter}",
            status.HTTP_409_CONFLICT
        )


class PlayerNotOnTeam(RosterException):
    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} is not on this team")


class PlayerNotAvailable(RosterException):
    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} is not available for this game")


class InvalidQuarterCopy(RosterException):
    def __init__(self, reason: str = "source and target quarter must differ"):
        super().__init__(f"Cannot copy quarter: {reason}")
