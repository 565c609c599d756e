"""
Games API module for looking up a game by SteamGridDB id or Steam app id.
"""
from typing import TYPE_CHECKING, Any

from sgdb.enums import GameIdType, coerce

if TYPE_CHECKING:
    from sgdb.client import SGDB


class GamesAPI:
    """Game endpoints."""

    def __init__(self, client: "SGDB"):
        self.client = client

    def get(self, type: GameIdType | str, id: int | str) -> Any:
        """Fetch a game (GET /games/{type}/{id}). Returns the 'data' object."""
        id_type = coerce(GameIdType, type, 'Invalid ID type. Must be "id" or "steam".')
        return self.client.http.get_json(f"/games/{id_type.value}/{id}").data

    def get_by_id(self, id: int | str) -> Any:
        """Fetch a game by SteamGridDB id (GET /games/id/{id})."""
        return self.get(GameIdType.ID, id)

    def get_by_steam_app_id(self, id: int | str) -> Any:
        """Fetch a game by Steam app id (GET /games/steam/{id})."""
        return self.get(GameIdType.STEAM, id)
