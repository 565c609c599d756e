"""
Grids API module for listing, voting on, uploading and deleting grid images.
"""
from collections.abc import Iterable
from typing import IO, TYPE_CHECKING, Any

from sgdb.enums import GridIdType, VoteDirection, coerce
from sgdb.errors import InvalidArgumentError

if TYPE_CHECKING:
    from sgdb.client import SGDB


class GridsAPI:
    """Grid endpoints."""

    def __init__(self, client: "SGDB"):
        self.client = client

    def get(self, type: GridIdType | str, id: int | str, styles: Iterable[str] | None = None) -> Any:
        """
        Fetch grids for a game.
        GET /grids/{type}/{id}?styles=a,b
        Returns the 'data' array from the response.
        """
        id_type = coerce(GridIdType, type, 'Invalid ID type. Must be "game" or "steam".')
        params = None
        if styles is not None:
            if isinstance(styles, str):
                raise InvalidArgumentError("styles must be a sequence of style names, not a string.")
            params = {"styles": ",".join(str(s) for s in styles)}
        return self.client.http.get_json(f"/grids/{id_type.value}/{id}", params=params).data

    def get_by_id(self, id: int | str, styles: Iterable[str] | None = None) -> Any:
        """Fetch grids by SteamGridDB game id (GET /grids/game/{id})."""
        return self.get(GridIdType.GAME, id, styles)

    def get_by_steam_app_id(self, id: int | str, styles: Iterable[str] | None = None) -> Any:
        """Fetch grids by Steam app id (GET /grids/steam/{id})."""
        return self.get(GridIdType.STEAM, id, styles)

    def vote(self, direction: VoteDirection | str, id: int | str) -> bool:
        """Vote on a grid (POST /grids/vote/{direction}/{id})."""
        vote_dir = coerce(VoteDirection, direction, 'Invalid direction parameter. Can only vote "up" or "down".')
        self.client.http.post_json(f"/grids/vote/{vote_dir.value}/{id}")
        return True

    def upvote(self, id: int | str) -> bool:
        """Upvote a grid (POST /grids/vote/up/{id})."""
        return self.vote(VoteDirection.UP, id)

    def downvote(self, id: int | str) -> bool:
        """Downvote a grid (POST /grids/vote/down/{id})."""
        return self.vote(VoteDirection.DOWN, id)

    def upload(self, game_id: int | str, style: str, grid: bytes | IO[bytes]) -> bool:
        """Upload a grid image as multipart form data (POST /grids)."""
        body = {"game_id": game_id, "style": style}
        self.client.http.post_json("/grids", data=body, files={"grid": grid})
        return True

    def delete(self, ids: int | str | Iterable[int | str]) -> bool:
        """Delete one or more grids (DELETE /grids/{id,id,...})."""
        members = [ids] if isinstance(ids, (int, str)) else list(ids)
        parts = [str(i).strip() for i in members]
        if not parts:
            raise InvalidArgumentError("At least one grid id is required.")
        if not all(parts):
            raise InvalidArgumentError("Grid ids must not be blank.")
        grid_ids = ",".join(parts)
        self.client.http.delete_json(f"/grids/{grid_ids}")
        return True
