"""
API Client module providing centralized access to SteamGridDB API endpoints.
Orchestrates sub-API modules for games, grids and search, and exposes each operation directly.
"""
import logging
from collections.abc import Iterable
from typing import IO, Any

import requests

from sgdb.config import DEFAULT_BASE_URL, ClientConfig
from sgdb.enums import GameIdType, GridIdType, VoteDirection
from sgdb.games import GamesAPI
from sgdb.grids import GridsAPI
from sgdb.handle_requests import RequestHandler
from sgdb.search import SearchAPI

logger = logging.getLogger(__name__)


class SGDB:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(
        self,
        key: str | None = None,
        headers: dict[str, str] | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.config = ClientConfig(key=key, headers=dict(headers or {}), base_url=base_url, timeout=timeout)
        if not self.config.key:
            logger.warning("API key not provided, some methods won't work.")

        self.http = RequestHandler(
            self.config.base_url,
            headers=self.config.build_headers(),
            timeout=self.config.timeout,
            session=session,
        )
        self.games = GamesAPI(self)
        self.grids = GridsAPI(self)
        self.search = SearchAPI(self)

    @classmethod
    def from_config(cls, config: ClientConfig, session: requests.Session | None = None) -> "SGDB":
        return cls(
            key=config.key,
            headers=config.headers,
            base_url=config.base_url,
            timeout=config.timeout,
            session=session,
        )

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "SGDB":
        """Build a client from SGDB_* environment variables (and an optional .env file)."""
        return cls.from_config(ClientConfig.from_env(env_file))

    @property
    def key(self) -> str | None:
        return self.config.key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self.http.headers)

    def close(self):
        self.http.close()

    def __enter__(self) -> "SGDB":
        return self

    def __exit__(self, *exc):
        self.close()

    # games

    def get_game(self, type: GameIdType | str, id: int | str) -> Any:
        """Fetch a game (GET /games/{type}/{id})."""
        return self.games.get(type, id)

    def get_game_by_id(self, id: int | str) -> Any:
        """Fetch a game by SteamGridDB id (GET /games/id/{id})."""
        return self.games.get_by_id(id)

    def get_game_by_steam_app_id(self, id: int | str) -> Any:
        """Fetch a game by Steam app id (GET /games/steam/{id})."""
        return self.games.get_by_steam_app_id(id)

    # grids

    def get_grids(self, type: GridIdType | str, id: int | str, styles: Iterable[str] | None = None) -> Any:
        """Fetch grids for a game (GET /grids/{type}/{id})."""
        return self.grids.get(type, id, styles)

    def get_grids_by_id(self, id: int | str, styles: Iterable[str] | None = None) -> Any:
        """Fetch grids by SteamGridDB game id (GET /grids/game/{id})."""
        return self.grids.get_by_id(id, styles)

    def get_grids_by_steam_app_id(self, id: int | str, styles: Iterable[str] | None = None) -> Any:
        """Fetch grids by Steam app id (GET /grids/steam/{id})."""
        return self.grids.get_by_steam_app_id(id, styles)

    def vote_grid(self, direction: VoteDirection | str, id: int | str) -> bool:
        """Vote on a grid (POST /grids/vote/{direction}/{id})."""
        return self.grids.vote(direction, id)

    def upvote_grid(self, id: int | str) -> bool:
        """Upvote a grid (POST /grids/vote/up/{id})."""
        return self.grids.upvote(id)

    def downvote_grid(self, id: int | str) -> bool:
        """Downvote a grid (POST /grids/vote/down/{id})."""
        return self.grids.downvote(id)

    def upload_grid(self, game_id: int | str, style: str, grid: bytes | IO[bytes]) -> bool:
        """Upload a grid image (POST /grids)."""
        return self.grids.upload(game_id, style, grid)

    def delete_grids(self, ids: int | str | Iterable[int | str]) -> bool:
        """Delete one or more grids (DELETE /grids/{id,id,...})."""
        return self.grids.delete(ids)

    # search

    def search_game(self, term: str) -> Any:
        """Autocomplete game names (GET /search/autocomplete/{term})."""
        return self.search.autocomplete(term)
