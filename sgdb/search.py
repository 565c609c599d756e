"""
Search API module for game name autocomplete.
"""
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from sgdb.client import SGDB

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_UNRESERVED = "!*'()"


class SearchAPI:
    """Search endpoints."""

    def __init__(self, client: "SGDB"):
        self.client = client

    def autocomplete(self, term: str) -> Any:
        """
        Search games by name.
        GET /search/autocomplete/{term}
        Returns the 'data' array from the response.
        """
        return self.client.http.get_json(f"/search/autocomplete/{quote(str(term), safe=_UNRESERVED)}").data
