"""
Client configuration and environment loading.
"""
import os
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "https://www.steamgriddb.com/api/v2"


@dataclass
class ClientConfig:
    key: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    base_url: str = DEFAULT_BASE_URL
    # None leaves the transport default in place
    timeout: float | None = None

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "ClientConfig":
        """
        Build a config from SGDB_API_KEY, SGDB_BASE_URL and SGDB_TIMEOUT.
        Values from a .env file (env_file, or the nearest one above the working directory)
        are loaded first but never override the real environment.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))
        timeout_raw = os.getenv("SGDB_TIMEOUT")
        return cls(
            key=os.getenv("SGDB_API_KEY") or None,
            base_url=os.getenv("SGDB_BASE_URL") or DEFAULT_BASE_URL,
            timeout=float(timeout_raw) if timeout_raw else None,
        )

    def build_headers(self) -> dict[str, str]:
        """Caller headers first, then the bearer token so the key always wins."""
        headers = dict(self.headers)
        if self.key:
            headers["Authorization"] = f"Bearer {self.key}"
        return headers
