"""
HTTP request handler that executes one call per operation and unwraps the SteamGridDB envelope.
Failures are mapped onto sgdb.errors; transport exceptions from requests pass through untouched.
"""
import logging
from typing import Any

import requests

from sgdb.errors import ApiError, MalformedResponseError
from sgdb.models import Envelope

logger = logging.getLogger(__name__)


class RequestHandler:
    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self):
        self.session.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        data: dict | None = None,
        files: dict | None = None,
    ) -> Envelope:
        """
        Perform a single request against base_url + path.
          - body is not a JSON object -> MalformedResponseError
          - success is false          -> ApiError with the server's messages
          - otherwise returns the parsed Envelope
        """
        url = f"{self.base_url}{path}"
        resp = self.session.request(
            method,
            url,
            headers=self.headers,
            params=params,
            data=data,
            files=files,
            timeout=self.timeout,
        )
        logger.debug(f"{method} {url} -> {resp.status_code}")
        return self._parse_envelope(resp)

    def _parse_envelope(self, resp: requests.Response) -> Envelope:
        try:
            payload: Any = resp.json()
        except ValueError as e:
            raise MalformedResponseError(status_code=resp.status_code) from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(payload).__name__}.",
                status_code=resp.status_code,
            )

        envelope = Envelope.from_payload(payload)
        if not envelope.success:
            logger.debug(f"API failure ({resp.status_code}): {envelope.errors}")
            raise ApiError(envelope.errors, status_code=resp.status_code)
        return envelope

    def get_json(self, path: str, params: dict | None = None) -> Envelope:
        return self.request("GET", path, params=params)

    def post_json(self, path: str, data: dict | None = None, files: dict | None = None) -> Envelope:
        return self.request("POST", path, data=data, files=files)

    def delete_json(self, path: str) -> Envelope:
        return self.request("DELETE", path)
