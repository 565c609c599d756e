import json
from unittest.mock import Mock

import pytest
import requests

from sgdb import SGDB


def make_response(body, status_code: int = 200) -> requests.Response:
    """Build a real Response carrying body (dict/list are JSON-encoded, str/bytes sent raw)."""
    resp = requests.Response()
    resp.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp._content = body
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response({"success": True, "data": None})
    return session


@pytest.fixture
def client(session):
    return SGDB("test-key", session=session)


def sent(session) -> tuple[str, str, dict]:
    """Method, URL and keyword arguments of the last request."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs
