from sgdb.client import SGDB
from sgdb.config import DEFAULT_BASE_URL, ClientConfig
from sgdb.enums import GameIdType, GridIdType, VoteDirection
from sgdb.errors import ApiError, InvalidArgumentError, MalformedResponseError, SGDBError, TransportError
from sgdb.models import Envelope

__all__ = [
    "SGDB",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "GameIdType",
    "GridIdType",
    "VoteDirection",
    "Envelope",
    "SGDBError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "ApiError",
    "TransportError",
]
