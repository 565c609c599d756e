from enum import Enum

from sgdb.errors import InvalidArgumentError


class GameIdType(str, Enum):
    ID = "id"
    STEAM = "steam"


class GridIdType(str, Enum):
    GAME = "game"
    STEAM = "steam"


class VoteDirection(str, Enum):
    UP = "up"
    DOWN = "down"


def coerce(enum_cls: type[Enum], value, message: str):
    """Return the enum member for value, or raise InvalidArgumentError with message."""
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidArgumentError(message) from None
