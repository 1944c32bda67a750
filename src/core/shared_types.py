"""
Type definitions used across layers
"""

from enum import StrEnum


class Direction(StrEnum):
    """The moves a snake can answer with."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class GameStatus(StrEnum):
    """Statuses reported by the game engine.

    NOTE: the replay record keeps the status as a free string, engines are allowed to add new ones.
    """

    RUNNING = "running"
    COMPLETE = "complete"
    ERROR = "error"


# No more frames will be added to a game in one of these states.
FINISHED_STATUSES = (GameStatus.COMPLETE, GameStatus.ERROR)
