"""Coordinates are the same (x, y) pair in both formats, only the key names differ ("X" vs "x")."""

from typing import Sequence

from src.replay.move_models import MoveCoord
from src.replay.view_models import ViewCoord


def convert_coord(coord: ViewCoord) -> MoveCoord:
    return MoveCoord(x=coord.x, y=coord.y)


def convert_coords(coords: Sequence[ViewCoord]) -> list[MoveCoord]:
    """Keeps the order (for a snake body: head first)."""
    return [convert_coord(coord) for coord in coords]
