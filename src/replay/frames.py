"""Look up the frame that belongs to a turn."""

from typing import Sequence

from src.core.exceptions import InvalidFrameError, TurnOutOfRangeError
from src.replay.view_models import ViewFrame


def locate_frame(
    frames: Sequence[ViewFrame], turn: int, *, strict: bool = False
) -> ViewFrame:
    """
    Frames are recorded one per turn, starting at turn 0, so frames[turn] is the frame for `turn`.

    ---
    NOTE: the frame's own Turn field is only checked with strict=True. Replays with missing frames would otherwise
    silently return a later turn.
    """
    if not 0 <= turn < len(frames):
        raise TurnOutOfRangeError(f"no frame found for turn {turn}")

    frame = frames[turn]
    if strict and frame.turn != turn:
        raise InvalidFrameError(
            f"frame at position {turn} is recorded as turn {frame.turn}"
        )
    return frame
