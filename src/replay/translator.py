"""
Rebuild the request a snake received on a given turn from the replay record.

The replay holds every snake's state per turn, so the request for one snake is the frame seen "through its eyes":
the same board for everyone, with its own entry repeated as `you`.
"""

import logging

from src.core.exceptions import InvalidFrameError, SnakeNotFoundError
from src.replay.coords import convert_coord, convert_coords
from src.replay.frames import locate_frame
from src.replay.move_models import (
    MoveBattlesnake,
    MoveBoard,
    MoveGame,
    MoveGameState,
    MoveRuleset,
    MoveSettings,
)
from src.replay.view_models import ViewFrame, ViewGame, ViewGameSettings, ViewSnake

logger = logging.getLogger(__name__)


def to_move(
    record: ViewGame, turn: int, snake_id: str, *, strict_turns: bool = False
) -> MoveGameState:
    """Request sent to snake `snake_id` on `turn`."""
    frame = locate_frame(record.frames, turn, strict=strict_turns)
    snakes = [to_move_snake(snake) for snake in frame.snakes]

    you = next((snake for snake in snakes if snake.id == snake_id), None)
    if you is None:
        raise SnakeNotFoundError(f"no snake ID found matching {snake_id}")

    return _build_state(record.game, frame, turn, snakes, you)


def to_moves(
    record: ViewGame, turn: int, *, strict_turns: bool = False
) -> dict[str, MoveGameState]:
    """Requests for every snake on the board at `turn`, keyed by snake ID (in board order)."""
    frame = locate_frame(record.frames, turn, strict=strict_turns)
    snakes = [to_move_snake(snake) for snake in frame.snakes]
    return {
        snake.id: _build_state(record.game, frame, turn, snakes, snake)
        for snake in snakes
    }


def to_move_snake(snake: ViewSnake) -> MoveBattlesnake:
    if not snake.body:
        raise InvalidFrameError(f"empty snake body (snake ID {snake.id})")

    return MoveBattlesnake(
        id=snake.id,
        name=snake.name,
        health=snake.health,
        body=convert_coords(snake.body),
        # body is stored head first
        head=convert_coord(snake.body[0]),
        length=len(snake.body),
        latency=snake.latency,
        shout=snake.shout,
        squad=snake.squad,
    )


def _build_state(
    settings: ViewGameSettings,
    frame: ViewFrame,
    turn: int,
    snakes: list[MoveBattlesnake],
    you: MoveBattlesnake,
) -> MoveGameState:
    logger.debug(
        "Translating turn %d of game %s for snake %s", turn, settings.id, you.id
    )
    # Royale and squad settings are not part of the replay, so they keep their defaults.
    game = MoveGame(
        id=settings.id,
        ruleset=MoveRuleset(
            name=settings.ruleset.name,
            settings=MoveSettings(
                food_spawn_chance=settings.ruleset.food_spawn_chance,
                minimum_food=settings.ruleset.minimum_food,
                hazard_damage_per_turn=settings.ruleset.damage_per_turn,
            ),
        ),
        timeout=settings.timeout,
    )
    board = MoveBoard(
        height=settings.height,
        width=settings.width,
        food=convert_coords(frame.food),
        snakes=list(snakes),
        hazards=convert_coords(frame.hazards),
    )
    return MoveGameState(game=game, turn=turn, board=board, you=you)
