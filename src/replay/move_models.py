"""
Decision-request ("move") format: the body a snake's server receives on POST /move, and the body it answers with.

These objects are never stored. They are rebuilt from a replay record whenever a turn needs to be replayed.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from src.core.shared_types import Direction


class MoveModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class MoveCoord(MoveModel):
    x: int
    y: int


class MoveRoyale(MoveModel):
    shrink_every_n_turns: int = 0


class MoveSquad(MoveModel):
    allow_body_collisions: bool = False
    shared_elimination: bool = False
    shared_health: bool = False
    shared_length: bool = False


class MoveSettings(MoveModel):
    food_spawn_chance: int = 0
    minimum_food: int = 0
    hazard_damage_per_turn: int = 0
    royale: MoveRoyale = Field(default_factory=MoveRoyale)
    squad: MoveSquad = Field(default_factory=MoveSquad)


class MoveRuleset(MoveModel):
    name: str = ""
    version: str = ""
    settings: MoveSettings = Field(default_factory=MoveSettings)


class MoveGame(MoveModel):
    id: str
    ruleset: MoveRuleset
    timeout: int


class MoveBattlesnake(MoveModel):
    id: str
    name: str
    health: int
    body: list[MoveCoord]
    head: MoveCoord
    length: int
    latency: str = ""
    shout: str = ""
    squad: str = ""


class MoveBoard(MoveModel):
    height: int
    width: int
    food: list[MoveCoord] = Field(default_factory=list)
    snakes: list[MoveBattlesnake] = Field(default_factory=list)
    hazards: list[MoveCoord] = Field(default_factory=list)


class MoveGameState(MoveModel):
    """Everything one snake gets to see on one turn. `you` is a copy of its own entry in board.snakes"""

    game: MoveGame
    turn: int
    board: MoveBoard
    you: MoveBattlesnake


class MoveBattlesnakeResponse(MoveModel):
    """What the snake's server answers with. An empty shout is left out of the JSON."""

    move: Direction
    shout: str = ""

    @model_serializer(mode="wrap")
    def _omit_empty_shout(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        if not self.shout:
            data.pop("shout", None)
        return data
