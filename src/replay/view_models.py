"""
Archival ("view") format of a game replay, as served by the game engine at /games/{id} and /games/{id}/frames.

Wire names are the engine's (capitalised keys, except inside the ruleset). Python attributes use snake_case.
Missing keys take zero values and `null` lists become empty lists, so a record read from the engine
always has every field populated.
"""

import re
from typing import Annotated, Any, Iterable, Self

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationInfo,
)

_INTEGER_STRING = re.compile(r"-?[0-9]+")


def _int_from_string(value: Any, info: ValidationInfo) -> Any:
    """Ruleset numbers are stored as JSON strings ("25"). Python callers may still pass plain ints."""
    if isinstance(value, str):
        if not _INTEGER_STRING.fullmatch(value):
            raise ValueError(f"expected an integer encoded as string, got {value!r}")
        return int(value)
    if info.mode == "json" or isinstance(value, bool):
        raise ValueError(f"expected an integer encoded as string, got {value!r}")
    return value


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


# Integer that travels as a string of digits. Only attached to the ruleset fields that the engine encodes this way.
# The engine stores them as 32-bit integers.
StringInt = Annotated[
    int,
    Field(ge=-(2**31), le=2**31 - 1),
    BeforeValidator(_int_from_string),
    PlainSerializer(str, return_type=str),
]


class ViewModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class ViewCoord(ViewModel):
    x: int = Field(default=0, alias="X")
    y: int = Field(default=0, alias="Y")


CoordList = Annotated[list[ViewCoord], BeforeValidator(_none_as_empty)]


class ViewDeath(ViewModel):
    cause: str = Field(default="", alias="Cause")
    turn: int = Field(default=0, alias="Turn")
    eliminated_by: str = Field(default="", alias="EliminatedBy")


class ViewSnake(ViewModel):
    id: str = Field(default="", alias="ID")
    name: str = Field(default="", alias="Name")
    url: str = Field(default="", alias="URL")
    body: CoordList = Field(default_factory=list, alias="Body")
    health: int = Field(default=0, alias="Health")
    color: str = Field(default="", alias="Color")
    head_type: str = Field(default="", alias="HeadType")
    tail_type: str = Field(default="", alias="TailType")
    latency: str = Field(default="", alias="Latency")
    shout: str = Field(default="", alias="Shout")
    squad: str = Field(default="", alias="Squad")
    api_version: str = Field(default="", alias="APIVersion")
    author: str = Field(default="", alias="Author")
    death: ViewDeath = Field(default_factory=ViewDeath, alias="Death")


SnakeList = Annotated[list[ViewSnake], BeforeValidator(_none_as_empty)]


class ViewFrame(ViewModel):
    turn: int = Field(default=0, alias="Turn")
    snakes: SnakeList = Field(default_factory=list, alias="Snakes")
    food: CoordList = Field(default_factory=list, alias="Food")
    hazards: CoordList = Field(default_factory=list, alias="Hazards")


FrameList = Annotated[list[ViewFrame], BeforeValidator(_none_as_empty)]


class ViewRuleset(ViewModel):
    """NOTE: foodSpawnChance, minimumFood and damagePerTurn are strings on the wire. Keep it that way, the engine expects it."""

    food_spawn_chance: StringInt = Field(default=0, alias="foodSpawnChance")
    minimum_food: StringInt = Field(default=0, alias="minimumFood")
    name: str = Field(default="", alias="name")
    map: str = Field(default="", alias="map")
    map_author: str = Field(default="", alias="map_author")
    damage_per_turn: StringInt = Field(default=0, alias="damagePerTurn")


class ViewGameSettings(ViewModel):
    id: str = Field(default="", alias="ID")
    ruleset: ViewRuleset = Field(default_factory=ViewRuleset, alias="Ruleset")
    timeout: int = Field(default=0, alias="SnakeTimeout")
    status: str = Field(default="", alias="Status")
    width: int = Field(default=0, alias="Width")
    height: int = Field(default=0, alias="Height")


class ViewTurn(ViewModel):
    """One page of frames returned by the engine's frames endpoint."""

    frames: FrameList = Field(default_factory=list, alias="Frames")
    count: int = Field(default=0, alias="Count")


class ViewGameResponse(ViewModel):
    """Body of the engine's game endpoint. The engine also sends LastFrame, which is ignored."""

    game: ViewGameSettings = Field(default_factory=ViewGameSettings, alias="Game")


class ViewGame(ViewModel):
    """The full replay record: game settings + one frame per turn."""

    game: ViewGameSettings = Field(default_factory=ViewGameSettings, alias="Game")
    frames: FrameList = Field(default_factory=list, alias="Frames")
    first_frame: ViewFrame = Field(default_factory=ViewFrame, alias="FirstFrame")
    last_turn: int = Field(default=0, alias="LastTurn")

    @classmethod
    def from_engine(cls, response: ViewGameResponse, turns: Iterable[ViewTurn]) -> Self:
        """Stitch the game endpoint body and the pages of frames (in the order they were fetched) into one record."""
        frames = [frame for page in turns for frame in page.frames]
        return cls(
            game=response.game,
            frames=frames,
            first_frame=frames[0] if frames else ViewFrame(),
            last_turn=frames[-1].turn if frames else 0,
        )
