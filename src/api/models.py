"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.replay.view_models import ViewGame


# --- REQUEST MODELS ---
class StoreReplayRequest(BaseModel):
    record: ViewGame

    @field_validator("record")
    @classmethod
    def validate_record_has_id(cls, value: ViewGame) -> ViewGame:
        # the game ID is the storage key
        if not value.game.id:
            raise InvalidRequestError("Cannot store a replay without a game ID.")
        return value


class MoveStateRequest(BaseModel):
    game_id: str
    turn: int
    snake_id: str

    @field_validator(*["game_id", "snake_id"])
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Identifiers cannot be empty.")
        return value


class GetReplayRequest(BaseModel):
    game_id: str


class DeleteReplayRequest(BaseModel):
    game_id: str


# --- RESPONSE MODELS ---
class ReplaySummary(BaseModel):
    game_id: str
    status: str
    finished: bool
    width: int
    height: int
    frame_count: int
    last_turn: int
    snake_ids: list[str]
