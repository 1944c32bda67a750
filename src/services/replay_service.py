"""Orchestration of communication from API router to the replay translation and persistence layers (and the reverse direction)."""

import logging

from sqlalchemy.orm import Session

from src.api.models import (
    DeleteReplayRequest,
    GetReplayRequest,
    MoveStateRequest,
    ReplaySummary,
    StoreReplayRequest,
)
from src.core.config import Settings, get_settings
from src.core.exceptions import RepositoryError
from src.core.shared_types import FINISHED_STATUSES
from src.db.repository import ReplayRepository
from src.db.sql_repository import SQLReplayRepository
from src.replay.move_models import MoveGameState
from src.replay.translator import to_move
from src.replay.view_models import ViewGame

logger = logging.getLogger(__name__)


class ReplayService:
    """Orchestration of layers for archived games."""

    def __init__(
        self, repository: ReplayRepository, strict_turns: bool = False
    ) -> None:
        self.repo = repository
        self.strict_turns = strict_turns

    # -- API routes logic ---
    def store_replay(self, request: StoreReplayRequest) -> ReplaySummary:
        """A finished (or running) game was fetched from the engine and should be archived."""
        stored = self.repo.save_replay(request.record)
        logger.info(
            "Stored replay of game %s (%d frames)", stored.game.id, len(stored.frames)
        )
        return self._create_summary(stored)

    def get_replay(self, request: GetReplayRequest) -> ReplaySummary:
        record = self._fetch_replay(request.game_id)
        return self._create_summary(record)

    def move_state(self, request: MoveStateRequest) -> MoveGameState:
        """
        The request the given snake received on the given turn.
        ----
        Used by the replay driver to feed a snake server the exact same input it got during the live game.
        """
        record = self._fetch_replay(request.game_id)
        return to_move(
            record, request.turn, request.snake_id, strict_turns=self.strict_turns
        )

    def list_replays(self) -> list[str]:
        return self.repo.list_replay_ids()

    def delete_replay(self, request: DeleteReplayRequest) -> None:
        """Handle a request to delete a replay."""
        deleted = self.repo.delete_replay(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Replay with {request.game_id=} not found.")
        logger.info("Deleted replay of game %s", request.game_id)

    # -- Internal helpers --
    def _create_summary(self, record: ViewGame) -> ReplaySummary:
        # The first frame holds every snake that entered the game.
        first_frame = record.frames[0] if record.frames else record.first_frame
        return ReplaySummary(
            game_id=record.game.id,
            status=record.game.status,
            finished=record.game.status in FINISHED_STATUSES,
            width=record.game.width,
            height=record.game.height,
            frame_count=len(record.frames),
            last_turn=record.last_turn,
            snake_ids=[snake.id for snake in first_frame.snakes],
        )

    def _fetch_replay(self, game_id: str) -> ViewGame:
        """Attempt to find the replay in the repository and raise error if it fails."""
        record = self.repo.get_replay(game_id)
        if record is None:
            raise RepositoryError(f"Replay with {game_id=} not found.")
        return record


def create_replay_service(
    db_session: Session, settings: Settings | None = None
) -> ReplayService:
    """Wire the service to the SQL repository using the configured settings."""
    settings = settings or get_settings()
    repository = SQLReplayRepository(db_session, settings.archive_compresslevel)
    return ReplayService(repository, strict_turns=settings.strict_turns)
