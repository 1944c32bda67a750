"""Protocol repository (SQLAlchemy implementation in sql_repository.py, tests use a dictionary)"""

from typing import Protocol

from src.replay.view_models import ViewGame


class ReplayRepository(Protocol):
    """Persistence layer orchestration. Replays are keyed by their game ID."""

    def get_replay(self, game_id: str) -> ViewGame | None:
        """Get replay by game ID, if record exists."""
        ...

    def save_replay(self, record: ViewGame) -> ViewGame:
        """Store a replay, replacing an earlier copy of the same game."""
        ...

    def delete_replay(self, game_id: str) -> ViewGame | None:
        """Remove a replay's record."""
        ...

    def list_replay_ids(self) -> list[str]:
        """IDs of every stored game."""
        ...
