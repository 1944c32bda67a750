"""Implementation of (Replay)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.schema import DBReplay
from src.replay.archive import DEFAULT_COMPRESSLEVEL, decode, encode
from src.replay.view_models import ViewGame

logger = logging.getLogger(__name__)


class SQLReplayRepository:
    """Replays stored as compressed archives in a single table / methods implemented using SQLAlchemy"""

    def __init__(
        self, db_session: Session, compresslevel: int = DEFAULT_COMPRESSLEVEL
    ) -> None:
        self.db = db_session
        self.compresslevel = compresslevel

    def get_replay(self, game_id: str) -> ViewGame | None:
        """Get replay by game ID, if record exists."""
        replay_db = self._fetch_replay(game_id)
        if replay_db:
            return decode(replay_db.archive)
        return None

    def save_replay(self, record: ViewGame) -> ViewGame:
        """Store a replay, replacing an earlier copy of the same game."""
        archive = encode(record, self.compresslevel)
        replay_db = self._fetch_replay(record.game.id)
        if replay_db is None:
            replay_db = DBReplay(id=record.game.id)
            self.db.add(replay_db)
        replay_db.status = record.game.status
        replay_db.last_turn = record.last_turn
        replay_db.archive = archive
        self.db.commit()
        self.db.refresh(replay_db)
        logger.debug("Stored game %s (%d bytes)", record.game.id, len(archive))
        return decode(replay_db.archive)

    def delete_replay(self, game_id: str) -> ViewGame | None:
        """Remove a replay's record."""
        replay_db = self._fetch_replay(game_id)
        if not replay_db:
            return None
        record = decode(replay_db.archive)
        self.db.delete(replay_db)
        self.db.commit()
        return record

    def list_replay_ids(self) -> list[str]:
        query = select(DBReplay.id).order_by(DBReplay.created_at, DBReplay.id)
        return list(self.db.scalars(query))

    def _fetch_replay(self, game_id: str) -> DBReplay | None:
        query = select(DBReplay).where(DBReplay.id == game_id)
        return self.db.scalar(query)
