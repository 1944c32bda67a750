"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import LargeBinary
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBReplay(Base):
    """One archived game. The record itself lives in `archive` (see src/replay/archive.py), the rest is for lookups."""

    __tablename__ = "replays"
    id: Mapped[str] = mapped_column(primary_key=True)
    status: Mapped[str]
    last_turn: Mapped[int]
    archive: Mapped[bytes] = mapped_column(LargeBinary)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
