"""Song catalogue and the song list of a worship service."""

from uuid import UUID, uuid4

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class Song(SQLModel, table=True):
    __tablename__ = "songs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    tags: list[str] = Field(default_factory=list, sa_column=sa.Column(sa.JSON, nullable=False))
    youtube_url: str | None = Field(default=None, max_length=500)
    spotify_url: str | None = Field(default=None, max_length=500)


class ServiceSongItem(SQLModel, table=True):
    """Ordered song entry of a worship service."""

    __tablename__ = "service_song_items"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    service_id: UUID = Field(index=True)
    song_id: UUID | None = Field(default=None, foreign_key="songs.id", ondelete="SET NULL")
    display_order: int = Field(default=0)
