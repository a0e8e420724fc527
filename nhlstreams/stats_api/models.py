"""
Stats API response models.

Only the fields needed to build a playlist are modelled; everything else in
the payloads is ignored.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ApiModel(BaseModel):
    """Base for camelCase API payloads."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class TeamDetail(_ApiModel):
    id: Optional[int] = None
    name: str


class ScheduleTeam(_ApiModel):
    team: TeamDetail


class ScheduleTeams(_ApiModel):
    home: ScheduleTeam
    away: ScheduleTeam


class ScheduleGame(_ApiModel):
    """A game on the day's schedule."""

    game_pk: int = Field(alias="gamePk")
    game_date: dt.datetime = Field(alias="gameDate")
    teams: ScheduleTeams

    @field_validator("game_date")
    @classmethod
    def _require_timezone(cls, value: dt.datetime) -> dt.datetime:
        if value.tzinfo is None:
            raise ValueError("gameDate must carry a timezone")
        return value

    @property
    def home_name(self) -> str:
        return self.teams.home.team.name

    @property
    def away_name(self) -> str:
        return self.teams.away.team.name


class Schedule(_ApiModel):
    """One day of the schedule."""

    date: dt.date
    games: list[ScheduleGame] = Field(default_factory=list)


class EpgItem(_ApiModel):
    """A single broadcast feed."""

    media_feed_type: str = Field(alias="mediaFeedType")
    media_playback_id: str = Field(alias="mediaPlaybackId")

    @field_validator("media_playback_id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # The API sends numeric ids for some feeds
        return str(value) if isinstance(value, int) else value


class Epg(_ApiModel):
    """A broadcast category (NHLTV, Audio, Extended Highlights, ...)."""

    title: str
    items: Optional[list[EpgItem]] = None


class GameMedia(_ApiModel):
    epg: list[Epg] = Field(default_factory=list)


class GameContent(_ApiModel):
    """Media content for one game."""

    media: GameMedia = Field(default_factory=GameMedia)

    def feeds_for(self, category: str) -> list[EpgItem]:
        """Feed items under the EPG entries titled exactly ``category``."""
        items: list[EpgItem] = []
        for epg in self.media.epg:
            if epg.title == category and epg.items:
                items.extend(epg.items)
        return items
