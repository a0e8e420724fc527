"""
Playlist data model.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Iterable

from nhlstreams.stats_api.models import ScheduleGame
from nhlstreams.streaming.resolvers.base import ResolvedStream


@dataclass(frozen=True)
class GameRecord:
    """
    A scheduled game and the streams resolved for it.

    Attributes:
        home: Home team display name
        away: Away team display name
        start_time: Scheduled start, timezone-aware
        streams: Resolved streams, in no meaningful order
    """

    home: str
    away: str
    start_time: dt.datetime
    streams: tuple[ResolvedStream, ...] = field(default_factory=tuple)

    @classmethod
    def from_game(cls, game: ScheduleGame, streams: Iterable[ResolvedStream] = ()) -> "GameRecord":
        return cls(
            home=game.home_name,
            away=game.away_name,
            start_time=game.game_date,
            streams=tuple(streams),
        )
