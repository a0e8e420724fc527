"""
Test Data Factories

Factory classes for generating test data.
"""

import random
import string
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from nhlstreams.models import GameRecord
from nhlstreams.stats_api.models import EpgItem
from nhlstreams.streaming.resolvers.base import ResolvedStream


class BaseFactory:
    """Base factory class."""

    _counter = 0

    @classmethod
    def _next_id(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def _random_string(cls, length: int = 8) -> str:
        return ''.join(random.choices(string.ascii_letters, k=length))


class EpgItemFactory(BaseFactory):
    """Factory for broadcast feed items."""

    @classmethod
    def create(
        cls,
        feed_type: str = "HOME",
        playback_id: Optional[str] = None,
    ) -> EpgItem:
        return EpgItem(
            media_feed_type=feed_type,
            media_playback_id=playback_id or str(68810000 + cls._next_id()),
        )

    @classmethod
    def create_batch(cls, feed_types: List[str]) -> List[EpgItem]:
        return [cls.create(feed_type=feed_type) for feed_type in feed_types]


class GameRecordFactory(BaseFactory):
    """Factory for GameRecord instances."""

    @classmethod
    def create(
        cls,
        home: str = "New York Rangers",
        away: str = "Boston Bruins",
        start_time: Optional[datetime] = None,
        feeds: Optional[List[str]] = None,
    ) -> GameRecord:
        """Create a GameRecord with one stream per feed type in ``feeds``."""
        start_time = start_time or datetime(2019, 10, 10, 23, 0, tzinfo=timezone.utc)
        streams = tuple(
            ResolvedStream(
                feed_type=feed_type,
                url=f"https://cdn.example.test/{cls._random_string()}/{feed_type.lower()}.m3u8",
            )
            for feed_type in (feeds or [])
        )
        return GameRecord(home=home, away=away, start_time=start_time, streams=streams)

    @classmethod
    def create_slate(cls, count: int, feeds: Optional[List[str]] = None) -> List[GameRecord]:
        """Create ``count`` games starting an hour apart."""
        first = datetime(2019, 10, 10, 23, 0, tzinfo=timezone.utc)
        return [
            cls.create(
                home=f"Home {i}",
                away=f"Away {i}",
                start_time=first + timedelta(hours=i),
                feeds=feeds,
            )
            for i in range(count)
        ]
