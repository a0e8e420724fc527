"""
Stats API client and response models.
"""

from nhlstreams.stats_api.client import StatsApiClient
from nhlstreams.stats_api.models import (
    Epg,
    EpgItem,
    GameContent,
    Schedule,
    ScheduleGame,
)

__all__ = [
    "StatsApiClient",
    "Epg",
    "EpgItem",
    "GameContent",
    "Schedule",
    "ScheduleGame",
]
