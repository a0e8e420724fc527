"""
Schedule pipeline.

Walks the day's schedule one game at a time: fetch the game's media content,
keep the feeds of the broadcast category of interest, fan out probes for them
and collect a GameRecord. Schedule and content fetches must succeed; a single
failure aborts the run. Feed probes are best-effort.
"""

import datetime as dt
import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from nhlstreams.config import NHLStreamsConfig, get_config
from nhlstreams.errors import PlaylistPathError
from nhlstreams.models import GameRecord
from nhlstreams.playlist.serializer import (
    render_for_player,
    resolve_timezone,
    serialize,
    write_playlist,
)
from nhlstreams.stats_api.client import StatsApiClient
from nhlstreams.streaming.fanout import FeedFanOut
from nhlstreams.streaming.resolvers.probe import StreamResolver

logger = logging.getLogger(__name__)

PLAYLIST_EXTENSION = ".m3u"


def validate_playlist_path(path: Union[str, Path]) -> Path:
    """
    Check that the destination is an .m3u file.

    Raises:
        PlaylistPathError: For any other extension, or none
    """
    path = Path(path)
    if path.suffix != PLAYLIST_EXTENSION:
        raise PlaylistPathError("Playlist file extension must be '.m3u'")
    return path


class SchedulePipeline:
    """
    Builds game records for one day.

    Games are processed sequentially in schedule order; the feeds within a
    game are probed concurrently by the fan-out.
    """

    def __init__(
        self,
        stats_client: StatsApiClient,
        fanout: FeedFanOut,
        broadcast_category: str = "NHLTV",
    ):
        self.stats_client = stats_client
        self.fanout = fanout
        self.broadcast_category = broadcast_category

    async def build_game_records(self, date: dt.date) -> list[GameRecord]:
        """
        Build one GameRecord per scheduled game.

        Raises:
            StatsApiError: If the schedule or any game's content cannot be fetched
        """
        schedule = await self.stats_client.get_schedule_for(date)
        logger.info(f"{len(schedule.games)} games scheduled for {schedule.date.isoformat()}")

        records: list[GameRecord] = []
        for game in schedule.games:
            content = await self.stats_client.get_game_content(game.game_pk)

            feed_items = content.feeds_for(self.broadcast_category)
            streams = []
            if feed_items:
                # Probe with the schedule's own date, not the requested one
                streams = await self.fanout.resolve_all(schedule.date, feed_items)

            record = GameRecord.from_game(game, streams)
            logger.info(
                f"{record.away} @ {record.home}: {len(record.streams)}/{len(feed_items)} feeds resolved"
            )
            records.append(record)

        return records


class PlaylistRun:
    """
    One end-to-end playlist run.

    Usage:
        async with PlaylistRun(config) as run:
            await run.run(Path("games.m3u"), date.today())

    Nothing is written unless every must-succeed step has completed.
    """

    def __init__(
        self,
        app_config: Optional[NHLStreamsConfig] = None,
        stats_client: Optional[StatsApiClient] = None,
        probe_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = app_config or get_config()
        self._owns_probe_client = probe_client is None
        self.probe_client = probe_client or httpx.AsyncClient(timeout=self.config.probe.timeout)
        self.stats_client = stats_client or StatsApiClient(
            base_url=self.config.stats_api.base_url,
            timeout=self.config.stats_api.timeout,
        )
        self.fanout = FeedFanOut(StreamResolver(self.probe_client, self.config.probe))
        self.pipeline = SchedulePipeline(
            self.stats_client,
            self.fanout,
            broadcast_category=self.config.playlist.broadcast_category,
        )

    async def __aenter__(self) -> "PlaylistRun":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.stats_client.close()
        if self._owns_probe_client:
            await self.probe_client.aclose()

    async def run(self, path: Union[str, Path], date: dt.date) -> Path:
        """
        Build the playlist for ``date`` and write it to ``path``.

        Returns:
            The written path
        """
        path = validate_playlist_path(path)
        tz = resolve_timezone(self.config.playlist.timezone)

        games = await self.pipeline.build_game_records(date)
        text = render_for_player(serialize(games, tz))
        return await write_playlist(path, text)
