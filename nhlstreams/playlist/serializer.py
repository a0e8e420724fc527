"""
Playlist serializer.

Turns game records into the .m3u text written to disk. Entries are live stream
pointers, so every duration is a zero placeholder.

VLC refuses playlists that carry #EXT-X-TARGETDURATION, but the encoder will
not build a playlist without it, so the rendered text has its second line
(where the encoder always puts that tag) removed before writing.
"""

import asyncio
import datetime as dt
import logging
from pathlib import Path
from typing import Iterable, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nhlstreams.errors import PlaylistError
from nhlstreams.models import GameRecord
from nhlstreams.playlist.m3u import (
    ExtInf,
    MediaPlaylist,
    MediaPlaylistBuilder,
    MediaSegment,
    SingleLineString,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_DURATION = 0
TARGET_DURATION_LINE = 1


def resolve_timezone(name: Optional[str]) -> Optional[dt.tzinfo]:
    """
    Look up an IANA timezone.

    Returns None for None, meaning the local zone of the process.
    """
    if name is None:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise PlaylistError(f"Unknown timezone: {name}", original_error=e) from e


def format_start_time(start_time: dt.datetime, tz: Optional[dt.tzinfo] = None) -> str:
    """Format a start time as 12-hour ``H:MM AM/PM`` in ``tz`` (local when None)."""
    local = start_time.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {meridiem}"


def synthesize_title(
    game: GameRecord, feed_type: str, tz: Optional[dt.tzinfo] = None
) -> str:
    """Entry title, e.g. ``Boston Bruins @ New York Rangers, 7:00 PM - home``."""
    return f"{game.away} @ {game.home}, {format_start_time(game.start_time, tz)} - {feed_type}"


def serialize(games: Iterable[GameRecord], tz: Optional[dt.tzinfo] = None) -> MediaPlaylist:
    """
    Build the playlist for a list of games.

    One entry per resolved stream, in game order. Games without streams
    contribute nothing.

    Raises:
        PlaylistError: If a title or URL does not fit on one line
    """
    builder = MediaPlaylistBuilder()
    builder.target_duration(PLACEHOLDER_DURATION)

    for game in games:
        for stream in game.streams:
            title = SingleLineString(synthesize_title(game, stream.feed_type, tz))
            uri = SingleLineString(stream.url)
            builder.segment(MediaSegment(uri=uri, ext_inf=ExtInf(PLACEHOLDER_DURATION, title)))

    return builder.finish()


def render_for_player(playlist: MediaPlaylist) -> str:
    """Render the playlist and drop the target duration line."""
    # dumps() ends with "\n", so the last piece is always empty
    lines = playlist.dumps().split("\n")[:-1]
    kept = [line for idx, line in enumerate(lines) if idx != TARGET_DURATION_LINE]
    return "".join(f"{line}\n" for line in kept)


async def write_playlist(path: Union[str, Path], text: str) -> Path:
    """
    Write playlist text to ``path``, replacing any existing file.

    Raises:
        PlaylistError: If the file cannot be written
    """
    path = Path(path)
    try:
        await asyncio.to_thread(path.write_text, text, encoding="utf-8")
    except OSError as e:
        raise PlaylistError(f"Failed to write playlist to {path}: {e}", original_error=e) from e

    logger.info(f"Wrote {len(text.splitlines())} lines to {path}")
    return path
