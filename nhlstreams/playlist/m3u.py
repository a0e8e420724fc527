"""
Media playlist encoder.

Builds M3U media playlists the way the HLS grammar expects them: the header,
a mandatory #EXT-X-TARGETDURATION tag, then one #EXTINF + URI pair per
segment. Titles and URIs must each fit on a single line.
"""

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Optional

from nhlstreams.errors import PlaylistError

logger = logging.getLogger(__name__)

EXTM3U = "#EXTM3U"
EXT_X_TARGETDURATION = "#EXT-X-TARGETDURATION"
EXTINF = "#EXTINF"

# Control characters plus the Unicode line and paragraph separators
_FORBIDDEN_CATEGORIES = ("Cc", "Zl", "Zp")


class SingleLineString(str):
    """A string that is guaranteed not to contain line breaks or control characters."""

    def __new__(cls, value: str):
        if any(unicodedata.category(c) in _FORBIDDEN_CATEGORIES for c in value):
            raise PlaylistError(f"Value must be a single line: {value!r}")
        return super().__new__(cls, value)


@dataclass(frozen=True)
class ExtInf:
    """#EXTINF tag: segment duration and title."""

    duration: int
    title: Optional[SingleLineString] = None

    def __str__(self) -> str:
        return f"{EXTINF}:{self.duration},{self.title or ''}"


@dataclass(frozen=True)
class MediaSegment:
    uri: SingleLineString
    ext_inf: ExtInf

    def lines(self) -> list[str]:
        return [str(self.ext_inf), str(self.uri)]


@dataclass(frozen=True)
class MediaPlaylist:
    """A finished media playlist."""

    target_duration: int
    segments: tuple[MediaSegment, ...] = field(default_factory=tuple)

    def lines(self) -> list[str]:
        lines = [EXTM3U, f"{EXT_X_TARGETDURATION}:{self.target_duration}"]
        for segment in self.segments:
            lines.extend(segment.lines())
        return lines

    def dumps(self) -> str:
        """Render the playlist, one tag or URI per line."""
        return "\n".join(self.lines()) + "\n"

    def __str__(self) -> str:
        return self.dumps()


class MediaPlaylistBuilder:
    """
    Incremental builder for MediaPlaylist.

    Usage:
        builder = MediaPlaylistBuilder()
        builder.target_duration(0)
        builder.segment(segment)
        playlist = builder.finish()
    """

    def __init__(self):
        self._target_duration: Optional[int] = None
        self._segments: list[MediaSegment] = []

    def target_duration(self, seconds: int) -> "MediaPlaylistBuilder":
        if seconds < 0:
            raise PlaylistError(f"Target duration must not be negative: {seconds}")
        self._target_duration = seconds
        return self

    def segment(self, segment: MediaSegment) -> "MediaPlaylistBuilder":
        self._segments.append(segment)
        return self

    def finish(self) -> MediaPlaylist:
        """
        Build the playlist.

        Raises:
            PlaylistError: If the target duration tag was never set
        """
        if self._target_duration is None:
            raise PlaylistError(f"{EXT_X_TARGETDURATION} is required")
        logger.debug(f"Built media playlist with {len(self._segments)} segments")
        return MediaPlaylist(target_duration=self._target_duration, segments=tuple(self._segments))
