"""
Playlist encoding and serialization.
"""

from nhlstreams.playlist.m3u import (
    ExtInf,
    MediaPlaylist,
    MediaPlaylistBuilder,
    MediaSegment,
    SingleLineString,
)
from nhlstreams.playlist.serializer import (
    render_for_player,
    serialize,
    synthesize_title,
    write_playlist,
)

__all__ = [
    "ExtInf",
    "MediaPlaylist",
    "MediaPlaylistBuilder",
    "MediaSegment",
    "SingleLineString",
    "render_for_player",
    "serialize",
    "synthesize_title",
    "write_playlist",
]
