"""
Exception hierarchy for nhlstreams.

Everything fatal to a playlist run derives from NHLStreamsError so the CLI can
report it once and exit non-zero.
"""

from typing import Optional


class NHLStreamsError(Exception):
    """Base class for all nhlstreams errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error


class PlaylistPathError(NHLStreamsError):
    """Destination path is not an .m3u file."""


class StatsApiError(NHLStreamsError):
    """Schedule or game content could not be fetched."""


class PlaylistError(NHLStreamsError):
    """Playlist could not be built or written."""
