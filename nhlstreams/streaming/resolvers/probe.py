"""
Probe-based stream resolver.

Asks the probe service for the playlist URL of one broadcast feed. The service
answers with plain text: a stream URL once the game is live, otherwise an
error page or placeholder.
"""

import datetime as dt
import logging
from typing import Optional

import httpx

from nhlstreams.config import ProbeConfig
from nhlstreams.stats_api.models import EpgItem
from nhlstreams.streaming.resolvers.base import ResolverError, ResolveStatus

logger = logging.getLogger(__name__)

STREAM_URL_PREFIX = "https"


class StreamResolver:
    """
    Resolves a feed item to a stream URL with one GET request.

    No retries and no caching: every call is a fresh probe, and the
    transport's timeout is the only deadline.

    Usage:
        resolver = StreamResolver(http_client, config.probe)
        url = await resolver.resolve(date.today(), feed_item)
    """

    def __init__(self, client: httpx.AsyncClient, probe_config: Optional[ProbeConfig] = None):
        self._client = client
        self.probe_config = probe_config or ProbeConfig()

    def build_probe_url(self, date: dt.date, media_playback_id: str) -> httpx.URL:
        """
        Build the probe URL for one feed.

        Raises:
            ResolverError: VALIDATION_ERROR if the result is not a valid URL
        """
        cfg = self.probe_config
        raw = (
            f"{cfg.host.rstrip('/')}{cfg.path}"
            f"?league={cfg.league}&date={date.strftime('%Y-%m-%d')}"
            f"&id={media_playback_id}&cdn={cfg.cdn}"
        )
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise ResolverError(
                f"Failed to build probe URL: {raw!r}",
                ResolveStatus.VALIDATION_ERROR,
                original_error=e,
            ) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise ResolverError(f"Failed to build probe URL: {raw!r}", ResolveStatus.VALIDATION_ERROR)
        return url

    async def resolve(self, date: dt.date, feed_item: EpgItem) -> str:
        """
        Resolve a feed item to its stream URL.

        Args:
            date: Schedule date the feed belongs to
            feed_item: Feed to probe

        Returns:
            The response body, verbatim, when it starts with ``https``

        Raises:
            ResolverError: with the status describing why the feed is unavailable
        """
        url = self.build_probe_url(date, feed_item.media_playback_id)

        try:
            response = await self._client.get(url)
            body = response.text
        except httpx.HTTPError as e:
            raise ResolverError(
                f"Probe request failed: {e}",
                ResolveStatus.TRANSPORT_ERROR,
                original_error=e,
            ) from e

        if not body.startswith(STREAM_URL_PREFIX):
            raise ResolverError("Game hasn't started", ResolveStatus.NOT_STARTED)

        return body
