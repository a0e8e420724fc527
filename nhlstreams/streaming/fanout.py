"""
Feed fan-out.

Probes every broadcast feed of a game at once and keeps the ones that resolved.
Each probe task returns its own ProbeResult, so there is no shared buffer to
guard; the coordinator filters once every task has finished.
"""

import asyncio
import datetime as dt
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from nhlstreams.stats_api.models import EpgItem
from nhlstreams.streaming.resolvers.base import (
    ProbeResult,
    ResolvedStream,
    ResolverError,
    ResolveStatus,
)
from nhlstreams.streaming.resolvers.probe import StreamResolver

logger = logging.getLogger(__name__)


@dataclass
class FanOutReport:
    """Probe outcome counts for one fan-out."""

    counts: Counter = field(default_factory=Counter)

    @classmethod
    def from_results(cls, results: Iterable[ProbeResult]) -> "FanOutReport":
        report = cls()
        for result in results:
            report.record(result)
        return report

    def record(self, result: ProbeResult) -> None:
        self.counts[result.status] += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def resolved(self) -> int:
        return self.counts[ResolveStatus.RESOLVED]

    def summary(self) -> str:
        parts = [f"{status.value}={self.counts[status]}" for status in ResolveStatus if self.counts[status]]
        return ", ".join(parts) or "no feeds"


class FeedFanOut:
    """
    Concurrent resolver for all feeds of one game.

    All probes start together with no concurrency cap and the coordinator
    waits for every one of them. A failed probe never cancels its siblings
    and never raises past this class; a missing feed in the result is the
    only trace it leaves.
    """

    def __init__(self, resolver: StreamResolver):
        self.resolver = resolver

    async def _probe(self, date: dt.date, feed_item: EpgItem) -> ProbeResult:
        try:
            url = await self.resolver.resolve(date, feed_item)
        except ResolverError as e:
            logger.debug(
                f"Feed {feed_item.media_feed_type} ({feed_item.media_playback_id}) "
                f"unavailable: {e} [{e.status.value}]"
            )
            return ProbeResult(feed_type=feed_item.media_feed_type, status=e.status, error=str(e))

        return ProbeResult(feed_type=feed_item.media_feed_type, status=ResolveStatus.RESOLVED, url=url)

    async def probe_all(self, date: dt.date, feed_items: Iterable[EpgItem]) -> list[ProbeResult]:
        """Probe every feed and return all results, failures included."""
        tasks = [self._probe(date, item) for item in feed_items]
        if not tasks:
            return []
        return list(await asyncio.gather(*tasks))

    async def resolve_all(self, date: dt.date, feed_items: Iterable[EpgItem]) -> list[ResolvedStream]:
        """
        Resolve all feeds of a game.

        Returns:
            One ResolvedStream per feed whose probe succeeded. Callers must not
            rely on the order of the streams.
        """
        results = await self.probe_all(date, feed_items)

        report = FanOutReport.from_results(results)
        if report.total:
            logger.info(f"Probed {report.total} feeds: {report.summary()}")

        return [result.to_stream() for result in results if result.is_resolved]
