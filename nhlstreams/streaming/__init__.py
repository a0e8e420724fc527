"""
Feed resolution: single-feed probes and per-game fan-out.
"""

from nhlstreams.streaming.fanout import FanOutReport, FeedFanOut
from nhlstreams.streaming.resolvers import (
    ProbeResult,
    ResolvedStream,
    ResolverError,
    ResolveStatus,
    StreamResolver,
)

__all__ = [
    "FanOutReport",
    "FeedFanOut",
    "ProbeResult",
    "ResolvedStream",
    "ResolverError",
    "ResolveStatus",
    "StreamResolver",
]
