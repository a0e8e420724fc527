"""
Stream resolvers.

Resolves broadcast feeds to playable stream URLs.
"""

from nhlstreams.streaming.resolvers.base import (
    ProbeResult,
    ResolvedStream,
    ResolverError,
    ResolveStatus,
)
from nhlstreams.streaming.resolvers.probe import StreamResolver

__all__ = [
    # Base
    "ProbeResult",
    "ResolvedStream",
    "ResolverError",
    "ResolveStatus",
    # Resolvers
    "StreamResolver",
]
