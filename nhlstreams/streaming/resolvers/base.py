"""
Stream resolution types.

Shared data models for probing broadcast feeds and classifying the outcome.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResolveStatus(str, Enum):
    """Outcome of a single feed probe."""

    RESOLVED = "resolved"
    NOT_STARTED = "not_started"  # Body is not a stream URL, feed not live yet
    TRANSPORT_ERROR = "transport_error"  # Connection failure, timeout, unreadable body
    VALIDATION_ERROR = "validation_error"  # Probe URL could not be built


class ResolverError(Exception):
    """A feed could not be resolved to a stream URL."""

    def __init__(
        self,
        message: str,
        status: ResolveStatus,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.status = status
        self.original_error = original_error


@dataclass(frozen=True)
class ResolvedStream:
    """A broadcast feed that resolved to a playable URL."""

    feed_type: str
    url: str


@dataclass(frozen=True)
class ProbeResult:
    """
    Result of probing one feed.

    Attributes:
        feed_type: Feed label of the probed item (HOME, AWAY, NATIONAL, ...)
        status: Classified outcome
        url: Stream URL, only set when status is RESOLVED
        error: Failure description for every other status
    """

    feed_type: str
    status: ResolveStatus
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.status is ResolveStatus.RESOLVED

    def to_stream(self) -> ResolvedStream:
        if not self.is_resolved or self.url is None:
            raise ValueError(f"Feed {self.feed_type} did not resolve ({self.status.value})")
        return ResolvedStream(feed_type=self.feed_type, url=self.url)
