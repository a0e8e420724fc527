"""
nhlstreams Test Configuration

Shared fixtures and configuration for all tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Callable, Generator, Mapping, Optional, Union

import httpx
import pytest

import nhlstreams.config as config_module
from nhlstreams.config import NHLStreamsConfig, ProbeConfig

from tests.fixtures.mock_responses import (
    GAME_CONTENT_NO_FEEDS_RESPONSE,
    GAME_CONTENT_RESPONSE,
    SCHEDULE_RESPONSE,
)

PROBE_HOST = "http://probe.test"
STATS_API_URL = "http://stats.test/api/v1"


# ============ Configuration Fixtures ============


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch) -> Generator[None, None, None]:
    """Keep tests independent of the global config and NHLSTREAMS_* env vars."""
    for name in list(os.environ):
        if name.startswith("NHLSTREAMS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    yield
    config_module._config = None


@pytest.fixture
def probe_config() -> ProbeConfig:
    return ProbeConfig(host=PROBE_HOST)


@pytest.fixture
def app_config(probe_config: ProbeConfig) -> NHLStreamsConfig:
    """Config pointing at the mocked services, titles rendered in UTC."""
    return NHLStreamsConfig(
        probe=probe_config,
        stats_api={"base_url": STATS_API_URL},
        playlist={"timezone": "UTC"},
    )


# ============ Temporary File Fixtures ============


@pytest.fixture(scope="function")
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(scope="function")
def temp_config_file(temp_dir: Path) -> Path:
    """Create a temporary config file."""
    config_file = temp_dir / "config.yaml"
    config_content = """
probe:
  host: "http://probe.example.test"
  timeout: 2.5

playlist:
  broadcast_category: "NHLTV"
  timezone: "America/New_York"

logging:
  level: "DEBUG"
"""
    config_file.write_text(config_content)
    return config_file


# ============ Mock HTTP Fixtures ============


ProbeBody = Union[str, Exception]


def make_probe_handler(bodies: Mapping[str, ProbeBody]) -> Callable[[httpx.Request], httpx.Response]:
    """
    Build a MockTransport handler for the probe service.

    ``bodies`` maps media playback ids to the response text, or to an
    exception to raise instead. Unknown ids get a "Not Found" page.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        body = bodies.get(request.url.params.get("id"), "Not Found")
        if isinstance(body, Exception):
            raise body
        return httpx.Response(200, text=body)

    return handler


def make_stats_handler(
    schedule: Union[dict, int] = SCHEDULE_RESPONSE,
    contents: Optional[Mapping[int, Union[dict, int]]] = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """
    Build a MockTransport handler for the stats API.

    An int in place of a payload is returned as that HTTP status.
    """
    if contents is None:
        contents = {
            2019020029: GAME_CONTENT_RESPONSE,
            2019020030: GAME_CONTENT_NO_FEEDS_RESPONSE,
        }

    def respond(payload: Union[dict, int]) -> httpx.Response:
        if isinstance(payload, int):
            return httpx.Response(payload, text="error")
        return httpx.Response(200, json=payload)

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.endswith("/schedule"):
            return respond(schedule)
        if path.endswith("/content"):
            game_pk = int(path.split("/")[-2])
            return respond(contents.get(game_pk, 404))
        return httpx.Response(404)

    return handler


@pytest.fixture
def probe_bodies() -> dict[str, ProbeBody]:
    """Probe responses for the feeds in GAME_CONTENT_RESPONSE."""
    return {
        "68810203": "https://cdn.example.test/home/master.m3u8",
        "68810303": "Not Found",
    }
