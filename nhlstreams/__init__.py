"""
nhlstreams - NHL.TV playlist generator

Builds an .m3u playlist of the day's NHL broadcast feeds:
- Fetches the day's schedule and per-game media content from the stats API
- Probes every broadcast feed concurrently for a playable stream URL
- Writes the resolved streams as a playlist a media player can open
"""

__version__ = "0.3.0"
__license__ = "MIT"

from nhlstreams.config import get_config, load_config

__all__ = [
    "__version__",
    "get_config",
    "load_config",
]
