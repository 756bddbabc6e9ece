"""
starschedules.config - Source configuration

Holds the listings endpoint and the channel table. Both are immutable so
several clients, each with its own source, can coexist in one process.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import UndefinedChannel, UnknownChannel


BASE_URL = "http://www.indya.com/uk/tvguide/tvguide.asp"

CHANNELS = {
    "gold": "STAR Gold",
    "news": "STAR News",
    "one": "STAR One",
    "plus": "STAR Plus",
}


@dataclass(frozen=True)
class SourceConfig:
    """Listings endpoint and channel table"""

    base_url: str = BASE_URL
    channels: Mapping[str, str] = field(default_factory=lambda: dict(CHANNELS))

    def __post_init__(self):
        channels = {}
        for key, name in dict(self.channels).items():
            if not name:
                raise ValueError(f"Channel [{key}] has no display name")
            channels[key.lower()] = name
        object.__setattr__(self, "channels", MappingProxyType(channels))

    def with_base_url(self, base_url: str) -> "SourceConfig":
        """Same channel table pointed at another endpoint"""
        return SourceConfig(base_url=base_url, channels=self.channels)


DEFAULT_SOURCE = SourceConfig()


class ChannelRegistry:
    """Case-insensitive lookup from channel key to display name"""

    def __init__(self, source: Optional[SourceConfig] = None):
        self.source = source or DEFAULT_SOURCE

    def resolve(self, channel_key: Optional[str]) -> str:
        """
        Get the display name sent to the listings form

        Raises:
            UndefinedChannel: channel_key is None
            UnknownChannel: channel_key is not registered
        """
        if channel_key is None:
            raise UndefinedChannel()

        try:
            return self.source.channels[str(channel_key).lower()]
        except KeyError:
            logging.debug("Unknown channel key: %s", channel_key)
            raise UnknownChannel(channel_key) from None

    def keys(self):
        return list(self.source.channels.keys())

    def __contains__(self, channel_key) -> bool:
        return channel_key is not None and str(channel_key).lower() in self.source.channels
