"""
Schedule client for starschedules

The ScheduleClient coordinates between:
- ChannelRegistry (channel key validation and display names)
- ScheduleDownloader (HTTP form POST)
- ListingParser (pure markup parsing)

Parsed listings are cached per date and channel for the lifetime of the
client. Instances are not thread safe.
"""

import logging
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple

from .config import ChannelRegistry, SourceConfig, DEFAULT_SOURCE
from .downloader import ScheduleDownloader
from .errors import InvalidArgument, InvalidConfiguration
from .parser import ListingEntry, ListingParser
from .renderers import render_text, render_xml
from .validator import ScheduleDate

DATE_KEYS = frozenset(("yyyy", "mm", "dd"))
DEFAULT_CHANNEL = "news"


class ScheduleClient:
    """Fetches, caches and renders STAR programme listings for one day"""

    def __init__(
        self,
        params: Optional[Mapping] = None,
        *,
        source: Optional[SourceConfig] = None,
        downloader: Optional[ScheduleDownloader] = None,
    ):
        """
        Args:
            params: Optional mapping with the three keys yyyy, mm and dd.
                None, an empty mapping, or a three-key mapping missing any
                of those values selects the current local date.
            source: Listings endpoint and channel table
            downloader: HTTP engine, created on demand when omitted

        Raises:
            InvalidArgument: params is not a mapping
            InvalidConfiguration: params does not hold exactly three keys
            InvalidDate: the date failed validation
        """
        self.date = self._resolve_date(params)
        self.source = source or DEFAULT_SOURCE
        self.registry = ChannelRegistry(self.source)
        self.http_engine = downloader or ScheduleDownloader()
        self.parser = ListingParser()

        self.cache: Dict[Tuple[str, str], List[ListingEntry]] = {}
        self.last_listings: Optional[List[ListingEntry]] = None
        self.cache_hits = 0

        logging.debug("Schedule client ready for %s using %s", self.date, self.source.base_url)

    @staticmethod
    def _resolve_date(params) -> ScheduleDate:
        if params is None:
            return ScheduleDate.today()

        if not isinstance(params, Mapping):
            raise InvalidArgument(params)

        # An empty mapping behaves like no mapping at all
        if not params:
            return ScheduleDate.today()

        if len(params) != 3:
            raise InvalidConfiguration(params.keys())

        # Any of yyyy, mm, dd missing or None selects today for all three
        if any(params.get(key) is None for key in DATE_KEYS):
            logging.debug("Incomplete date %s, using current date", dict(params))
            return ScheduleDate.today()

        return ScheduleDate.from_values(params["yyyy"], params["mm"], params["dd"])

    def get_listings(self, channel_key: Optional[str]) -> List[ListingEntry]:
        """
        Get the programme listings for a channel on the client's date

        The second call for the same channel returns the cached list object
        without touching the network.

        Raises:
            UndefinedChannel, UnknownChannel: bad channel key
            TransportError: the request failed
        """
        display_name = self.registry.resolve(channel_key)
        channel = str(channel_key).lower()
        dd_date = self.date.formatted
        cache_key = (dd_date, channel)

        if cache_key in self.cache:
            self.cache_hits += 1
            logging.debug("Listing already cached previously for [%s] on [%s]", channel, dd_date)
            return self.cache[cache_key]

        query = {"ddChannelName": display_name, "ddDate": dd_date}
        logging.debug("Query: %s", query)
        logging.info(
            "Fetch programmes listing for channel [%s] date [%s] using url [%s]",
            channel,
            dd_date,
            self.source.base_url,
        )

        contents = self.http_engine.post(self.source.base_url, query)
        listings = self.parser.parse(contents)
        if not listings:
            logging.warning("No listings found for channel [%s] date [%s]", channel, dd_date)

        self.cache[cache_key] = listings
        self.last_listings = listings
        return listings

    def _listings_or_default(self, listings) -> List[ListingEntry]:
        if listings is not None:
            return listings
        if self.last_listings is None:
            self.last_listings = self.get_listings(DEFAULT_CHANNEL)
        return self.last_listings

    def render_text(self, listings: Optional[List[ListingEntry]] = None) -> str:
        """Text listing; defaults to the last fetched set, or the news channel"""
        return render_text(self._listings_or_default(listings))

    def render_xml(self, listings: Optional[List[ListingEntry]] = None) -> str:
        """XML listing; defaults to the last fetched set, or the news channel"""
        return render_xml(self._listings_or_default(listings))

    def get_statistics(self) -> Dict:
        """Combined statistics from the HTTP engine, parser and cache"""
        return {
            "cache": {"entries": len(self.cache), "hits": self.cache_hits},
            "parser": self.parser.get_parsing_statistics(),
            "http_engine": self.http_engine.get_stats(),
        }

    def close(self):
        """Clean shutdown of HTTP engine"""
        self.http_engine.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()
