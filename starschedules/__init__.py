"""
starschedules - STAR TV programme schedules

Fetches programme listings for the STAR channels from the indya.com TV
guide, with per-day caching and plain text or XML output.
"""

__version__ = "0.5.0"
__author__ = "Mohammad S Anwar"
__license__ = "GPL-3.0"

from .client import ScheduleClient
from .config import ChannelRegistry, SourceConfig, DEFAULT_SOURCE
from .downloader import ScheduleDownloader
from .errors import (
    ScheduleError,
    InvalidArgument,
    InvalidConfiguration,
    InvalidDate,
    UndefinedChannel,
    UnknownChannel,
    TransportError,
)
from .parser import ListingEntry, ListingParser
from .renderers import render_text, render_xml
from .validator import DateValidator, ScheduleDate

__all__ = [
    "ScheduleClient",
    "ChannelRegistry",
    "SourceConfig",
    "DEFAULT_SOURCE",
    "ScheduleDownloader",
    "ScheduleError",
    "InvalidArgument",
    "InvalidConfiguration",
    "InvalidDate",
    "UndefinedChannel",
    "UnknownChannel",
    "TransportError",
    "ListingEntry",
    "ListingParser",
    "render_text",
    "render_xml",
    "DateValidator",
    "ScheduleDate",
]
