"""
starschedules.parser - Listings markup parser

Pure parsing logic, no HTTP or caching. Scrapes the schedule table out of
the listings page line by line. The page layout is the only thing this
module knows about; swapping it for a tree-based parser only needs the
same parse() signature.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ListingEntry:
    """A single scheduled programme"""

    time: Optional[str]
    title: Optional[str]

    def as_dict(self) -> dict:
        return {"time": self.time, "title": self.title}


class ListingParser:
    """Parses the listings page into ListingEntry records"""

    # Schedule row-group marker; the rest of the line holds the rows
    ROW_GROUP_PATTERN = re.compile(r"<tr class=black (.*)")
    # Header cell closing the row-group's first row
    HEADER_PATTERN = re.compile(r"(.*?)</td></tr>(.*)")
    ROW_PATTERN = re.compile(r"<tr class(.*?)</tr>")
    TIME_PATTERN = re.compile(r"(\d\d:\d\d)")
    TITLE_PATTERN = re.compile(r"&nbsp;(.*?)</div>")

    def __init__(self):
        self.rows_parsed = 0
        self.missing_times = 0
        self.missing_titles = 0

    def parse(self, raw_markup: Optional[str]) -> List[ListingEntry]:
        """
        Parse raw listings markup

        Only the first schedule row-group is used. Never raises: rows without
        a time or title give None in that field, and markup without a
        row-group gives an empty list.
        """
        listings: List[ListingEntry] = []
        if not raw_markup:
            return listings

        for line in raw_markup.split("\n"):
            line = line.strip()
            if not line:
                continue

            match = self.ROW_GROUP_PATTERN.search(line)
            if not match:
                continue

            rows = match.group(1)
            header = self.HEADER_PATTERN.match(rows)
            if header:
                rows = header.group(2)

            while True:
                row = self.ROW_PATTERN.search(rows)
                if not row:
                    break
                rows = rows[: row.start()] + rows[row.end():]
                listings.append(self._parse_row(row.group(1)))

            logging.debug("Parsed %d listings from schedule table", len(listings))
            return listings

        logging.debug("No schedule table found in %d characters of markup", len(raw_markup))
        return listings

    def _parse_row(self, row: str) -> ListingEntry:
        """Extract time and title from one row segment"""
        self.rows_parsed += 1

        time_match = self.TIME_PATTERN.search(row)
        time = time_match.group(1) if time_match else None
        if time is None:
            self.missing_times += 1

        title_match = self.TITLE_PATTERN.search(row)
        title = self.clean_title(title_match.group(1)) if title_match else None
        if title is None:
            self.missing_titles += 1

        return ListingEntry(time=time, title=title)

    @staticmethod
    def clean_title(title: str) -> str:
        """Drop non-printable characters and surrounding whitespace"""
        return "".join(ch for ch in title if ch.isprintable()).strip()

    def get_parsing_statistics(self) -> dict:
        return {
            "rows_parsed": self.rows_parsed,
            "missing_times": self.missing_times,
            "missing_titles": self.missing_titles,
        }


def parse(raw_markup: Optional[str]) -> List[ListingEntry]:
    """Parse listings markup with a throwaway ListingParser"""
    return ListingParser().parse(raw_markup)
