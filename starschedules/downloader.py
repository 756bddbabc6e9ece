"""
starschedules.downloader - HTTP download manager

Performs the listings form POST over a persistent requests session.
Automatic retries are disabled: one request per call, failures surface
to the caller as TransportError.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__
from .errors import TransportError


DEFAULT_USER_AGENT = f"starschedules/{__version__}"


class ScheduleDownloader:
    """Download manager wrapping a requests session"""

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None):
        self.session: Optional[requests.Session] = None
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.total_requests = 0
        self.failed_requests = 0
        self.bytes_received = 0

        # Initialize session
        self.init_session()

    def init_session(self):
        """Initialize session with headers and no automatic retries"""
        if self.session:
            self.session.close()

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "text/html, application/xhtml+xml, */*",
                "Accept-Language": "en-GB,en;q=0.9",
                "User-Agent": self.user_agent,
            }
        )

        retry_strategy = Retry(total=0, backoff_factor=0, status_forcelist=[])  # Don't auto-retry
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        logging.debug("HTTP session initialized (User-Agent: %s)", self.user_agent)

    def post(self, url: str, data: Mapping[str, str]) -> str:
        """
        POST form data and return the decoded response body

        Args:
            url: Form endpoint
            data: Form fields

        Returns:
            str: Response body text

        Raises:
            TransportError: on connection failure or non-success status
        """
        if self.session is None:
            self.init_session()

        self.total_requests += 1
        logging.debug("  POST %s %s (timeout: %s)", url, dict(data), self.timeout)

        try:
            response = self.session.post(url, data=dict(data), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.failed_requests += 1
            logging.warning("  Request error for %s: %s", url, str(e))
            raise TransportError(url, str(e)) from e

        if not response.ok:
            self.failed_requests += 1
            logging.warning("  HTTP %d received from %s", response.status_code, url)
            raise TransportError(url, f"HTTP {response.status_code}")

        self.bytes_received += len(response.content)
        logging.debug("  Success: %d bytes received", len(response.content))
        return response.text

    def close(self):
        """Clean shutdown"""
        if self.session:
            self.session.close()
            self.session = None

    def get_stats(self) -> Dict[str, Any]:
        """Get download statistics"""
        return {
            "total_requests": self.total_requests,
            "failed_requests": self.failed_requests,
            "bytes_received": self.bytes_received,
        }

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()
