"""Shared fixtures for starschedules tests"""

from unittest import mock

import pytest

from starschedules.downloader import ScheduleDownloader


SAMPLE_MARKUP = """
<html>
  <body>
    <table width=100%>
      <tr class=black valign=top><td colspan=2>Schedule</td></tr><tr class=row1><td>18:00</td><td><div class=prog>&nbsp;Sample Show A</div></td></tr><tr class=row2><td>19:30</td><td><div class=prog>&nbsp;Sample Show B </div></td></tr>
    </table>
  </body>
</html>
"""


@pytest.fixture
def sample_markup():
    return SAMPLE_MARKUP


@pytest.fixture
def fake_downloader():
    """Downloader double answering every POST with the sample markup"""
    downloader = mock.create_autospec(ScheduleDownloader, instance=True)
    downloader.post.return_value = SAMPLE_MARKUP
    downloader.get_stats.return_value = {}
    return downloader
