"""Tests for the listings markup parser"""

from starschedules.parser import ListingEntry, ListingParser, parse


def test_parse_sample_rows_in_order(sample_markup):
    assert parse(sample_markup) == [
        ListingEntry(time="18:00", title="Sample Show A"),
        ListingEntry(time="19:30", title="Sample Show B"),
    ]


def test_as_dict(sample_markup):
    assert [entry.as_dict() for entry in parse(sample_markup)] == [
        {"time": "18:00", "title": "Sample Show A"},
        {"time": "19:30", "title": "Sample Show B"},
    ]


def test_no_row_group_gives_empty_list():
    assert parse("<html><body><p>No listings</p></body></html>") == []


def test_empty_input():
    assert parse("") == []
    assert parse(None) == []


def test_only_first_row_group_used():
    markup = (
        "<tr class=black bgcolor=x><td>A</td></tr><tr class=r><td>06:00</td><div>&nbsp;First</div></tr>\n"
        "<tr class=black bgcolor=x><td>B</td></tr><tr class=r><td>07:00</td><div>&nbsp;Second</div></tr>\n"
    )
    assert parse(markup) == [ListingEntry(time="06:00", title="First")]


def test_missing_time_and_title_degrade_to_none():
    markup = (
        "<tr class=black ><td>Head</td></tr>"
        "<tr class=r><td>TBA</td><div>&nbsp;Mystery Film</div></tr>"
        "<tr class=r><td>21:15</td><td>no title here</td></tr>"
    )
    parser = ListingParser()
    assert parser.parse(markup) == [
        ListingEntry(time=None, title="Mystery Film"),
        ListingEntry(time="21:15", title=None),
    ]
    assert parser.get_parsing_statistics() == {
        "rows_parsed": 2,
        "missing_times": 1,
        "missing_titles": 1,
    }


def test_first_time_token_wins():
    markup = (
        "<tr class=black x><td>h</td></tr>"
        "<tr class=r><td>22:00</td><div>&nbsp;News at 23:00</div></tr>"
    )
    assert parse(markup) == [ListingEntry(time="22:00", title="News at 23:00")]


def test_title_is_cleaned():
    markup = (
        "<tr class=black x><td>h</td></tr>"
        "<tr class=r><td>08:45</td><div>&nbsp;  Kahani\x07 Ghar Ghar Ki \t </div></tr>"
    )
    assert parse(markup) == [ListingEntry(time="08:45", title="Kahani Ghar Ghar Ki")]


def test_surrounding_whitespace_and_blank_lines_ignored(sample_markup):
    padded = "\n\n   \n" + sample_markup.replace("\n", "\n    \n")
    assert parse(padded) == parse(sample_markup)


def test_row_group_without_rows():
    assert parse("<tr class=black x><td>Schedule</td></tr>") == []


def test_row_group_line_split_on_newline_only():
    markup = (
        "<table>\r\n"
        "<tr class=black x><td>h</td></tr>"
        "<tr class=r><td>18:00</td><div>&nbsp;Show A\x85</div></tr>"
        "<tr class=r><td>19:30</td><div>&nbsp;Show\x0c B</div></tr>\r\n"
        "</table>\r\n"
    )
    assert parse(markup) == [
        ListingEntry(time="18:00", title="Show A"),
        ListingEntry(time="19:30", title="Show B"),
    ]
