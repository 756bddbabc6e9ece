"""
starschedules.renderers - Text and XML output

Pure functions turning a listing set into a display string. Title text is
written as-is, without XML escaping.
"""

from typing import Iterable

from .parser import ListingEntry

SEPARATOR = "-" * 19
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _field(value) -> str:
    return "" if value is None else str(value)


def render_text(listings: Iterable[ListingEntry]) -> str:
    """Human readable listing: time, title and a dashed separator per entry"""
    lines = []
    for entry in listings:
        lines.append(f" Time: {_field(entry.time)}\n")
        lines.append(f"Title: {_field(entry.title)}\n")
        lines.append(f"{SEPARATOR}\n")
    return "".join(lines)


def render_xml(listings: Iterable[ListingEntry]) -> str:
    """XML document with one <programme> per entry under a <programmes> root"""
    xml = [XML_HEADER, "<programmes>\n"]
    for entry in listings:
        xml.append("\t<programme>\n")
        xml.append(f"\t\t<time> {_field(entry.time)} </time>\n")
        xml.append(f"\t\t<title> {_field(entry.title)} </title>\n")
        xml.append("\t</programme>\n")
    xml.append("</programmes>")
    return "".join(xml)
