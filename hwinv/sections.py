# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

"""
Locate the blocks of a CPU-Z style text report that carry hardware facts.

A section starts right after a header line. Paragraph sections end at the
first blank line, or at the next header of the same kind when no blank line
separates them. Drive sections run until the next drive header or the end
of the report.
"""

import re
import typing


PARAGRAPH = "paragraph"
UNTIL_NEXT = "until-next"

BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")


class Section(typing.NamedTuple):
    header: re.Pattern
    boundary: str


def header(pattern: str) -> re.Pattern:
    return re.compile(rf"^[ \t]*{pattern}[^\n]*(?:\n|$)", re.IGNORECASE | re.MULTILINE)


SECTIONS = {
    "processor": Section(header(r"Socket[ \t]+\d+[ \t]+ID[ \t]*=[ \t]*\d+"), PARAGRAPH),
    "memory device": Section(header(r"DMI[ \t]+Memory[ \t]+Device[ \t]*$"), PARAGRAPH),
    "memory array": Section(
        header(r"DMI[ \t]+Physical[ \t]+Memory[ \t]+Array[ \t]*$"), PARAGRAPH
    ),
    "drive": Section(header(r"Drive[ \t]+\d+[ \t]*$"), UNTIL_NEXT),
    "baseboard": Section(header(r"DMI[ \t]+Baseboard[ \t]*$"), PARAGRAPH),
    "system information": Section(
        header(r"DMI[ \t]+System[ \t]+Information[ \t]*$"), PARAGRAPH
    ),
}


def locate(text: str, name: str) -> typing.Iterator[str]:
    """
    Yield the body of every section called name, in report order.
    """
    if name == "report":
        yield text
        return
    section = SECTIONS[name]
    headers = list(section.header.finditer(text))
    for i, match in enumerate(headers):
        start = match.end()
        end = len(text)
        if i + 1 < len(headers):
            end = headers[i + 1].start()
        if section.boundary == PARAGRAPH:
            blank = BLANK_LINE_RE.search(text, start - 1, end)
            if blank is not None:
                end = blank.start()
        yield text[start:end]
