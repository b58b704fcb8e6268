# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import inspect

from hwinv.sections import locate


REPORT = """\
Socket 1\t\t\tID = 0
\tName\t\tFirst CPU
\tPackage\t\tSocket AM4

Socket 2\t\t\tID = 1
\tName\t\tSecond CPU

dmi memory device\t
\tsize\t\t16 GB
DMI Memory Device\t
\tsize\t\t8 GB

Drive\t0
\tName\t\tQEMU HARDDISK

\tCapacity\t64 GB
Drive\t1
\tName\t\tQEMU DVD-ROM
Trailing text
"""


def test_locate_is_lazy():
    assert inspect.isgenerator(locate(REPORT, "processor"))


def test_paragraph_stops_at_blank_line():
    blocks = list(locate(REPORT, "processor"))
    assert len(blocks) == 2
    assert "First CPU" in blocks[0]
    assert "Socket AM4" in blocks[0]
    assert "Second CPU" not in blocks[0]
    assert "Second CPU" in blocks[1]
    assert "memory" not in blocks[1].lower()


def test_paragraph_stops_at_next_header():
    blocks = list(locate(REPORT, "memory device"))
    assert len(blocks) == 2
    assert "16 GB" in blocks[0]
    assert "8 GB" not in blocks[0]
    assert "8 GB" in blocks[1]


def test_drive_spans_until_next_drive():
    blocks = list(locate(REPORT, "drive"))
    assert len(blocks) == 2
    assert "QEMU HARDDISK" in blocks[0]
    assert "64 GB" in blocks[0]
    assert "DVD-ROM" not in blocks[0]
    assert blocks[1].endswith("Trailing text\n")


def test_no_match():
    assert list(locate(REPORT, "memory array")) == []
    assert list(locate("", "baseboard")) == []


def test_whole_report():
    assert list(locate(REPORT, "report")) == [REPORT]


def test_fixture_sections(report):
    text = report("desktop_hybrid.txt")
    assert len(list(locate(text, "processor"))) == 1
    assert len(list(locate(text, "memory device"))) == 4
    assert len(list(locate(text, "memory array"))) == 1
    assert len(list(locate(text, "drive"))) == 2
    assert len(list(locate(text, "baseboard"))) == 1
    assert len(list(locate(text, "system information"))) == 1
