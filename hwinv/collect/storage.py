# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import decimal
import re
import typing

from . import D, Report
from ..bits import NumberFormat, human_capacity, strip_parenthetical
from ..fields import extract
from ..model import Disk, DriveRecord
from ..sections import locate


VIRTUAL_KEYWORDS = (
    "QEMU",
    "VBOX",
    "VMWARE",
    "VIRTIO",
    "HYPER-V",
    "KVM",
    "MSFT VIRTUAL",
    "VIRTUAL",
)
VIRTUAL_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in VIRTUAL_KEYWORDS) + r")\b",
    re.IGNORECASE,
)
BYTES_PER_GB = 1000**3


def parse_report(report: Report, data: D):
    data.drives = classify_drives(report.text, report.os_disks(), report.numfmt)


def is_virtual(name: str) -> bool:
    return VIRTUAL_RE.search(name) is not None


def classify_drives(
    text: str,
    disks: typing.Iterable[Disk] = (),
    numfmt: NumberFormat = NumberFormat(),
) -> typing.Tuple[DriveRecord, ...]:
    drives = []
    for disk in disks:
        if is_virtual(disk.model):
            continue
        gigabytes = decimal.Decimal(disk.size_bytes) / BYTES_PER_GB
        drives.append(
            DriveRecord(
                is_virtual=False,
                media_type=disk.media_type or "Unknown",
                model=disk.model,
                display_size=human_capacity(gigabytes, numfmt),
                bus_type=disk.bus_type or None,
            )
        )
    drives.extend(report_drives(text, numfmt))
    return tuple(drives)


def report_drives(text: str, numfmt: NumberFormat) -> typing.Iterator[DriveRecord]:
    """
    Only virtual drives are taken from the report, physical ones come from
    the operating system which knows their media type.
    """
    for block in locate(text, "drive"):
        name = extract(block, "drive", "name") or ""
        if not is_virtual(name):
            continue
        capacity = extract(block, "drive", "capacity", numfmt)
        bus = extract(block, "drive", "bus type")
        kind = extract(block, "drive", "type") or ""
        yield DriveRecord(
            is_virtual=True,
            media_type=kind.rpartition(",")[2].strip() or "Unknown",
            model=name,
            display_size=human_capacity(capacity, numfmt) if capacity else "",
            bus_type=strip_parenthetical(bus) if bus else None,
        )
