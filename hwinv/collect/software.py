# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import typing

from . import D, Report
from ..bits import collapse
from ..fields import extract


def parse_report(report: Report, data: D):
    data.os_identity = os_identity(report.text, report.lookup)


def os_identity(text: str, lookup: typing.Optional[typing.Callable] = None) -> str:
    version = extract(text, "report", "windows version")
    if version:
        return version
    if lookup is None:
        return ""

    def value(key):
        v = lookup(key)
        if v is None:
            return ""
        return collapse(str(v))

    product = value("ProductName")
    display = value("DisplayVersion") or value("ReleaseId")
    build = value("CurrentBuild") or value("CurrentBuildNumber")
    ubr = value("UBR")

    identity = " ".join(v for v in (product, display) if v)
    if build:
        if ubr.isdigit():
            build += f".{int(ubr)}"
        identity = f"{identity} ({build})".strip()
    return identity
