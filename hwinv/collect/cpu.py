# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import re

from . import D, Report
from ..bits import NumberFormat, mhz_to_ghz, strip_parenthetical
from ..errors import MissingSection
from ..fields import extract
from ..model import CoreLayout, CpuDescriptor
from ..sections import locate


SOCKET_PREFIX_RE = re.compile(r"^Socket\b\s*", re.IGNORECASE)


def parse_report(report: Report, data: D):
    data.cpu = build_cpu(report.text, report.numfmt)


def build_cpu(text: str, numfmt: NumberFormat = NumberFormat()) -> CpuDescriptor:
    block = next(locate(text, "processor"), None)
    if block is None:
        raise MissingSection("processor")

    def field(name):
        return extract(block, "processor", name, numfmt)

    performance = field("performance cores") or 0
    efficiency = field("efficiency cores") or 0
    if performance or efficiency:
        layout = CoreLayout.HYBRID
    else:
        # no core sets: this is not a hybrid part
        performance = field("cores") or 0
        layout = CoreLayout.UNIFORM if performance else CoreLayout.UNKNOWN

    base = field("stock frequency")
    top = field("max frequency")

    return CpuDescriptor(
        sockets=extract(text, "report", "sockets") or 0,
        threads=extract(text, "report", "threads") or 0,
        name=field("name") or field("specification") or "",
        socket_type=socket_label(field("package") or ""),
        performance_cores=performance,
        efficiency_cores=efficiency,
        layout=layout,
        base_frequency=mhz_to_ghz(base) if base else None,
        max_frequency=mhz_to_ghz(top) if top else None,
    )


def socket_label(package: str) -> str:
    return strip_parenthetical(SOCKET_PREFIX_RE.sub("", package))
