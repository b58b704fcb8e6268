# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

from . import D, Report
from ..fields import extract
from ..sections import locate


def parse_report(report: Report, data: D):
    data.motherboard_model = motherboard_model(report.text)


def motherboard_model(text: str) -> str:
    for section in "baseboard", "system information":
        for block in locate(text, section):
            vendor = extract(block, section, "vendor") or ""
            model = extract(block, section, "model") or ""
            if model:
                return f"{vendor} {model}".strip()
    return ""
