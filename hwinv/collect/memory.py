# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import collections
import re
import typing

from . import D, Report
from ..fields import extract
from ..model import MemoryInventory, MemoryModule
from ..sections import locate


ECC_RE = re.compile(r"\bECC\b", re.IGNORECASE)


def parse_report(report: Report, data: D):
    data.memory = build_memory(report.text)


def build_memory(text: str) -> MemoryInventory:
    modules = tuple(
        memory_module(block) for block in locate(text, "memory device")
    )
    total_slots = 0
    ecc = False
    for block in locate(text, "memory array"):
        total_slots += extract(block, "memory array", "max devices") or 0
        correction = extract(block, "memory array", "correction") or ""
        if ECC_RE.search(correction):
            ecc = True

    installed = [m for m in modules if m.installed]
    summary = configuration_summary(installed)
    if summary and ecc:
        summary += " ECC"

    return MemoryInventory(
        total_installed_gb=sum(m.size_gb for m in installed),
        total_slots=total_slots,
        used_slots=len(installed),
        configuration_summary=summary,
        ecc=ecc,
        modules=modules,
    )


def memory_module(block: str) -> MemoryModule:
    size = extract(block, "memory device", "size")
    return MemoryModule(
        size_gb=size or 0,
        type=(extract(block, "memory device", "type") or "").upper(),
        speed_mhz=extract(block, "memory device", "speed") or 0,
        installed=bool(size),
    )


def configuration_summary(installed: typing.List[MemoryModule]) -> str:
    if not installed:
        return ""

    sizes = {m.size_gb for m in installed}
    # dict keeps the first reported type/speed as the representative one
    types = list(dict.fromkeys(m.type for m in installed if m.type))
    speeds = list(dict.fromkeys(m.speed_mhz for m in installed if m.speed_mhz))

    # an unknown type is reported as mixed even if everything else matches
    if len(sizes) == 1 and len(types) == 1 and len(speeds) <= 1:
        summary = f"{len(installed)}×{installed[0].size_gb} GB {types[0]}"
        if speeds:
            summary += f"-{speeds[0]} MHz"
        return summary

    groups = collections.Counter(m.size_gb for m in installed)
    summary = " + ".join(f"{groups[size]}×{size} GB" for size in sorted(groups))
    if types:
        summary += f" {types[0]}"
    return summary + " (mixed)"
