# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

from ..bits import NumberFormat
from ..model import CpuDescriptor, HardwareSnapshot, MemoryInventory


def render(snapshot: HardwareSnapshot, numfmt: NumberFormat = NumberFormat(), **opts):
    print("\n".join(lines(snapshot, numfmt)))


def lines(snapshot: HardwareSnapshot, numfmt: NumberFormat = NumberFormat()):
    yield f"CPU:         {cpu_line(snapshot.cpu, numfmt)}"
    yield f"Memory:      {memory_line(snapshot.memory)}"
    yield f"Motherboard: {snapshot.motherboard_model or 'Unknown'}"
    yield f"OS:          {snapshot.os_identity or 'Unknown'}"
    yield "Drives:"
    if not snapshot.drives:
        yield "  (none)"
    for i, d in enumerate(snapshot.drives, 1):
        line = f"  {i}. [{d.media_type}] {d.model}"
        if d.display_size:
            line += f", {d.display_size}"
        if d.bus_type:
            line += f", {d.bus_type}"
        if d.is_virtual:
            line += " (virtual)"
        yield line


def cpu_line(cpu: CpuDescriptor, numfmt: NumberFormat = NumberFormat()) -> str:
    cores = f"{cpu.performance_cores}"
    if cpu.efficiency_cores:
        cores = f"{cpu.performance_cores}P+{cpu.efficiency_cores}E"
    parts = [f"{cpu.sockets} x {cpu.name or 'Unknown CPU'}"]
    parts.append(f"{cores} cores / {cpu.threads} threads")
    freq = frequency_range(cpu, numfmt)
    if freq:
        parts.append(freq)
    if cpu.socket_type:
        parts.append(f"socket {cpu.socket_type}")
    return ", ".join(parts)


def frequency_range(cpu: CpuDescriptor, numfmt: NumberFormat = NumberFormat()) -> str:
    freqs = [f for f in (cpu.base_frequency, cpu.max_frequency) if f is not None]
    if not freqs:
        return ""
    if len(freqs) == 2 and numfmt.format(freqs[0]) != numfmt.format(freqs[1]):
        return f"{numfmt.format(freqs[0])}-{numfmt.format(freqs[1])} GHz"
    return f"{numfmt.format(freqs[0])} GHz"


def memory_line(memory: MemoryInventory) -> str:
    line = f"{memory.total_installed_gb} GB ({memory.used_slots}/{memory.total_slots} slots)"
    if memory.configuration_summary:
        line += f" {memory.configuration_summary}"
    return line
