# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

from decimal import Decimal
import json

import pytest

from hwinv import output
from hwinv.bits import NumberFormat
from hwinv.collect import parse_report
from hwinv.model import CoreLayout, CpuDescriptor
from hwinv.output.dot import SnapshotGraph
from hwinv.output.text import cpu_line, frequency_range


def cpu(**kwargs):
    fields = dict(
        sockets=1,
        threads=20,
        name="Intel Core i7 12700K",
        socket_type="1700 LGA",
        performance_cores=8,
        efficiency_cores=4,
        layout=CoreLayout.HYBRID,
        base_frequency=Decimal("3.6"),
        max_frequency=Decimal("4.95"),
    )
    fields.update(kwargs)
    return CpuDescriptor(**fields)


def test_cpu_line():
    assert cpu_line(cpu()) == (
        "1 x Intel Core i7 12700K, 8P+4E cores / 20 threads, 3,6-5,0 GHz, socket 1700 LGA"
    )
    line = cpu_line(
        cpu(efficiency_cores=0, socket_type="", max_frequency=None),
        NumberFormat(decimal_separator="."),
    )
    assert line == "1 x Intel Core i7 12700K, 8 cores / 20 threads, 3.6 GHz"


def test_frequency_range_same_rounding():
    c = cpu(base_frequency=Decimal("3.6"), max_frequency=Decimal("3.64"))
    assert frequency_range(c) == "3,6 GHz"
    assert frequency_range(cpu(base_frequency=None, max_frequency=None)) == ""


def test_text(report, capsys):
    output.render(parse_report(report("server_ecc.txt")), "text")
    out = capsys.readouterr().out
    assert "CPU:         2 x Intel Xeon Silver 4214, 12 cores / 48 threads" in out
    assert "Memory:      64 GB (3/16 slots) 2×16 GB + 1×32 GB DDR4 (mixed) ECC" in out
    assert "Motherboard: Supermicro X11DPi-N" in out
    assert "OS:          Unknown" in out
    assert "  (none)" in out


def test_text_drives(report, capsys):
    output.render(parse_report(report("vm_qemu.txt")), "text")
    out = capsys.readouterr().out
    assert "  1. [Fixed] QEMU HARDDISK, 1,0 TB, SATA (virtual)" in out
    assert "  2. [CD-ROM] QEMU DVD-ROM, SATA (virtual)" in out


def test_json(report, capsys):
    output.render(parse_report(report("desktop_hybrid.txt")), "json")
    data = json.loads(capsys.readouterr().out)
    assert data["cpu"]["layout"] == "hybrid"
    assert data["cpu"]["base_frequency"] == "3.6"
    assert data["memory"]["used_slots"] == 2
    assert data["drives"][0]["model"] == "Msft Virtual Disk"


def test_dot(report):
    src = SnapshotGraph(parse_report(report("vm_qemu.txt"))).source()
    assert src.startswith("graph hwinv {")
    assert "QEMU HARDDISK" in src
    assert "dimm_0" in src
    assert "cpu -- mem_total" in src


def test_unknown_format(report):
    with pytest.raises(ValueError):
        output.render(parse_report(report("vm_qemu.txt")), "xml")
