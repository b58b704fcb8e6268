# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

from hwinv.collect.memory import build_memory, configuration_summary
from hwinv.model import MemoryModule


def device(size=None, type=None, speed=None):
    lines = ["DMI Memory Device\t", "\tdesignation\tDIMM"]
    if type is not None:
        lines.append(f"\ttype\t\t{type}")
    if size is not None:
        lines.append(f"\tsize\t\t{size} GB")
    if speed is not None:
        lines.append(f"\tspeed\t\t{speed} MHz")
    return "\n".join(lines) + "\n\n"


def array(devices, correction="None"):
    return (
        "DMI Physical Memory Array\t\n"
        f"\tcorrection\t{correction}\n"
        f"\tmax# of devices\t{devices}\n\n"
    )


def module(size, type="DDR4", speed=3200):
    return MemoryModule(size_gb=size, type=type, speed_mhz=speed, installed=True)


def test_uniform():
    text = array(4) + "".join(device(48, "DDR5", 5600) for _ in range(4))
    mem = build_memory(text)
    assert mem.configuration_summary == "4×48 GB DDR5-5600 MHz"
    assert mem.total_installed_gb == 192
    assert mem.used_slots == 4
    assert mem.total_slots == 4
    assert not mem.ecc


def test_mixed_sizes():
    text = device(16, "DDR4", 3200) + device(16, "DDR4", 3200) + device(32, "DDR4", 3200)
    mem = build_memory(text)
    assert mem.configuration_summary == "2×16 GB + 1×32 GB DDR4 (mixed)"
    assert mem.total_installed_gb == 64


def test_mixed_groups_sorted_by_size():
    summary = configuration_summary([module(32), module(8), module(32)])
    assert summary == "1×8 GB + 2×32 GB DDR4 (mixed)"


def test_mixed_speeds():
    summary = configuration_summary([module(16, speed=3200), module(16, speed=2666)])
    assert summary == "2×16 GB DDR4 (mixed)"


def test_mixed_types_uses_first_type():
    summary = configuration_summary([module(8, "DDR4"), module(8, "DDR3")])
    assert summary == "2×8 GB DDR4 (mixed)"


def test_unknown_type_is_mixed():
    summary = configuration_summary([module(8, ""), module(8, "")])
    assert summary == "2×8 GB (mixed)"


def test_zero_speed_does_not_force_mixed():
    summary = configuration_summary([module(8, speed=0), module(8, speed=3200)])
    assert summary == "2×8 GB DDR4-3200 MHz"
    summary = configuration_summary([module(8, speed=0), module(8, speed=0)])
    assert summary == "2×8 GB DDR4"


def test_empty_slots_are_ignored(report):
    mem = build_memory(report("desktop_hybrid.txt"))
    assert len(mem.modules) == 4
    assert [m.installed for m in mem.modules] == [False, True, False, True]
    assert mem.modules[0].size_gb == 0
    assert mem.modules[1].type == "DDR4"
    assert mem.used_slots == 2
    assert mem.total_slots == 4
    assert mem.total_installed_gb == 64
    assert mem.configuration_summary == "2×32 GB DDR4-3200 MHz"


def test_ecc_once_over_several_arrays(report):
    mem = build_memory(report("server_ecc.txt"))
    assert mem.total_slots == 16
    assert mem.used_slots == 3
    assert mem.total_installed_gb == 64
    assert mem.ecc
    assert mem.configuration_summary == "2×16 GB + 1×32 GB DDR4 (mixed) ECC"


def test_ecc_uniform(report):
    mem = build_memory(report("vm_qemu.txt"))
    assert mem.configuration_summary == "1×8 GB RAM ECC"


def test_more_modules_than_slots():
    text = array(1) + device(8, "DDR4") + device(8, "DDR4")
    mem = build_memory(text)
    assert mem.total_slots == 1
    assert mem.used_slots == 2
    assert mem.configuration_summary == "2×8 GB DDR4"


def test_no_memory_sections():
    mem = build_memory("")
    assert mem.total_installed_gb == 0
    assert mem.used_slots == 0
    assert mem.total_slots == 0
    assert mem.configuration_summary == ""
    assert mem.modules == ()


def test_ecc_without_modules():
    mem = build_memory(array(2, "Multi-bit ECC"))
    assert mem.ecc
    assert mem.total_slots == 2
    assert mem.configuration_summary == ""
