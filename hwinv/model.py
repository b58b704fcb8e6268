# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import dataclasses
import decimal
import enum
import typing


class CoreLayout(enum.Enum):
    HYBRID = "hybrid"
    UNIFORM = "uniform"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True)
class CpuDescriptor:
    sockets: int
    threads: int
    name: str
    socket_type: str
    performance_cores: int
    efficiency_cores: int
    layout: CoreLayout
    # GHz
    base_frequency: typing.Optional[decimal.Decimal] = None
    max_frequency: typing.Optional[decimal.Decimal] = None


@dataclasses.dataclass(frozen=True)
class MemoryModule:
    size_gb: int
    type: str
    speed_mhz: int
    installed: bool


@dataclasses.dataclass(frozen=True)
class MemoryInventory:
    total_installed_gb: int = 0
    total_slots: int = 0
    used_slots: int = 0
    configuration_summary: str = ""
    ecc: bool = False
    modules: typing.Tuple[MemoryModule, ...] = ()


@dataclasses.dataclass(frozen=True)
class Disk:
    """
    Physical disk as enumerated by the operating system.
    """

    model: str
    media_type: str
    size_bytes: int
    bus_type: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class DriveRecord:
    is_virtual: bool
    media_type: str
    model: str
    display_size: str
    bus_type: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class HardwareSnapshot:
    cpu: CpuDescriptor
    memory: MemoryInventory
    drives: typing.Tuple[DriveRecord, ...]
    motherboard_model: str
    os_identity: str
