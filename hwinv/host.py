# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

"""
Operating system collaborators: registry values and physical disks.
"""

import json
import logging
import pathlib
import subprocess
import sys
import typing

from .errors import CollaboratorUnavailable
from .model import Disk


LOG = logging.getLogger(__name__)


CURRENT_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"
PHYSICAL_DISKS_PS = (
    "Get-PhysicalDisk | "
    "Select-Object FriendlyName, MediaType, Size, BusType | "
    "ConvertTo-Json -Compress"
)


def registry_lookup(key: str):
    if sys.platform != "win32":
        raise CollaboratorUnavailable("registry is only available on Windows")
    import winreg

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, CURRENT_VERSION_KEY) as k:
            value, _ = winreg.QueryValueEx(k, key)
    except FileNotFoundError:
        return None
    except OSError as e:
        raise CollaboratorUnavailable(f"{CURRENT_VERSION_KEY}: {e}") from e
    return value


def physical_disks() -> typing.List[Disk]:
    try:
        proc = subprocess.run(
            ["powershell", "-NoProfile", "-Command", PHYSICAL_DISKS_PS],
            capture_output=True,
            text=True,
            timeout=30,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise CollaboratorUnavailable(f"Get-PhysicalDisk: {e}") from e
    return parse_disks(proc.stdout)


def load_disks(path: pathlib.Path) -> typing.List[Disk]:
    try:
        return parse_disks(path.read_text())
    except OSError as e:
        raise CollaboratorUnavailable(f"'{path}': {e.strerror}") from e


def parse_disks(text: str) -> typing.List[Disk]:
    """
    Convert Get-PhysicalDisk JSON output (a single object or a list) to disk
    records. Records that do not look like a disk are skipped.
    """
    if not text.strip():
        return []
    try:
        records = json.loads(text)
    except ValueError as e:
        raise CollaboratorUnavailable(f"invalid disk list: {e}") from e
    if isinstance(records, dict):
        records = [records]
    if not isinstance(records, list):
        raise CollaboratorUnavailable(f"invalid disk list: {type(records).__name__}")

    disks = []
    for r in records:
        try:
            disks.append(disk_record(r))
        except (TypeError, ValueError) as e:
            LOG.warning("skipping disk record %r: %s", r, e)
    return disks


def disk_record(r: dict) -> Disk:
    if not isinstance(r, dict):
        raise TypeError(f"expected an object, got {type(r).__name__}")
    media = r.get("MediaType")
    bus = r.get("BusType")
    size = int(r.get("Size") or 0)
    if size < 0:
        raise ValueError(f"negative size: {size}")
    return Disk(
        model=str(r.get("FriendlyName") or r.get("Model") or "").strip(),
        media_type=enum_name(MEDIA_TYPES, media) or "",
        size_bytes=size,
        bus_type=enum_name(BUS_TYPES, bus),
    )


def enum_name(names: dict, value) -> typing.Optional[str]:
    if value is None:
        return None
    if isinstance(value, int):
        return names.get(value, str(value))
    if isinstance(value, str):
        return value
    raise TypeError(f"unexpected value: {value!r}")


# ConvertTo-Json emits the numeric value of these enums
MEDIA_TYPES = {0: "Unspecified", 3: "HDD", 4: "SSD", 5: "SCM"}
BUS_TYPES = {
    1: "SCSI",
    3: "ATA",
    7: "USB",
    8: "RAID",
    10: "SAS",
    11: "SATA",
    12: "SD",
    14: "Virtual",
    15: "File Backed Virtual",
    17: "NVMe",
}
