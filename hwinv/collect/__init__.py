# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import importlib
import logging
import pkgutil
import typing

from ..bits import NumberFormat
from ..errors import CollaboratorUnavailable
from ..model import Disk, HardwareSnapshot


LOG = logging.getLogger(__name__)

Registry = typing.Callable[[str], typing.Any]
Disks = typing.Union[typing.Sequence[Disk], typing.Callable[[], typing.Iterable[Disk]]]


class D(dict):

    def __getattr__(self, attr):
        try:
            return self[attr]
        except KeyError as e:
            raise AttributeError(attr) from e

    def __setattr__(self, attr, value):
        return self.__setitem__(attr, value)


class Report(typing.NamedTuple):
    """
    Everything a collector may look at: the raw report text and the optional
    operating system collaborators.
    """

    text: str
    disks: typing.Optional[Disks] = None
    registry: typing.Optional[Registry] = None
    numfmt: NumberFormat = NumberFormat()

    def os_disks(self) -> typing.List[Disk]:
        disks = self.disks
        if disks is None:
            return []
        try:
            if callable(disks):
                disks = disks()
            return list(disks)
        except (CollaboratorUnavailable, OSError) as e:
            LOG.warning("disk enumeration unavailable: %s", e)
            return []

    def lookup(self, key: str):
        if self.registry is None:
            return None
        try:
            return self.registry(key)
        except (CollaboratorUnavailable, OSError) as e:
            LOG.warning("registry lookup of %r unavailable: %s", key, e)
            return None


def parse_report(
    text: str,
    disks: typing.Optional[Disks] = None,
    registry: typing.Optional[Registry] = None,
    numfmt: NumberFormat = NumberFormat(),
) -> HardwareSnapshot:
    report = Report(text, disks, registry, numfmt)
    data = D()
    for collector in discover_collectors():
        collector.parse_report(report, data)
    return HardwareSnapshot(
        cpu=data.cpu,
        memory=data.memory,
        drives=data.drives,
        motherboard_model=data.motherboard_model,
        os_identity=data.os_identity,
    )


def discover_collectors():
    for info in pkgutil.walk_packages(__path__, prefix=__name__ + "."):
        mod = importlib.import_module(info.name, __name__)
        if not (hasattr(mod, "parse_report") and callable(mod.parse_report)):
            continue
        yield mod
