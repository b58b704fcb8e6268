# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import logging
import re
import typing

from .bits import NumberFormat, collapse
from .errors import MalformedField


LOG = logging.getLogger(__name__)

INT_RE = re.compile(r"\d+")
GIGABYTES_RE = re.compile(r"(\d+)\s*GB\b", re.IGNORECASE)

INTEGER = "integer"
DECIMAL = "decimal"
GIGABYTES = "gigabytes"
TEXT = "text"


class Rule(typing.NamedTuple):
    pattern: re.Pattern
    kind: str


def rule(label: str, kind: str, qualified: bool = False) -> Rule:
    """
    Build the pattern of a "<label> [(qualifier)]<separator><value>" line.

    With qualified, a parenthesized qualifier after the label is accepted
    (CPU-Z writes "Package (platform ID)" on Intel parts).
    """
    label = r"[ \t]+".join(re.escape(word) for word in label.split())
    if qualified:
        label += r"(?:[ \t]*\([^)\n]*\))?"
    pattern = re.compile(
        rf"^[ \t]*{label}(?:[ \t]*[:=][ \t]*|[ \t]*\t[ \t]*|[ \t]{{2,}})(\S[^\n]*?)[ \t]*$",
        re.IGNORECASE | re.MULTILINE,
    )
    return Rule(pattern, kind)


FIELDS = {
    ("report", "sockets"): rule("Number of sockets", INTEGER),
    ("report", "threads"): rule("Number of threads", INTEGER),
    ("report", "windows version"): rule("Windows Version", TEXT),
    ("processor", "name"): rule("Name", TEXT),
    ("processor", "specification"): rule("Specification", TEXT),
    ("processor", "package"): rule("Package", TEXT, qualified=True),
    ("processor", "cores"): rule("Number of cores", INTEGER),
    ("processor", "performance cores"): rule("Core Set 0", INTEGER),
    ("processor", "efficiency cores"): rule("Core Set 1", INTEGER),
    ("processor", "stock frequency"): rule("Stock frequency", DECIMAL),
    ("processor", "max frequency"): rule("Max frequency", DECIMAL),
    ("memory device", "size"): rule("size", GIGABYTES),
    ("memory device", "type"): rule("type", TEXT),
    ("memory device", "speed"): rule("speed", INTEGER),
    ("memory array", "max devices"): rule("max# of devices", INTEGER),
    ("memory array", "correction"): rule("correction", TEXT),
    ("drive", "name"): rule("Name", TEXT),
    ("drive", "capacity"): rule("Capacity", DECIMAL),
    ("drive", "type"): rule("Type", TEXT),
    ("drive", "bus type"): rule("Bus Type", TEXT),
    ("baseboard", "vendor"): rule("vendor", TEXT),
    ("baseboard", "model"): rule("model", TEXT),
    ("system information", "vendor"): rule("vendor", TEXT),
    ("system information", "model"): rule("model", TEXT),
}


def extract(
    body: str, section: str, field: str, numfmt: NumberFormat = NumberFormat()
):
    """
    Return the first value of field in a section body, None if absent or if
    the value cannot be parsed.
    """
    r = FIELDS[(section, field)]
    match = r.pattern.search(body)
    if match is None:
        return None
    try:
        return convert(match.group(1), r.kind, numfmt, section, field)
    except MalformedField as e:
        LOG.debug("skipping field: %s", e)
        return None


def convert(value: str, kind: str, numfmt: NumberFormat, section: str, field: str):
    if kind == TEXT:
        return collapse(value)
    if kind == INTEGER:
        match = INT_RE.search(value)
        if match is None:
            raise MalformedField(section, field, value)
        return int(match.group())
    if kind == GIGABYTES:
        match = GIGABYTES_RE.search(value)
        if match is None:
            raise MalformedField(section, field, value)
        return int(match.group(1))
    if kind == DECIMAL:
        try:
            return numfmt.parse(value)
        except ValueError as e:
            raise MalformedField(section, field, value) from e
    raise NotImplementedError(f"unknown field kind: {kind}")
