# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors


class Error(Exception):
    pass


class MissingSection(Error):
    """
    A section required to build part of the inventory is not in the report.
    """

    def __init__(self, section: str):
        super().__init__(f"no {section!r} section found in report")
        self.section = section


class MalformedField(Error, ValueError):
    def __init__(self, section: str, field: str, value: str):
        super().__init__(f"{section}/{field}: cannot parse {value!r}")
        self.section = section
        self.field = field
        self.value = value


class CollaboratorUnavailable(Error):
    """
    An external source (OS disk enumeration, registry) could not be queried.
    """
