# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import dataclasses
import decimal
import re
import typing


NUMBER_RE = re.compile(r"\d+(?:[.,]\d+)*")
SPACES_RE = re.compile(r"\s+")
PARENTHETICAL_RE = re.compile(r"\s*\(.*$")
ONE_DIGIT = decimal.Decimal("0.1")


@dataclasses.dataclass(frozen=True)
class NumberFormat:
    """
    Decimal separator policy for parsing report values and rendering them.

    decimal_separator is used when rendering. input_separator fixes which
    character is the decimal separator in the report; None guesses it per
    value (right-most of "." and "," wins, the other one is grouping).
    """

    decimal_separator: str = ","
    input_separator: typing.Optional[str] = None

    def parse(self, text: str) -> decimal.Decimal:
        match = NUMBER_RE.search(text)
        if match is None:
            raise ValueError(f"invalid number: {text!r}")
        value = match.group()
        sep = self.input_separator
        if sep is None:
            sep = "," if value.rfind(",") > value.rfind(".") else "."
        group = "." if sep == "," else ","
        head, _, tail = value.replace(group, "").rpartition(sep)
        if head:
            if sep in head:
                raise ValueError(f"invalid number: {text!r}")
            value = f"{head}.{tail}"
        else:
            value = tail
        return decimal.Decimal(value)

    def format(self, value: decimal.Decimal) -> str:
        value = value.quantize(ONE_DIGIT, rounding=decimal.ROUND_HALF_UP)
        return str(value).replace(".", self.decimal_separator)


def collapse(text: str) -> str:
    return SPACES_RE.sub(" ", text).strip()


def strip_parenthetical(text: str) -> str:
    return PARENTHETICAL_RE.sub("", text).strip()


def mhz_to_ghz(mhz: decimal.Decimal) -> decimal.Decimal:
    return mhz / 1000


def human_capacity(gigabytes: decimal.Decimal, numfmt: NumberFormat) -> str:
    if gigabytes.quantize(ONE_DIGIT, rounding=decimal.ROUND_HALF_UP) >= 1000:
        return f"{numfmt.format(gigabytes / 1000)} TB"
    return f"{numfmt.format(gigabytes)} GB"
