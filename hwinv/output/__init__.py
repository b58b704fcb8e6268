# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

from . import dot, json, svg, text


FORMATS = {"dot": dot, "text": text, "json": json, "svg": svg}
DEFAULT_FORMAT = "text"


def render(snapshot, fmt: str = DEFAULT_FORMAT, **opts):
    if fmt not in FORMATS:
        raise ValueError(f"unknown format: {fmt}")
    FORMATS[fmt].render(snapshot, **opts)
