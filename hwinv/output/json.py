# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import dataclasses
import decimal
import enum
import json


def render(snapshot, **opts):
    print(json.dumps(dataclasses.asdict(snapshot), default=cast_json))


def cast_json(obj):
    if isinstance(obj, decimal.Decimal):
        return str(obj)
    if isinstance(obj, enum.Enum):
        return obj.value
    raise TypeError(f"{type(obj).__name__} is not JSON serializable")
