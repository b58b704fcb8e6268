# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import pathlib

import pytest


DATA = pathlib.Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    return DATA


@pytest.fixture
def report():
    def read(name):
        return (DATA / name).read_text(encoding="utf-8")

    return read
