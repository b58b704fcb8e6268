# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

import subprocess

from .dot import SnapshotGraph


def render(snapshot, **opts):
    src = SnapshotGraph(snapshot, **opts).source()
    subprocess.run(["dot", "-T", "svg"], input=src, text=True, check=True)
