# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors


import contextlib
import html
import re
import secrets

import graphviz

from ..bits import NumberFormat
from ..model import DriveRecord, HardwareSnapshot, MemoryModule
from .text import frequency_range


def render(snapshot: HardwareSnapshot, **opts):
    print(SnapshotGraph(snapshot, **opts).source())


class SnapshotGraph:

    def __init__(
        self, snapshot: HardwareSnapshot, numfmt: NumberFormat = NumberFormat(), **opts
    ):
        self.dot = graphviz.Graph(
            name="hwinv",
            node_attr={
                "fontsize": "11",
                "fontname": "monospace",
                "margin": "0.05",
                "shape": "rectangle",
            },
            edge_attr={
                "fontsize": "11",
                "fontname": "monospace",
                "margin": "0",
            },
            graph_attr={
                "fontsize": "11",
                "fontname": "monospace",
                "compound": "true",
                "rankdir": "LR",
            },
        )
        self.cur = self.dot
        self.stack = []
        self.links = set()
        self.clusters = set()
        self.snapshot = snapshot
        self.numfmt = numfmt
        self.build()

    def source(self):
        return self.dot.source

    def safe_id(self, n):
        return re.sub(r"\W", "_", n)

    def edge(self, a, b, **kwargs):
        a = self.safe_id(a)
        b = self.safe_id(b)
        link = frozenset((a, b))
        if link in self.links:
            return
        self.links.add(link)
        self.dot.edge(a, b, **kwargs)

    @contextlib.contextmanager
    def subgraph(self, name=None, **kwargs):
        self.stack.append(self.cur)
        with self.cur.subgraph(name=name, graph_attr=kwargs) as cur:
            try:
                self.cur = cur
                yield cur
            finally:
                self.cur = self.stack.pop()

    def cluster(self, label, **kwargs):
        kwargs["label"] = format_label(label)
        if "style" not in kwargs:
            kwargs["style"] = "dotted"
        kwargs["cluster"] = "true"
        if isinstance(label, list):
            label = label[0]
        name = self.safe_id(label)
        if name in self.clusters:
            name += secrets.token_hex(8)
        self.clusters.add(name)
        return self.subgraph(name=name, **kwargs)

    def node(self, name: str, label, **kwargs):
        self.cur.node(self.safe_id(name), format_label(label), **kwargs)

    def build(self):
        s = self.snapshot
        label = [f"<b>{escape(s.motherboard_model or 'Unknown Hardware')}</b>"]
        if s.os_identity:
            label.append(f"<i>{escape(s.os_identity)}</i>")

        with self.cluster(label):
            self.cpu()
            with self.cluster("memory", color="red"):
                self.memory()
            with self.cluster("storage", color="darkorange"):
                for i, drive in enumerate(s.drives):
                    self.drive(i, drive)

    def cpu(self):
        cpu = self.snapshot.cpu
        labels = [f"<b>{escape(cpu.name or 'Unknown CPU')}</b>"]
        cores = f"{cpu.performance_cores} cores"
        if cpu.efficiency_cores:
            cores = f"{cpu.performance_cores}P + {cpu.efficiency_cores}E cores"
        labels.append(f"{cpu.sockets} socket(s), {cores}, {cpu.threads} threads")
        freq = frequency_range(cpu, self.numfmt)
        if freq:
            labels.append(freq)
        if cpu.socket_type:
            labels.append(f"<i>{escape(cpu.socket_type)}</i>")
        self.node("cpu", labels, color="blue")

    def memory(self):
        mem = self.snapshot.memory
        labels = [f"<b>{mem.total_installed_gb} GB</b>"]
        labels.append(f"{mem.used_slots}/{mem.total_slots} slots")
        if mem.configuration_summary:
            labels.append(escape(mem.configuration_summary))
        self.node("mem_total", labels, color="red")
        self.edge("cpu", "mem_total", color="red")
        for i, module in enumerate(mem.modules):
            if module.installed:
                self.memory_module(i, module)

    def memory_module(self, i: int, module: MemoryModule):
        labels = [f"<b>{module.size_gb} GB</b>"]
        if module.type:
            labels.append(escape(module.type))
        if module.speed_mhz:
            labels.append(f"{module.speed_mhz} MHz")
        self.node(f"dimm_{i}", labels, color="red")
        self.edge("mem_total", f"dimm_{i}", color="red")

    def drive(self, i: int, drive: DriveRecord):
        labels = [f"<b>{escape(drive.model or 'Unknown drive')}</b>"]
        labels.append(escape(drive.media_type))
        if drive.display_size:
            labels.append(drive.display_size)
        if drive.bus_type:
            labels.append(escape(drive.bus_type))
        style = "dashed" if drive.is_virtual else "solid"
        self.node(f"drive_{i}", labels, color="darkorange", style=style)
        self.edge("cpu", f"drive_{i}", color="darkorange")


def escape(text: str) -> str:
    return html.escape(text, quote=False)


def format_label(lines) -> str:
    if isinstance(lines, str):
        lines = [lines]
    if any(line.startswith("<") for line in lines):
        return "<" + "<br/>".join(lines) + ">"
    return "\\n".join(lines)
