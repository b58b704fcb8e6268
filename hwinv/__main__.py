# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 The hwinv Authors

"""
Extract a hardware inventory (processor, memory, storage, OS identity) from
a CPU-Z text report and export it in other formats on standard output.
"""

import argparse
from importlib import metadata
import logging
import pathlib
import sys

from . import collect, host, output
from .bits import NumberFormat


LOG = logging.getLogger("hwinv")


def main():
    parser = argparse.ArgumentParser(description=__doc__, prog="hwinv")
    parser.add_argument(
        "path",
        metavar="PATH",
        help="""
        Path to a text report ("-" to read standard input).
        """,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {metadata.version('hwinv')}",
        help="""
        Show version and exit.
        """,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="""
        Show debug info.
        """,
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=output.FORMATS.keys(),
        default=output.DEFAULT_FORMAT,
        help="""
        Output format (default: %(default)s).
        """,
    )
    parser.add_argument(
        "--disks",
        metavar="FILE",
        type=pathlib.Path,
        help="""
        Read physical disks from a Get-PhysicalDisk JSON dump instead of
        querying the local system.
        """,
    )
    parser.add_argument(
        "--no-host",
        action="store_true",
        help="""
        Do not query the local system (Windows only) for disks and OS
        version.
        """,
    )
    parser.add_argument(
        "--decimal-separator",
        choices=(",", "."),
        default=",",
        help="""
        Decimal separator used in the output (default: %(default)r).
        """,
    )
    parser.add_argument(
        "--input-separator",
        choices=("auto", ",", "."),
        default="auto",
        help="""
        Decimal separator used in the report (default: %(default)s).
        """,
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="""
        Report text encoding (default: %(default)s).
        """,
    )
    args = parser.parse_args()
    logging.basicConfig(
        format="%(levelname)s: %(name)s: %(message)s",
        level=logging.DEBUG if args.debug else logging.WARNING,
    )
    try:
        text = read_report(args.path, args.encoding)
        numfmt = NumberFormat(
            decimal_separator=args.decimal_separator,
            input_separator=None if args.input_separator == "auto" else args.input_separator,
        )
        disks = registry = None
        use_host = not args.no_host and sys.platform == "win32"
        if args.disks is not None:
            disks = host.load_disks(args.disks)
        elif use_host:
            disks = host.physical_disks
        if use_host:
            registry = host.registry_lookup
        snapshot = collect.parse_report(text, disks, registry, numfmt)
        LOG.debug("parsed %d drive(s)", len(snapshot.drives))
        output.render(snapshot, args.format, numfmt=numfmt)
    except BrokenPipeError:
        pass
    except Exception as e:
        if args.debug or isinstance(e, NotImplementedError):
            raise
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def read_report(path: str, encoding: str) -> str:
    if path == "-":
        return sys.stdin.read()
    p = pathlib.Path(path)
    if not p.is_file():
        raise ValueError(f"'{p}': No such file")
    return p.read_text(encoding=encoding, errors="replace")


if __name__ == "__main__":
    main()
