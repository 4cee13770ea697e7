#!/usr/bin/env python3
"""
Demo: XES round trip.

Reads an XES file (or builds the example log), prints a summary of every
log found, and writes the first log back out.
"""

import argparse
import logging

import xesio
from xesio.backends import XmlLayout, save_xes_file
from xesio.examples import build_example_log
from xesio.serialization import log_to_yaml


def print_summary(log):
    """Print the shape of a Log."""
    print(f"  Version:     {log.version}")
    print(f"  Features:    {', '.join(log.features) or '(none)'}")
    print(f"  Extensions:  {', '.join(e.prefix for e in log.extensions) or '(none)'}")
    print(f"  Attributes:  {len(log.attributes)}")
    print(f"  Traces:      {len(log.traces)}")
    print(f"  Events:      {sum(len(t.events) for t in log.traces)} in traces, {len(log.events)} top-level")


def main():
    parser = argparse.ArgumentParser(description='Read an XES file and write it back out')
    parser.add_argument('input', nargs='?', help='Path to an .xes file (defaults to the built-in example log)')
    parser.add_argument('-o', '--output', default='roundtrip.xes', help='Where to write the first log')
    parser.add_argument('--compact', action='store_true', help='Write without indentation')
    parser.add_argument('--yaml', action='store_true', help='Also print the first log as YAML')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.input:
        logs = xesio.read(args.input)
    else:
        logs = [build_example_log()]

    print("=" * 80)
    print("XES ROUND TRIP DEMO")
    print("=" * 80)

    for index, log in enumerate(logs, start=1):
        print(f"\nLOG {index}:")
        print_summary(log)

    if not logs:
        print("\nNo <log> elements found.")
        return

    layout = XmlLayout.COMPACT if args.compact else XmlLayout.INDENTED
    save_xes_file(logs[0], args.output, layout=layout)
    print(f"\nSaved to: {args.output}")

    reread = xesio.read(args.output)
    print(f"Re-read equal to original: {reread == logs[:1]}")

    if args.yaml:
        print("\n" + "-" * 80)
        print(log_to_yaml(logs[0]))


if __name__ == "__main__":
    main()
