"""
xesio: read and write eXtensible Event Stream (XES) event logs.

An XES document holds logs; a log holds traces; a trace holds an ordered
sequence of events. Logs, traces and events all carry typed, possibly
nested attributes.

The package maps XES XML to a plain domain tree and back:

    logs = xesio.read("input.xes")
    xesio.write(logs[0], "output.xes")

It does NOT interpret attribute semantics (concept:name, time:timestamp, ...)
and does NOT analyse logs. Both belong to callers.
"""

from xesio.attributes import Attribute, AttributeKind
from xesio.model import Event, Extension, Log, Trace
from xesio.xes_parser import XESParseError, parse_xes_file as read
from xesio.backends.xes_writer import XESWriteError, save_xes_file as write

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "AttributeKind",
    "Event",
    "Extension",
    "Log",
    "Trace",
    "XESParseError",
    "XESWriteError",
    "read",
    "write",
]
