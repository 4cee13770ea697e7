"""
Serialization helpers for XES domain objects (Log, Trace, Event, Attribute).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from xesio.attributes import Attribute, AttributeKind
from xesio.model import Event, Extension, Log, Trace


def attribute_to_dict(a: Attribute) -> Dict[str, Any]:
    if a.is_list:
        return {
            "type": "list",
            "attributes": attributes_to_dict(a.children),
        }
    return {"type": a.kind.name.lower(), "value": a.value}


def attribute_from_dict(d: Dict[str, Any]) -> Attribute:
    t = d.get("type")
    if t == "list":
        return Attribute.list(attributes_from_dict(d.get("attributes", {})))
    try:
        kind = AttributeKind[str(t).upper()]
    except KeyError:
        raise TypeError(f"Unsupported attribute dict type: {t}")
    value = d["value"]
    if kind is AttributeKind.DOUBLE:
        value = float(value)
    return Attribute(kind, value)


def attributes_to_dict(attributes: Dict[str, Attribute]) -> Dict[str, Any]:
    return {key: attribute_to_dict(a) for key, a in attributes.items()}


def attributes_from_dict(d: Dict[str, Any]) -> Dict[str, Attribute]:
    return {key: attribute_from_dict(a) for key, a in d.items()}


def extension_to_dict(e: Extension) -> Dict[str, Any]:
    return {"name": e.name, "prefix": e.prefix, "uri": e.uri}


def extension_from_dict(d: Dict[str, Any]) -> Extension:
    return Extension(name=d["name"], prefix=d["prefix"], uri=d["uri"])


def event_to_dict(e: Event) -> Dict[str, Any]:
    return {"attributes": attributes_to_dict(e.attributes)}


def event_from_dict(d: Dict[str, Any]) -> Event:
    return Event(attributes=attributes_from_dict(d.get("attributes", {})))


def trace_to_dict(t: Trace) -> Dict[str, Any]:
    return {
        "attributes": attributes_to_dict(t.attributes),
        "events": [event_to_dict(e) for e in t.events],
    }


def trace_from_dict(d: Dict[str, Any]) -> Trace:
    return Trace(
        attributes=attributes_from_dict(d.get("attributes", {})),
        events=[event_from_dict(e) for e in d.get("events", [])],
    )


def log_to_dict(log: Log) -> Dict[str, Any]:
    return {
        "version": log.version,
        "features": list(log.features),
        "extensions": [extension_to_dict(e) for e in log.extensions],
        "attributes": attributes_to_dict(log.attributes),
        "traces": [trace_to_dict(t) for t in log.traces],
        "events": [event_to_dict(e) for e in log.events],
    }


def log_from_dict(d: Dict[str, Any]) -> Log:
    log = Log(version=str(d["version"]), features=list(d.get("features", [])))
    log.extensions = [extension_from_dict(e) for e in d.get("extensions", [])]
    log.attributes = attributes_from_dict(d.get("attributes", {}))
    log.traces = [trace_from_dict(t) for t in d.get("traces", [])]
    log.events = [event_from_dict(e) for e in d.get("events", [])]
    return log


def log_to_json(log: Log) -> str:
    return json.dumps(log_to_dict(log), sort_keys=True)


def log_from_json(s: str) -> Log:
    d = json.loads(s)
    return log_from_dict(d)


def log_to_yaml(log: Log) -> str:
    return yaml.safe_dump(log_to_dict(log))


def log_from_yaml(s: str) -> Log:
    d = yaml.safe_load(s)
    return log_from_dict(d)
