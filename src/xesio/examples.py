"""
Example log builder for demos and tests.

Builds a small purchase-order log declaring the standard concept, time and
lifecycle extensions. It exercises every attribute kind, a nested list,
ordered events in each trace, and one event owned directly by the log.
"""
from xesio.attributes import Attribute
from xesio.model import Event, Extension, Log, Trace


ACTIVITIES = ["register order", "check stock", "ship order", "send invoice"]


def build_example_log(trace_count: int = 2, events_per_trace: int = 3) -> Log:
    log = Log(version="1.0", features=["nested-attributes"])

    log.extensions = [
        Extension(name="Concept", prefix="concept", uri="http://www.xes-standard.org/concept.xesext"),
        Extension(name="Time", prefix="time", uri="http://www.xes-standard.org/time.xesext"),
        Extension(name="Lifecycle", prefix="lifecycle", uri="http://www.xes-standard.org/lifecycle.xesext"),
    ]

    log.attributes = {
        "concept:name": Attribute.string("Purchase orders"),
        "source": Attribute.id("c5a3f1e0-0000-4000-8000-000000000001"),
        "created": Attribute.datetime("2024-03-01T08:00:00.000+01:00"),
        "complete": Attribute.boolean(True),
        # Nested list: system -> {name, release -> {major, minor}}
        "system": Attribute.list({
            "name": Attribute.string("erp"),
            "release": Attribute.list({
                "major": Attribute.long(4),
                "minor": Attribute.long(2),
            }),
        }),
    }

    for case in range(1, trace_count + 1):
        trace = Trace(attributes={
            "concept:name": Attribute.string(f"order-{case}"),
            "amount": Attribute.double(99.5 * case),
        })
        for step in range(events_per_trace):
            activity = ACTIVITIES[step % len(ACTIVITIES)]
            trace.events.append(Event(attributes={
                "concept:name": Attribute.string(activity),
                "lifecycle:transition": Attribute.string("complete"),
                "time:timestamp": Attribute.datetime(f"2024-03-{case:02d}T{9 + step % 12:02d}:00:00.000+01:00"),
                "step": Attribute.long(step),
            }))
        log.traces.append(trace)

    # An event outside any trace, as the grammar permits
    log.events.append(Event(attributes={
        "concept:name": Attribute.string("archive log"),
        "time:timestamp": Attribute.datetime("2024-04-01T00:00:00.000+01:00"),
    }))

    return log
