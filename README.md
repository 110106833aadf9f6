# fuku

Building blocks for a terminal dashboard that supervises a set of local
services: thread-safe event and command buses, a per-service log filter,
a view navigator, key bindings, terminal styles, log-level highlighting,
ANSI-aware line wrapping, a heartbeat-style status indicator and a
scrollable log viewer that keeps a bounded number of recent lines.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

| Module              | What it provides                                                         |
|---------------------|--------------------------------------------------------------------------|
| `fuku.bus`          | `Bus`, `Subscription`, `SubscriptionClosed`: fan-out with bounded buffers |
| `fuku.events`       | `EventBus`, `NoOpEventBus`, `Event`, `EventType`, `Phase`, event data    |
| `fuku.commands`     | `CommandBus`, `NoOpCommandBus`, `Command`, `CommandType`, command data   |
| `fuku.filter`       | `LogFilter`: which services have their logs shown                        |
| `fuku.navigation`   | `View` and `Navigator`: switching between services and logs views        |
| `fuku.styles`       | `Style`, `strip_ansi`, `display_width`, colours, styles and UI constants |
| `fuku.keys`         | `Binding`, `KeyMap`, `default_key_map`                                   |
| `fuku.logkeys`      | `LogsKeyMap`, `default_logs_key_map`                                     |
| `fuku.layout`       | `render_header`, `render_footer`, `render_line`, `truncate`              |
| `fuku.blink`        | `Blink`, a two-beat pulse indicator driven by a damped `Spring`          |
| `fuku.highlight`    | `Highlighter`, `highlight_log_level`                                     |
| `fuku.wrap`         | `wrap_text`                                                              |
| `fuku.subscriber`   | `Sender`, `Subscriber`, `LogMsg`                                         |
| `fuku.viewport`     | `Viewport`, a scrollable text window                                     |
| `fuku.logs`         | `LogEntry`, `LogModel`: the log viewer                                   |

## Buses

A bus delivers every published item to every current subscriber. Each
subscriber has its own bounded buffer; when it is full, ordinary items are
dropped for that subscriber rather than blocking the publisher. An event
with `critical=True` waits until there is room, so it is never dropped.
`EventBus.publish` stamps each event with the time of publication. After
`close()` every subscription ends and further publishing is ignored.

```python
from fuku.events import Event, EventBus, EventType, PhaseChangedData, Phase

bus = EventBus(100)
subscription = bus.subscribe()

bus.publish(Event(EventType.PHASE_CHANGED, PhaseChangedData(Phase.RUNNING)))
event = subscription.get(timeout=1.0)
print(event.type, event.timestamp)

bus.close()
for event in subscription:   # ends once the subscription is closed and drained
    print(event)
```

`Subscription.get(timeout)` raises `TimeoutError` if nothing arrives in
time and `SubscriptionClosed` once the subscription is closed and empty.
`Subscription.cancel()` detaches it from its bus; a subscription can also
be used as a context manager, which cancels it on exit.

`CommandBus` works the same way for `Command` values such as
`CommandType.STOP_SERVICE` with `StopServiceData(service=...)`. The default
buffer sizes are 100 events and 10 commands.

For runs without a user interface, `NoOpEventBus` and `NoOpCommandBus`
accept everything and deliver nothing. A `NoOpEventBus` subscription is
closed at once; a `NoOpCommandBus` subscription stays open until it is
cancelled, and the bus counts discarded commands in `dropped`.

## Forwarding log lines

`Subscriber` reads an event bus and passes every `EventType.LOG_LINE`
event carrying `LogLineData` to a `Sender` as a `LogMsg`; other events
are ignored.

```python
from fuku.subscriber import Sender, Subscriber

sender = Sender()
sender.set(print)                      # any callable taking one message
subscription = Subscriber(bus, sender).start()   # forwards on a background thread
# ...
subscription.cancel()                  # stops the forwarding
```

## Log filtering and navigation

```python
from fuku.filter import LogFilter
from fuku.navigation import Navigator

log_filter = LogFilter()
log_filter.set("api", True)
log_filter.toggle_all(["api", "web", "db"])   # not all enabled, so all become enabled
print(log_filter.all())                        # a copy of the settings

nav = Navigator()                              # starts on the services view
nav.toggle()
print(nav.is_logs(), str(nav.current_view))    # True logs
```

## Formatting helpers

```python
from fuku.highlight import highlight_log_level
from fuku.layout import render_footer, render_header, truncate
from fuku.wrap import wrap_text

truncate("very-long-service-name", 15)          # 'very-long-serv…'
wrap_text("Hello world this is a test", 15)     # ['Hello world', 'this is a test']
highlight_log_level("level=error msg=failed")   # 'level=ERROR' coloured red

render_header(80, "fuku", "running")
render_footer(80, "q quit", "0.1.0")            # version line reads 'v0.1.0'
```

Widths are measured in terminal columns, so wide characters such as CJK
text and emoji count as two, and ANSI escape sequences count as zero.
`highlight_log_level` upper-cases level keywords (`error`, `warn`,
`info`, `debug`, `fatal` and their short and bracketed forms, and
`level=...`) and colours them, and colours UUIDs.

## The log viewer

`LogModel` keeps the most recent 1000 log lines (set `max_size` to change
this), renders each one once with the service name as a prefix, wraps long
messages to the viewer's width, and re-renders everything only when the
width changes. Only services enabled with `set_enabled` or `toggle_all`
are shown.

```python
from datetime import datetime

from fuku.logs import LogEntry, LogModel

model = LogModel()
model.set_size(100, 40)
model.set_enabled("api", True)

model.handle_log(
    LogEntry(
        timestamp=datetime.now(),
        service="api",
        tier="tier1",
        stream="STDOUT",
        message="[INFO] request served",
    )
)

print(model.view())
```

`model.handle_key(key)` scrolls for `up`/`k`, `down`/`j`, `pgup`/`b`,
`pgdown`/space/`f`, and half pages with `u`/`ctrl+u` and `d`/`ctrl+d`,
and returns whether the view moved; scrolling away from the bottom turns
autoscroll off. `model.toggle_autoscroll()` turns following of new output
on and off, and `model.clear()` empties the buffer while keeping the
filter and autoscroll settings. With nothing to show, `view()` returns a
hint to enable service logs.

## What this package does not do

It provides the pieces, not a running dashboard: there is no command to
run, it does not start, stop or watch any services, it does not read the
keyboard or drive a terminal screen, and it has no services table view.
Key bindings in `fuku.keys` and `fuku.logkeys` describe keys and their
help text; matching real key presses to them is left to the caller.