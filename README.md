# mermaidgen

Build Mermaid diagram source from plain Python objects. Three diagram kinds
are supported:

- flowcharts (`mermaidgen.flowchart`)
- sequence diagrams (`mermaidgen.sequence`)
- state diagrams (`mermaidgen.state`)

Every diagram object turns into Mermaid text with `str()` and can be written
straight to a file with `render_to_file(path)`.

## Installing

```
pip install .
```

The package has no runtime dependencies.

## Flowcharts

```python
from mermaidgen.flowchart.diagram import Flowchart, FlowchartDirection
from mermaidgen.flowchart.link import LinkShape
from mermaidgen.flowchart.node import NodeShape

chart = Flowchart(title="Example")
chart.set_direction(FlowchartDirection.LEFT_RIGHT)

start = chart.new_node("Start")
finish = chart.new_node("Finish").set_shape(NodeShape.TERMINAL)
chart.new_link(start, finish).set_text("go").set_shape(LinkShape.DOTTED)

highlight = chart.add_class("highlight")
highlight.style.fill = "#f9f9f9"
start.set_class(highlight)

group = chart.add_subgraph("Details")
group.add_link(start, finish)

print(chart)
chart.render_to_file("flow.mmd")
```

`new_node` and `add_subgraph` draw IDs from one counter per chart, so nodes
and top-level subgraphs are numbered `"0"`, `"1"`, ... in the order they are
created. Nodes and links built by hand can be added with `add_node` and
`add_link`.

- `NodeShape` lists the node shapes; `Node.set_style` takes a `NodeStyle`
  (colour, fill, stroke, stroke width, dash pattern).
- `LinkShape` and `LinkArrowType` set a link's line and its head and tail
  markers; `Link.set_length` makes the line longer.
- `Subgraph.add_subgraph` nests subgraphs; `Subgraph.direction` takes a
  `SubgraphDirection`.
- Rendering a link whose source or target node is `None` raises
  `ValueError`.

## Sequence diagrams

```python
from mermaidgen.sequence.actor import ActorType
from mermaidgen.sequence.diagram import SequenceDiagram
from mermaidgen.sequence.message import MessageType
from mermaidgen.sequence.note import NotePosition

diagram = SequenceDiagram()
diagram.enable_auto_number()
user = diagram.add_actor("user", "User", ActorType.PARTICIPANT)
system = diagram.add_actor("system", "System", ActorType.ACTOR)

request = diagram.add_message(user, system, MessageType.SOLID, "Request")
request.add_nested_message(system, user, MessageType.ASYNC, "Ack")
diagram.add_note(NotePosition.OVER, "Processing", user, system)
diagram.add_message(system, user, MessageType.RESPONSE, "Response")

print(diagram)
```

Actors can also be created and destroyed mid-diagram with `create_actor` and
`destroy_actor`. `MessageType.ACTIVATE` and `MessageType.DEACTIVATE` emit
`activate` / `deactivate` lines for the target actor. A note renders only
with one actor, or with two actors when placed `OVER`; otherwise it renders
as nothing.

## State diagrams

```python
from mermaidgen.state.diagram import StateDiagram
from mermaidgen.state.state import NotePosition, StateType
from mermaidgen.state.transition import TransitionType

diagram = StateDiagram()
idle = diagram.add_state("Idle", "Waiting", StateType.NORMAL)
busy = diagram.add_state("Busy", "Working", StateType.NORMAL)
busy.add_note("does the work", NotePosition.RIGHT)

diagram.add_transition(None, idle, "")
diagram.add_transition(idle, busy, "job arrives").set_type(TransitionType.DASHED)
diagram.add_transition(busy, None, "done")

print(diagram)
```

A transition whose source or target is `None` is drawn from or to the
terminal state `[*]`. Composite states are built with
`State.add_nested_state`; choice, fork and join states come from
`StateType`.

## Titles and configuration

Each diagram takes an optional `title` and has a `config` attribute:
`FlowchartConfigurationProperties`, `SequenceConfigurationProperties` or
`StateConfigurationProperties`. Their setters (`set_padding`,
`set_curve`, `set_activation_width`, `set_radius`, ...) return the object,
so calls can be chained. General settings that belong to no diagram kind go
on `config.base`, a plain `ConfigurationProperties` set with
`set(name, value)`.

When a title or any setting is present, the output starts with a front-matter
block:

```
---
title: Example
config:
    fontSize: 12
    flowchart:
        padding: 10
---
flowchart TB
```

## What it does not do

The package only produces Mermaid text. It does not draw diagrams to images,
does not read Mermaid text back into objects, and has no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```