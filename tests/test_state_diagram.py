import pytest

from mermaidgen.state.diagram import StateDiagram
from mermaidgen.state.state import State, StateType
from mermaidgen.state.transition import Transition


def test_new_diagram_defaults():
    diagram = StateDiagram()
    assert diagram.states == []
    assert diagram.transitions == []
    assert len(diagram.config) == 0
    assert str(diagram) == "stateDiagram-v2\n"


def test_single_state():
    diagram = StateDiagram()
    diagram.add_state("S1", "State 1", StateType.NORMAL)
    assert str(diagram) == 'stateDiagram-v2\n    state "State 1" as S1\n'


def test_states_and_transition():
    diagram = StateDiagram()
    s1 = diagram.add_state("S1", "State 1", StateType.NORMAL)
    s2 = diagram.add_state("S2", "State 2", StateType.NORMAL)
    diagram.add_transition(s1, s2, "Next")
    text = str(diagram)
    for want in (
        "stateDiagram-v2",
        'state "State 1" as S1',
        'state "State 2" as S2',
        "S1 --> S2: Next",
    ):
        assert want in text
    assert text.index("as S2") < text.index("S1 --> S2")


def test_choice_state():
    diagram = StateDiagram()
    s1 = diagram.add_state("S1", "State 1", StateType.NORMAL)
    c1 = diagram.add_state("C1", "", StateType.CHOICE)
    s2 = diagram.add_state("S2", "State 2", StateType.NORMAL)
    diagram.add_transition(s1, c1, "Check")
    diagram.add_transition(c1, s2, "Yes")
    text = str(diagram)
    for want in (
        'state "State 1" as S1',
        "state C1 <<choice>>",
        'state "State 2" as S2',
        "S1 --> C1: Check",
        "C1 --> S2: Yes",
    ):
        assert want in text


def test_composite_state():
    diagram = StateDiagram()
    composite = diagram.add_state("CS", "Composite", StateType.COMPOSITE)
    nested = composite.add_nested_state("NS", "Nested", StateType.NORMAL)
    s2 = diagram.add_state("S2", "State 2", StateType.NORMAL)
    diagram.add_transition(nested, s2, "Exit")
    text = str(diagram)
    for want in (
        "state CS {",
        '    state "Nested" as NS',
        "}",
        'state "State 2" as S2',
        "NS --> S2: Exit",
    ):
        assert want in text


def test_start_and_end_states():
    diagram = StateDiagram()
    start = diagram.add_state("[*]", "", StateType.START)
    s1 = diagram.add_state("S1", "Process", StateType.NORMAL)
    end = diagram.add_state("[*]", "", StateType.END)
    diagram.add_transition(start, s1, "Begin")
    diagram.add_transition(s1, end, "Finish")
    text = str(diagram)
    for want in ("[*] --> S1: Begin", 'state "Process" as S1', "S1 --> [*]: Finish"):
        assert want in text


def test_fork_and_join():
    diagram = StateDiagram()
    s1 = diagram.add_state("S1", "Start", StateType.NORMAL)
    fork = diagram.add_state("F1", "", StateType.FORK)
    p1 = diagram.add_state("P1", "Path 1", StateType.NORMAL)
    p2 = diagram.add_state("P2", "Path 2", StateType.NORMAL)
    join = diagram.add_state("J1", "", StateType.JOIN)
    s2 = diagram.add_state("S2", "End", StateType.NORMAL)
    diagram.add_transition(s1, fork, "Split")
    diagram.add_transition(fork, p1, "")
    diagram.add_transition(fork, p2, "")
    diagram.add_transition(p1, join, "")
    diagram.add_transition(p2, join, "")
    diagram.add_transition(join, s2, "Merge")
    text = str(diagram)
    for want in (
        'state "Start" as S1',
        "state F1 <<fork>>",
        'state "Path 1" as P1',
        'state "Path 2" as P2',
        "state J1 <<join>>",
        'state "End" as S2',
        "S1 --> F1: Split",
        "F1 --> P1",
        "F1 --> P2",
        "P1 --> J1",
        "P2 --> J1",
        "J1 --> S2: Merge",
    ):
        assert want in text


@pytest.mark.parametrize(
    "state_id, description, state_type",
    [
        ("S1", "State 1", StateType.NORMAL),
        ("C1", "", StateType.CHOICE),
        ("CS1", "Composite", StateType.COMPOSITE),
    ],
)
def test_add_state(state_id, description, state_type):
    diagram = StateDiagram()
    state = diagram.add_state(state_id, description, state_type)
    assert state == State(state_id, description, state_type, [], None)
    assert diagram.states == [state]
    assert diagram.states[0] is state


@pytest.mark.parametrize("description", ["Next", ""])
def test_add_transition(description):
    diagram = StateDiagram()
    s1 = State("S1", "", StateType.NORMAL)
    s2 = State("S2", "", StateType.NORMAL)
    transition = diagram.add_transition(s1, s2, description)
    assert transition.from_state.id == "S1"
    assert transition.to_state.id == "S2"
    assert transition.description == description
    assert diagram.transitions == [Transition(s1, s2, description)]
    assert diagram.transitions[0] is transition


def test_title_and_config_front_matter():
    diagram = StateDiagram(title="Flow")
    diagram.config.set_padding(10)
    text = str(diagram)
    assert text.startswith("---\ntitle: Flow\nconfig:\n")
    assert "    state:\n        padding: 10\n---\nstateDiagram-v2\n" in text


def test_render_to_file(tmp_path):
    diagram = StateDiagram()
    diagram.add_state("S1", "State 1", StateType.NORMAL)
    target = tmp_path / "diagram.mmd"
    diagram.render_to_file(target)
    assert target.read_text(encoding="utf-8") == str(diagram)