import pytest

from mermaidgen.state.state import NotePosition, State, StateNote, StateType


@pytest.mark.parametrize(
    "state_id, description, state_type",
    [
        ("idle", "Idle State", StateType.NORMAL),
        ("decision", "Decision Point", StateType.CHOICE),
        ("fork1", "", StateType.FORK),
        ("join1", "", StateType.JOIN),
        ("[*]", "", StateType.START),
        ("[*]", "", StateType.END),
    ],
)
def test_new_state(state_id, description, state_type):
    state = State(state_id, description, state_type)
    assert state == State(
        id=state_id,
        description=description,
        state_type=state_type,
        nested=[],
        note=None,
    )
    assert state.nested == []


@pytest.mark.parametrize(
    "state, indentation, want",
    [
        (State("S1", "State 1", StateType.NORMAL), "", 'state "State 1" as S1'),
        (State("C1", "", StateType.CHOICE), "", "state C1 <<choice>>"),
        (State("F1", "", StateType.FORK), "", "state F1 <<fork>>"),
        (State("J1", "", StateType.JOIN), "", "state J1 <<join>>"),
        (State("[*]", "", StateType.START), "", "[*] --> "),
        (State("[*]", "", StateType.END), "", " --> [*]"),
        (State("S1", "State 1", StateType.NORMAL), "    ", '    state "State 1" as S1'),
    ],
)
def test_render_contains(state, indentation, want):
    assert want in state.render(indentation)


def test_render_exact_normal_state():
    state = State("S1", "State 1", StateType.NORMAL)
    assert state.render("") == '    state "State 1" as S1\n'
    assert str(state) == '    state "State 1" as S1\n'


def test_render_exact_with_indentation():
    state = State("S1", "State 1", StateType.NORMAL)
    assert state.render("    ") == '        state "State 1" as S1\n'


def test_normal_state_without_description_renders_nothing():
    assert State("S1", "", StateType.NORMAL).render("") == ""


def test_description_is_quoted():
    state = State("Q", 'say "hi"', StateType.NORMAL)
    assert 'state "say \\"hi\\"" as Q' in state.render("")


def test_state_with_note():
    state = State("S1", "State 1", StateType.NORMAL)
    state.add_note("This is a note", NotePosition.LEFT)
    text = state.render("")
    assert 'state "State 1" as S1' in text
    assert "note left of S1: This is a note" in text


def test_composite_with_nested_states():
    state = State("CS1", "Composite", StateType.COMPOSITE)
    state.add_nested_state("N1", "Nested 1", StateType.NORMAL)
    state.add_nested_state("N2", "Nested 2", StateType.NORMAL)
    text = state.render("")
    for want in (
        "state CS1 {",
        '    state "Nested 1" as N1',
        '    state "Nested 2" as N2',
        "}",
    ):
        assert want in text
    assert text.index("state CS1 {") < text.index("N1") < text.index("N2")


def test_composite_with_note_and_nested_states():
    state = State("CS1", "Composite", StateType.COMPOSITE)
    state.add_nested_state("N1", "Nested 1", StateType.NORMAL)
    state.add_note("Composite note", NotePosition.RIGHT)
    text = state.render("")
    for want in (
        "state CS1 {",
        '    state "Nested 1" as N1',
        "}",
        "note right of CS1: Composite note",
    ):
        assert want in text
    assert text.index("}") < text.index("note right")


@pytest.mark.parametrize(
    "nested_id, description, state_type",
    [
        ("child", "Child State", StateType.NORMAL),
        ("choice", "", StateType.CHOICE),
    ],
)
def test_add_nested_state(nested_id, description, state_type):
    parent = State("parent", "Parent State", StateType.COMPOSITE)
    child = parent.add_nested_state(nested_id, description, state_type)
    want = State(nested_id, description, state_type)
    assert child == want
    assert len(parent.nested) == 1
    assert parent.nested[0] is child


@pytest.mark.parametrize(
    "text, position",
    [("Left note", NotePosition.LEFT), ("Right note", NotePosition.RIGHT)],
)
def test_add_note(text, position):
    state = State("S1", "State 1", StateType.NORMAL)
    result = state.add_note(text, position)
    assert result is state
    assert state.note == StateNote(text, position)


def test_add_note_replaces_existing():
    state = State("S1", "State 1", StateType.NORMAL)
    state.add_note("Old note", NotePosition.LEFT)
    result = state.add_note("New note", NotePosition.RIGHT)
    assert result is state
    assert state.note.text == "New note"
    assert state.note.position is NotePosition.RIGHT