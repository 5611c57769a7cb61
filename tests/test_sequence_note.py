import pytest

from mermaidgen.sequence.actor import Actor
from mermaidgen.sequence.note import Note, NotePosition


@pytest.mark.parametrize(
    "position, text, count",
    [
        (NotePosition.LEFT, "Left note", 1),
        (NotePosition.RIGHT, "Right note", 1),
        (NotePosition.OVER, "Over note", 1),
        (NotePosition.OVER, "Over both note", 2),
    ],
)
def test_new_note(position, text, count):
    actors = [Actor("A"), Actor("B")][:count]
    note = Note(position, text, actors)
    assert note.position is position
    assert note.text == text
    assert len(note.actors) == count


@pytest.mark.parametrize(
    "note, expected",
    [
        (
            Note(NotePosition.LEFT, "Left side note", [Actor("A")]),
            "\tNote left of A: Left side note\n",
        ),
        (
            Note(NotePosition.RIGHT, "Right side note", [Actor("B")]),
            "\tNote right of B: Right side note\n",
        ),
        (
            Note(NotePosition.OVER, "Over note", [Actor("C")]),
            "\tNote over C: Over note\n",
        ),
        (
            Note(NotePosition.OVER, "Over both note", [Actor("A"), Actor("B")]),
            "\tNote over A,B: Over both note\n",
        ),
    ],
)
def test_note_render(note, expected):
    assert note.render("") == expected
    assert str(note) == expected


def test_note_with_indentation():
    note = Note(NotePosition.LEFT, "Indented note", [Actor("A")])
    assert note.render("\t") == "\t\tNote left of A: Indented note\n"


def test_note_without_actors_is_empty():
    assert Note(NotePosition.OVER, "Empty note").render("") == ""


def test_left_note_with_two_actors_is_empty():
    note = Note(NotePosition.LEFT, "Left", [Actor("A"), Actor("B")])
    assert note.render("") == ""


def test_over_note_with_three_actors_is_empty():
    note = Note(NotePosition.OVER, "Over", [Actor("A"), Actor("B"), Actor("C")])
    assert note.render("") == ""