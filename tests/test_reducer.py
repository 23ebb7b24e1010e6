"""Tests for the notes reducer."""

import unittest

from pynotes.store import AddNote, Note, PopulateNotes, RemoveNote, notes_reducer


class NotesReducerTest(unittest.TestCase):
    """Transitions of the pure reducer."""

    def setUp(self):
        self.state = (
            Note("a", "x"),
            Note("a", "y"),
            Note("b", "z"),
        )

    def test_add_appends_last(self):
        new_state = notes_reducer(self.state, AddNote("c", "w"))
        self.assertEqual(len(new_state), len(self.state) + 1)
        self.assertEqual(new_state[:-1], self.state)
        self.assertEqual(new_state[-1], Note("c", "w"))

    def test_add_accepts_empty_strings(self):
        new_state = notes_reducer((), AddNote("", ""))
        self.assertEqual(new_state, (Note("", ""),))

    def test_add_allows_duplicate_titles(self):
        new_state = notes_reducer(self.state, AddNote("b", "again"))
        self.assertEqual([n.title for n in new_state], ["a", "a", "b", "b"])

    def test_remove_drops_every_match(self):
        new_state = notes_reducer(self.state, RemoveNote("a"))
        self.assertEqual(new_state, (Note("b", "z"),))

    def test_remove_absent_title_is_identity(self):
        new_state = notes_reducer(self.state, RemoveNote("missing"))
        self.assertIs(new_state, self.state)

    def test_remove_from_empty(self):
        self.assertEqual(notes_reducer((), RemoveNote("a")), ())

    def test_populate_replaces_wholesale(self):
        new_state = notes_reducer(self.state, PopulateNotes([Note("x", "1")]))
        self.assertEqual(new_state, (Note("x", "1"),))

    def test_populate_keeps_duplicates_and_order(self):
        notes = [Note("b", "2"), Note("b", "1"), Note("a", "0")]
        self.assertEqual(notes_reducer((), PopulateNotes(notes)), tuple(notes))

    def test_unknown_intent_leaves_state(self):
        self.assertIs(notes_reducer(self.state, object()), self.state)

    def test_reducer_is_pure(self):
        before = tuple(self.state)
        notes_reducer(self.state, AddNote("c", "w"))
        notes_reducer(self.state, RemoveNote("a"))
        self.assertEqual(self.state, before)
        self.assertEqual(
            notes_reducer(self.state, AddNote("c", "w")),
            notes_reducer(self.state, AddNote("c", "w")),
        )


if __name__ == "__main__":
    unittest.main()
