"""Tests for NoteStore."""

import os
import tempfile
import unittest
from unittest.mock import MagicMock

from pynotes.store import (
    LocalStorage,
    MemoryStorage,
    Note,
    NoteStore,
    RemoveNote,
    SlotSnapshotStorage,
)


class NoteStoreStartupTest(unittest.TestCase):
    """Restore behaviour on construction."""

    def test_starts_empty_without_stored_data(self):
        storage = MagicMock()
        storage.load_snapshot.return_value = None

        store = NoteStore(storage)

        self.assertEqual(store.notes, ())
        storage.load_snapshot.assert_called_once_with()
        storage.save_snapshot.assert_not_called()

    def test_restores_stored_snapshot_once(self):
        stored = (Note("Todo", "Write spec"),)
        storage = MagicMock()
        storage.load_snapshot.return_value = stored

        store = NoteStore(storage)

        self.assertEqual(store.notes, stored)
        storage.load_snapshot.assert_called_once_with()
        storage.save_snapshot.assert_called_once_with(stored)

    def test_restores_stored_empty_list(self):
        storage = MemoryStorage(initial=[])
        store = NoteStore(storage)
        self.assertEqual(store.notes, ())
        self.assertEqual(storage.save_count, 1)


class NoteStoreTransitionTest(unittest.TestCase):
    """Transitions, write-through and subscriptions."""

    def setUp(self):
        self.storage = MemoryStorage()
        self.store = NoteStore(self.storage)

    def test_every_transition_is_saved(self):
        self.store.add_note("a", "1")
        self.store.add_note("b", "2")
        self.store.remove_note("missing")
        self.store.populate([Note("c", "3")])

        self.assertEqual(self.storage.save_count, 4)
        self.assertEqual(self.storage.load_snapshot(), (Note("c", "3"),))

    def test_remove_missing_title_keeps_collection(self):
        self.store.add_note("a", "1")
        before = self.store.notes
        self.assertEqual(self.store.remove_note("zzz"), before)

    def test_remove_duplicates(self):
        self.store.populate([Note("a", "x"), Note("a", "y"), Note("b", "z")])
        self.assertEqual(self.store.remove_note("a"), (Note("b", "z"),))

    def test_dispatch_returns_new_snapshot(self):
        self.store.add_note("a", "1")
        self.assertEqual(self.store.dispatch(RemoveNote("a")), ())

    def test_subscribers_see_new_snapshot_in_order(self):
        calls = []
        self.store.subscribe(lambda notes: calls.append(("first", notes)))
        self.store.subscribe(lambda notes: calls.append(("second", notes)))

        self.store.add_note("a", "1")

        expected = (Note("a", "1"),)
        self.assertEqual(calls, [("first", expected), ("second", expected)])

    def test_subscriber_runs_after_state_update(self):
        seen = []
        self.store.subscribe(lambda notes: seen.append(self.store.notes is notes))
        self.store.add_note("a", "1")
        self.assertEqual(seen, [True])

    def test_unsubscribe(self):
        calls = []
        unsubscribe = self.store.subscribe(calls.append)
        self.store.add_note("a", "1")
        unsubscribe()
        unsubscribe()
        self.store.add_note("b", "2")
        self.assertEqual(len(calls), 1)

    def test_failing_subscriber_still_saves(self):
        def boom(notes):
            raise RuntimeError("render failed")

        self.store.subscribe(boom)
        with self.assertRaises(RuntimeError):
            self.store.add_note("a", "1")

        self.assertEqual(self.store.notes, (Note("a", "1"),))
        self.assertEqual(self.storage.load_snapshot(), (Note("a", "1"),))

    def test_len_and_iter(self):
        self.store.add_note("a", "1")
        self.store.add_note("b", "2")
        self.assertEqual(len(self.store), 2)
        self.assertEqual([n.title for n in self.store], ["a", "b"])

    def test_snapshot_is_immutable(self):
        self.store.add_note("a", "1")
        self.assertIsInstance(self.store.notes, tuple)


class NoteStoreScenarioTest(unittest.TestCase):
    """End-to-end run against a real storage file."""

    def test_groceries_then_todo(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "storage.json")
            store = NoteStore(SlotSnapshotStorage(LocalStorage(path)))
            self.assertEqual(store.notes, ())

            store.add_note("Groceries", "Milk, eggs")
            store.add_note("Todo", "Write spec")
            self.assertEqual(
                store.notes,
                (Note("Groceries", "Milk, eggs"), Note("Todo", "Write spec")),
            )

            store.remove_note("Groceries")
            self.assertEqual(store.notes, (Note("Todo", "Write spec"),))

            persisted = SlotSnapshotStorage(LocalStorage(path)).load_snapshot()
            self.assertEqual(persisted, store.notes)

            reopened = NoteStore(SlotSnapshotStorage(LocalStorage(path)))
            self.assertEqual(reopened.notes, (Note("Todo", "Write spec"),))

    def test_unsaveable_title_still_applies(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "storage.json")
            store = NoteStore(SlotSnapshotStorage(LocalStorage(path)))
            store.add_note("keep", "me")

            with self.assertLogs("pynotes.store.persistence", level="WARNING"):
                notes = store.add_note("bad\udcff", "x")

            self.assertEqual(notes, (Note("keep", "me"), Note("bad\udcff", "x")))
            persisted = SlotSnapshotStorage(LocalStorage(path)).load_snapshot()
            self.assertEqual(persisted, (Note("keep", "me"),))


if __name__ == "__main__":
    unittest.main()
