"""Tests for variable stores and terminators."""

import os

import pytest

from envirator import MemoryVariableStore, ProcessEnvStore, VariableStore
from envirator.exceptions import TerminationError
from envirator.store import stringify
from envirator.terminator import ProcessTerminator, Terminator
from envirator.testing import RaisingTerminator, RecordingTerminator


class TestStringify:
    """Tests for value stringification."""

    @pytest.mark.parametrize(
        "value, expected",
        [("abc", "abc"), (5200, "5200"), (1.5, "1.5"), (True, "true"), (False, "false")],
    )
    def test_stringify(self, value, expected):
        """Test that values are written as strings."""
        assert stringify(value) == expected


class TestMemoryVariableStore:
    """Tests for the in-memory store."""

    def test_satisfies_protocol(self):
        """Test that MemoryVariableStore is a VariableStore."""
        assert isinstance(MemoryVariableStore(), VariableStore)

    def test_initial_values_are_stringified(self):
        """Test that initial values go through set()."""
        store = MemoryVariableStore({"PORT": 8080, "DEBUG": True})

        assert store.get("PORT") == "8080"
        assert store.get("DEBUG") == "true"
        assert len(store) == 2

    def test_get_missing_returns_none(self):
        """Test that unknown keys are None."""
        assert MemoryVariableStore().get("NOPE") is None

    def test_entries_is_a_copy(self):
        """Test that entries() cannot mutate the store."""
        store = MemoryVariableStore({"A": "1"})
        store.entries()["B"] = "2"

        assert "B" not in store

    def test_clear(self):
        """Test that clear() empties the store."""
        store = MemoryVariableStore({"A": "1"})
        store.clear()

        assert store.entries() == {}


class TestProcessEnvStore:
    """Tests for the os.environ-backed store."""

    def test_reads_and_writes_os_environ(self, monkeypatch):
        """Test that values round-trip through os.environ."""
        monkeypatch.delenv("ENVIRATOR_TEST_VALUE", raising=False)
        store = ProcessEnvStore()

        store.set("ENVIRATOR_TEST_VALUE", 42)

        assert os.environ["ENVIRATOR_TEST_VALUE"] == "42"
        assert store.get("ENVIRATOR_TEST_VALUE") == "42"
        assert store.entries()["ENVIRATOR_TEST_VALUE"] == "42"
        monkeypatch.delenv("ENVIRATOR_TEST_VALUE")

    def test_follows_monkeypatched_environ(self, monkeypatch):
        """Test that os.environ is looked up on each access."""
        store = ProcessEnvStore()
        monkeypatch.setattr(os, "environ", {"ONLY": "this"})

        assert store.entries() == {"ONLY": "this"}

    def test_explicit_mapping(self):
        """Test binding to an explicit mapping."""
        backing = {}
        ProcessEnvStore(backing).set("K", False)

        assert backing == {"K": "false"}


class TestTerminators:
    """Tests for terminator implementations."""

    def test_process_terminator_satisfies_protocol(self):
        """Test the default terminator shape."""
        assert isinstance(ProcessTerminator(), Terminator)

    def test_process_terminator_calls_os_exit(self, monkeypatch):
        """Test that ProcessTerminator exits without unwinding."""
        calls = []
        monkeypatch.setattr(os, "_exit", calls.append)

        ProcessTerminator().terminate(1)

        assert calls == [1]

    def test_recording_terminator(self):
        """Test that RecordingTerminator records and returns."""
        terminator = RecordingTerminator()
        terminator.terminate(1)

        assert terminator.called
        assert terminator.codes == [1]

    def test_raising_terminator(self):
        """Test that RaisingTerminator raises TerminationError."""
        with pytest.raises(TerminationError) as exc_info:
            RaisingTerminator().terminate(1)

        assert exc_info.value.exit_code == 1
