"""
Tests for the reactive signal system.
"""

import logging

import pytest

from ropes.core.signals import Computed, Signal, SignalBackend, computed


class TestSignal:
    """Signal reads, writes and notifications"""

    def test_holds_initial_value(self):
        signal = Signal("hello")
        assert signal.get() == "hello"
        assert signal() == "hello"
        assert signal.value == "hello"

    def test_set_notifies_with_new_and_old_value(self):
        signal = Signal(1)
        seen = []
        signal.subscribe(lambda new, old: seen.append((new, old)))

        signal.set(2)

        assert signal.get() == 2
        assert seen == [(2, 1)]

    def test_equal_write_does_not_notify(self):
        signal = Signal("same")
        seen = []
        signal.subscribe(lambda new, old: seen.append(new))

        signal.set("same")

        assert seen == []

    def test_equal_value_of_different_type_notifies(self):
        signal = Signal(0)
        seen = []
        signal.subscribe(lambda new, old: seen.append(new))

        signal.set(False)

        assert seen == [False]

    def test_unsubscribe_handle(self):
        signal = Signal(0)
        seen = []
        unsubscribe = signal.subscribe(lambda new, old: seen.append(new))

        signal.set(1)
        unsubscribe()
        signal.set(2)

        assert seen == [1]
        assert signal.subscriber_count == 0

    def test_failing_subscriber_is_logged_not_raised(self, caplog):
        signal = Signal(0)
        seen = []

        def broken(new, old):
            raise RuntimeError("boom")

        signal.subscribe(broken)
        signal.subscribe(lambda new, old: seen.append(new))

        with caplog.at_level(logging.ERROR, logger="ropes.core.signals"):
            signal.set(1)

        assert seen == [1]
        assert "boom" in caplog.text


class TestComputed:
    """Derived signals"""

    def test_tracks_dependencies_automatically(self):
        first = Signal("Jane")
        last = Signal("Doe")
        full = Computed(lambda: f"{first()} {last()}")

        assert full.get() == "Jane Doe"
        assert set(map(id, full.dependencies)) == {id(first), id(last)}

        last.set("Smith")
        assert full.get() == "Jane Smith"

    def test_notifies_only_when_result_changes(self):
        number = Signal(3)
        parity = Computed(lambda: number() % 2)
        seen = []
        parity.subscribe(lambda new, old: seen.append(new))

        number.set(5)
        number.set(6)

        assert seen == [0]

    def test_chained_computeds(self):
        base = Signal(2)
        doubled = Computed(lambda: base() * 2)
        label = Computed(lambda: f"{doubled()} items")

        base.set(5)

        assert label.get() == "10 items"

    def test_dependencies_follow_branches(self):
        use_a = Signal(True)
        a = Signal("a")
        b = Signal("b")
        pick = Computed(lambda: a() if use_a() else b())

        use_a.set(False)
        assert pick.get() == "b"
        assert a.subscriber_count == 0

        b.set("B")
        assert pick.get() == "B"

    def test_peek_does_not_track(self):
        source = Signal(1)
        snapshot = Computed(lambda: source.peek())

        source.set(2)

        assert snapshot.get() == 1
        assert snapshot.dependencies == ()

    def test_is_read_only(self):
        result = Computed(lambda: 1)
        with pytest.raises(AttributeError):
            result.set(2)

    def test_dispose_stops_following_dependencies(self):
        source = Signal(2)
        doubled = Computed(lambda: source() * 2)
        assert source.subscriber_count == 1

        doubled.dispose()
        source.set(10)

        assert source.subscriber_count == 0
        assert doubled.dependencies == ()
        assert doubled.get() == 4

    def test_computed_helper(self):
        source = Signal("x")
        upper = computed(lambda: source().upper())
        assert isinstance(upper, Computed)
        assert upper() == "X"


class TestSignalBackend:
    """The four operations the core relies on"""

    def test_create_read_write_derive(self):
        backend = SignalBackend()
        cell = backend.create("default", name="field")
        derived = backend.derive(lambda: backend.read(cell).upper())

        assert backend.read(cell) == "default"
        assert backend.read(derived) == "DEFAULT"

        backend.write(cell, "changed")

        assert backend.read(cell) == "changed"
        assert backend.read(derived) == "CHANGED"
