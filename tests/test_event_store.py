"""Tests for the in-memory event store."""

from datetime import date, datetime

import pytest

from event_store import Event, EventStore, first_n


@pytest.fixture
def store():
    return EventStore()


class TestEventStore:
    """Tests for EventStore."""

    def test_events_on_filters_by_date_in_insertion_order(self, store):
        day = date(2026, 10, 15)
        store.add(Event(store.next_id(), day, "first"))
        store.add(Event(store.next_id(), date(2026, 10, 16), "other day"))
        store.add(Event(store.next_id(), day, "second"))

        assert [e.title for e in store.events_on(day)] == ["first", "second"]
        assert [e.title for e in store.events_on(date(2026, 10, 16))] == ["other day"]
        assert store.events_on(date(2026, 10, 17)) == []

    def test_events_on_ignores_time_of_day(self, store):
        store.add(Event(store.next_id(), datetime(2026, 10, 15, 23, 59), "late"))

        assert [e.title for e in store.events_on(date(2026, 10, 15))] == ["late"]
        assert [e.title for e in store.events_on(datetime(2026, 10, 15, 8, 0))] == ["late"]

    def test_len_and_iteration(self, store):
        assert len(store) == 0
        store.add(Event(1, date(2026, 1, 1), "a"))
        store.add(Event(2, date(2026, 1, 2), "b"))
        assert len(store) == 2
        assert [e.id for e in store] == [1, 2]

    def test_next_id_is_unique_and_increasing(self, store):
        ids = [store.next_id() for _ in range(1000)]
        assert len(set(ids)) == 1000
        assert ids == sorted(ids)

    def test_next_id_is_derived_from_clock(self, store, monkeypatch):
        monkeypatch.setattr("event_store.time.time_ns", lambda: 1_700_000_000_123_456_789)
        assert store.next_id() == 1_700_000_000_123
        # same millisecond
        assert store.next_id() == 1_700_000_000_124


class TestFirstN:
    """Tests for the display truncation policy."""

    def _events(self, count):
        return [Event(i, date(2026, 10, 15), f"event {i}") for i in range(count)]

    def test_five_events_show_three_plus_two(self):
        visible, overflow = first_n(self._events(5))
        assert [e.id for e in visible] == [0, 1, 2]
        assert overflow == 2

    def test_two_events_have_no_overflow(self):
        visible, overflow = first_n(self._events(2))
        assert len(visible) == 2
        assert overflow == 0

    def test_empty(self):
        assert first_n([]) == ([], 0)

    def test_custom_n(self):
        visible, overflow = first_n(self._events(4), n=1)
        assert len(visible) == 1
        assert overflow == 3
