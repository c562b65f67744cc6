"""Tests for the bounded SleepLog store"""
import pytest
from pydantic import ValidationError

from sleeplog.core.models.data_models import StoreStatus
from sleeplog.core.repositories.sleep_log import SleepLog


class TestAppend:

    def test_append_keeps_insertion_order(self, empty_log, make_entry):
        for day in ("b", "a", "c"):
            assert empty_log.append(make_entry(date=day)) == StoreStatus.OK
        assert [e.date for e in empty_log.entries()] == ["b", "a", "c"]
        assert empty_log.count == 3

    def test_append_at_capacity_rejected(self, make_entry):
        log = SleepLog()
        for i in range(100):
            assert log.append(make_entry(date=str(i))) == StoreStatus.OK
        assert log.is_full

        assert log.append(make_entry(date="extra")) == StoreStatus.CAPACITY_EXCEEDED
        assert log.count == 100
        assert log.entries()[-1].date == "99"

    def test_custom_capacity(self, make_entry):
        log = SleepLog(capacity=2)
        log.append(make_entry())
        log.append(make_entry())
        assert log.append(make_entry()) == StoreStatus.CAPACITY_EXCEEDED
        assert len(log) == 2

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            SleepLog(capacity=-1)


class TestReplaceAll:

    def test_replace_overwrites_previous_content(self, empty_log, make_entry):
        empty_log.append(make_entry(date="old"))
        kept = empty_log.replace_all([make_entry(date="n1"), make_entry(date="n2")])
        assert kept == 2
        assert [e.date for e in empty_log] == ["n1", "n2"]

    def test_replace_truncates_to_capacity(self, make_entry):
        log = SleepLog(capacity=3)
        kept = log.replace_all([make_entry(date=str(i)) for i in range(5)])
        assert kept == 3
        assert [e.date for e in log] == ["0", "1", "2"]

    def test_replace_with_empty_clears(self, empty_log, make_entry):
        empty_log.append(make_entry())
        assert empty_log.replace_all([]) == 0
        assert empty_log.count == 0


def test_entries_view_is_read_only(empty_log, make_entry):
    empty_log.append(make_entry())
    view = empty_log.entries()
    assert isinstance(view, tuple)
    with pytest.raises(AttributeError):
        view.append(make_entry())
    assert empty_log.count == 1


def test_stored_entries_cannot_be_modified(empty_log, make_entry):
    original = make_entry(hours=5.0, quality=4)
    empty_log.append(original)

    with pytest.raises(ValidationError):
        original.quality = 99
    with pytest.raises(ValidationError):
        empty_log.entries()[0].hours = 0.0

    stored = empty_log.entries()[0]
    assert (stored.hours, stored.quality) == (5.0, 4)
