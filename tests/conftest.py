"""Shared fixtures for sleeplog tests"""
import pytest

from sleeplog.core.models.data_models import SleepEntry
from sleeplog.core.repositories.csv_codec import SleepLogFile
from sleeplog.core.repositories.sleep_log import SleepLog


@pytest.fixture
def make_entry():
    """Factory for entries with neutral defaults (score 0.0)"""
    def _make(**overrides):
        fields = {
            "date": "2024-03-01",
            "hours": 8.0,
            "quality": 10,
            "screen": 0.0,
            "caffeine": 0,
            "note": "",
        }
        fields.update(overrides)
        return SleepEntry(**fields)
    return _make


@pytest.fixture
def empty_log():
    return SleepLog()


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "sleeplog.csv"


@pytest.fixture
def log_file(log_path):
    return SleepLogFile(path=log_path)


@pytest.fixture
def write_log(log_path):
    """Write raw lines (newline-terminated) to the log file"""
    def _write(*lines):
        log_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return log_path
    return _write
