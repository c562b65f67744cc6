"""Tests for SleepService"""
import yaml

from sleeplog.config.config_manager import ConfigManager
from sleeplog.core.models.data_models import RiskLevel, StoreStatus
from sleeplog.core.repositories.csv_codec import SleepLogFile
from sleeplog.core.repositories.sleep_log import SleepLog
from sleeplog.core.services.sleep_service import SleepService


def make_service(path, capacity=100):
    return SleepService(SleepLog(capacity=capacity), SleepLogFile(path=path))


def test_add_entry_returns_score(log_path):
    service = make_service(log_path)
    status, entry, score = service.add_entry(
        date="2024-03-01", hours=5.0, quality=4, screen=3.0, caffeine=200, note="x"
    )
    assert status == StoreStatus.OK
    assert entry.date == "2024-03-01"
    assert score == 50.0
    assert service.log.count == 1


def test_add_entry_when_full(log_path):
    service = make_service(log_path, capacity=1)
    service.add_entry(hours=8.0, quality=10, screen=0.0, caffeine=0)

    status, entry, score = service.add_entry(hours=5.0, quality=4, screen=3.0, caffeine=200)

    assert status == StoreStatus.CAPACITY_EXCEEDED
    assert entry is None and score is None
    assert service.log.count == 1


def test_list_summary_predict(log_path):
    service = make_service(log_path)
    service.add_entry(date="a", hours=5.0, quality=10, screen=0.0, caffeine=0)
    service.add_entry(date="b", hours=2.0, quality=10, screen=0.0, caffeine=0)

    assert [(e.date, s) for e, s in service.list_entries()] == [("a", 30.0), ("b", 60.0)]
    assert service.summary()["avg_hours"] == 3.5
    prediction = service.predict()
    assert prediction.average == 45.0
    assert prediction.level == RiskLevel.MODERATE


def test_save_and_load(log_path):
    service = make_service(log_path)
    service.add_entry(date="a", hours=6.5, quality=7, screen=1.0, caffeine=80)
    assert service.save().status == StoreStatus.OK

    fresh = make_service(log_path)
    result = fresh.load()

    assert result.loaded == 1
    assert fresh.log.entries()[0].hours == 6.5


def test_from_config(tmp_path):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml.safe_dump({
        "storage": {"path": str(tmp_path / "from_config.csv"), "max_entries": 5, "on_malformed": "skip"},
        "scoring": {"caffeine_mg_per_point": 50.0},
        "risk": {"low_max": 10.0, "moderate_max": 20.0, "window": 2},
    }))

    service = SleepService.from_config(ConfigManager(str(cfg_path)))

    assert service.log.capacity == 5
    assert service.storage.path.endswith("from_config.csv")
    assert service.storage.on_malformed == "skip"
    assert service.window == 2
    _, _, score = service.add_entry(hours=8.0, quality=10, screen=0.0, caffeine=600)
    assert score == 12.0
    assert service.predict().level == RiskLevel.MODERATE


def test_from_config_path_override(tmp_path):
    config = ConfigManager(str(tmp_path / "absent.yaml"))
    service = SleepService.from_config(config, path=str(tmp_path / "other.csv"))
    assert service.storage.path == str(tmp_path / "other.csv")
