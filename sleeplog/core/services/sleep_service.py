# sleeplog/core/services/sleep_service.py
import logging

from sleeplog.core.analysis.log_metrics import calculate_log_metrics
from sleeplog.core.analysis.risk import predict_risk
from sleeplog.core.models.data_models import SleepEntry, StoreStatus
from sleeplog.core.repositories.csv_codec import SleepLogFile
from sleeplog.core.repositories.sleep_log import SleepLog
from sleeplog.core.scoring.fatigue_score import FatigueScoreCalculator
from sleeplog.utils.constants import RECENT_WINDOW, risk_thresholds

logger = logging.getLogger(__name__)


class SleepService:
    def __init__(self, log, storage, calculator=None, thresholds=None, window=RECENT_WINDOW):
        self.log = log
        self.storage = storage
        self.calculator = calculator or FatigueScoreCalculator()
        self.thresholds = dict(risk_thresholds)
        if thresholds:
            self.thresholds.update(thresholds)
        self.window = window
    
    @classmethod
    def from_config(cls, config, path=None):
        """Build the service from a ConfigManager, `path` overriding storage.path"""
        log = SleepLog(capacity=int(config.get('storage.max_entries')))
        storage = SleepLogFile(
            path=path or config.get('storage.path'),
            on_malformed=config.get('storage.on_malformed'),
        )
        calculator = FatigueScoreCalculator(config.get('scoring'))
        thresholds = {
            'low_max': float(config.get('risk.low_max')),
            'moderate_max': float(config.get('risk.moderate_max')),
        }
        return cls(log, storage, calculator, thresholds, int(config.get('risk.window')))
    
    def add_entry(self, **fields):
        """
        Create an entry and append it to the log.
        
        Returns:
            tuple: (StoreStatus, SleepEntry or None, fatigue score or None)
        """
        if self.log.is_full:
            logger.warning(f"Storage full (max {self.log.capacity}), entry not created")
            return StoreStatus.CAPACITY_EXCEEDED, None, None
        
        entry = SleepEntry(**fields)
        status = self.log.append(entry)
        if status != StoreStatus.OK:
            return status, None, None
        
        score = self.calculator.calculate_score(entry)
        logger.info(f"Added entry for {entry.date} with fatigue score {score:.2f}")
        return status, entry, score
    
    def list_entries(self):
        return [(entry, self.calculator.calculate_score(entry)) for entry in self.log]
    
    def summary(self):
        return calculate_log_metrics(self.log, self.window, self.calculator)
    
    def predict(self):
        return predict_risk(
            self.log,
            window=self.window,
            calculator=self.calculator,
            low_max=self.thresholds['low_max'],
            moderate_max=self.thresholds['moderate_max'],
        )
    
    def save(self):
        return self.storage.save(self.log)
    
    def load(self):
        return self.storage.load(self.log)
